"""School Admin package.

This package is organized by feature modules (attendance, roster, users, ...)
with a thin Flask controller layer over service and in-memory store layers.
"""
