from __future__ import annotations

import logging

from flask import Flask


def configure_logging(app: Flask) -> None:
    """Console logging for the whole package.

    The Flask app logger lives under the package logger, so one handler here
    covers both request handlers and services. Must run before the first
    access to `app.logger`, otherwise Flask installs its own default handler.
    """

    level = app.config.get("LOG_LEVEL", "INFO")

    package_logger = logging.getLogger(__package__)
    package_logger.setLevel(level)
    if not package_logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s in %(module)s: %(message)s"))
        package_logger.addHandler(console)

    app.logger.setLevel(level)
