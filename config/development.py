import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

PORT = int(os.getenv("PORT", "8000"))
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", f"http://localhost:{PORT}")
UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(os.getcwd(), "uploads"))

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

# Seed the demo students/teacher/courses on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
