import os
import tempfile

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

PORT = 8000
PUBLIC_BASE_URL = "http://localhost:8000"
UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), "school-admin-test-uploads")

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"

SEED_DEMO_DATA = True
