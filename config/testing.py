from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False

ORG_ID = "org-test"
TIMEZONE = "America/Guatemala"
ATTENDANCE_WINDOW_START = "07:00"
ATTENDANCE_WINDOW_MINUTES = 30
PORTAL_ATTENDANCE_TOKEN = "portal-attendance"
PORTAL_APPLICATIONS_TOKEN = "portal-apply"
ADMIN_TOKEN = "admin-secret"

GEMINI_API_KEY = None
RATE_LIMIT_MAX = 60
RATE_LIMIT_WINDOW_SECONDS = 600
DIST_DIR = None
PUBLIC_BASE_URL = "https://portal.example.com"
DEFAULT_ADMIN_PASSWORD = "admin123"
