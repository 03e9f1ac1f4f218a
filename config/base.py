"""Valores compartidos por todos los entornos (leídos de variables de entorno)."""

import os


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "constructora_db"),
}

# Portal de asistencia / postulaciones
ORG_ID = os.getenv("WM_ORG_ID")
TIMEZONE = os.getenv("WM_TIMEZONE", "America/Guatemala")
ATTENDANCE_WINDOW_START = os.getenv("ATTENDANCE_WINDOW_START", "07:00")
ATTENDANCE_WINDOW_MINUTES = int(os.getenv("ATTENDANCE_WINDOW_MINUTES", "30"))
PORTAL_ATTENDANCE_TOKEN = os.getenv("PORTAL_ATTENDANCE_TOKEN")
PORTAL_APPLICATIONS_TOKEN = os.getenv("PORTAL_APPLICATIONS_TOKEN")
ADMIN_TOKEN = os.getenv("ADMIN_TOKEN")

# Gemini
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_API_BASE = os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
GEMINI_TIMEOUT_SECONDS = float(os.getenv("GEMINI_TIMEOUT_SECONDS", "60"))
RATE_LIMIT_WINDOW_SECONDS = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "600"))
RATE_LIMIT_MAX = int(os.getenv("RATE_LIMIT_MAX", "60"))

MAX_CONTENT_LENGTH = 15 * 1024 * 1024
DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")
DIST_DIR = os.getenv("DIST_DIR")
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = env_flag("LOG_JSON")
