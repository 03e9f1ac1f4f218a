import os

from .base import *  # noqa: F401,F403
from .base import env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# Aplica schema.sql al iniciar (idempotente: CREATE TABLE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Opcional: también cargar datos demo
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
