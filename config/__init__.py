import os


def get_settings_module() -> str:
    # APP_ENV decide el módulo de configuración; por defecto 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
