from __future__ import annotations

import importlib
import logging
from pathlib import Path
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .common.http import error_response, json_error
from .common.logging_config import configure_logging
from .container import Container, build_container
from .core.exceptions import DomainError
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_employees, list_tables

from .ai.controller import register as register_ai
from .auth.controller import register as register_auth
from .budgets.controller import register as register_budgets
from .employees.controller import register as register_hr
from .finance.controller import register as register_finance
from .notifications.controller import register as register_notifications
from .portal.controller import register as register_portal
from .projects.controller import register as register_projects
from .reports.controller import register as register_reports
from .web.controller import register as register_web

REPO_ROOT = Path(__file__).resolve().parents[2]

logger = logging.getLogger(__name__)


def _bootstrap_database(settings: ModuleType) -> None:
    db_config = settings.DB_CONFIG
    if getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if getattr(settings, "AUTO_SEED_DB", False):
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
        if getattr(settings, "ORG_ID", None):
            ensure_demo_employees(db_config, org_id=settings.ORG_ID)
        logger.info("demo seed ready")


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    configure_logging(
        getattr(settings, "LOG_LEVEL", "INFO"),
        json_output=bool(getattr(settings, "LOG_JSON", False)),
    )

    app = Flask(__name__, static_folder=None)
    app.secret_key = settings.SECRET_KEY
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_CONTENT_LENGTH", 15 * 1024 * 1024))
    app.config["PUBLIC_BASE_URL"] = getattr(settings, "PUBLIC_BASE_URL", None)
    app.config["DIST_DIR"] = str(getattr(settings, "DIST_DIR", None) or REPO_ROOT / "dist")

    db_config = settings.DB_CONFIG
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        _bootstrap_database(settings)
        container = build_container(settings=settings)
    app.extensions["constructora.container"] = container

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return error_response(e)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        app.logger.exception("unhandled error")
        return json_error("Error interno", 500)

    register_auth(app, container)
    register_portal(app, container)
    register_ai(app, container)
    register_projects(app, container)
    register_finance(app, container)
    register_budgets(app, container)
    register_hr(app, container)
    register_notifications(app, container)
    register_reports(app, container)
    register_web(app, container)

    return app
