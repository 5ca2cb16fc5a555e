"""University Tracker package.

Organized by feature modules (students, attendance, classes, ...), each with a
thin Flask controller over service and repository layers.
"""
from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .assignments.controller import register as register_assignments
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .classes.controller import register as register_classes
from .comments.controller import register as register_comments
from .common.http import ISODateJSONProvider, register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_TOKEN_TTL_HOURS
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .students.controller import register as register_students
from .web.controller import register as register_web

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def _load_settings(overrides: Optional[dict]) -> tuple[str, dict[str, Any]]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name) for name in dir(module) if name.isupper()}
    settings.update(overrides or {})
    return settings_module, settings


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def create_app(overrides: Optional[dict] = None, *, container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    ``overrides`` replaces values from the selected settings module; a prebuilt
    ``container`` skips database bootstrap (tests pass in-memory repositories).
    """
    load_dotenv(override=False)
    settings_module, settings = _load_settings(overrides)
    _configure_logging(settings.get("LOG_LEVEL", "INFO"))

    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")
    app.json = ISODateJSONProvider(app)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    CORS(app, origins=settings.get("CORS_ORIGINS", ["http://localhost:3000"]))

    if container is None:
        db_config = settings["DB_CONFIG"]
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if settings.get("AUTO_INIT_DB"):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        if settings.get("AUTO_SEED_DB"):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_users(db_config)
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            jwt_secret=settings["JWT_SECRET"],
            token_ttl_hours=int(settings.get("TOKEN_TTL_HOURS", DEFAULT_TOKEN_TTL_HOURS)),
        )

    app.extensions["university_tracker"] = container
    register_error_handlers(app)

    @app.route("/", endpoint="index")
    def index():
        return "University Tracker Backend running"

    register_auth(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_classes(app, container)
    register_assignments(app, container)
    register_comments(app, container)
    register_dashboard(app, container)
    register_web(app, container)

    return app
