"""Phonebook application factory and bootstrap."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from flask import Flask

from phonebook.config import PLACEHOLDER_SECRET, config_by_name
from phonebook.extensions import db, init_extensions, jwt


def create_app(config_name: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Create and configure the Phonebook Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    app = Flask(
        __name__,
        instance_path=str(instance_root),
        instance_relative_config=True,
    )
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)
    if overrides:
        app.config.update(overrides)

    _check_secrets(app)

    # Relative sqlite paths resolve inside the instance folder.
    instance_root.mkdir(parents=True, exist_ok=True)

    _configure_logging(app)
    init_extensions(app)
    _register_blueprints(app)
    _register_error_handlers(app)
    _register_auth_handlers(app)

    @app.get("/ping")
    def ping():
        return "pong", 200

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    from phonebook.scripts.purge_attempts import register_commands

    register_commands(app)

    return app


def _check_secrets(app: Flask) -> None:
    env = (app.config.get("ENV") or "").lower()
    if env == "production" and app.config.get("JWT_SECRET_KEY") in (None, "", PLACEHOLDER_SECRET):
        raise RuntimeError("JWT_SECRET_KEY must be set in production")


def _configure_logging(app: Flask) -> None:
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    logging.getLogger("phonebook").setLevel(level)


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from phonebook.core.auth.controllers import auth_bp  # local import to avoid circulars
    from phonebook.core.users.controllers import user_api_bp
    from phonebook.domains.contacts.controllers.contact_api import contact_api_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(user_api_bp, url_prefix="/api")
    app.register_blueprint(contact_api_bp, url_prefix="/api")


def _register_error_handlers(app: Flask) -> None:
    """JSON error responses for the domain error taxonomy."""
    from sqlalchemy.exc import SQLAlchemyError
    from werkzeug.exceptions import HTTPException

    from phonebook.core.errors import PhonebookError, StoreError

    @app.errorhandler(PhonebookError)
    def _domain_error(exc: PhonebookError):
        return {"ok": False, "error": exc.code}, exc.status_code

    @app.errorhandler(SQLAlchemyError)
    def _store_error(exc: SQLAlchemyError):
        db.session.rollback()
        app.logger.exception("Store failure: %s", exc)
        return {"ok": False, "error": StoreError.code}, StoreError.status_code

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return {"ok": False, "error": exc.description}, exc.code

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500


def _register_auth_handlers(app: Flask) -> None:
    from phonebook.core.auth.token_service import register_jwt_handlers

    register_jwt_handlers(jwt)
