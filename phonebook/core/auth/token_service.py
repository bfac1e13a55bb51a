"""Bearer token issuing and credential failure responses."""

from __future__ import annotations

import logging

from flask import jsonify
from flask_jwt_extended import JWTManager, create_access_token

from phonebook.core.users.models import User

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    """Signed access token whose identity is the user key; expiry from JWT_ACCESS_TOKEN_EXPIRES."""
    return create_access_token(identity=user.key)


def register_jwt_handlers(jwt: JWTManager) -> None:
    """Every credential failure is a 401 before any handler logic runs."""

    @jwt.unauthorized_loader
    def _missing_token(reason: str):
        return jsonify({"ok": False, "error": "unauthorized"}), 401

    @jwt.invalid_token_loader
    def _invalid_token(reason: str):
        logger.info("Rejected invalid token: %s", reason)
        return jsonify({"ok": False, "error": "invalid_token"}), 401

    @jwt.expired_token_loader
    def _expired_token(jwt_header: dict, jwt_payload: dict):
        return jsonify({"ok": False, "error": "token_expired"}), 401
