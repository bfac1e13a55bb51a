"""User controllers (API)."""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from phonebook.core.errors import UserNotFound
from phonebook.core.users.schemas import serialize_user
from phonebook.core.users.services import get_user

user_api_bp = Blueprint("user_api", __name__)


@user_api_bp.get("/me")
@jwt_required()
def api_me():
    user = get_user(get_jwt_identity())
    if not user:
        raise UserNotFound()
    return jsonify({"ok": True, **serialize_user(user).model_dump()})
