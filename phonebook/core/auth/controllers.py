"""Auth HTTP controllers: phone verification and token issue."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from phonebook.core.auth.schemas import (
    CancelVerificationRequest,
    RequestVerificationRequest,
    VerifyRequest,
)
from phonebook.core.auth.token_service import issue_token
from phonebook.core.auth.verification_service import cancel_attempt, create_attempt, verify_code
from phonebook.core.errors import InvalidPhoneNumberForRegion
from phonebook.core.phone import canonicalize
from phonebook.core.users.services import resolve_user
from phonebook.core.utils.validation import bad_request

auth_bp = Blueprint("auth_api", __name__)


@auth_bp.post("/request-verification")
def request_verification():
    payload = request.get_json(silent=True) or {}
    try:
        data = RequestVerificationRequest.model_validate(payload)
    except ValidationError as exc:
        return bad_request(exc)

    region = data.country_code or current_app.config["PHONE_DEFAULT_REGION"]
    number = canonicalize(data.number, region)
    if not number.valid_for_region:
        raise InvalidPhoneNumberForRegion()

    attempt = create_attempt(number.e164)
    return jsonify({"ok": True, "message": "Verification code sent", "id": attempt.key})


@auth_bp.post("/cancel-verification")
def cancel_verification():
    payload = request.get_json(silent=True) or {}
    try:
        data = CancelVerificationRequest.model_validate(payload)
    except ValidationError as exc:
        return bad_request(exc)

    cancel_attempt(data.attempt_key)
    return jsonify({"ok": True, "message": "Verification canceled"})


@auth_bp.post("/verify")
def verify():
    payload = request.get_json(silent=True) or {}
    try:
        data = VerifyRequest.model_validate(payload)
    except ValidationError as exc:
        return bad_request(exc)

    accepted, number = verify_code(data.attempt_key, data.code)
    if not accepted:
        return jsonify({"ok": False, "error": "invalid_or_expired_code"}), 400

    user = resolve_user(number)
    return jsonify(
        {
            "ok": True,
            "message": "User verified",
            "token": issue_token(user),
            "user_key": user.key,
        }
    )
