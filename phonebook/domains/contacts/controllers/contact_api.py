"""Contacts JSON API."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from pydantic import ValidationError

from phonebook.core.utils.validation import bad_request
from phonebook.domains.contacts import services
from phonebook.domains.contacts.mappers import map_contact
from phonebook.domains.contacts.schemas.contact_schemas import (
    AddContactsRequest,
    GetContactsRequest,
)

contact_api_bp = Blueprint("contacts_api", __name__)


@contact_api_bp.post("/add-contacts")
@jwt_required()
def add_contacts():
    payload = request.get_json(silent=True) or {}
    try:
        data = AddContactsRequest.model_validate(payload)
    except ValidationError as exc:
        return bad_request(exc)

    result = services.add_contacts(
        get_jwt_identity(),
        data.contacts,
        validate_first=current_app.config.get("CONTACTS_VALIDATE_BEFORE_APPLY", False),
    )
    return jsonify({"ok": True, "message": "Contacts added", **result.as_dict()})


@contact_api_bp.get("/contacts")
@jwt_required()
def list_contacts():
    payload = request.get_json(silent=True) or {}
    if "user_key" in request.args:
        payload = {"user_key": request.args.get("user_key")}
    try:
        data = GetContactsRequest.model_validate(payload)
    except ValidationError as exc:
        return bad_request(exc)

    owner_key = data.user_key or get_jwt_identity()
    edges = services.list_contacts(owner_key)
    return jsonify([map_contact(edge) for edge in edges])
