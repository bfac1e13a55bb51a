"""Request validation helpers."""

from __future__ import annotations

from flask import jsonify
from pydantic import ValidationError


def jsonable_errors(exc: ValidationError) -> list[dict]:
    errors = exc.errors()
    for err in errors:
        if "ctx" in err and isinstance(err["ctx"], dict):
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
    return errors


def bad_request(exc: ValidationError):
    return jsonify({"ok": False, "error": "bad_request", "details": jsonable_errors(exc)}), 400
