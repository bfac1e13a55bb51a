"""Typed schemas for user IO."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from phonebook.core.users.models import User


class UserResponse(BaseModel):
    user_key: str
    number: str


def serialize_user(user: "User") -> UserResponse:
    return UserResponse(user_key=user.key, number=user.number)
