"""Contacts schemas and DTOs."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ContactItem(BaseModel):
    country_code: str = Field(default="", max_length=8)
    number: str = Field(max_length=64)
    name: str = Field(default="", max_length=255)


class AddContactsRequest(BaseModel):
    contacts: List[ContactItem] = Field(default_factory=list, max_length=5000)


class GetContactsRequest(BaseModel):
    user_key: Optional[str] = Field(default=None, max_length=64)
