"""Schemas for the phone verification flow."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class RequestVerificationRequest(BaseModel):
    number: str = Field(min_length=1, max_length=64)
    country_code: Optional[str] = Field(default=None, max_length=8)


class CancelVerificationRequest(BaseModel):
    attempt_key: str = Field(min_length=1, max_length=64)


class VerifyRequest(BaseModel):
    attempt_key: str = Field(min_length=1, max_length=64)
    code: str = Field(max_length=16)
