"""Verification attempt model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from phonebook.core.users.models import new_key
from phonebook.core.utils.dates import utcnow
from phonebook.extensions import db


class VerificationAttempt(db.Model):
    __tablename__ = "verification_attempt"
    __table_args__ = (
        db.Index("ix_verification_attempt_created_at", "created_at"),
        db.Index("ix_verification_attempt_number", "number"),
    )

    key: Mapped[str] = mapped_column(db.String(32), primary_key=True, default=new_key)
    number: Mapped[str] = mapped_column(db.String(32), nullable=False)
    code: Mapped[str] = mapped_column(db.String(6), nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow, nullable=False)
