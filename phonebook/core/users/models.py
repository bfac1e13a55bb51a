"""User identity model."""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from sqlalchemy.orm import Mapped, mapped_column

from phonebook.core.utils.dates import utcnow
from phonebook.extensions import db


def new_key() -> str:
    return uuid4().hex


class User(db.Model):
    __tablename__ = "user"
    __table_args__ = (db.UniqueConstraint("number", name="uq_user_number"),)

    key: Mapped[str] = mapped_column(db.String(32), primary_key=True, default=new_key)
    number: Mapped[str] = mapped_column(db.String(32), nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
