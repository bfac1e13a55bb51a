"""Directed contact edge model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from phonebook.core.utils.dates import utcnow
from phonebook.extensions import db


class ContactEdge(db.Model):
    __tablename__ = "contact_edge"
    __table_args__ = (
        db.UniqueConstraint("from_key", "to_key", name="uq_contact_edge_from_to"),
        db.Index("ix_contact_edge_to_key", "to_key"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    from_key: Mapped[str] = mapped_column(db.ForeignKey("user.key"), nullable=False)
    to_key: Mapped[str] = mapped_column(db.ForeignKey("user.key"), nullable=False)
    name: Mapped[str] = mapped_column(db.String(255), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)
