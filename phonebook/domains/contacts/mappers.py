"""DTO ↔ dict mappers for contacts domain."""

from __future__ import annotations

from phonebook.domains.contacts.models.contact_models import ContactEdge


def map_contact(edge: ContactEdge) -> dict:
    return {"name": edge.name, "user_key": edge.to_key}
