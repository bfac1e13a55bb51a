"""Contact graph services: edge ingestion and one-hop reads."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Iterable, List, Optional, Protocol

from sqlalchemy.exc import IntegrityError

from phonebook.core.errors import UserNotFound
from phonebook.core.phone import CanonicalNumber, canonicalize
from phonebook.core.users.services import get_user, resolve_user
from phonebook.domains.contacts.models.contact_models import ContactEdge
from phonebook.extensions import db

logger = logging.getLogger(__name__)

EDGE_CREATED = "created"
EDGE_UPDATED = "updated"
EDGE_UNCHANGED = "unchanged"


class ContactEntry(Protocol):
    number: str
    country_code: str
    name: str


@dataclass
class AddContactsResult:
    created: int = 0
    updated: int = 0
    unchanged: int = 0
    skipped: int = 0

    def record(self, outcome: str) -> None:
        setattr(self, outcome, getattr(self, outcome) + 1)

    def as_dict(self) -> dict:
        return asdict(self)


def _require_user(user_key: str) -> None:
    if get_user(user_key) is None:
        raise UserNotFound()


def find_edge(owner_key: str, contact_key: str) -> Optional[ContactEdge]:
    return ContactEdge.query.filter_by(from_key=owner_key, to_key=contact_key).first()


def upsert_edge(owner_key: str, contact_key: str, name: str) -> str:
    """Create the owner->contact edge or bring its name up to date.

    ``uq_contact_edge_from_to`` keeps one edge per ordered pair; losing a
    concurrent create falls through to the update path on the winner's row.
    """
    edge = find_edge(owner_key, contact_key)
    if edge is None:
        db.session.add(ContactEdge(from_key=owner_key, to_key=contact_key, name=name))
        try:
            db.session.commit()
            return EDGE_CREATED
        except IntegrityError:
            db.session.rollback()
            edge = find_edge(owner_key, contact_key)
            if edge is None:
                raise

    if edge.name == name:
        return EDGE_UNCHANGED
    edge.name = name
    db.session.commit()
    return EDGE_UPDATED


def _apply(owner_key: str, number: CanonicalNumber, name: str, result: AddContactsResult) -> None:
    if not number.valid_for_region:
        logger.info("Skipping contact number not valid for region %s", number.region)
        result.skipped += 1
        return
    contact = resolve_user(number.e164)
    result.record(upsert_edge(owner_key, contact.key, name))


def add_contacts(
    owner_key: str,
    items: Iterable[ContactEntry],
    *,
    validate_first: bool = False,
) -> AddContactsResult:
    """Upsert an edge from the owner to every contact in *items*.

    The first unparseable number raises ``InvalidPhoneNumber``. By default the
    items before it have already been written and stay written; with
    ``validate_first`` every item is parsed before anything is written.
    """
    _require_user(owner_key)
    result = AddContactsResult()

    if validate_first:
        parsed = [(canonicalize(item.number, item.country_code), item.name) for item in items]
        for number, name in parsed:
            _apply(owner_key, number, name, result)
    else:
        for item in items:
            _apply(owner_key, canonicalize(item.number, item.country_code), item.name, result)

    logger.info(
        "Contacts for %s: %d created, %d updated, %d unchanged, %d skipped",
        owner_key,
        result.created,
        result.updated,
        result.unchanged,
        result.skipped,
    )
    return result


def list_contacts(owner_key: str) -> List[ContactEdge]:
    """Outbound edges of the owner, one hop."""
    _require_user(owner_key)
    return ContactEdge.query.filter_by(from_key=owner_key).order_by(ContactEdge.id).all()
