"""User service layer: phone number to durable identity."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from phonebook.core.users.models import User
from phonebook.extensions import db

logger = logging.getLogger(__name__)


def get_user(user_key: str) -> Optional[User]:
    if not user_key:
        return None
    return db.session.get(User, user_key)


def find_user_by_number(number: str) -> Optional[User]:
    return User.query.filter_by(number=number).first()


def resolve_user(number: str) -> User:
    """Return the user owning *number*, creating one on first sighting.

    ``uq_user_number`` rejects a second row for the same number, so a resolver
    that loses a concurrent create re-reads the winner's row.
    """
    user = find_user_by_number(number)
    if user:
        return user

    user = User(number=number)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.info("User for %s created concurrently, re-reading", number)
        user = find_user_by_number(number)
        if user is None:
            raise
        return user

    logger.info("Created user %s", user.key)
    return user
