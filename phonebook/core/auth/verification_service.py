"""Verification code ledger: issue, cancel, verify and purge attempts."""

from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional

from flask import current_app

from phonebook.core.auth.models import VerificationAttempt
from phonebook.core.errors import AttemptNotFound
from phonebook.core.utils.dates import utcnow
from phonebook.extensions import db

logger = logging.getLogger(__name__)

CODE_DIGITS = 6
DEFAULT_CODE_TTL = timedelta(minutes=5)


def _code_ttl() -> timedelta:
    return current_app.config.get("VERIFICATION_CODE_TTL", DEFAULT_CODE_TTL)


def generate_code() -> str:
    """Uniform 6-digit code, leading zeros preserved."""
    return f"{secrets.randbelow(10 ** CODE_DIGITS):0{CODE_DIGITS}d}"


def create_attempt(number: str, now: Optional[datetime] = None) -> VerificationAttempt:
    """Persist a new attempt for *number*.

    Delivering the code to the number's owner happens out of band; the code is
    only logged here when ``LOG_VERIFICATION_CODES`` is on.
    """
    attempt = VerificationAttempt(number=number, code=generate_code(), created_at=now or utcnow())
    db.session.add(attempt)
    db.session.commit()

    if current_app.config.get("LOG_VERIFICATION_CODES", False):
        logger.info("Verification attempt %s code is %s", attempt.key, attempt.code)
    else:
        logger.info("Created verification attempt %s", attempt.key)
    return attempt


def get_attempt(attempt_key: str) -> VerificationAttempt:
    attempt = db.session.get(VerificationAttempt, attempt_key) if attempt_key else None
    if attempt is None:
        raise AttemptNotFound()
    return attempt


def _consume(attempt: VerificationAttempt) -> bool:
    """Delete *attempt* by key. False when another caller already removed it."""
    removed = (
        VerificationAttempt.query.filter_by(key=attempt.key)
        .delete(synchronize_session="evaluate")
    )
    db.session.commit()
    return removed == 1


def cancel_attempt(attempt_key: str) -> None:
    attempt = get_attempt(attempt_key)
    if not _consume(attempt):
        raise AttemptNotFound()


def is_expired(attempt: VerificationAttempt, now: datetime) -> bool:
    return now > attempt.created_at + _code_ttl()


def verify_code(attempt_key: str, code: str, now: Optional[datetime] = None) -> tuple[bool, str]:
    """Check *code* against the attempt and return ``(accepted, number)``.

    An expired attempt is deleted by the check itself. A matching code also
    deletes it. A wrong code leaves it in place so the caller can retry until
    the window closes. Codes are compared byte for byte.

    Both deletes are conditional on the row still existing; a caller that
    loses a concurrent redemption gets ``AttemptNotFound``, so a code is
    accepted at most once.
    """
    attempt = get_attempt(attempt_key)
    now = now or utcnow()

    if is_expired(attempt, now):
        if not _consume(attempt):
            raise AttemptNotFound()
        logger.info("Verification attempt %s expired", attempt.key)
        return False, attempt.number

    if secrets.compare_digest((code or "").encode("utf-8"), attempt.code.encode("utf-8")):
        if not _consume(attempt):
            logger.info("Verification attempt %s already redeemed", attempt.key)
            raise AttemptNotFound()
        return True, attempt.number

    return False, attempt.number


def purge_expired_attempts(now: Optional[datetime] = None) -> int:
    """Delete attempts whose window has closed. Returns the number removed."""
    cutoff = (now or utcnow()) - _code_ttl()
    removed = (
        VerificationAttempt.query.filter(VerificationAttempt.created_at < cutoff)
        .delete(synchronize_session=False)
    )
    db.session.commit()
    return removed
