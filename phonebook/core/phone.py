"""Phone number canonicalization.

Numbers are stored and compared in E.164 (e.g. ``+46701234567``). The region
hint is an ISO-3166-1 alpha-2 code used when the raw text carries no
international prefix, and is also the region the number must be valid for.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import phonenumbers

from phonebook.core.errors import InvalidPhoneNumber

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanonicalNumber:
    e164: str
    region: str
    valid_for_region: bool


def normalize_region(region: str | None) -> str:
    return (region or "").strip().upper()


def canonicalize(raw: str, region: str | None) -> CanonicalNumber:
    """Parse *raw* with *region* as hint.

    Raises ``InvalidPhoneNumber`` when the text cannot be parsed at all. A
    number that parses but does not belong to *region* is returned with
    ``valid_for_region=False``; callers decide whether that is an error.
    """
    region_code = normalize_region(region)
    if not raw or not raw.strip():
        raise InvalidPhoneNumber()

    try:
        parsed = phonenumbers.parse(raw, region_code or None)
    except phonenumbers.NumberParseException as exc:
        logger.info("Failed to parse phone number for region %s: %s", region_code, exc)
        raise InvalidPhoneNumber() from exc

    return CanonicalNumber(
        e164=phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164),
        region=region_code,
        valid_for_region=phonenumbers.is_valid_number_for_region(parsed, region_code),
    )
