# E164Lookup/lookup.py

import re
import logging
from enum import Enum
from typing import NamedTuple, Optional

import pycountry

from .data import PREFIX_MAP, COUNTRY_MAP, MAX_KEY_DIGITS

logger = logging.getLogger(__name__)

MIN_NUMBER_LENGTH = 10
# NANP numbers are keyed by "1" + the 3-digit area code
NANP_KEY_LENGTH = 4
WINDOW_LENGTH = MAX_KEY_DIGITS + 1

_DIGITS = re.compile(r"[0-9]+")


class LookupStatus(Enum):
    FOUND = "found"
    TOO_SHORT = "too_short"
    NO_MATCH = "no_match"
    MALFORMED = "malformed"


class Lookup(NamedTuple):
    """Outcome of resolving a phone number: status, alpha-2 country and matched table key."""

    status: LookupStatus
    country: Optional[str] = None
    prefix: Optional[int] = None


def _match_longest(window: str) -> int:
    """
    Tries the leading 6, 5, ... 1 digits of the window against the table
    and returns the first key found, or 0 when nothing matches.
    """
    for length in range(len(window) - 1, 0, -1):
        key = int(window[:length])
        if key in PREFIX_MAP:
            return key
    return 0


def lookup_number(phone: str) -> Lookup:
    """
    Resolves an E.164 number (digits only, no leading '+') to its country.

    Numbers shorter than 10 characters are rejected before any parsing.
    Numbers starting with '1' are looked up by their first 4 digits,
    all others by the longest table key within their first 7 digits.
    """
    if len(phone) < MIN_NUMBER_LENGTH:
        return Lookup(LookupStatus.TOO_SHORT)

    if phone[0] == "1":
        window = phone[:NANP_KEY_LENGTH]
    else:
        window = phone[:WINDOW_LENGTH]
    if not _DIGITS.fullmatch(window):
        logger.debug("Malformed number, non-digit in %r", window)
        return Lookup(LookupStatus.MALFORMED)

    if phone[0] == "1":
        key = int(window)
    else:
        key = _match_longest(window)

    country = PREFIX_MAP.get(key)
    if country is None:
        return Lookup(LookupStatus.NO_MATCH, prefix=key or None)
    return Lookup(LookupStatus.FOUND, country, key)


def e164_number_to_iso3166(phone: str) -> Optional[str]:
    """
    Converts an E.164 phone number into an ISO 3166-1 alpha-2 country code.

    The number must have at least 10 digits. Returns None when the number is
    too short, malformed or not covered by the table; use lookup_number()
    to tell those apart.

    >>> e164_number_to_iso3166("12069359290")
    'US'
    >>> e164_number_to_iso3166("12229359290") is None
    True
    """
    return lookup_number(phone).country


def iso3166_to_e164_country_code(code: str) -> Optional[int]:
    """
    Converts an ISO 3166-1 alpha-2 country code to its E.164 calling code.

    Exact match only: the code is neither trimmed nor upper-cased.
    Returns None if the code is not found.
    """
    return COUNTRY_MAP.get(code)


def country_name(code: str) -> Optional[str]:
    """ISO 3166-1 short name of a country known to the table."""
    if code not in COUNTRY_MAP:
        return None
    country = pycountry.countries.get(alpha_2=code)
    return country.name if country else None
