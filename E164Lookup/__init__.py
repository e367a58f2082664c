import logging

# Before the tables load
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .data import PREFIX_MAP, COUNTRY_MAP  # noqa: E402
from .lookup import (  # noqa: E402
    Lookup,
    LookupStatus,
    lookup_number,
    e164_number_to_iso3166,
    iso3166_to_e164_country_code,
    country_name,
)

__all__ = [
    "PREFIX_MAP",
    "COUNTRY_MAP",
    "Lookup",
    "LookupStatus",
    "lookup_number",
    "e164_number_to_iso3166",
    "iso3166_to_e164_country_code",
    "country_name",
]
