# E164Lookup/data.py

import os
import json
import logging
from types import MappingProxyType

import pycountry

logger = logging.getLogger(__name__)

# 1) Directory of this file (E164Lookup/)
MODULE_PATH = os.path.abspath(os.path.dirname(__file__))
# 2) Project root, one level up (where scripts/ and pyproject.toml live)
PROJECT_ROOT = os.path.abspath(os.path.join(MODULE_PATH, os.pardir))

DATA_FILE = "prefixes.json"
ENV_PATH = "E164_PREFIXES_PATH"

# Keys are read from a 7-character window, at most 6 digits of it are tried
MAX_KEY_DIGITS = 6


def _find_file(fname: str) -> str:
    """
    Looks for fname in MODULE_PATH, then in PROJECT_ROOT.
    Returns the full path if found, otherwise an empty string.
    """
    for base in (MODULE_PATH, PROJECT_ROOT):
        candidate = os.path.join(base, fname)
        if os.path.isfile(candidate):
            return candidate
    return ""


def data_path() -> str:
    """Path of the prefix table: $E164_PREFIXES_PATH or the bundled file."""
    return os.environ.get(ENV_PATH) or _find_file(DATA_FILE)


def load_rows(path: str) -> list:
    """Reads the raw list of rows. An unreadable table yields an empty list."""
    if not path:
        logger.error("%s not found in %s or %s", DATA_FILE, MODULE_PATH, PROJECT_ROOT)
        return []
    try:
        with open(path, encoding="utf-8") as f:
            rows = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Could not load prefix table %s: %s", path, e)
        return []
    if not isinstance(rows, list):
        logger.error("Prefix table %s must hold a JSON list, got %s", path, type(rows).__name__)
        return []
    return rows


def _valid_digits(value: str, max_len: int) -> bool:
    return 0 < len(value) <= max_len and value.isascii() and value.isdigit() and value[0] != "0"


def build_maps(rows):
    """
    Builds (prefix_map, country_map) from table rows.

    prefix_map:  int table key -> alpha-2 country, the first row of a key wins.
    country_map: alpha-2 country -> int calling code, the first row of a country wins.
    Rows with missing fields, bad digits or countries unknown to ISO 3166-1 are skipped.
    """
    prefix_map = {}
    country_map = {}
    for entry in rows:
        if not isinstance(entry, dict):
            logger.warning("Skipping non-object row: %r", entry)
            continue
        prefix = str(entry.get("prefix", ""))
        alpha2 = str(entry.get("country", ""))
        calling_code = str(entry.get("calling_code", ""))
        if not (prefix and alpha2 and calling_code):
            logger.warning("Skipping incomplete row: %r", entry)
            continue
        if not _valid_digits(prefix, MAX_KEY_DIGITS) or not _valid_digits(calling_code, 3):
            logger.warning("Skipping row with bad digits: %r", entry)
            continue
        if not prefix.startswith(calling_code):
            logger.warning("Skipping row whose prefix %s lies outside calling code %s", prefix, calling_code)
            continue
        country = pycountry.countries.get(alpha_2=alpha2) if len(alpha2) == 2 else None
        if not country or country.alpha_2 != alpha2:
            logger.warning("Skipping row with unknown country %r", alpha2)
            continue
        prefix_map.setdefault(int(prefix), alpha2)
        country_map.setdefault(alpha2, int(calling_code))
    return prefix_map, country_map


def load_maps(path: str = None):
    """Loads the table at path (default: data_path()) into two read-only mappings."""
    if path is None:
        path = data_path()
    prefix_map, country_map = build_maps(load_rows(path))
    logger.debug("Loaded %d prefixes and %d countries from %s", len(prefix_map), len(country_map), path)
    return MappingProxyType(prefix_map), MappingProxyType(country_map)


# Built once, at import
PREFIX_MAP, COUNTRY_MAP = load_maps()
