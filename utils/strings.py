"""String processing utilities for the Maslow needs tools."""

import unicodedata

from utils.patterns import (
    DECIMAL,
    INTEGER,
    LEADING_NEWLINE,
    NON_ALPHANUMERIC,
    WHITESPACE,
)


def is_blank(value) -> bool:
    """Return True for values a form would treat as "not filled in".

    Handles:
    - None -> blank
    - strings that are empty or whitespace only -> blank
    - empty lists, tuples, dicts and sets -> blank
    - False -> blank

    Everything else (including 0) is present.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def slugify(text: str) -> str:
    """Turn free text into a URL slug.

    Accented characters are transliterated to ASCII, the result is
    lower-cased, runs of anything that is not a letter or digit become a
    single hyphen, and leading/trailing hyphens are dropped.

    Example:
        "Find my local register office" -> "find-my-local-register-office"
        "Café  &  Crèche!" -> "cafe-creche"
    """
    if not text:
        return ""
    ascii_text = (
        unicodedata.normalize("NFKD", str(text))
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    return NON_ALPHANUMERIC.sub("-", ascii_text.lower()).strip("-")


def strip_leading_newline(value):
    """Remove a single leading newline from a string value.

    Non-string values are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    return LEADING_NEWLINE.sub("", value, count=1)


def coerce_integer(value):
    """Convert integer-looking input to int, leaving anything else alone.

    Blank input becomes None.  "12" -> 12, 7 -> 7, "abc" -> "abc",
    "1.5" -> "1.5".  Booleans are never treated as integers.
    """
    if is_blank(value):
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, str) and INTEGER.match(value.strip()):
        return int(value.strip())
    return value


def is_number(value) -> bool:
    """True if value is numeric or a string that parses as a number."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return bool(DECIMAL.match(value.strip()))
    return False


def normalize_whitespace(s: str) -> str:
    """Normalize multiple whitespace characters to single spaces."""
    return WHITESPACE.sub(' ', s).strip()
