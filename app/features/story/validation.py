# app/features/story/validation.py
import re
from typing import Any, List, Sequence

from app.features.keywords.catalog import is_known_keyword
from app.lib.errors import InvalidAgeError, InvalidKeywordsError, InvalidNameError

MIN_AGE = 1
MAX_AGE = 16

_NON_LETTERS = re.compile(r"[^A-Za-z]")


def validate_keywords(keywords: Sequence[str]) -> List[str]:
    """Return the keywords missing from the catalog (case-insensitive), in input order."""
    return [k for k in keywords if not is_known_keyword(k)]


def ensure_valid_keywords(keywords: Sequence[str]) -> None:
    invalid = validate_keywords(keywords)
    if invalid:
        raise InvalidKeywordsError(invalid)


def validate_age(age: Any) -> int:
    # bool is an int subclass; True must not pass as age 1
    if isinstance(age, bool):
        raise InvalidAgeError()
    try:
        value = float(age)
    except (TypeError, ValueError, OverflowError):
        raise InvalidAgeError()
    if not value.is_integer() or not MIN_AGE <= value <= MAX_AGE:
        raise InvalidAgeError()
    return int(value)


def sanitize_name(name: str) -> str:
    """
    Drop everything that is not an ASCII letter, then keep the first
    whitespace-separated segment. Stripping runs first, so spaces are gone
    by the time of the split: "Mary Jane" becomes "MaryJane".
    """
    if not isinstance(name, str):
        raise InvalidNameError()
    letters = _NON_LETTERS.sub("", name)
    parts = letters.split()
    if not parts:
        raise InvalidNameError()
    return parts[0]
