"""Parsing helpers for query parameters and date fields."""

import re
from datetime import date, datetime

from app.core.errors import BadRequestError
from app.models.base import INT64_MAX, INT64_MIN

DATE_FORMAT = "%Y-%m-%d"

# Plain ASCII decimal only: int() alone would also take "1_0" and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_id(raw: str | None, name: str) -> int:
    """Parse a required 64-bit integer id from a query string value."""
    if raw is None or not raw.strip():
        raise BadRequestError(f"{name} is required")
    text = raw.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise BadRequestError(f"Invalid {name}")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise BadRequestError(f"Invalid {name}")
    return value


def parse_tanggal(raw: str | None) -> date:
    """Parse a required YYYY-MM-DD payment date."""
    if raw is None or not raw.strip():
        raise BadRequestError("Tanggal is required")
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT).date()
    except ValueError:
        raise BadRequestError("Tanggal must be in YYYY-MM-DD format")
