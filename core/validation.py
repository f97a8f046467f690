"""Free-text validation for dates (DD-MM-YYYY) and weights."""
from __future__ import annotations

import math
import re
from datetime import date, datetime

from core.errors import InvalidDate, InvalidWeight

DATE_FORMAT = "%d-%m-%Y"
_DATE_RE = re.compile(r"^\d{2}-\d{2}-\d{4}$")
_WEIGHT_RE = re.compile(r"^(\d+(\.\d*)?|\.\d+)$")


def parse_date(text: str) -> date:
    """Return the calendar date for DD-MM-YYYY text or raise InvalidDate."""
    value = (text or "").strip()
    if not _DATE_RE.match(value):
        raise InvalidDate(f"Date must look like DD-MM-YYYY, got {text!r}")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDate(f"Not a real calendar date: {text!r}") from exc


def parse_weight(text: str) -> float:
    """Return a strictly positive finite weight or raise InvalidWeight."""
    value = (text or "").strip()
    if not _WEIGHT_RE.match(value):
        raise InvalidWeight(f"Weight must be a decimal number, got {text!r}")
    weight = float(value)
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidWeight(f"Weight must be greater than zero, got {text!r}")
    return weight


def check_weight(weight: float) -> float:
    """Validate an already-numeric weight."""
    if not isinstance(weight, (int, float)) or not math.isfinite(weight) or weight <= 0:
        raise InvalidWeight(f"Weight must be a positive number, got {weight!r}")
    return float(weight)


def is_valid_date(text: str) -> bool:
    try:
        parse_date(text)
    except InvalidDate:
        return False
    return True


def is_valid_weight(text: str) -> bool:
    try:
        parse_weight(text)
    except InvalidWeight:
        return False
    return True


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_weight(weight: float) -> str:
    return f"{weight:.1f}"
