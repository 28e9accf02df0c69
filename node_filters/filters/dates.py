"""
Date detection for sample values.

Sample strings are matched against the ISO 8601 family of formats used by the
content store when it serializes dates. Matching is strict: the whole string
must fit one format and every component must be in range.
"""

from __future__ import annotations

import calendar
import re
from datetime import date
from typing import Any, Dict, List, Optional

ISO_8601_FORMATS: tuple = (
    "YYYY",
    "YYYY-MM",
    "YYYY-MM-DD",
    "YYYYMMDD",
    # Local time
    "YYYY-MM-DDTHH",
    "YYYY-MM-DDTHH:mm",
    "YYYY-MM-DDTHHmm",
    "YYYY-MM-DDTHH:mm:ss",
    "YYYY-MM-DDTHHmmss",
    "YYYY-MM-DDTHH:mm:ss.SSS",
    "YYYY-MM-DDTHHmmss.SSS",
    # Coordinated Universal Time (UTC)
    "YYYY-MM-DDTHHZ",
    "YYYY-MM-DDTHH:mmZ",
    "YYYY-MM-DDTHHmmZ",
    "YYYY-MM-DDTHH:mm:ssZ",
    "YYYY-MM-DDTHHmmssZ",
    "YYYY-MM-DDTHH:mm:ss.SSSZ",
    "YYYY-MM-DDTHHmmss.SSSZ",
    # Week dates
    "YYYY-[W]WW",
    "YYYY[W]WW",
    "YYYY-[W]WW-E",
    "YYYY[W]WWE",
    # Ordinal dates
    "YYYY-DDDD",
    "YYYYDDDD",
)

# Longer tokens first so DDDD is not read as two DD tokens.
_TOKEN_RE = re.compile(r"\[[^\]]*\]|YYYY|DDDD|SSS|MM|DD|HH|mm|ss|WW|E|Z|.")

_TOKEN_PATTERNS: Dict[str, str] = {
    "YYYY": r"(?P<year>[0-9]{4})",
    "MM": r"(?P<month>[0-9]{2})",
    "DD": r"(?P<day>[0-9]{2})",
    "DDDD": r"(?P<ordinal>[0-9]{3})",
    "HH": r"(?P<hour>[0-9]{2})",
    "mm": r"(?P<minute>[0-9]{2})",
    "ss": r"(?P<second>[0-9]{2})",
    "SSS": r"(?P<millisecond>[0-9]{3})",
    "WW": r"(?P<week>[0-9]{2})",
    "E": r"(?P<weekday>[0-9])",
    "Z": r"(?P<offset>[Zz]|[+-][0-9]{2}(?::?[0-9]{2})?)",
}


def format_to_pattern(date_format: str) -> re.Pattern:
    """
    Compile a date format such as ``YYYY-MM-DDTHH:mm`` to an anchored regex.

    Bracketed text is matched literally, unknown characters are escaped.
    """
    parts: List[str] = []
    for token in _TOKEN_RE.findall(date_format):
        if token.startswith("[") and token.endswith("]"):
            parts.append(re.escape(token[1:-1]))
        elif token in _TOKEN_PATTERNS:
            parts.append(_TOKEN_PATTERNS[token])
        else:
            parts.append(re.escape(token))
    return re.compile(r"\A" + "".join(parts) + r"\Z")


ISO_8601_PATTERNS: tuple = tuple(format_to_pattern(fmt) for fmt in ISO_8601_FORMATS)


def _days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def _days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if calendar.isleap(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def _components_valid(parts: Dict[str, Optional[str]]) -> bool:
    year = int(parts["year"])
    month = parts.get("month")
    day = parts.get("day")

    if month is not None and not 1 <= int(month) <= 12:
        return False
    if day is not None and not 1 <= int(day) <= _days_in_month(year, int(month)):
        return False
    if parts.get("hour") is not None and int(parts["hour"]) > 23:
        return False
    if parts.get("minute") is not None and int(parts["minute"]) > 59:
        return False
    if parts.get("second") is not None and int(parts["second"]) > 59:
        return False

    ordinal = parts.get("ordinal")
    if ordinal is not None and not 1 <= int(ordinal) <= _days_in_year(year):
        return False

    week = parts.get("week")
    if week is not None:
        weekday = int(parts.get("weekday") or 1)
        try:
            date.fromisocalendar(year, int(week), weekday)
        except ValueError:
            return False

    return True


def match_iso_8601(value: str) -> Optional[Dict[str, Optional[str]]]:
    """
    Return the components of ``value`` for the first matching format.

    Returns None when no format matches or the components are out of range.
    """
    for pattern in ISO_8601_PATTERNS:
        match = pattern.fullmatch(value)
        if match and _components_valid(match.groupdict()):
            return match.groupdict()
    return None


def is_date_value(value: Any) -> bool:
    """
    Check whether a sample value is a date.

    Examples:
        >>> is_date_value("2021-05-01")
        True
        >>> is_date_value("2021-13-01")
        False
        >>> is_date_value("hello")
        False
    """
    if isinstance(value, date):
        return True
    if not isinstance(value, str):
        return False
    return match_iso_8601(value) is not None


__all__ = [
    "ISO_8601_FORMATS",
    "ISO_8601_PATTERNS",
    "format_to_pattern",
    "match_iso_8601",
    "is_date_value",
]
