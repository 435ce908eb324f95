"""Date and date-time parsing and formatting.

Input accepts a strict ``yyyy-MM-dd`` date, and date-times in one of three
shapes tried in order: ``yyyy-MM-dd HHmm``, ``yyyy-MM-dd HH:mm`` or a bare
``yyyy-MM-dd`` meaning midnight. Two renderings exist for every value: a
human-readable one for display and an ISO-8601 one for storage.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time

from pingpong.errors import InvalidDateFormat, InvalidDateTimeFormat

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
DATETIME_HHMM_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{4}")
DATETIME_COLON_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")

DATE_FORMAT = "%Y-%m-%d"
DATETIME_HHMM_FORMAT = "%Y-%m-%d %H%M"
DATETIME_COLON_FORMAT = "%Y-%m-%d %H:%M"

INVALID_DATE_MESSAGE = "Invalid date format. Please use yyyy-MM-dd format (e.g., 2019-12-02)"
INVALID_DATETIME_MESSAGE = (
    "Invalid datetime format. "
    "Please use formats like: 2019-12-02 1800, 2019-12-02 18:00, or 2019-12-02"
)


def parse_date(text: str) -> date:
    """Parse a ``yyyy-MM-dd`` date.

    Raises:
        InvalidDateFormat: if the text has another shape or is not a real date.
    """
    if not DATE_PATTERN.fullmatch(text):
        raise InvalidDateFormat(INVALID_DATE_MESSAGE)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateFormat(INVALID_DATE_MESSAGE) from None


def try_parse_date(text: str) -> date | None:
    """Return the parsed date, or None when ``text`` is not a valid date."""
    try:
        return parse_date(text)
    except InvalidDateFormat:
        return None


def parse_datetime(text: str) -> datetime:
    """Parse a date-time in the first accepted shape that matches.

    Raises:
        InvalidDateTimeFormat: if no shape matches or the value is not real.
    """
    try:
        if DATETIME_HHMM_PATTERN.fullmatch(text):
            return datetime.strptime(text, DATETIME_HHMM_FORMAT)
        if DATETIME_COLON_PATTERN.fullmatch(text):
            return datetime.strptime(text, DATETIME_COLON_FORMAT)
        if DATE_PATTERN.fullmatch(text):
            return datetime.combine(datetime.strptime(text, DATE_FORMAT).date(), time.min)
    except ValueError:
        raise InvalidDateTimeFormat(INVALID_DATETIME_MESSAGE) from None
    raise InvalidDateTimeFormat(INVALID_DATETIME_MESSAGE)


def format_date(value: date) -> str:
    """Display form of a date, e.g. ``Dec 25 2024``."""
    return f"{value:%b} {value.day} {value.year}"


def format_datetime(value: datetime) -> str:
    """Display form of a date-time, e.g. ``Dec 25 2024, 2:00PM``."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{format_date(value)}, {hour}:{value.minute:02d}{meridiem}"


def date_to_storage(value: date) -> str:
    """Storage form of a date (ISO-8601)."""
    return value.isoformat()


def datetime_to_storage(value: datetime) -> str:
    """Storage form of a date-time (ISO-8601)."""
    return value.isoformat()


def date_from_storage(text: str) -> date:
    return date.fromisoformat(text)


def datetime_from_storage(text: str) -> datetime:
    return datetime.fromisoformat(text)
