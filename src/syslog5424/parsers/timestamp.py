"""TIMESTAMP consumer.

Accepts the nil value or ``YYYY-MM-DDTHH:MM:SS[.F{1,9}](Z|+HH:MM|-HH:MM)``.
The fraction is normalized to nanoseconds by right-padding with zeros.
Calendar-invalid values are rejected rather than clamped, and so is the leap
second ``60``.
"""

from __future__ import annotations

import calendar
from datetime import MINYEAR, UTC, datetime, timedelta, timezone

from syslog5424.errors import InvalidTimestamp, UnexpectedEnd
from syslog5424.grammar import DIGITS, MAX_FRACTION_DIGITS, NILVALUE, FieldName
from syslog5424.models import Timestamp
from syslog5424.parsers.base import Cursor, take_digits

_FIELD = FieldName.TIMESTAMP
_NIL = NILVALUE[0]


def _expect(cursor: Cursor, byte: str) -> Cursor:
    current = cursor.peek()
    if current is None:
        raise UnexpectedEnd(_FIELD, cursor.pos)
    if current != ord(byte):
        msg = f"expected {byte!r}"
        raise InvalidTimestamp(msg, cursor.pos)
    return cursor.advance()


def _fixed_digits(cursor: Cursor, count: int, what: str) -> tuple[int, Cursor]:
    digits, after = take_digits(cursor, count)
    if len(digits) < count:
        if after.at_end:
            raise UnexpectedEnd(_FIELD, after.pos)
        msg = f"expected {count}-digit {what}"
        raise InvalidTimestamp(msg, after.pos)
    return int(digits), after


def _check_range(value: int, low: int, high: int, what: str, offset: int) -> None:
    if not low <= value <= high:
        msg = f"{what} {value} out of range {low}-{high}"
        raise InvalidTimestamp(msg, offset)


def consume_fraction(cursor: Cursor) -> tuple[int, Cursor]:
    """Consume the optional ``.digits`` part, returning nanoseconds."""
    if cursor.peek() != ord("."):
        return 0, cursor
    digits, after = take_digits(cursor.advance(), MAX_FRACTION_DIGITS)
    if not digits:
        if after.at_end:
            raise UnexpectedEnd(_FIELD, after.pos)
        msg = "expected fractional second digits"
        raise InvalidTimestamp(msg, after.pos)
    if after.peek() in DIGITS:
        msg = f"more than {MAX_FRACTION_DIGITS} fractional second digits"
        raise InvalidTimestamp(msg, after.pos)
    return int(digits.ljust(MAX_FRACTION_DIGITS, b"0")), after


def consume_offset(cursor: Cursor) -> tuple[int, Cursor]:
    """Consume TIME-OFFSET, returning signed minutes east of UTC."""
    current = cursor.peek()
    if current is None:
        raise UnexpectedEnd(_FIELD, cursor.pos)
    if current == ord("Z"):
        return 0, cursor.advance()
    if current == ord("+"):
        sign = 1
    elif current == ord("-"):
        sign = -1
    else:
        msg = "expected 'Z' or a signed UTC offset"
        raise InvalidTimestamp(msg, cursor.pos)
    cursor = cursor.advance()
    hour_at = cursor.pos
    hours, cursor = _fixed_digits(cursor, 2, "offset hour")
    cursor = _expect(cursor, ":")
    minute_at = cursor.pos
    minutes, cursor = _fixed_digits(cursor, 2, "offset minute")
    _check_range(hours, 0, 23, "offset hour", hour_at)
    _check_range(minutes, 0, 59, "offset minute", minute_at)
    return sign * (hours * 60 + minutes), cursor


def consume_timestamp(cursor: Cursor) -> tuple[Timestamp | None, Cursor]:  # noqa: PLR0914
    """Consume TIMESTAMP. The nil value gives None."""
    current = cursor.peek()
    if current is None:
        raise UnexpectedEnd(_FIELD, cursor.pos)
    if current == _NIL:
        return None, cursor.advance()

    year_at = cursor.pos
    year, cursor = _fixed_digits(cursor, 4, "year")
    cursor = _expect(cursor, "-")
    month_at = cursor.pos
    month, cursor = _fixed_digits(cursor, 2, "month")
    cursor = _expect(cursor, "-")
    day_at = cursor.pos
    day, cursor = _fixed_digits(cursor, 2, "day")
    cursor = _expect(cursor, "T")
    hour_at = cursor.pos
    hour, cursor = _fixed_digits(cursor, 2, "hour")
    cursor = _expect(cursor, ":")
    minute_at = cursor.pos
    minute, cursor = _fixed_digits(cursor, 2, "minute")
    cursor = _expect(cursor, ":")
    second_at = cursor.pos
    second, cursor = _fixed_digits(cursor, 2, "second")
    nanosecond, cursor = consume_fraction(cursor)
    offset_minutes, cursor = consume_offset(cursor)

    _check_range(year, MINYEAR, 9999, "year", year_at)
    _check_range(month, 1, 12, "month", month_at)
    _check_range(day, 1, calendar.monthrange(year, month)[1], "day", day_at)
    _check_range(hour, 0, 23, "hour", hour_at)
    _check_range(minute, 0, 59, "minute", minute_at)
    if second == 60:  # noqa: PLR2004
        msg = "leap seconds are not supported"
        raise InvalidTimestamp(msg, second_at)
    _check_range(second, 0, 59, "second", second_at)

    tz = UTC if offset_minutes == 0 else timezone(timedelta(minutes=offset_minutes))
    value = datetime(year, month, day, hour, minute, second, nanosecond // 1000, tzinfo=tz)
    return Timestamp(value=value, nanosecond=nanosecond), cursor
