"""Consumers for the PRI, VERSION and identifier fields of the header."""

from __future__ import annotations

from syslog5424.errors import InvalidPriority, InvalidVersion, UnexpectedEnd
from syslog5424.grammar import (
    DIGITS,
    MAX_FIELD_LENGTH,
    MAX_PRIORITY,
    NILVALUE,
    PRINTUSASCII,
    SUPPORTED_VERSION,
    FieldName,
    procid_value,
)
from syslog5424.models import Facility, Severity, decode_priority
from syslog5424.parsers.base import Cursor, take_digits, take_run

_LT = ord("<")
_GT = ord(">")
_ZERO = ord("0")


def consume_priority(cursor: Cursor) -> tuple[tuple[Facility, Severity], Cursor]:
    """Consume ``<PRIVAL>`` and split it into facility and severity."""
    field = FieldName.PRIORITY
    first = cursor.peek()
    if first is None:
        raise UnexpectedEnd(field, cursor.pos)
    if first != _LT:
        msg = "expected '<'"
        raise InvalidPriority(msg, cursor.pos)
    cursor = cursor.advance()
    digits, after = take_digits(cursor, 3)
    if not digits:
        if after.at_end:
            raise UnexpectedEnd(field, after.pos)
        msg = "expected priority digits"
        raise InvalidPriority(msg, after.pos)
    if len(digits) > 1 and digits[0] == _ZERO:
        msg = "leading zero in priority"
        raise InvalidPriority(msg, cursor.pos)
    closing = after.peek()
    if closing is None:
        raise UnexpectedEnd(field, after.pos)
    if closing in DIGITS:
        msg = "priority longer than 3 digits"
        raise InvalidPriority(msg, after.pos)
    if closing != _GT:
        msg = "expected '>'"
        raise InvalidPriority(msg, after.pos)
    value = int(digits)
    if value > MAX_PRIORITY:
        msg = f"priority {value} out of range 0-{MAX_PRIORITY}"
        raise InvalidPriority(msg, cursor.pos)
    return decode_priority(value), after.advance()


def consume_version(cursor: Cursor) -> tuple[int, Cursor]:
    """Consume VERSION. Only version 1 is accepted."""
    digits, after = take_digits(cursor, 3)
    if not digits:
        if cursor.at_end:
            raise UnexpectedEnd(FieldName.VERSION, cursor.pos)
        msg = "expected version digits"
        raise InvalidVersion(msg, cursor.pos)
    if digits[0] == _ZERO:
        msg = "version must not start with 0"
        raise InvalidVersion(msg, cursor.pos)
    if after.peek() in DIGITS:
        msg = "version longer than 3 digits"
        raise InvalidVersion(msg, after.pos)
    value = int(digits)
    if value != SUPPORTED_VERSION:
        msg = f"unsupported version {value}"
        raise InvalidVersion(msg, cursor.pos)
    return value, after


def consume_identifier(cursor: Cursor, field: FieldName) -> tuple[str | None, Cursor]:
    """Consume HOSTNAME, APP-NAME, PROCID or MSGID. The nil value gives None."""
    token, after = take_run(cursor, field, MAX_FIELD_LENGTH[field], PRINTUSASCII)
    if token == NILVALUE:
        return None, after
    return token.decode("ascii"), after


def consume_procid(cursor: Cursor) -> tuple[int | str | None, Cursor]:
    token, after = consume_identifier(cursor, FieldName.PROCID)
    if token is None:
        return None, after
    return procid_value(token), after
