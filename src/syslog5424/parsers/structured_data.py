"""STRUCTURED-DATA consumer."""

from __future__ import annotations

from syslog5424.errors import InvalidStructuredData, UnexpectedEnd
from syslog5424.grammar import MAX_SD_NAME_LENGTH, NILVALUE, SD_ESCAPABLE, SD_NAME_CHARS, SP, FieldName
from syslog5424.models import SDElement, SDParam, StructuredData
from syslog5424.parsers.base import Cursor, take_while

_FIELD = FieldName.STRUCTURED_DATA
_NIL = NILVALUE[0]
_OPEN = ord("[")
_CLOSE = ord("]")
_QUOTE = ord('"')
_EQUALS = ord("=")
_BACKSLASH = ord("\\")


def consume_structured_data(cursor: Cursor) -> tuple[StructuredData, Cursor]:
    """Consume the nil value or one or more SD-ELEMENTs.

    Both forms of "no structured data" give an empty StructuredData.
    Repeated SD-IDs are kept in encounter order.
    """
    current = cursor.peek()
    if current is None:
        raise UnexpectedEnd(_FIELD, cursor.pos)
    if current == _NIL:
        return StructuredData(), cursor.advance()
    if current != _OPEN:
        msg = "expected '[' or '-'"
        raise InvalidStructuredData(msg, cursor.pos)

    elements: list[SDElement] = []
    while cursor.peek() == _OPEN:
        element, cursor = consume_sd_element(cursor)
        elements.append(element)
    return StructuredData(tuple(elements)), cursor


def consume_sd_element(cursor: Cursor) -> tuple[SDElement, Cursor]:
    """Consume ``[SD-ID *(SP PARAM-NAME="PARAM-VALUE")]``."""
    cursor = _expect(cursor, _OPEN)
    sd_id, cursor = _consume_sd_name(cursor, "SD-ID")
    params: list[SDParam] = []
    while True:
        current = cursor.peek()
        if current is None:
            raise UnexpectedEnd(_FIELD, cursor.pos)
        if current == _CLOSE:
            return SDElement(sd_id=sd_id, params=tuple(params)), cursor.advance()
        if current != SP:
            msg = "expected ' ' or ']'"
            raise InvalidStructuredData(msg, cursor.pos)
        param, cursor = consume_sd_param(cursor.advance())
        params.append(param)


def consume_sd_param(cursor: Cursor) -> tuple[SDParam, Cursor]:
    name, cursor = _consume_sd_name(cursor, "PARAM-NAME")
    cursor = _expect(cursor, _EQUALS)
    cursor = _expect(cursor, _QUOTE)
    value, cursor = consume_param_value(cursor)
    return SDParam(name=name, value=value), cursor


def consume_param_value(cursor: Cursor) -> tuple[str, Cursor]:
    """Consume an escaped PARAM-VALUE and its closing quote.

    The cursor must sit just past the opening quote. ``\\"``, ``\\\\`` and
    ``\\]`` are unescaped; any other backslash sequence is an error at the
    backslash. A bare ``]`` inside the quotes is taken literally.
    """
    data = cursor.data
    start = cursor.pos
    chunks: list[bytes] = []
    chunk_start = start
    pos = start
    while pos < len(data):
        current = data[pos]
        if current == _QUOTE:
            chunks.append(data[chunk_start:pos])
            try:
                value = b"".join(chunks).decode("utf-8")
            except UnicodeDecodeError:
                msg = "PARAM-VALUE is not valid UTF-8"
                raise InvalidStructuredData(msg, start) from None
            return value, Cursor(data, pos + 1)
        if current == _BACKSLASH:
            if pos + 1 >= len(data):
                break
            if data[pos + 1] not in SD_ESCAPABLE:
                msg = "invalid escape sequence in PARAM-VALUE"
                raise InvalidStructuredData(msg, pos)
            chunks.append(data[chunk_start:pos])
            # the escaped byte starts the next chunk
            chunk_start = pos + 1
            pos += 2
            continue
        pos += 1
    raise UnexpectedEnd(_FIELD, len(data))


def _consume_sd_name(cursor: Cursor, what: str) -> tuple[str, Cursor]:
    name, after = take_while(cursor, SD_NAME_CHARS, MAX_SD_NAME_LENGTH)
    if not name:
        if after.at_end:
            raise UnexpectedEnd(_FIELD, after.pos)
        msg = f"expected {what}"
        raise InvalidStructuredData(msg, after.pos)
    if after.peek() in SD_NAME_CHARS:
        msg = f"{what} longer than {MAX_SD_NAME_LENGTH} bytes"
        raise InvalidStructuredData(msg, after.pos)
    return name.decode("ascii"), after


def _expect(cursor: Cursor, byte: int) -> Cursor:
    current = cursor.peek()
    if current is None:
        raise UnexpectedEnd(_FIELD, cursor.pos)
    if current != byte:
        msg = f"expected {chr(byte)!r}"
        raise InvalidStructuredData(msg, cursor.pos)
    return cursor.advance()
