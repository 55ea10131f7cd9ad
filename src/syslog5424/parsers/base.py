"""Field-bounded cursor and helpers shared by the field consumers.

A consumer takes a Cursor, returns ``(value, next_cursor)`` and raises a
ParseError carrying the absolute byte offset on mismatch. Cursors are
immutable, so a failed consumer never disturbs its caller's position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from syslog5424.errors import InvalidField, MissingSeparator, UnexpectedEnd
from syslog5424.grammar import DIGITS, SP

if TYPE_CHECKING:
    from collections.abc import Set

    from syslog5424.grammar import FieldName


@dataclass(frozen=True, slots=True)
class Cursor:
    """Position inside an immutable input buffer."""

    data: bytes
    pos: int = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    @property
    def remaining(self) -> bytes:
        return self.data[self.pos :]

    def peek(self) -> int | None:
        """Byte at the cursor, or None at end of input."""
        if self.pos < len(self.data):
            return self.data[self.pos]
        return None

    def advance(self, n: int = 1) -> Cursor:
        return Cursor(self.data, self.pos + n)


def expect_space(cursor: Cursor, field: FieldName) -> Cursor:
    """Consume the single SP that precedes `field`."""
    if cursor.peek() != SP:
        raise MissingSeparator(field, cursor.pos)
    return cursor.advance()


def take_while(cursor: Cursor, allowed: Set[int], limit: int | None = None) -> tuple[bytes, Cursor]:
    """Consume bytes from `allowed`, at most `limit` of them."""
    data = cursor.data
    end = len(data) if limit is None else min(len(data), cursor.pos + limit)
    pos = cursor.pos
    while pos < end and data[pos] in allowed:
        pos += 1
    return data[cursor.pos : pos], Cursor(data, pos)


def take_digits(cursor: Cursor, limit: int | None = None) -> tuple[bytes, Cursor]:
    return take_while(cursor, DIGITS, limit)


def take_run(cursor: Cursor, field: FieldName, max_length: int, allowed: Set[int]) -> tuple[bytes, Cursor]:
    """Consume a space-terminated run of `allowed` bytes, 1 to `max_length` long.

    Stops in front of SP or at end of input. An empty run, a disallowed byte,
    or a run longer than `max_length` raises InvalidField at the offending offset.
    """
    if cursor.at_end:
        raise UnexpectedEnd(field, cursor.pos)
    data = cursor.data
    start = cursor.pos
    pos = start
    while pos < len(data) and data[pos] != SP:
        if pos - start >= max_length:
            msg = f"{field} longer than {max_length} bytes"
            raise InvalidField(field, msg, pos)
        if data[pos] not in allowed:
            msg = f"disallowed byte 0x{data[pos]:02x} in {field}"
            raise InvalidField(field, msg, pos)
        pos += 1
    if pos == start:
        msg = f"empty {field}"
        raise InvalidField(field, msg, pos)
    return data[start:pos], Cursor(data, pos)
