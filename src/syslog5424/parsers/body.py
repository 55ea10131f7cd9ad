"""MSG consumer."""

from __future__ import annotations

from syslog5424.grammar import BOM, FieldName
from syslog5424.parsers.base import Cursor, expect_space


def consume_msg(cursor: Cursor) -> tuple[bytes | None, bool]:
    """Take everything after the separator verbatim.

    Returns ``(body, has_bom)``. The body is None when input ends right after
    the structured data; a leading UTF-8 BOM is stripped and reported.
    """
    if cursor.at_end:
        return None, False
    cursor = expect_space(cursor, FieldName.MSG)
    body = cursor.remaining
    if body.startswith(BOM):
        return body[len(BOM) :], True
    return body, False
