"""Message parsing: runs the field consumers in wire order and builds a SyslogMessage."""

from __future__ import annotations

import logging

from syslog5424.errors import ParseError
from syslog5424.grammar import FieldName
from syslog5424.models import SyslogMessage
from syslog5424.parsers import (
    Cursor,
    consume_identifier,
    consume_msg,
    consume_priority,
    consume_procid,
    consume_structured_data,
    consume_timestamp,
    consume_version,
    expect_space,
)

logger = logging.getLogger(__name__)

RawMessage = str | bytes | bytearray | memoryview


def parse_message(data: RawMessage) -> SyslogMessage:
    """Parse one already-delimited RFC 5424 message.

    `str` input is UTF-8 encoded first; error offsets always refer to bytes.
    Raises a ParseError subclass on the first mismatch. There is no
    backtracking and no partial result.

    >>> msg = parse_message('<78>1 2016-01-15T00:04:01+00:00 host1 CROND 10391 - [meta sequenceId="29"] hi')
    >>> msg.hostname, msg.procid, msg.sd.find_tuple("meta", "sequenceId")
    ('host1', 10391, '29')
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    cursor = Cursor(raw)

    (facility, severity), cursor = consume_priority(cursor)
    version, cursor = consume_version(cursor)
    cursor = expect_space(cursor, FieldName.TIMESTAMP)
    timestamp, cursor = consume_timestamp(cursor)
    cursor = expect_space(cursor, FieldName.HOSTNAME)
    hostname, cursor = consume_identifier(cursor, FieldName.HOSTNAME)
    cursor = expect_space(cursor, FieldName.APP_NAME)
    appname, cursor = consume_identifier(cursor, FieldName.APP_NAME)
    cursor = expect_space(cursor, FieldName.PROCID)
    procid, cursor = consume_procid(cursor)
    cursor = expect_space(cursor, FieldName.MSGID)
    msgid, cursor = consume_identifier(cursor, FieldName.MSGID)
    cursor = expect_space(cursor, FieldName.STRUCTURED_DATA)
    sd, cursor = consume_structured_data(cursor)
    msg, has_bom = consume_msg(cursor)

    return SyslogMessage(
        facility=facility,
        severity=severity,
        version=version,
        timestamp=timestamp,
        hostname=hostname,
        appname=appname,
        procid=procid,
        msgid=msgid,
        sd=sd,
        msg=msg,
        has_bom=has_bom,
    )


def try_parse_message(data: RawMessage) -> SyslogMessage | None:
    """Like parse_message, but returns None for malformed input."""
    try:
        return parse_message(data)
    except ParseError as e:
        logger.debug("rejected message: %s", e)
        return None
