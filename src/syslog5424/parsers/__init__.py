"""Field consumers, one per section of the RFC 5424 grammar."""

from __future__ import annotations

from syslog5424.parsers.base import Cursor, expect_space, take_run
from syslog5424.parsers.body import consume_msg
from syslog5424.parsers.header import consume_identifier, consume_priority, consume_procid, consume_version
from syslog5424.parsers.structured_data import consume_structured_data
from syslog5424.parsers.timestamp import consume_timestamp

__all__ = [
    "Cursor",
    "consume_identifier",
    "consume_msg",
    "consume_priority",
    "consume_procid",
    "consume_structured_data",
    "consume_timestamp",
    "consume_version",
    "expect_space",
    "take_run",
]
