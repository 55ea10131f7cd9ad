"""Parser and serializer for RFC 5424 (IETF) syslog messages."""

from __future__ import annotations

from syslog5424.errors import (
    ErrorKind,
    InvalidFacilityError,
    InvalidField,
    InvalidPriority,
    InvalidSeverityError,
    InvalidStructuredData,
    InvalidTimestamp,
    InvalidVersion,
    MissingSeparator,
    ParseError,
    UnexpectedEnd,
)
from syslog5424.grammar import FieldName
from syslog5424.models import (
    Facility,
    SDElement,
    SDParam,
    Severity,
    StructuredData,
    SyslogMessage,
    Timestamp,
    decode_priority,
)
from syslog5424.parser import parse_message, try_parse_message
from syslog5424.serializer import serialize_message

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "Facility",
    "FieldName",
    "InvalidFacilityError",
    "InvalidField",
    "InvalidPriority",
    "InvalidSeverityError",
    "InvalidStructuredData",
    "InvalidTimestamp",
    "InvalidVersion",
    "MissingSeparator",
    "ParseError",
    "SDElement",
    "SDParam",
    "Severity",
    "StructuredData",
    "SyslogMessage",
    "Timestamp",
    "UnexpectedEnd",
    "decode_priority",
    "parse_message",
    "serialize_message",
    "try_parse_message",
]
