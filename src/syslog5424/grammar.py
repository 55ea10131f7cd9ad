"""RFC 5424 grammar constants shared by the data model and the parser."""

from __future__ import annotations

from enum import StrEnum


class FieldName(StrEnum):
    """Message fields, in wire order."""

    PRIORITY = "priority"
    VERSION = "version"
    TIMESTAMP = "timestamp"
    HOSTNAME = "hostname"
    APP_NAME = "app-name"
    PROCID = "procid"
    MSGID = "msgid"
    STRUCTURED_DATA = "structured-data"
    MSG = "msg"


NILVALUE = b"-"
SP = 0x20
BOM = b"\xef\xbb\xbf"

SUPPORTED_VERSION = 1
MAX_PRIORITY = 191

# Upper bounds from RFC 5424 section 6
MAX_FIELD_LENGTH: dict[FieldName, int] = {
    FieldName.HOSTNAME: 255,
    FieldName.APP_NAME: 48,
    FieldName.PROCID: 128,
    FieldName.MSGID: 32,
}
MAX_SD_NAME_LENGTH = 32
MAX_FRACTION_DIGITS = 9

# PRINTUSASCII = %d33-126
PRINTUSASCII = frozenset(range(33, 127))
# SD-NAME excludes '=', SP, ']', '"' and, here, the escape character
SD_NAME_CHARS = PRINTUSASCII - frozenset(b'=]"\\')
# Characters that must be backslash-escaped inside PARAM-VALUE
SD_ESCAPABLE = frozenset(b'"\\]')

DIGITS = frozenset(b"0123456789")


def is_printusascii(value: str) -> bool:
    """Check that every character of value is in PRINTUSASCII."""
    return all(33 <= ord(c) <= 126 for c in value)  # noqa: PLR2004


def is_sd_name(value: str) -> bool:
    """Check that value is a legal SD-ID or PARAM-NAME."""
    return 0 < len(value) <= MAX_SD_NAME_LENGTH and all(ord(c) in SD_NAME_CHARS for c in value)


def procid_value(token: str) -> int | str:
    """Interpret a PROCID token: canonical decimal tokens become ints, anything else stays a string."""
    if token.isascii() and token.isdigit() and (token == "0" or token[0] != "0"):
        return int(token)
    return token
