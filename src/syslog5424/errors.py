"""Parse errors. Every error carries the byte offset where the input stopped matching."""

from __future__ import annotations

from enum import StrEnum

from syslog5424.grammar import FieldName


class ErrorKind(StrEnum):
    """Category of a parse failure."""

    INVALID_PRIORITY = "invalid_priority"
    INVALID_VERSION = "invalid_version"
    INVALID_TIMESTAMP = "invalid_timestamp"
    INVALID_FIELD = "invalid_field"
    MISSING_SEPARATOR = "missing_separator"
    INVALID_STRUCTURED_DATA = "invalid_structured_data"
    UNEXPECTED_END = "unexpected_end"


class ParseError(ValueError):
    """Base class for all parse failures."""

    kind: ErrorKind

    def __init__(self, reason: str, offset: int) -> None:
        self.reason = reason
        self.offset = offset
        super().__init__(f"{reason} (at offset {offset})")


class InvalidPriority(ParseError):
    kind = ErrorKind.INVALID_PRIORITY


class InvalidVersion(ParseError):
    kind = ErrorKind.INVALID_VERSION


class InvalidTimestamp(ParseError):
    kind = ErrorKind.INVALID_TIMESTAMP


class InvalidStructuredData(ParseError):
    kind = ErrorKind.INVALID_STRUCTURED_DATA


class _FieldError(ParseError):
    """A failure tied to a named message field."""

    def __init__(self, field: FieldName, reason: str, offset: int) -> None:
        self.field = field
        super().__init__(reason, offset)


class InvalidField(_FieldError):
    """An identifier field is too long, empty, or holds a disallowed byte."""

    kind = ErrorKind.INVALID_FIELD


class MissingSeparator(_FieldError):
    """The space in front of `field` was not found."""

    kind = ErrorKind.MISSING_SEPARATOR

    def __init__(self, field: FieldName, offset: int) -> None:
        super().__init__(field, f"expected space before {field}", offset)


class UnexpectedEnd(_FieldError):
    """Input ended inside `field`."""

    kind = ErrorKind.UNEXPECTED_END

    def __init__(self, field: FieldName, offset: int) -> None:
        super().__init__(field, f"unexpected end of input in {field}", offset)


class InvalidSeverityError(ValueError):
    """Integer does not correspond to a syslog severity."""


class InvalidFacilityError(ValueError):
    """Integer does not correspond to a syslog facility."""
