"""Pydantic models for syslog5424."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING, Annotated, Any, Self

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    field_serializer,
    field_validator,
    model_validator,
)

from syslog5424.errors import InvalidFacilityError, InvalidSeverityError
from syslog5424.grammar import (
    BOM,
    MAX_FIELD_LENGTH,
    MAX_PRIORITY,
    SUPPORTED_VERSION,
    FieldName,
    is_printusascii,
    is_sd_name,
    procid_value,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_SECOND = timedelta(seconds=1)


class Severity(IntEnum):
    """Syslog severities from RFC 5424."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7

    @classmethod
    def from_int(cls, value: int) -> Severity:
        """Convert a wire integer, raising InvalidSeverityError outside 0-7."""
        try:
            return cls(value)
        except ValueError:
            msg = f"invalid severity: {value}"
            raise InvalidSeverityError(msg) from None

    @classmethod
    def from_label(cls, label: str) -> Severity:
        """Look up a severity by its short name (e.g. 'err')."""
        for severity, name in _SEVERITY_LABELS.items():
            if name == label:
                return severity
        msg = f"invalid severity: {label!r}"
        raise InvalidSeverityError(msg)

    @property
    def label(self) -> str:
        """Conventional short name, as used by syslog(3)."""
        return _SEVERITY_LABELS[self]


_SEVERITY_LABELS: dict[Severity, str] = {
    Severity.EMERGENCY: "emerg",
    Severity.ALERT: "alert",
    Severity.CRITICAL: "crit",
    Severity.ERROR: "err",
    Severity.WARNING: "warning",
    Severity.NOTICE: "notice",
    Severity.INFORMATIONAL: "info",
    Severity.DEBUG: "debug",
}


class Facility(IntEnum):
    """Syslog facilities from RFC 5424. Names follow Linux."""

    KERN = 0
    USER = 1
    MAIL = 2
    DAEMON = 3
    AUTH = 4
    SYSLOG = 5
    LPR = 6
    NEWS = 7
    UUCP = 8
    CRON = 9
    AUTHPRIV = 10
    FTP = 11
    NTP = 12
    AUDIT = 13
    ALERT = 14
    CLOCKD = 15
    LOCAL0 = 16
    LOCAL1 = 17
    LOCAL2 = 18
    LOCAL3 = 19
    LOCAL4 = 20
    LOCAL5 = 21
    LOCAL6 = 22
    LOCAL7 = 23

    @classmethod
    def from_int(cls, value: int) -> Facility:
        """Convert a wire integer, raising InvalidFacilityError outside 0-23."""
        try:
            return cls(value)
        except ValueError:
            msg = f"invalid facility: {value}"
            raise InvalidFacilityError(msg) from None

    @classmethod
    def from_label(cls, label: str) -> Facility:
        """Look up a facility by its short name (e.g. 'local3')."""
        try:
            return cls[label.upper()]
        except KeyError:
            msg = f"invalid facility: {label!r}"
            raise InvalidFacilityError(msg) from None

    @property
    def label(self) -> str:
        return self.name.lower()


def decode_priority(value: int) -> tuple[Facility, Severity]:
    """Split a PRI value (0-191) into facility and severity."""
    if not 0 <= value <= MAX_PRIORITY:
        msg = f"priority out of range: {value}"
        raise ValueError(msg)
    return Facility.from_int(value >> 3), Severity.from_int(value & 0x7)


class Timestamp(BaseModel):
    """A TIMESTAMP with nanosecond precision.

    `value` holds the date, time and UTC offset at microsecond precision;
    `nanosecond` holds the full fractional second. Fractions with fewer than
    nine digits are right-padded, so the digit count of the input is not kept.
    """

    model_config = ConfigDict(frozen=True)

    value: datetime
    nanosecond: int = Field(ge=0, le=999_999_999)

    @model_validator(mode="before")
    @classmethod
    def _default_nanosecond(cls, data: Any) -> Any:
        if isinstance(data, dict) and "nanosecond" not in data and isinstance(data.get("value"), datetime):
            data = {**data, "nanosecond": data["value"].microsecond * 1000}
        return data

    @model_validator(mode="after")
    def _check_consistency(self) -> Self:
        offset = self.value.utcoffset()
        if offset is None:
            msg = "timestamp must be timezone-aware"
            raise ValueError(msg)
        if offset.total_seconds() % 60 or abs(offset) >= timedelta(hours=24):
            msg = f"unsupported UTC offset: {offset}"
            raise ValueError(msg)
        if self.value.microsecond != self.nanosecond // 1000:
            msg = "datetime microsecond does not match nanosecond"
            raise ValueError(msg)
        return self

    @classmethod
    def from_datetime(cls, value: datetime) -> Timestamp:
        return cls(value=value)

    @property
    def utc_offset(self) -> timedelta:
        offset = self.value.utcoffset()
        assert offset is not None  # noqa: S101 - checked by the validator
        return offset

    @property
    def unix_seconds(self) -> int:
        """Whole seconds since the epoch."""
        return (self.value - _EPOCH) // _ONE_SECOND

    @property
    def unix_nanos(self) -> int:
        return self.unix_seconds * 1_000_000_000 + self.nanosecond


def _check_sd_name(value: str) -> str:
    if not is_sd_name(value):
        msg = f"invalid SD name: {value!r}"
        raise ValueError(msg)
    return value


SDName = Annotated[str, AfterValidator(_check_sd_name)]


class SDParam(BaseModel):
    """One PARAM-NAME="PARAM-VALUE" pair. The value is stored unescaped."""

    model_config = ConfigDict(frozen=True)

    name: SDName
    value: str


class SDElement(BaseModel):
    """A single SD-ELEMENT. Repeated parameter names are kept in encounter order."""

    model_config = ConfigDict(frozen=True)

    sd_id: SDName
    params: tuple[SDParam, ...] = ()

    def get(self, name: str) -> str | None:
        """Value of the first parameter called `name`."""
        for param in self.params:
            if param.name == name:
                return param.value
        return None

    def get_all(self, name: str) -> list[str]:
        return [param.value for param in self.params if param.name == name]

    def as_dict(self) -> dict[str, str]:
        """Parameters as a dict; for repeated names the last value wins."""
        return {param.name: param.value for param in self.params}


class StructuredData(RootModel[tuple[SDElement, ...]]):
    """Ordered SD-ELEMENTs of a message.

    Repeated SD-IDs are preserved. The nil value and an empty sequence are
    the same state.
    """

    model_config = ConfigDict(frozen=True)

    root: tuple[SDElement, ...] = ()

    @property
    def elements(self) -> tuple[SDElement, ...]:
        return self.root

    def __iter__(self) -> Iterator[SDElement]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def find_sdid(self, sd_id: str) -> SDElement | None:
        """First element with the given SD-ID."""
        for element in self.root:
            if element.sd_id == sd_id:
                return element
        return None

    def find_all(self, sd_id: str) -> list[SDElement]:
        return [element for element in self.root if element.sd_id == sd_id]

    def find_tuple(self, sd_id: str, name: str) -> str | None:
        """Value of the first `name` parameter in any element with the given SD-ID."""
        for element in self.find_all(sd_id):
            value = element.get(name)
            if value is not None:
                return value
        return None

    def as_dict(self) -> dict[str, dict[str, str]]:
        """Nested {sd_id: {name: value}} view; later duplicates overwrite earlier ones."""
        result: dict[str, dict[str, str]] = {}
        for element in self.root:
            result.setdefault(element.sd_id, {}).update(element.as_dict())
        return result


def _check_identifier(value: str | None, field: FieldName) -> str | None:
    if value is None:
        return None
    max_length = MAX_FIELD_LENGTH[field]
    if not 0 < len(value) <= max_length:
        msg = f"{field} must be 1-{max_length} characters"
        raise ValueError(msg)
    if not is_printusascii(value):
        msg = f"{field} must be printable US-ASCII without spaces"
        raise ValueError(msg)
    if value == "-":
        msg = f"{field} cannot be the nil value; use None"
        raise ValueError(msg)
    return value


class SyslogMessage(BaseModel):
    """A parsed RFC 5424 message.

    Absent header fields are None, never the empty string. `msg` holds the raw
    body bytes with any leading BOM removed (`has_bom` records it); it is None
    when the message ends right after the structured data.
    """

    model_config = ConfigDict(frozen=True)

    facility: Facility
    severity: Severity
    version: int = Field(default=SUPPORTED_VERSION, ge=1, le=999)
    timestamp: Timestamp | None = None
    hostname: str | None = None
    appname: str | None = None
    procid: int | str | None = None
    msgid: str | None = None
    sd: StructuredData = Field(default_factory=StructuredData)
    msg: bytes | None = None
    has_bom: bool = False

    @field_validator("hostname")
    @classmethod
    def _check_hostname(cls, value: str | None) -> str | None:
        return _check_identifier(value, FieldName.HOSTNAME)

    @field_validator("appname")
    @classmethod
    def _check_appname(cls, value: str | None) -> str | None:
        return _check_identifier(value, FieldName.APP_NAME)

    @field_validator("msgid")
    @classmethod
    def _check_msgid(cls, value: str | None) -> str | None:
        return _check_identifier(value, FieldName.MSGID)

    @field_validator("procid")
    @classmethod
    def _check_procid(cls, value: int | str | None) -> int | str | None:
        if isinstance(value, int):
            if value < 0:
                msg = "procid must not be negative"
                raise ValueError(msg)
            return value
        checked = _check_identifier(value, FieldName.PROCID)
        return None if checked is None else procid_value(checked)

    @model_validator(mode="after")
    def _check_body(self) -> Self:
        if self.msg is None:
            if self.has_bom:
                msg = "has_bom requires a message body"
                raise ValueError(msg)
        elif self.msg.startswith(BOM):
            msg = "strip the BOM from msg and set has_bom instead"
            raise ValueError(msg)
        return self

    @field_serializer("msg", when_used="json")
    def _serialize_msg(self, value: bytes | None) -> str | None:
        return None if value is None else value.decode("utf-8", errors="replace")

    @property
    def priority(self) -> int:
        return self.facility * 8 + self.severity

    @property
    def text(self) -> str | None:
        """Body decoded as UTF-8. Raises UnicodeDecodeError on illegal content."""
        return None if self.msg is None else self.msg.decode("utf-8")

    @classmethod
    def parse(cls, data: str | bytes) -> SyslogMessage:
        """Parse one message. Same as parser.parse_message."""
        from syslog5424.parser import parse_message  # noqa: PLC0415

        return parse_message(data)

    def to_wire(self) -> bytes:
        from syslog5424.serializer import serialize_message  # noqa: PLC0415

        return serialize_message(self)

    def __bytes__(self) -> bytes:
        return self.to_wire()


class OutputFormat(StrEnum):
    """How the CLI prints parsed messages."""

    JSON = "json"
    WIRE = "wire"


class AppConfig(BaseModel):
    """Application configuration persisted to disk."""

    output_format: OutputFormat = OutputFormat.JSON
    json_indent: int | None = None
    show_errors: bool = True
