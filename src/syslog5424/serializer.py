"""Render SyslogMessage values back to the RFC 5424 wire form."""

from __future__ import annotations

from typing import TYPE_CHECKING

from syslog5424.grammar import BOM, NILVALUE

if TYPE_CHECKING:
    from syslog5424.models import StructuredData, SyslogMessage, Timestamp

_NIL = NILVALUE.decode("ascii")
_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "]": "\\]"})


def escape_param_value(value: str) -> str:
    """Backslash-escape '"', '\\' and ']' for use inside a PARAM-VALUE."""
    return value.translate(_ESCAPES)


def format_timestamp(timestamp: Timestamp | None) -> str:
    """Canonical TIMESTAMP text.

    The fraction is printed with trailing zeros trimmed (and left out when
    zero), and a zero offset is printed as 'Z'. Input with a padded fraction or
    '+00:00' therefore does not round-trip byte for byte, only by value.
    """
    if timestamp is None:
        return _NIL
    v = timestamp.value
    text = f"{v.year:04d}-{v.month:02d}-{v.day:02d}T{v.hour:02d}:{v.minute:02d}:{v.second:02d}"
    if timestamp.nanosecond:
        text += "." + f"{timestamp.nanosecond:09d}".rstrip("0")
    minutes = int(timestamp.utc_offset.total_seconds()) // 60
    if minutes == 0:
        return text + "Z"
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def format_structured_data(sd: StructuredData) -> str:
    if not sd:
        return _NIL
    parts: list[str] = []
    for element in sd:
        params = "".join(f' {param.name}="{escape_param_value(param.value)}"' for param in element.params)
        parts.append(f"[{element.sd_id}{params}]")
    return "".join(parts)


def _field(value: str | int | None) -> str:
    return _NIL if value is None else str(value)


def serialize_message(message: SyslogMessage) -> bytes:
    """Serialize a message to bytes, emitting '-' for every absent field."""
    header = " ".join(
        (
            f"<{message.priority}>{message.version}",
            format_timestamp(message.timestamp),
            _field(message.hostname),
            _field(message.appname),
            _field(message.procid),
            _field(message.msgid),
            format_structured_data(message.sd),
        )
    )
    wire = header.encode("utf-8")
    if message.msg is None:
        return wire
    return wire + b" " + (BOM if message.has_bom else b"") + message.msg
