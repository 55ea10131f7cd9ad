"""Tests for wire serialization."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from syslog5424.models import Facility, SDElement, SDParam, Severity, StructuredData, SyslogMessage, Timestamp
from syslog5424.parser import parse_message
from syslog5424.serializer import escape_param_value, format_structured_data, format_timestamp, serialize_message


class TestRoundTrip:
    def test_parse_serialize_parse(self, sample_message: bytes) -> None:
        msg = parse_message(sample_message)
        assert parse_message(serialize_message(msg)) == msg

    @pytest.mark.parametrize(
        "raw",
        [
            b"<1>1 - - - - - -",
            b"<1>1 - - - - - - ",
            b"<34>1 2003-10-11T22:14:15.003Z mymachine.example.com su - ID47 - \xef\xbb\xbf'su root' failed",
            b'<78>1 2016-01-15T00:04:01Z host1 CROND 10391 - [meta sequenceId="29" sequenceBlah="foo"][my key="value"] msg',
            b'<13>1 2019-02-13T19:48:34.123456789+05:30 web-01 nginx worker-3 REQ [req path="/a\\"b\\\\c\\]d"] body',
            b"<191>1 1985-04-12T23:20:50.52Z - - 0123 - - \xff\xfe not utf-8",
        ],
    )
    def test_canonical_input_is_reproduced(self, raw: bytes) -> None:
        assert serialize_message(parse_message(raw)) == raw

    def test_zero_offset_becomes_z(self) -> None:
        wire = serialize_message(parse_message("<1>1 2016-01-15T00:04:01+00:00 - - - - -"))
        assert wire == b"<1>1 2016-01-15T00:04:01Z - - - - -"

    def test_fraction_trailing_zeros_trimmed(self) -> None:
        wire = serialize_message(parse_message("<1>1 1985-04-12T23:20:50.520-00:00 - - - - -"))
        assert wire == b"<1>1 1985-04-12T23:20:50.52Z - - - - -"

    def test_bytes_and_to_wire(self) -> None:
        msg = parse_message("<1>1 - host - - - - hi")
        assert bytes(msg) == msg.to_wire() == b"<1>1 - host - - - - hi"


class TestSerializeMessage:
    def test_all_fields_absent(self) -> None:
        msg = SyslogMessage(facility=Facility.KERN, severity=Severity.ALERT)
        assert serialize_message(msg) == b"<1>1 - - - - - -"

    def test_built_message(self) -> None:
        msg = SyslogMessage(
            facility=Facility.LOCAL4,
            severity=Severity.NOTICE,
            timestamp=Timestamp.from_datetime(datetime(2003, 8, 24, 5, 14, 15, 3, tzinfo=timezone(timedelta(hours=-7)))),
            hostname="192.0.2.1",
            appname="myproc",
            procid=8710,
            msg=b"%% It's time to make the do-nuts.",
        )
        assert serialize_message(msg) == (
            b"<165>1 2003-08-24T05:14:15.000003-07:00 192.0.2.1 myproc 8710 - - %% It's time to make the do-nuts."
        )

    def test_bom_is_emitted(self) -> None:
        msg = SyslogMessage(facility=0, severity=0, msg=b"text", has_bom=True)
        assert serialize_message(msg) == b"<0>1 - - - - - - \xef\xbb\xbftext"

    def test_empty_sd_is_nil(self) -> None:
        msg = SyslogMessage(facility=0, severity=0, sd=StructuredData(()))
        assert serialize_message(msg).endswith(b" -")


class TestFormatTimestamp:
    def test_nil(self) -> None:
        assert format_timestamp(None) == "-"

    def test_small_year_is_padded(self) -> None:
        timestamp = Timestamp.from_datetime(datetime(5, 1, 2, 3, 4, 5, tzinfo=UTC))
        assert format_timestamp(timestamp) == "0005-01-02T03:04:05Z"

    def test_nanoseconds(self) -> None:
        timestamp = Timestamp(value=datetime(2019, 2, 13, 19, 48, 34, 123456, tzinfo=UTC), nanosecond=123_456_789)
        assert format_timestamp(timestamp) == "2019-02-13T19:48:34.123456789Z"

    def test_negative_half_hour_offset(self) -> None:
        tz = timezone(-timedelta(hours=3, minutes=30))
        timestamp = Timestamp.from_datetime(datetime(2020, 1, 1, tzinfo=tz))
        assert format_timestamp(timestamp) == "2020-01-01T00:00:00-03:30"


class TestFormatStructuredData:
    def test_empty(self) -> None:
        assert format_structured_data(StructuredData()) == "-"

    def test_element_without_params(self) -> None:
        assert format_structured_data(StructuredData((SDElement(sd_id="origin"),))) == "[origin]"

    def test_escaping(self) -> None:
        sd = StructuredData((SDElement(sd_id="a", params=(SDParam(name="b", value='x"y\\z]'),)),))
        assert format_structured_data(sd) == '[a b="x\\"y\\\\z\\]"]'

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("plain", "plain"), ('"', '\\"'), ("\\", "\\\\"), ("]", "\\]"), ("[", "[")],
    )
    def test_escape_param_value(self, value: str, expected: str) -> None:
        assert escape_param_value(value) == expected
