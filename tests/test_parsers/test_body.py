"""Tests for the MSG consumer."""

from __future__ import annotations

import pytest

from syslog5424.errors import MissingSeparator
from syslog5424.grammar import FieldName
from syslog5424.parsers.base import Cursor
from syslog5424.parsers.body import consume_msg


class TestConsumeMsg:
    def test_end_of_input_means_no_body(self) -> None:
        assert consume_msg(Cursor(b"-", 1)) == (None, False)

    def test_trailing_space_means_empty_body(self) -> None:
        assert consume_msg(Cursor(b"- ", 1)) == (b"", False)

    def test_body_taken_verbatim(self) -> None:
        body, has_bom = consume_msg(Cursor(b"-  two  spaces \r\n", 1))
        assert body == b" two  spaces \r\n"
        assert has_bom is False

    def test_bom_is_stripped(self) -> None:
        assert consume_msg(Cursor(b"- \xef\xbb\xbfhello", 1)) == (b"hello", True)

    def test_bom_only(self) -> None:
        assert consume_msg(Cursor(b"- \xef\xbb\xbf", 1)) == (b"", True)

    def test_bom_not_at_start_is_kept(self) -> None:
        assert consume_msg(Cursor(b"- a\xef\xbb\xbf", 1)) == (b"a\xef\xbb\xbf", False)

    def test_invalid_utf8_is_kept(self) -> None:
        body, _ = consume_msg(Cursor(b"- \xff\xfe", 1))
        assert body == b"\xff\xfe"

    def test_missing_separator(self) -> None:
        with pytest.raises(MissingSeparator) as exc_info:
            consume_msg(Cursor(b"-x", 1))
        assert exc_info.value.field == FieldName.MSG
        assert exc_info.value.offset == 1
