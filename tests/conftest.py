"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

# Examples from RFC 5424 section 6.5, plus a few messages seen in the wild
RFC_EXAMPLES = [
    b"<34>1 2003-10-11T22:14:15.003Z mymachine.example.com su - ID47 - \xef\xbb\xbf'su root' failed for lonvick on /dev/pts/8",
    b"<165>1 2003-08-24T05:14:15.000003-07:00 192.0.2.1 myproc 8710 - - %% It's time to make the do-nuts.",
    b"<165>1 2003-10-11T22:14:15.003Z mymachine.example.com evntslog - ID47 "
    b'[exampleSDID@32473 iut="3" eventSource="Application" eventID="1011"] '
    b"\xef\xbb\xbfAn application event log entry...",
    b"<165>1 2003-10-11T22:14:15.003Z mymachine.example.com evntslog - ID47 "
    b'[exampleSDID@32473 iut="3" eventSource="Application" eventID="1011"][examplePriority@32473 class="high"]',
]

SAMPLE_MESSAGES = [
    *RFC_EXAMPLES,
    b"<1>1 - - - - - -",
    b"<1>1 - - - - - - ",
    b'<78>1 2016-01-15T00:04:01+00:00 host1 CROND 10391 - [meta sequenceId="29"] some_message',
    b'<78>1 2016-01-15T00:04:01Z host1 CROND 10391 - [meta sequenceId="29" sequenceBlah="foo"][my key="value"] msg',
    b'<190>1 2016-02-21T01:19:11+00:00 batch6sj - - - [meta sequenceId="21881798" x-group="37051387"]'
    b'[origin x-service="tracking"] metascutellar conversationalist nephralgic exogenetic graphy',
    b'<13>1 2019-02-13T19:48:34.123456789+05:30 web-01 nginx worker-3 REQ [req path="/a\\"b\\\\c\\]d"] body',
    b"<191>1 1985-04-12T23:20:50.52Z - - - - - \xff\xfe not utf-8",
]


@pytest.fixture
def rfc_examples() -> list[bytes]:
    return list(RFC_EXAMPLES)


@pytest.fixture(params=SAMPLE_MESSAGES)
def sample_message(request: pytest.FixtureRequest) -> bytes:
    """Each well-formed sample message in turn."""
    return request.param


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at an empty temporary directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("SYSLOG5424_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def sample_log_file(tmp_path: Path) -> Path:
    """Create a temporary file with one valid message per line, plus one invalid line."""
    log_file = tmp_path / "messages.log"
    lines = [
        b"<34>1 2003-10-11T22:14:15.003Z mymachine.example.com su - ID47 - 'su root' failed",
        b"<134>Feb 18 20:53:31 haproxy[376]: I am a message",
        b"",
        b'<78>1 2016-01-15T00:04:01Z host1 CROND 10391 - [meta sequenceId="29"] some_message',
        b"<1>1 - - - - - -",
    ]
    log_file.write_bytes(b"\n".join(lines) + b"\n")
    return log_file
