"""Тесты командной строки."""

import io
import json
import logging

import pytest

from mailaddr.main import run


def test_run_reports_valid_address() -> None:
    out = io.StringIO()

    code = run(["Simons Email <simon@example.com>"], stdout=out)

    assert code == 0
    line = out.getvalue().strip()
    assert line.startswith("OK\tSimons Email <simon@example.com>")
    assert "local=simon" in line
    assert "domain=example.com" in line
    assert "display=Simons Email" in line


def test_run_reports_invalid_address() -> None:
    out = io.StringIO()

    code = run(["simple@example.com", "Abc.example.com"], stdout=out)

    assert code == 1
    lines = out.getvalue().splitlines()
    assert lines[0].startswith("OK\t")
    assert lines[1] == "INVALID\tAbc.example.com\tMissingSeparator: Missing separator character '@'."


def test_run_json_from_stdin() -> None:
    out = io.StringIO()
    stdin = io.StringIO("user+tag@example.org\n\nfoo@localhost\n")

    code = run(["--json", "--require-tld"], stdin=stdin, stdout=out)

    assert code == 1
    first, second = [json.loads(line) for line in out.getvalue().splitlines()]
    assert first["valid"] is True
    assert first["uri"] == "mailto:user%2Btag@example.org"
    assert first["email"] == "user+tag@example.org"
    assert second == {
        "input": "foo@localhost",
        "valid": False,
        "error": "DomainTooFew",
        "message": "Too few parts in the domain",
    }


def test_run_flags_override_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAILADDR_MINIMUM_SUB_DOMAINS", "2")
    out = io.StringIO()

    assert run(["--min-sub-domains", "0", "foo@localhost"], stdout=out) == 0
    assert run(["--no-domain-literal", "email@[127.0.0.1]"], stdout=out) == 1
    assert "UnsupportedDomainLiteral" in out.getvalue()


def test_run_display_text_disabled_by_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAILADDR_ALLOW_DISPLAY_TEXT", "false")
    out = io.StringIO()

    assert run(["Simon <simon@example.com>"], stdout=out) == 1
    assert "UnsupportedDisplayName" in out.getvalue()


def test_run_rejects_negative_minimum() -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(["--min-sub-domains", "-1", "simon@example.com"], stdout=io.StringIO())

    assert excinfo.value.code == 2


def test_run_writes_each_result_before_reading_next_line(caplog: pytest.LogCaptureFixture) -> None:
    out = io.StringIO()
    seen = []

    def lines():
        for line in ("simon@example.com\n", "simon@\n", "foo@localhost\n"):
            seen.append(len(out.getvalue().splitlines()))
            yield line

    caplog.set_level(logging.INFO, logger="mailaddr.main")
    code = run([], stdin=lines(), stdout=out)  # type: ignore[arg-type]

    assert code == 1
    assert seen == [0, 1, 2]
    assert len(out.getvalue().splitlines()) == 3
    assert "Проверено адресов: 3, некорректных: 1" in caplog.text
