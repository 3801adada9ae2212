from __future__ import annotations

from typer.testing import CliRunner

from regexcollection.cli import app
from regexcollection.patterns import names

runner = CliRunner()


def test_list_names() -> None:
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    for name in names():
        assert name in result.stdout


def test_list_with_patterns() -> None:
    result = runner.invoke(app, ["list", "--show-pattern"])
    assert result.exit_code == 0
    assert r"\{\{\s*RANDOM" in result.stdout


def test_match_url() -> None:
    result = runner.invoke(app, ["match", "url", "visit http://foo.com/bar now"])
    assert result.exit_code == 0
    assert "match: 'http://foo.com/bar'" in result.stdout


def test_match_prints_groups() -> None:
    result = runner.invoke(app, ["match", "city_state_postal", "Los Angeles CA 90001-1234"])
    assert result.exit_code == 0
    assert "group 1: 'Los Angeles'" in result.stdout
    assert "group 2: 'CA'" in result.stdout
    assert "group 3: '90001-1234'" in result.stdout


def test_match_no_match() -> None:
    result = runner.invoke(app, ["match", "dns_hostname", "a.c"])
    assert result.exit_code == 1
    assert "no match" in result.output


def test_match_full() -> None:
    assert runner.invoke(app, ["match", "spaces", "a b"]).exit_code == 0
    assert runner.invoke(app, ["match", "--full", "spaces", "a b"]).exit_code == 1
    assert runner.invoke(app, ["match", "--full", "spaces", " "]).exit_code == 0


def test_match_unknown_pattern() -> None:
    result = runner.invoke(app, ["match", "phone", "555-1234"])
    assert result.exit_code == 5
    assert "unknown pattern 'phone'" in result.output
