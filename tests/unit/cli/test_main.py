"""Unit tests for CLI command handling."""

from __future__ import annotations

import io
import json

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path


def test_cli_train_prints_one_json_line_per_designation(capsys) -> None:
    """CLI train should print parsed fields and the long-distance flag."""
    exit_code = main(["train", "NWB RS12345", "ICE 1007"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0
    assert [json.loads(line) for line in lines] == [
        {"thirdParty": "NWB", "trainType": "S", "trainId": "RS12345", "longDistance": False},
        {"thirdParty": None, "trainType": "ICE", "trainId": "1007", "longDistance": True},
    ]


def test_cli_messages_renders_resolved_codes(capsys) -> None:
    """CLI messages should drop superseded codes."""
    exit_code = main(["messages", "80:q", "84:q", "43:d"])
    rendered = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert [(row["code"], row["category"]) for row in rendered] == [
        ("84", "qos"),
        ("43", "delay"),
    ]


def test_cli_messages_without_prefix_uses_unknown_category(capsys) -> None:
    """Codes given without prefix should fall back to the unknown category."""
    exit_code = main(["messages", "2"])
    rendered = json.loads(capsys.readouterr().out)

    assert exit_code == 0 and rendered[0]["category"] == "unknown"


def test_cli_messages_uses_catalog_override(capsys) -> None:
    """--catalog should extend the built-in catalog."""
    catalog_path = str(fixture_path("catalog/valid_overlay.yaml"))

    exit_code = main(["--catalog", catalog_path, "messages", "4:d"])
    rendered = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert rendered == [
        {
            "code": "4",
            "text": "Kurzfristiger Personalausfall",
            "category": "delay",
            "uncertain": True,
        }
    ]


def test_cli_enrich_reads_departure_file(capsys) -> None:
    """CLI enrich should print enriched departures."""
    exit_code = main(["enrich", str(fixture_path("departures/departures.json"))])
    enriched = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert [row["trainId"] for row in enriched] == ["1007", "RS12345", None]
    assert [row["code"] for row in enriched[0]["renderedMessages"]] == ["84", "43"]
    assert "renderedMessages" not in enriched[1]


def test_cli_enrich_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """CLI enrich without a path should read stdin."""
    monkeypatch.setattr("sys.stdin", io.StringIO('[{"train": "TGV 9573"}]'))

    exit_code = main(["enrich"])
    enriched = json.loads(capsys.readouterr().out)

    assert exit_code == 0 and enriched[0]["longDistance"] is True


def test_cli_reports_invalid_config(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """Invalid environment config should exit with code 1."""
    monkeypatch.setenv("RAILNORM_MISSING_TEXT_POLICY", "guess")

    exit_code = main(["messages", "2:d"])
    captured = capsys.readouterr()

    assert exit_code == 1 and "error=" in captured.err and captured.out == ""


def test_cli_reports_missing_catalog(tmp_path, capsys) -> None:
    """Missing catalog overlay should exit with code 1."""
    exit_code = main(["--catalog", str(tmp_path / "missing.yaml"), "messages", "2:d"])

    assert exit_code == 1 and "does not exist" in capsys.readouterr().err


def test_cli_requires_command() -> None:
    """Missing subcommand should be a usage error."""
    with pytest.raises(SystemExit) as error:
        main([])

    assert error.value.code == 2


def test_cli_reports_non_utf8_catalog(tmp_path, capsys) -> None:
    """Catalog overlay with a non-UTF-8 encoding should exit with code 1."""
    overlay_path = tmp_path / "latin1.yaml"
    overlay_path.write_bytes('messages:\n  "4": "Verspätung"\n'.encode("latin-1"))

    exit_code = main(["--catalog", str(overlay_path), "messages", "2:d"])

    assert exit_code == 1 and "error=" in capsys.readouterr().err


def test_cli_reports_non_utf8_departures(tmp_path, capsys) -> None:
    """Departures file with a non-UTF-8 encoding should exit with code 1."""
    source_path = tmp_path / "latin1.json"
    source_path.write_bytes('[{"destination": "München"}]'.encode("latin-1"))

    exit_code = main(["enrich", str(source_path)])
    captured = capsys.readouterr()

    assert exit_code == 1 and "error=" in captured.err and captured.out == ""
