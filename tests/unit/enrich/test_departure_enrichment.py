"""Unit tests for departure enrichment."""

from __future__ import annotations

import pytest

from core.config import RailnormConfig
from core.errors import RailnormInputError
from enrich import departure_enrichment
from enrich.departure_enrichment import enrich_departure, enrich_departures
from tests.fixture_paths import fixture_path


class _RecordingLogger:
    """Collects structured log events for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, object]]] = []

    def info(self, event: str, **fields: object) -> None:
        self.events.append((event, fields))


def test_enrich_departure_merges_designation_fields() -> None:
    """Parsed designation and long-distance flag should be merged in."""
    departure = {"train": "ICE 1007", "destination": "München Hbf"}

    enriched = enrich_departure(departure)

    assert enriched == {
        "train": "ICE 1007",
        "destination": "München Hbf",
        "thirdParty": None,
        "trainType": "ICE",
        "trainId": "1007",
        "longDistance": True,
    }


def test_enrich_departure_does_not_mutate_input() -> None:
    """Input departure should be left untouched."""
    departure = {"train": "NWB RS12345"}

    enriched = enrich_departure(departure)

    assert departure == {"train": "NWB RS12345"} and enriched["trainId"] == "RS12345"


@pytest.mark.parametrize("departure", [{}, {"train": None}, {"train": 42}])
def test_enrich_departure_without_designation_has_empty_fields(departure: dict) -> None:
    """Missing or non-string designations should yield empty fields."""
    enriched = enrich_departure(departure)

    assert enriched["thirdParty"] is None
    assert enriched["trainType"] is None
    assert enriched["trainId"] is None
    assert enriched["longDistance"] is False


def test_enrich_departure_renders_messages() -> None:
    """Departures with messages should receive rendered messages."""
    departure = {
        "train": "RB 1007",
        "messages": [{"code": "80", "type": "q"}, {"code": "84", "type": "q"}],
    }

    enriched = enrich_departure(departure, RailnormConfig())

    assert enriched["renderedMessages"] == [
        {"code": "84", "text": "Zug verkehrt richtig gereiht", "category": "qos", "uncertain": False}
    ]
    assert enriched["longDistance"] is False


def test_enrich_departure_rejects_non_mapping() -> None:
    """Non-mapping departures should raise input errors."""
    with pytest.raises(RailnormInputError):
        enrich_departure(["ICE 1007"])  # type: ignore[arg-type]


def test_enrich_departures_preserves_order() -> None:
    """Batch enrichment should keep input order."""
    enriched = enrich_departures([{"train": "S 5"}, {"train": "FLX RE100"}])

    assert [row["trainType"] for row in enriched] == ["S", "IR"]


def test_enrich_departure_uses_overlay_from_config() -> None:
    """Catalog overlay named by the config should drive message texts."""
    config = RailnormConfig(catalog_path=fixture_path("catalog/valid_overlay.yaml"))
    departure = {"train": "RB 1", "messages": [{"code": "4", "type": "d"}]}

    enriched = enrich_departure(departure, config)

    assert enriched["renderedMessages"] == [
        {
            "code": "4",
            "text": "Kurzfristiger Personalausfall",
            "category": "delay",
            "uncertain": True,
        }
    ]


def test_enrich_departures_reads_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Omitted config should come from the environment, overlay included."""
    monkeypatch.setenv("RAILNORM_MESSAGE_CATALOG", str(fixture_path("catalog/valid_overlay.yaml")))
    monkeypatch.setenv("RAILNORM_UNKNOWN_CATEGORY", "sonstiges")

    enriched = enrich_departures([{"train": "S 1", "messages": [{"code": "4", "type": "x"}]}])

    assert [(row["text"], row["category"]) for row in enriched[0]["renderedMessages"]] == [
        ("Kurzfristiger Personalausfall", "sonstiges")
    ]


def test_enrich_departures_logs_unparsed_designations(monkeypatch: pytest.MonkeyPatch) -> None:
    """Summary event should count departures without a parseable designation."""
    recorder = _RecordingLogger()
    monkeypatch.setattr(departure_enrichment, "_LOGGER", recorder)

    enrich_departures([{"train": "ICE 1007"}, {"train": "Bus"}, {}], RailnormConfig())

    assert recorder.events == [
        (
            "departures_enriched",
            {"departure_count": 3, "unparsed_count": 2, "long_distance_count": 1},
        )
    ]
