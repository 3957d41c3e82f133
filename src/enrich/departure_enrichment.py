"""Departure record enrichment.

This module merges the parsed train designation, the long-distance
flag and rendered messages into departure records. Input records are
never mutated; each call returns a fresh dictionary.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from core.config import RailnormConfig
from core.constants import (
    DEPARTURE_MESSAGES_KEY,
    DEPARTURE_RENDERED_MESSAGES_KEY,
    DEPARTURE_TRAIN_KEY,
)
from core.errors import RailnormInputError
from core.logging_config import get_logger
from core.types import TrainDesignation
from enrich.message_rendering import parse_raw_messages, render_messages, rendered_message_payload
from transforms.catalog_loader import build_message_catalog
from transforms.message_catalog import MessageCatalog
from transforms.train_designation import is_long_distance, parse_train_designation

_LOGGER = get_logger(__name__)


def enrich_departure(
    departure: Mapping[str, object],
    config: RailnormConfig | None = None,
    catalog: MessageCatalog | None = None,
) -> dict[str, object]:
    """Enrich one departure record.

    Args:
        departure: Departure record with an optional ``train`` designation
            and an optional ``messages`` list.
        config: Runtime configuration, read from the environment when omitted.
        catalog: Catalog used for message rendering, built from ``config``
            (including its overlay) when omitted.

    Returns:
        Copy of the departure with designation fields merged in.

    Raises:
        RailnormInputError: If the departure or its messages are malformed.
        RailnormCatalogError: If the configured catalog overlay is invalid.
    """
    resolved_config = config if config is not None else RailnormConfig.from_env()
    resolved_catalog = (
        catalog if catalog is not None else build_message_catalog(resolved_config)
    )
    enriched, _ = _enrich_one(departure, resolved_config, resolved_catalog)
    return enriched


def enrich_departures(
    departures: Iterable[Mapping[str, object]],
    config: RailnormConfig | None = None,
    catalog: MessageCatalog | None = None,
) -> list[dict[str, object]]:
    """Enrich departure records in order.

    The catalog is built once for the whole batch.

    Args:
        departures: Departure records.
        config: Runtime configuration, read from the environment when omitted.
        catalog: Catalog used for message rendering, built from ``config``
            (including its overlay) when omitted.

    Returns:
        Enriched records aligned to the input order.
    """
    resolved_config = config if config is not None else RailnormConfig.from_env()
    resolved_catalog = (
        catalog if catalog is not None else build_message_catalog(resolved_config)
    )
    enriched: list[dict[str, object]] = []
    unparsed_count = 0
    for departure in departures:
        row, designation = _enrich_one(departure, resolved_config, resolved_catalog)
        enriched.append(row)
        if designation.is_empty:
            unparsed_count += 1
    _LOGGER.info(
        "departures_enriched",
        departure_count=len(enriched),
        unparsed_count=unparsed_count,
        long_distance_count=sum(1 for row in enriched if row["longDistance"]),
    )
    return enriched


def designation_payload(designation: TrainDesignation) -> dict[str, object]:
    """Convert a designation into departure record fields."""
    return {
        "thirdParty": designation.third_party,
        "trainType": designation.train_type,
        "trainId": designation.train_id,
    }


def _enrich_one(
    departure: Mapping[str, object],
    config: RailnormConfig,
    catalog: MessageCatalog,
) -> tuple[dict[str, object], TrainDesignation]:
    """Enrich one departure and return it with its parsed designation."""
    if not isinstance(departure, Mapping):
        raise RailnormInputError(
            f"Invalid departure: expected object mapping, got {type(departure).__name__}."
        )
    raw_train = departure.get(DEPARTURE_TRAIN_KEY)
    train = raw_train if isinstance(raw_train, str) else ""
    designation = parse_train_designation(train)
    enriched = dict(departure)
    enriched.update(designation_payload(designation))
    enriched["longDistance"] = is_long_distance(train)
    raw_messages = departure.get(DEPARTURE_MESSAGES_KEY)
    if raw_messages is not None:
        rendered = render_messages(parse_raw_messages(raw_messages), config, catalog)
        enriched[DEPARTURE_RENDERED_MESSAGES_KEY] = [
            rendered_message_payload(message) for message in rendered
        ]
    return enriched, designation
