"""Public SDK surface for Railnorm.

This module provides a stable import path for library users.
It re-exports the parsers, the message normalizer and typed models.
"""

from __future__ import annotations

from core.config import RailnormConfig
from core.types import MessageCategory, RawMessage, RenderedMessage, TrainDesignation
from enrich.departure_enrichment import enrich_departure, enrich_departures
from enrich.message_rendering import render_messages
from transforms.catalog_loader import build_message_catalog, load_catalog_overrides
from transforms.message_catalog import DEFAULT_MESSAGE_CATALOG, MessageCatalog
from transforms.message_normalizer import (
    classify_type,
    is_uncertain,
    lookup_text,
    resolve_active_set,
)
from transforms.train_designation import is_long_distance, parse_train_designation

__all__ = [
    "DEFAULT_MESSAGE_CATALOG",
    "MessageCatalog",
    "MessageCategory",
    "RailnormConfig",
    "RawMessage",
    "RenderedMessage",
    "TrainDesignation",
    "build_message_catalog",
    "classify_type",
    "enrich_departure",
    "enrich_departures",
    "is_long_distance",
    "is_uncertain",
    "load_catalog_overrides",
    "lookup_text",
    "parse_train_designation",
    "render_messages",
    "resolve_active_set",
]
