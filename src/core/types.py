"""Shared typed models.

This module defines immutable data models used by the transforms,
enrichment, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MessageCategory(str, Enum):
    """Display category of a departure message."""

    DELAY = "delay"
    QOS = "qos"


@dataclass(frozen=True)
class TrainDesignation:
    """Operator, category and run number parsed from a raw designation.

    All fields are None when the raw designation is unparseable.

    Attributes:
        third_party: Operator code such as "NWB", None for the national operator.
        train_type: Canonical category code such as "S" or "IC".
        train_id: Run number, prefixed by its raw category for NWB RS trains.
    """

    third_party: str | None = None
    train_type: str | None = None
    train_id: str | None = None

    @property
    def is_empty(self) -> bool:
        """Whether no field could be parsed."""
        return self.third_party is None and self.train_type is None and self.train_id is None


@dataclass(frozen=True)
class RawMessage:
    """Message code reported for a departure.

    Attributes:
        code: Catalog code, for example "80".
        type_prefix: One-character message type, for example "q".
    """

    code: str
    type_prefix: str


@dataclass(frozen=True)
class RenderedMessage:
    """Display-ready message after catalog lookup and supersession.

    Attributes:
        code: Catalog code.
        text: Catalog text, or the code itself when the catalog has no entry.
        category: "delay", "qos", or the configured unknown-category label.
        uncertain: Whether the catalog marks the text's meaning as uncertain.
    """

    code: str
    text: str
    category: str
    uncertain: bool = False
