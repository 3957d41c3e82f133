"""Departure message normalization transform.

This module resolves message codes to display text, classifies
message type prefixes, and drops codes superseded by another code
reported for the same departure. Lookups that find nothing return
None instead of raising.
"""

from __future__ import annotations

from typing import Iterable

from core.types import MessageCategory
from transforms.message_catalog import DEFAULT_MESSAGE_CATALOG, MessageCatalog


def normalize_code(code: str | int) -> str:
    """Normalize a message code to its catalog key.

    Args:
        code: Code as reported, string or integer.

    Returns:
        Code string without surrounding whitespace.
    """
    return str(code).strip()


def lookup_text(
    code: str | int,
    catalog: MessageCatalog = DEFAULT_MESSAGE_CATALOG,
) -> str | None:
    """Look up the display text for a message code.

    Args:
        code: Message code.
        catalog: Catalog to read from.

    Returns:
        Catalog text, or None when the code has no entry.
    """
    return catalog.texts.get(normalize_code(code))


def is_uncertain(code: str | int, catalog: MessageCatalog = DEFAULT_MESSAGE_CATALOG) -> bool:
    """Return whether the catalog marks a code's meaning as uncertain."""
    return normalize_code(code) in catalog.uncertain_codes


def classify_type(
    prefix: str,
    catalog: MessageCatalog = DEFAULT_MESSAGE_CATALOG,
) -> MessageCategory | None:
    """Classify a one-character message type prefix.

    Args:
        prefix: Type prefix such as "d", "f" or "q".
        catalog: Catalog to read from.

    Returns:
        Message category, or None for an unknown prefix.
    """
    return catalog.types.get(prefix)


def resolve_active_set(
    codes: Iterable[str | int],
    catalog: MessageCatalog = DEFAULT_MESSAGE_CATALOG,
) -> frozenset[str]:
    """Remove codes superseded by another code in the same set.

    Supersession is evaluated once against the original set. Two codes
    that supersede each other are both kept when both are present.

    Args:
        codes: Codes reported for one departure.
        catalog: Catalog to read supersession rules from.

    Returns:
        Codes left after supersession.
    """
    active_codes = frozenset(normalize_code(code) for code in codes)
    superseded_codes: set[str] = set()
    for code in active_codes:
        for target in catalog.superseded.get(code, ()):
            if target == code or target not in active_codes:
                continue
            if code in catalog.superseded.get(target, ()):
                continue
            superseded_codes.add(target)
    return active_codes - superseded_codes
