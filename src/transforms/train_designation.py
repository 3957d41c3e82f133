"""Train designation parsing transform.

This module splits raw designations such as "NWB RS12345" into an
operator, a canonical category and a run number. It also flags
long-distance services from the raw designation.
"""

from __future__ import annotations

import re

from core.types import TrainDesignation

_TRAIN_PATTERN = re.compile(
    r"(\w+?)?? ?(RS|STB|IRE|RE|RB|IC|ICE|EC|ECE|TGV|NJ|RJ|S)? ?(\d+\w*)",
    re.ASCII,
)
_LONG_DISTANCE_PATTERN = re.compile(r"(ICE?|TGV|ECE?|RJ).*", re.ASCII)

_UNPARSEABLE = TrainDesignation()


def parse_train_designation(raw: str | None) -> TrainDesignation:
    """Parse a raw train designation.

    Args:
        raw: Designation as reported by the departure backend.

    Returns:
        Parsed designation; all fields are None when nothing matches.
    """
    match = _TRAIN_PATTERN.search(raw or "")
    if match is None:
        return _UNPARSEABLE
    third_party = match.group(1) or None
    raw_type = match.group(2) or None
    return TrainDesignation(
        third_party=third_party,
        train_type=canonical_train_type(third_party, raw_type),
        train_id=derive_train_id(third_party, raw_type, match.group(3)),
    )


def canonical_train_type(third_party: str | None, raw_type: str | None) -> str | None:
    """Map a raw category to its canonical code.

    Rules are applied in order and the first match wins.

    Args:
        third_party: Operator code, None for the national operator.
        raw_type: Category token matched in the designation.

    Returns:
        Canonical category code, or None when no category is known.
    """
    if (third_party == "NWB" and raw_type == "RS") or third_party == "BSB":
        return "S"
    if third_party == "FLX":
        return "IR"
    if third_party:
        return "RB"
    if raw_type == "ECE":
        return "EC"
    return raw_type


def derive_train_id(
    third_party: str | None,
    raw_type: str | None,
    number: str | None,
) -> str | None:
    """Build the run number for a parsed designation.

    NWB RS services keep their category token as a prefix.

    Args:
        third_party: Operator code.
        raw_type: Category token matched in the designation.
        number: Matched number token.

    Returns:
        Run number, or None when no number was captured.
    """
    if third_party == "NWB" and raw_type == "RS":
        return f"{raw_type}{number}"
    return number or None


def is_long_distance(raw: str | None) -> bool:
    """Return whether a raw designation names a long-distance service.

    The check runs on the raw designation, not on the canonical type.

    Args:
        raw: Designation as reported by the departure backend.

    Returns:
        True for ICE, IC, TGV, EC, ECE and RJ designations.
    """
    return _LONG_DISTANCE_PATTERN.search(raw or "") is not None
