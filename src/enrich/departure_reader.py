"""Departure payload readers.

This module loads departure records from a local JSON file or stdin.
It validates the top-level shape before enrichment.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Mapping

from core.constants import STDIN_PATH_MARKER
from core.errors import RailnormInputError


def read_departures(source: str | None) -> list[Mapping[str, object]]:
    """Load departure records from a JSON document.

    Args:
        source: Path to a JSON file, or None / "-" for stdin.

    Returns:
        Departure records in document order.

    Raises:
        RailnormInputError: If the source is unreadable or not a list of objects.
    """
    if source is None or source == STDIN_PATH_MARKER:
        payload = _decode_json(_read_stdin_text(), "stdin")
    else:
        payload = _decode_json(_read_file_text(Path(source).expanduser()), source)
    return _expect_departure_rows(payload)


def _read_stdin_text() -> str:
    try:
        return sys.stdin.read()
    except UnicodeDecodeError as error:
        raise RailnormInputError(
            f"Failed to read departures from stdin: {error}. Provide UTF-8 encoded JSON."
        ) from error


def _read_file_text(source_path: Path) -> str:
    if not source_path.is_file():
        raise RailnormInputError(
            f"Failed to read departures at {source_path}: file does not exist. "
            "Provide an existing JSON file or '-' for stdin."
        )
    try:
        return source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise RailnormInputError(
            f"Failed to read departures at {source_path}: {error}. "
            "Check file permissions and UTF-8 encoding."
        ) from error


def _decode_json(text: str, source_name: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        raise RailnormInputError(
            f"Invalid JSON in departures from {source_name} at line {error.lineno}: {error.msg}."
        ) from error


def _expect_departure_rows(payload: Any) -> list[Mapping[str, object]]:
    if not isinstance(payload, list):
        raise RailnormInputError(
            f"Invalid departures document: expected list, got {type(payload).__name__}."
        )
    for index, row in enumerate(payload):
        if not isinstance(row, dict):
            raise RailnormInputError(
                f"Invalid departure #{index + 1}: expected object, got {type(row).__name__}."
            )
    return payload
