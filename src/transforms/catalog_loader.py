"""Message catalog overlay loading.

This module reads optional YAML overlays that add or replace
catalog texts, uncertainty marks and supersession rules, and merges
them with the built-in catalog into one immutable catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence, cast

from core.config import RailnormConfig
from core.errors import RailnormCatalogError, RailnormDependencyError
from core.logging_config import get_logger
from transforms.message_catalog import DEFAULT_MESSAGE_CATALOG, MessageCatalog, build_catalog

_LOGGER = get_logger(__name__)

_ALLOWED_OVERLAY_KEYS = ("messages", "uncertain", "superseded")


@dataclass(frozen=True)
class CatalogOverrides:
    """Parsed catalog overlay contents.

    Attributes:
        texts: Code to display text additions or replacements.
        uncertain_codes: Additional codes with unconfirmed meaning.
        superseded: Code to superseded codes, replacing built-in rules per code.
    """

    texts: Mapping[str, str]
    uncertain_codes: frozenset[str]
    superseded: Mapping[str, tuple[str, ...]]


def build_message_catalog(config: RailnormConfig) -> MessageCatalog:
    """Build the message catalog for a runtime config.

    Args:
        config: Runtime configuration.

    Returns:
        Built-in catalog, merged with the configured overlay if any.

    Raises:
        RailnormCatalogError: If the overlay file is invalid.
        RailnormDependencyError: If PyYAML is unavailable.
    """
    if config.catalog_path is None:
        return DEFAULT_MESSAGE_CATALOG
    overrides = load_catalog_overrides(config.catalog_path)
    return merge_catalog(DEFAULT_MESSAGE_CATALOG, overrides)


def merge_catalog(base: MessageCatalog, overrides: CatalogOverrides) -> MessageCatalog:
    """Merge overlay entries on top of a base catalog."""
    return build_catalog(
        texts={**base.texts, **overrides.texts},
        types=base.types,
        superseded={**base.superseded, **overrides.superseded},
        uncertain_codes=base.uncertain_codes | overrides.uncertain_codes,
    )


def load_catalog_overrides(catalog_path: Path | str) -> CatalogOverrides:
    """Load and validate a YAML catalog overlay from disk.

    Args:
        catalog_path: File path to the YAML overlay.

    Returns:
        Validated overlay contents.

    Raises:
        RailnormCatalogError: If the file is missing, unreadable, or malformed.
        RailnormDependencyError: If PyYAML is unavailable.
    """
    catalog_file = Path(catalog_path).expanduser().resolve()
    payload = _load_yaml_payload(catalog_file)
    root_mapping = _expect_mapping(payload, "catalog overlay root")
    _validate_root_keys(root_mapping)
    overrides = CatalogOverrides(
        texts=_parse_texts(root_mapping.get("messages")),
        uncertain_codes=_parse_uncertain(root_mapping.get("uncertain")),
        superseded=_parse_superseded(root_mapping.get("superseded")),
    )
    _LOGGER.info(
        "catalog_overrides_loaded",
        catalog_path=str(catalog_file),
        message_count=len(overrides.texts),
        uncertain_count=len(overrides.uncertain_codes),
        superseded_count=len(overrides.superseded),
    )
    return overrides


def _load_yaml_payload(catalog_file: Path) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise RailnormDependencyError(
            "Catalog overlays require PyYAML. Install with 'pip install pyyaml'."
        ) from error
    if not catalog_file.exists():
        raise RailnormCatalogError(
            f"Catalog overlay does not exist at {catalog_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(catalog_file.read_text(encoding="utf-8")))
    except (OSError, UnicodeDecodeError) as error:
        raise RailnormCatalogError(
            f"Failed to read catalog overlay at {catalog_file}: {error}. "
            "Check file permissions and UTF-8 encoding, then retry."
        ) from error
    except yaml.YAMLError as error:
        raise RailnormCatalogError(
            f"Failed to parse catalog overlay at {catalog_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise RailnormCatalogError(
            f"Catalog overlay at {catalog_file} is empty. Define 'messages', 'uncertain' "
            "or 'superseded'."
        )
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[object, object]:
    if isinstance(value, Mapping):
        return value
    raise RailnormCatalogError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise RailnormCatalogError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _expect_code(value: object, context: str) -> str:
    # YAML reads unquoted codes such as 80 as integers.
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise RailnormCatalogError(
            f"Invalid {context}: expected a message code, got {type(value).__name__}."
        )
    code = str(value).strip()
    if not code:
        raise RailnormCatalogError(f"Invalid {context}: message code must not be empty.")
    return code


def _parse_texts(raw_value: object) -> Mapping[str, str]:
    if raw_value is None:
        return {}
    texts = {}
    for raw_code, raw_text in _expect_mapping(raw_value, "catalog messages").items():
        code = _expect_code(raw_code, "catalog messages key")
        if not isinstance(raw_text, str) or not raw_text.strip():
            raise RailnormCatalogError(
                f"Invalid catalog text for code '{code}': expected a non-empty string."
            )
        texts[code] = raw_text
    return texts


def _parse_uncertain(raw_value: object) -> frozenset[str]:
    if raw_value is None:
        return frozenset()
    rows = _expect_sequence(raw_value, "catalog uncertain codes")
    return frozenset(_expect_code(row, "catalog uncertain code") for row in rows)


def _parse_superseded(raw_value: object) -> Mapping[str, tuple[str, ...]]:
    if raw_value is None:
        return {}
    superseded = {}
    for raw_code, raw_targets in _expect_mapping(raw_value, "catalog superseded rules").items():
        code = _expect_code(raw_code, "catalog superseded key")
        rows = _expect_sequence(raw_targets, f"catalog superseded rule for '{code}'")
        superseded[code] = tuple(
            _expect_code(row, f"catalog superseded rule for '{code}'") for row in rows
        )
    return superseded


def _validate_root_keys(root_mapping: Mapping[object, object]) -> None:
    unknown_keys = sorted(str(key) for key in root_mapping if key not in _ALLOWED_OVERLAY_KEYS)
    if unknown_keys:
        allowed = ", ".join(_ALLOWED_OVERLAY_KEYS)
        raise RailnormCatalogError(
            f"Catalog overlay contains unknown fields: {', '.join(unknown_keys)}. "
            f"Use only: {allowed}."
        )
