"""Message rendering for one departure.

This module turns raw (code, type prefix) pairs into display-ready
messages: superseded and duplicate codes are dropped, texts and
categories are looked up, and configured fallbacks fill the gaps.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from core.config import RailnormConfig
from core.constants import MESSAGE_CODE_KEY, MESSAGE_TYPE_KEY, MISSING_TEXT_POLICY_SUPPRESS
from core.errors import RailnormInputError
from core.logging_config import get_logger
from core.types import RawMessage, RenderedMessage
from transforms.message_catalog import DEFAULT_MESSAGE_CATALOG, MessageCatalog
from transforms.message_normalizer import (
    classify_type,
    is_uncertain,
    lookup_text,
    normalize_code,
    resolve_active_set,
)

_LOGGER = get_logger(__name__)


def parse_raw_messages(payload: object) -> list[RawMessage]:
    """Parse a departure's message list.

    Args:
        payload: List of ``{"code": ..., "type": ...}`` objects.

    Returns:
        Ordered raw messages.

    Raises:
        RailnormInputError: If the payload shape is invalid.
    """
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes, bytearray)):
        raise RailnormInputError(
            f"Invalid departure messages: expected list, got {type(payload).__name__}."
        )
    return [_parse_raw_message(row, index) for index, row in enumerate(payload)]


def render_messages(
    messages: Iterable[RawMessage],
    config: RailnormConfig,
    catalog: MessageCatalog = DEFAULT_MESSAGE_CATALOG,
) -> list[RenderedMessage]:
    """Render raw messages for display.

    Args:
        messages: Raw messages of one departure.
        config: Runtime configuration with fallback policies.
        catalog: Catalog used for lookups.

    Returns:
        Rendered messages in input order, one per surviving code.
    """
    raw_messages = list(messages)
    active_codes = resolve_active_set((message.code for message in raw_messages), catalog)
    rendered: list[RenderedMessage] = []
    seen_codes: set[str] = set()
    for message in raw_messages:
        code = normalize_code(message.code)
        if code not in active_codes or code in seen_codes:
            continue
        seen_codes.add(code)
        text = _resolve_text(code, config, catalog)
        if text is None:
            continue
        rendered.append(
            RenderedMessage(
                code=code,
                text=text,
                category=_resolve_category(code, message.type_prefix, config, catalog),
                uncertain=is_uncertain(code, catalog),
            )
        )
    return rendered


def rendered_message_payload(message: RenderedMessage) -> dict[str, object]:
    """Convert a rendered message into a JSON-compatible mapping."""
    return {
        "code": message.code,
        "text": message.text,
        "category": message.category,
        "uncertain": message.uncertain,
    }


def _parse_raw_message(row: object, index: int) -> RawMessage:
    context = f"departure message #{index + 1}"
    if not isinstance(row, Mapping):
        raise RailnormInputError(
            f"Invalid {context}: expected object mapping, got {type(row).__name__}."
        )
    raw_code = row.get(MESSAGE_CODE_KEY)
    if isinstance(raw_code, bool) or not isinstance(raw_code, (str, int)):
        raise RailnormInputError(
            f"Invalid {context}: field '{MESSAGE_CODE_KEY}' must be a string or integer."
        )
    raw_type = row.get(MESSAGE_TYPE_KEY, "")
    if not isinstance(raw_type, str):
        raise RailnormInputError(
            f"Invalid {context}: field '{MESSAGE_TYPE_KEY}' must be a string when provided."
        )
    return RawMessage(code=normalize_code(raw_code), type_prefix=raw_type)


def _resolve_text(code: str, config: RailnormConfig, catalog: MessageCatalog) -> str | None:
    text = lookup_text(code, catalog)
    if text is not None:
        return text
    _LOGGER.debug(
        "message_text_missing",
        code=code,
        missing_text_policy=config.missing_text_policy,
    )
    if config.missing_text_policy == MISSING_TEXT_POLICY_SUPPRESS:
        return None
    return code


def _resolve_category(
    code: str,
    type_prefix: str,
    config: RailnormConfig,
    catalog: MessageCatalog,
) -> str:
    category = classify_type(type_prefix, catalog)
    if category is not None:
        return category.value
    _LOGGER.warning(
        "message_prefix_unknown",
        code=code,
        type_prefix=type_prefix,
        fallback_category=config.unknown_category,
    )
    return config.unknown_category
