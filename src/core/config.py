"""Runtime configuration model for Railnorm.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_MISSING_TEXT_POLICY,
    DEFAULT_UNKNOWN_CATEGORY,
    ENV_MESSAGE_CATALOG,
    ENV_MISSING_TEXT_POLICY,
    ENV_UNKNOWN_CATEGORY,
    SUPPORTED_MISSING_TEXT_POLICIES,
)
from core.errors import RailnormConfigError


@dataclass(frozen=True)
class RailnormConfig:
    """Validated runtime configuration.

    Attributes:
        missing_text_policy: How rendering treats codes without catalog text,
            either "raw" (display the code) or "suppress" (drop the message).
        unknown_category: Category label used for unknown message type prefixes.
        catalog_path: Optional YAML file extending the built-in message catalog.
    """

    missing_text_policy: str = DEFAULT_MISSING_TEXT_POLICY
    unknown_category: str = DEFAULT_UNKNOWN_CATEGORY
    catalog_path: Path | None = None

    @classmethod
    def from_env(cls) -> "RailnormConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RailnormConfigError: If environment values are invalid.
        """
        policy_value = os.getenv(ENV_MISSING_TEXT_POLICY, DEFAULT_MISSING_TEXT_POLICY)
        category_value = os.getenv(ENV_UNKNOWN_CATEGORY, DEFAULT_UNKNOWN_CATEGORY)
        catalog_value = os.getenv(ENV_MESSAGE_CATALOG)
        return cls(
            missing_text_policy=_parse_missing_text_policy(policy_value),
            unknown_category=_parse_unknown_category(category_value),
            catalog_path=_parse_catalog_path(catalog_value),
        )


def _parse_missing_text_policy(raw_value: str) -> str:
    """Parse the missing-text policy environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized policy name.

    Raises:
        RailnormConfigError: If the policy is not supported.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value in SUPPORTED_MISSING_TEXT_POLICIES:
        return normalized_value
    supported = ", ".join(SUPPORTED_MISSING_TEXT_POLICIES)
    raise RailnormConfigError(
        f"Invalid {ENV_MISSING_TEXT_POLICY} value: "
        f"expected one of {supported}, got '{raw_value}'. "
        f"Set {ENV_MISSING_TEXT_POLICY} to a supported policy."
    )


def _parse_unknown_category(raw_value: str) -> str:
    normalized_value = raw_value.strip()
    if normalized_value:
        return normalized_value
    raise RailnormConfigError(
        f"Invalid {ENV_UNKNOWN_CATEGORY} value: expected a non-empty label. "
        f"Unset {ENV_UNKNOWN_CATEGORY} to use '{DEFAULT_UNKNOWN_CATEGORY}'."
    )


def _parse_catalog_path(raw_value: str | None) -> Path | None:
    if raw_value is None or not raw_value.strip():
        return None
    return Path(raw_value.strip()).expanduser().resolve()
