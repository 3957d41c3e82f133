"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import RailnormConfig
from core.errors import RailnormConfigError


def test_from_env_uses_defaults_when_unset() -> None:
    """Config should fall back to documented defaults."""
    config = RailnormConfig.from_env()

    assert config == RailnormConfig(
        missing_text_policy="raw",
        unknown_category="unknown",
        catalog_path=None,
    )


def test_from_env_reads_values(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should read and normalize environment values."""
    monkeypatch.setenv("RAILNORM_MISSING_TEXT_POLICY", " Suppress ")
    monkeypatch.setenv("RAILNORM_UNKNOWN_CATEGORY", "other")
    monkeypatch.setenv("RAILNORM_MESSAGE_CATALOG", "./overlay.yaml")

    config = RailnormConfig.from_env()

    assert config.missing_text_policy == "suppress"
    assert config.unknown_category == "other"
    assert config.catalog_path is not None and config.catalog_path.name == "overlay.yaml"


def test_from_env_raises_for_invalid_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported missing-text policy."""
    monkeypatch.setenv("RAILNORM_MISSING_TEXT_POLICY", "guess")

    with pytest.raises(RailnormConfigError, match="RAILNORM_MISSING_TEXT_POLICY"):
        RailnormConfig.from_env()


def test_from_env_raises_for_blank_unknown_category(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a blank unknown-category label."""
    monkeypatch.setenv("RAILNORM_UNKNOWN_CATEGORY", "   ")

    with pytest.raises(RailnormConfigError):
        RailnormConfig.from_env()


def test_from_env_ignores_blank_catalog_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Blank catalog path should mean no overlay."""
    monkeypatch.setenv("RAILNORM_MESSAGE_CATALOG", " ")

    assert RailnormConfig.from_env().catalog_path is None
