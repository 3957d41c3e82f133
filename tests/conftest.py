"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_RAILNORM_ENV_VARS = (
    "RAILNORM_MISSING_TEXT_POLICY",
    "RAILNORM_UNKNOWN_CATEGORY",
    "RAILNORM_MESSAGE_CATALOG",
    "RAILNORM_LOG_LEVEL",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def clean_railnorm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without Railnorm settings from the host environment."""
    for name in _RAILNORM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
