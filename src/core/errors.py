"""Railnorm exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Classification outcomes of the core parsers are result states, not
errors; these types cover configuration, catalog and payload faults.
"""

from __future__ import annotations


class RailnormError(Exception):
    """Base exception for all Railnorm failures."""


class RailnormConfigError(RailnormError):
    """Raised for invalid runtime configuration."""


class RailnormCatalogError(RailnormError):
    """Raised for unreadable or malformed message catalog overlays."""


class RailnormInputError(RailnormError):
    """Raised for malformed departure or message payloads."""


class RailnormDependencyError(RailnormError):
    """Raised when an optional runtime dependency is missing."""
