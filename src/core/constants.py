"""Core constants used across Railnorm modules.

This module centralizes environment names, policies and payload keys.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

MISSING_TEXT_POLICY_RAW = "raw"
MISSING_TEXT_POLICY_SUPPRESS = "suppress"
SUPPORTED_MISSING_TEXT_POLICIES = (MISSING_TEXT_POLICY_RAW, MISSING_TEXT_POLICY_SUPPRESS)
DEFAULT_MISSING_TEXT_POLICY = MISSING_TEXT_POLICY_RAW
DEFAULT_UNKNOWN_CATEGORY = "unknown"
ENV_MISSING_TEXT_POLICY = "RAILNORM_MISSING_TEXT_POLICY"
ENV_UNKNOWN_CATEGORY = "RAILNORM_UNKNOWN_CATEGORY"
ENV_MESSAGE_CATALOG = "RAILNORM_MESSAGE_CATALOG"
DEPARTURE_TRAIN_KEY = "train"
DEPARTURE_MESSAGES_KEY = "messages"
DEPARTURE_RENDERED_MESSAGES_KEY = "renderedMessages"
MESSAGE_CODE_KEY = "code"
MESSAGE_TYPE_KEY = "type"
STDIN_PATH_MARKER = "-"
ENV_LOG_LEVEL = "RAILNORM_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "info"
