"""
freepik_common.error_enums - Centralized error code definitions.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Upstream API errors
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    RATE_LIMIT = "RATE_LIMIT"
    INVALID_API_KEY = "INVALID_API_KEY"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    CANCELLED = "CANCELLED"


class IconErrorCode(str, Enum):
    """
    Specific error codes for icon download and AI generation flows.
    """

    DOWNLOAD_UNAVAILABLE = "DOWNLOAD_UNAVAILABLE"
    GENERATION_FAILED = "GENERATION_FAILED"
    EMPTY_GENERATION_RESULT = "EMPTY_GENERATION_RESULT"
