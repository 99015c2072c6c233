"""Exception taxonomy for the Freepik API client and relay.

Every exception carries an error code and a details mapping so callers can
render a distinct message per failure class without parsing strings.
"""

from __future__ import annotations

from typing import Any

from freepik_common.error_enums import ErrorCode, IconErrorCode


class FreepikError(Exception):
    """Base exception for all Freepik Icons failures."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode | IconErrorCode = ErrorCode.UNKNOWN_ERROR,
        **details: Any,
    ) -> None:
        self.error_code = error_code
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": str(self), "error_code": self.error_code.value, "details": self.details}


class InvalidCredentialError(FreepikError):
    """Raised when the upstream API rejects the API key (HTTP 401)."""

    def __init__(self, message: str = "Invalid API key. Check your key in Settings.") -> None:
        super().__init__(message, ErrorCode.INVALID_API_KEY, status_code=401)


class RateLimitedError(FreepikError):
    """Raised when the upstream API reports quota exhaustion (HTTP 429)."""

    def __init__(self, guidance: str) -> None:
        self.guidance = guidance
        super().__init__(
            f"Rate limit exceeded. Please wait before making more requests. {guidance}",
            ErrorCode.RATE_LIMIT,
            status_code=429,
            guidance=guidance,
        )


class NotFoundError(FreepikError):
    """Raised when the requested resource does not exist (HTTP 404)."""

    def __init__(self, message: str = "Resource not found.", **details: Any) -> None:
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, status_code=404, **details)


class UpstreamError(FreepikError):
    """Raised for any other non-success upstream status."""

    def __init__(self, status: int, body: str, reason: str = "") -> None:
        self.status = status
        self.body = body
        super().__init__(
            f"API error {status}: {body or reason}",
            ErrorCode.EXTERNAL_SERVICE_ERROR,
            status_code=status,
            body=body,
        )


class DownloadUnavailableError(FreepikError):
    """Raised when a download envelope carries no usable asset URL."""

    def __init__(self, icon_id: int | str) -> None:
        self.icon_id = icon_id
        super().__init__(
            "No download URL returned from API.",
            IconErrorCode.DOWNLOAD_UNAVAILABLE,
            icon_id=str(icon_id),
        )


class MalformedResponseError(FreepikError):
    """Raised when a success response lacks a field the flow depends on."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, ErrorCode.INVALID_RESPONSE, **details)


class GenerationFailedError(FreepikError):
    """Raised as soon as a generation task reports the failed state."""

    def __init__(self, task_id: str, reason: str) -> None:
        self.task_id = task_id
        self.reason = reason
        super().__init__(
            f"Icon generation failed: {reason}",
            IconErrorCode.GENERATION_FAILED,
            task_id=task_id,
            reason=reason,
        )


class GenerationTimeoutError(FreepikError):
    """Raised when a task is still pending after the attempt budget."""

    def __init__(self, task_id: str, attempts: int) -> None:
        self.task_id = task_id
        self.attempts = attempts
        super().__init__(
            "Icon generation timed out. Please try again.",
            ErrorCode.TIMEOUT,
            task_id=task_id,
            attempts=attempts,
        )


class GenerationCancelledError(FreepikError):
    """Raised when the caller signals cancellation during a poll wait."""

    def __init__(self, task_id: str, attempts: int) -> None:
        self.task_id = task_id
        self.attempts = attempts
        super().__init__(
            "Icon generation polling was cancelled.",
            ErrorCode.CANCELLED,
            task_id=task_id,
            attempts=attempts,
        )


class EmptyGenerationResultError(FreepikError):
    """Raised when a completed task carries neither a direct URL nor candidates."""

    def __init__(self, task_id: str | None) -> None:
        self.task_id = task_id
        super().__init__(
            "Generation completed but no icon was returned.",
            IconErrorCode.EMPTY_GENERATION_RESULT,
            task_id=task_id,
        )


class InvalidParameterError(FreepikError):
    """Raised before any network call when a request parameter is out of range."""

    def __init__(self, parameter: str, value: Any, message: str | None = None) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(
            message or f"Invalid value for '{parameter}': {value!r}",
            ErrorCode.VALIDATION_ERROR,
            parameter=parameter,
            value=repr(value),
        )


class RelayUpstreamUnreachableError(FreepikError):
    """Raised by the relay when the upstream call cannot be completed."""

    def __init__(self, message: str, *, method: str, path: str) -> None:
        super().__init__(message, ErrorCode.CONNECTION_ERROR, method=method, path=path)
