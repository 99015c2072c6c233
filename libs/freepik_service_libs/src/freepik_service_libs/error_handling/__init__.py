"""Error handling for Freepik Icons: exception taxonomy and framework integration."""

from .exceptions import (
    DownloadUnavailableError,
    EmptyGenerationResultError,
    FreepikError,
    GenerationCancelledError,
    GenerationFailedError,
    GenerationTimeoutError,
    InvalidCredentialError,
    InvalidParameterError,
    MalformedResponseError,
    NotFoundError,
    RateLimitedError,
    RelayUpstreamUnreachableError,
    UpstreamError,
)

__all__ = [
    "DownloadUnavailableError",
    "EmptyGenerationResultError",
    "FreepikError",
    "GenerationCancelledError",
    "GenerationFailedError",
    "GenerationTimeoutError",
    "InvalidCredentialError",
    "InvalidParameterError",
    "MalformedResponseError",
    "NotFoundError",
    "RateLimitedError",
    "RelayUpstreamUnreachableError",
    "UpstreamError",
]
