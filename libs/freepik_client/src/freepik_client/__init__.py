"""
Freepik API client: stock icon search/download and AI icon generation.
"""

from .client import FreepikClient, create_http_client
from .config import FreepikClientSettings
from .insertion import IconInsertionService
from .poller import GenerationPoller
from .protocols import (
    DocumentInserterProtocol,
    FreepikClientProtocol,
    IconStateStoreProtocol,
)
from .result_policy import (
    CandidateList,
    DirectUrl,
    EmptyResult,
    GenerationResult,
    extract_result,
    resolve_result_url,
)

__all__ = [
    "CandidateList",
    "DirectUrl",
    "DocumentInserterProtocol",
    "EmptyResult",
    "FreepikClient",
    "FreepikClientProtocol",
    "FreepikClientSettings",
    "GenerationPoller",
    "GenerationResult",
    "IconInsertionService",
    "IconStateStoreProtocol",
    "create_http_client",
    "extract_result",
    "resolve_result_url",
]
