"""
Freepik Icons common core package.

Shared enums and pydantic models used by the API client and the relay.
"""

from .config_enums import Environment
from .error_enums import ErrorCode, IconErrorCode
from .icon_enums import DownloadFormat, GenerationFormat, IconStyle, PngSize, SortOrder
from .models import (
    DEFAULT_PER_PAGE,
    GeneratedIcon,
    GenerationPreviewRequest,
    GenerationRequest,
    GenerationTask,
    IconDetailResponse,
    IconSearchResponse,
    IconSummary,
    PaginationMeta,
    SearchQuery,
    Thumbnail,
)
from .status_enums import GenerationStatus

__all__ = [
    "DEFAULT_PER_PAGE",
    "DownloadFormat",
    "Environment",
    "ErrorCode",
    "GeneratedIcon",
    "GenerationFormat",
    "GenerationPreviewRequest",
    "GenerationRequest",
    "GenerationStatus",
    "GenerationTask",
    "IconDetailResponse",
    "IconErrorCode",
    "IconSearchResponse",
    "IconStyle",
    "IconSummary",
    "PaginationMeta",
    "PngSize",
    "SearchQuery",
    "SortOrder",
    "Thumbnail",
]
