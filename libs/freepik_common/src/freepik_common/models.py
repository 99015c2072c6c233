"""Pydantic models for icon API requests and responses.

SearchQuery / GenerationRequest: request builders that emit the exact wire
parameters and bodies.
IconSearchResponse / IconDetailResponse: decoded response envelopes. Unknown
upstream fields are kept (extra="allow") so callers see the envelope unmodified.
GenerationTask: normalized view of a text-to-icon task status payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .icon_enums import GenerationFormat, IconStyle, SortOrder
from .status_enums import GenerationStatus

DEFAULT_PER_PAGE = 20

__all__ = [
    "DEFAULT_PER_PAGE",
    "GeneratedIcon",
    "GenerationPreviewRequest",
    "GenerationRequest",
    "GenerationTask",
    "IconDetailResponse",
    "IconSearchResponse",
    "IconSummary",
    "PaginationMeta",
    "SearchMeta",
    "SearchQuery",
    "Thumbnail",
]


# --- Request models ---


class SearchQuery(BaseModel):
    """Icon search parameters.

    per_page is always materialized: callers that omit it get DEFAULT_PER_PAGE.
    """

    term: str = Field(min_length=1)
    page: int | None = Field(default=None, ge=1)
    per_page: int = Field(default=DEFAULT_PER_PAGE, gt=0)
    family_id: str | int | None = None
    order: SortOrder | None = None
    thumbnail_size: int | None = None
    slug: str | None = None
    filters: dict[str, Any] = Field(default_factory=dict)

    def to_params(self) -> dict[str, str]:
        """Flatten into query parameters, filters as ``filters[<key>]``."""
        params: dict[str, str] = {"term": self.term}
        if self.page is not None:
            params["page"] = str(self.page)
        params["per_page"] = str(self.per_page)
        if self.family_id:
            params["family-id"] = str(self.family_id)
        if self.order is not None:
            params["order"] = self.order.value
        if self.thumbnail_size:
            params["thumbnail_size"] = str(self.thumbnail_size)
        if self.slug:
            params["slug"] = self.slug
        for key, value in self.filters.items():
            params[f"filters[{key}]"] = str(value)
        return params


class GenerationPreviewRequest(BaseModel):
    """Body of a preview generation request (no tuning parameters)."""

    prompt: str = Field(min_length=1)
    style: IconStyle | None = None
    format: GenerationFormat | None = None

    def to_body(self) -> dict[str, Any]:
        """Serialize only the fields the caller supplied."""
        return self.model_dump(mode="json", exclude_none=True)


class GenerationRequest(GenerationPreviewRequest):
    """Body of a full generation request.

    Tuning parameters are passed through to the upstream API unvalidated.
    """

    num_inference_steps: Any = None
    guidance_scale: Any = None


# --- Response models ---


class Thumbnail(BaseModel):
    model_config = ConfigDict(extra="allow")

    url: str
    width: int | None = None
    height: int | None = None


class IconSummary(BaseModel):
    """Single icon as returned by search and detail endpoints."""

    model_config = ConfigDict(extra="allow")

    id: int | str
    name: str | None = None
    slug: str | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)
    style: Any = None
    family: Any = None
    tags: list[Any] = Field(default_factory=list)


class PaginationMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    current_page: int = 1
    last_page: int = 1
    per_page: int | None = None
    total: int | None = None

    @field_validator("current_page", "last_page", mode="before")
    @classmethod
    def _default_missing_page(cls, value: Any) -> Any:
        return 1 if value is None else value


class SearchMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    pagination: PaginationMeta = Field(default_factory=PaginationMeta)

    @field_validator("pagination", mode="before")
    @classmethod
    def _default_missing_pagination(cls, value: Any) -> Any:
        return {} if value is None else value


class IconSearchResponse(BaseModel):
    """Search envelope: icon list plus pagination metadata."""

    model_config = ConfigDict(extra="allow")

    data: list[IconSummary] = Field(default_factory=list)
    meta: SearchMeta = Field(default_factory=SearchMeta)

    @field_validator("data", "meta", mode="before")
    @classmethod
    def _default_missing(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return [] if info.field_name == "data" else {}
        return value

    @property
    def pagination(self) -> PaginationMeta:
        return self.meta.pagination


class IconDetailResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: IconSummary


class GenerationTask(BaseModel):
    """Normalized text-to-icon task.

    The upstream API reports task fields either at the top level or inside a
    ``data`` envelope; from_payload() reads the top level first.
    """

    model_config = ConfigDict(extra="allow")

    task_id: str | None = None
    status: str | None = None
    icon_url: str | None = None
    generated: list[str] = Field(default_factory=list)
    error: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> GenerationTask:
        envelope = payload.get("data")
        data: Mapping[str, Any] = envelope if isinstance(envelope, Mapping) else {}

        def pick(key: str) -> Any:
            value = payload.get(key)
            return value if value is not None else data.get(key)

        task_id = pick("task_id")
        generated = data.get("generated") or payload.get("generated") or []
        error = pick("error")
        return cls(
            task_id=str(task_id) if task_id is not None else None,
            status=pick("status"),
            icon_url=payload.get("icon_url") or None,
            generated=[str(url) for url in generated if url],
            error=str(error) if error is not None else None,
            raw=dict(payload),
        )

    @property
    def status_enum(self) -> GenerationStatus | None:
        return GenerationStatus.parse(self.status)

    @property
    def is_terminal(self) -> bool:
        return self.status_enum in GenerationStatus.terminal()


class GeneratedIcon(BaseModel):
    """Terminal outcome of a generate-and-wait flow."""

    task_id: str
    url: str
    task: GenerationTask
