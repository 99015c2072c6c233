"""Tests for request builders and response envelopes."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from freepik_common.models import (
    DEFAULT_PER_PAGE,
    GenerationRequest,
    GenerationTask,
    IconSearchResponse,
    SearchQuery,
)
from freepik_common.status_enums import GenerationStatus


class TestSearchQuery:
    def test_per_page_materialized_by_default(self) -> None:
        params = SearchQuery(term="camera").to_params()

        assert params == {"term": "camera", "per_page": str(DEFAULT_PER_PAGE)}

    def test_all_parameters_flattened(self) -> None:
        query = SearchQuery(
            term="camera",
            page=2,
            per_page=10,
            family_id=7,
            order="recent",
            thumbnail_size=128,
            slug="photo",
            filters={"color": "red", "shape": "outline"},
        )

        assert query.to_params() == {
            "term": "camera",
            "page": "2",
            "per_page": "10",
            "family-id": "7",
            "order": "recent",
            "thumbnail_size": "128",
            "slug": "photo",
            "filters[color]": "red",
            "filters[shape]": "outline",
        }

    def test_falsy_optional_values_omitted(self) -> None:
        params = SearchQuery(term="camera", family_id="", thumbnail_size=0, slug="").to_params()

        assert "family-id" not in params
        assert "thumbnail_size" not in params
        assert "slug" not in params

    def test_empty_term_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchQuery(term="")

    def test_unknown_order_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchQuery(term="camera", order="popular")


class TestGenerationRequest:
    def test_body_contains_only_supplied_fields(self) -> None:
        body = GenerationRequest(prompt="sun icon", style="outline").to_body()

        assert body == {"prompt": "sun icon", "style": "outline"}

    def test_tuning_parameters_passed_through(self) -> None:
        body = GenerationRequest(
            prompt="sun icon", format="svg", num_inference_steps=20, guidance_scale=7.5
        ).to_body()

        assert body == {
            "prompt": "sun icon",
            "format": "svg",
            "num_inference_steps": 20,
            "guidance_scale": 7.5,
        }

    def test_unknown_style_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GenerationRequest(prompt="sun icon", style="neon")


class TestIconSearchResponse:
    def test_missing_meta_defaults_pagination(self) -> None:
        response = IconSearchResponse.model_validate({"data": [{"id": 1}], "meta": None})

        assert response.pagination.current_page == 1
        assert response.pagination.last_page == 1
        assert response.data[0].id == 1

    def test_null_data_becomes_empty_list(self) -> None:
        response = IconSearchResponse.model_validate({"data": None})

        assert response.data == []

    def test_unknown_icon_fields_kept(self) -> None:
        response = IconSearchResponse.model_validate(
            {
                "data": [{"id": 5, "name": "camera", "author": {"name": "x"}}],
                "meta": {"pagination": {"current_page": 3, "last_page": 9, "total": 180}},
            }
        )

        assert response.data[0].model_dump()["author"] == {"name": "x"}
        assert response.pagination.current_page == 3
        assert response.pagination.last_page == 9


class TestGenerationTask:
    def test_reads_data_envelope(self) -> None:
        task = GenerationTask.from_payload(
            {"data": {"task_id": "t-1", "status": "COMPLETED", "generated": ["https://a/1.png"]}}
        )

        assert task.task_id == "t-1"
        assert task.status_enum is GenerationStatus.COMPLETED
        assert task.generated == ["https://a/1.png"]
        assert task.is_terminal

    def test_top_level_fields_win(self) -> None:
        task = GenerationTask.from_payload(
            {"task_id": "top", "status": "pending", "data": {"task_id": "inner"}}
        )

        assert task.task_id == "top"
        assert not task.is_terminal

    def test_icon_url_read_from_top_level(self) -> None:
        task = GenerationTask.from_payload(
            {"status": "completed", "icon_url": "https://a/direct.svg"}
        )

        assert task.icon_url == "https://a/direct.svg"

    def test_unknown_status_not_terminal(self) -> None:
        task = GenerationTask.from_payload({"status": "queued"})

        assert task.status_enum is None
        assert not task.is_terminal


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("completed", GenerationStatus.COMPLETED),
        ("FAILED", GenerationStatus.FAILED),
        (" Processing ", GenerationStatus.PROCESSING),
        ("", None),
        (None, None),
        ("queued", None),
    ],
)
def test_generation_status_parse(raw: str | None, expected: GenerationStatus | None) -> None:
    assert GenerationStatus.parse(raw) is expected
