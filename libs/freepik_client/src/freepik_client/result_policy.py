"""Ordered extraction policy for a completed generation task.

Precedence: the task's direct ``icon_url``, then the first entry of the
``generated`` candidate list, otherwise an empty result. An empty result is
an error distinct from a failed task.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from freepik_common.models import GenerationTask
from freepik_service_libs.error_handling import EmptyGenerationResultError


@dataclass(frozen=True)
class DirectUrl:
    url: str


@dataclass(frozen=True)
class CandidateList:
    urls: tuple[str, ...]

    @property
    def url(self) -> str:
        return self.urls[0]


@dataclass(frozen=True)
class EmptyResult:
    pass


GenerationResult = Union[DirectUrl, CandidateList, EmptyResult]


def extract_result(task: GenerationTask) -> GenerationResult:
    if task.icon_url:
        return DirectUrl(task.icon_url)
    if task.generated:
        return CandidateList(tuple(task.generated))
    return EmptyResult()


def resolve_result_url(task: GenerationTask) -> str:
    """Return the URL chosen by the policy.

    Raises:
        EmptyGenerationResultError: The task completed without any result URL
    """
    result = extract_result(task)
    if isinstance(result, (DirectUrl, CandidateList)):
        return result.url
    raise EmptyGenerationResultError(task.task_id)
