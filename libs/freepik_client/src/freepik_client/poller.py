"""Fixed-interval poller for AI generation tasks.

The wait between fetches is constant, so the worst-case wait is
interval_seconds * max_attempts. A completed or failed status ends the loop
at once; a terminal task is never fetched again.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from freepik_common.models import GenerationTask
from freepik_common.status_enums import GenerationStatus
from freepik_service_libs.error_handling import (
    GenerationCancelledError,
    GenerationFailedError,
    GenerationTimeoutError,
)
from freepik_service_libs.logging_utils import create_service_logger

logger = create_service_logger("freepik_client.poller")

StatusFetcher = Callable[[str], Awaitable[GenerationTask]]


class GenerationPoller:
    """Poll a task's status endpoint until it reaches a terminal state."""

    def __init__(
        self,
        fetch_status: StatusFetcher,
        *,
        interval_seconds: float = 2.0,
        max_attempts: int = 30,
    ) -> None:
        """Initialize the poller.

        Args:
            fetch_status: Coroutine function returning the current task for an id
            interval_seconds: Fixed wait between non-terminal fetches
            max_attempts: Maximum number of status fetches
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._fetch_status = fetch_status
        self.interval_seconds = interval_seconds
        self.max_attempts = max_attempts

    async def wait_for_completion(
        self,
        task_id: str,
        cancel_event: asyncio.Event | None = None,
    ) -> GenerationTask:
        """Poll until the task completes.

        Args:
            task_id: Upstream task identifier
            cancel_event: Optional token; setting it ends the current wait

        Returns:
            The completed task

        Raises:
            GenerationFailedError: The task reported the failed state
            GenerationTimeoutError: max_attempts fetches were all non-terminal
            GenerationCancelledError: cancel_event was set before completion
        """
        for attempt in range(1, self.max_attempts + 1):
            if cancel_event is not None and cancel_event.is_set():
                raise GenerationCancelledError(task_id, attempt - 1)

            task = await self._fetch_status(task_id)
            status = task.status_enum

            if status is GenerationStatus.COMPLETED:
                logger.info(
                    "Generation task completed",
                    extra={"task_id": task_id, "attempts": attempt},
                )
                return task

            if status is GenerationStatus.FAILED:
                logger.warning(
                    "Generation task failed",
                    extra={"task_id": task_id, "attempts": attempt, "error": task.error},
                )
                raise GenerationFailedError(task_id, task.error or "Unknown error")

            logger.debug(
                f"Generation task still {task.status} "
                f"(attempt {attempt}/{self.max_attempts})",
                extra={"task_id": task_id},
            )

            if attempt < self.max_attempts:
                await self._wait(task_id, attempt, cancel_event)

        logger.warning(
            "Generation polling timed out",
            extra={"task_id": task_id, "attempts": self.max_attempts},
        )
        raise GenerationTimeoutError(task_id, self.max_attempts)

    async def _wait(
        self, task_id: str, attempt: int, cancel_event: asyncio.Event | None
    ) -> None:
        if cancel_event is None:
            await asyncio.sleep(self.interval_seconds)
            return
        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=self.interval_seconds)
        except asyncio.TimeoutError:
            return
        raise GenerationCancelledError(task_id, attempt)
