"""Status enums for the AI icon generation task state machine.

GenerationStatus: pending/processing until the upstream task reaches
completed or failed. Terminal states are never polled again.
"""

from __future__ import annotations

from enum import Enum


class GenerationStatus(str, Enum):
    """Lifecycle of an upstream text-to-icon task."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    @classmethod
    def terminal(cls) -> set[GenerationStatus]:
        """Return terminal states (no further polling)."""
        return {cls.COMPLETED, cls.FAILED}

    @classmethod
    def parse(cls, value: str | None) -> GenerationStatus | None:
        """Map a raw upstream status string onto the enum, case-insensitively.

        Unknown values return None and are treated as non-terminal by callers.
        """
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
