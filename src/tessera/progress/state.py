"""Snapshot of one tracked task, as seen by the cells that draw it."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class TaskStatus(Enum):
    """Lifecycle of a tracked task."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


@dataclass(frozen=True, slots=True)
class ProgressState(Generic[T]):
    """Progress data of a single task at one instant.

    All values are produced by whoever tracks the task; cells only read
    and format them.
    """

    context: T
    """Caller payload, e.g. a file name or task label."""

    total: float | None = None
    """Total units of work, or None when unknown."""

    completed: float = 0
    """Units of work done so far."""

    animation_time: float = 0.0
    """Seconds on the animation clock; drives spinners and pulsing bars."""

    status: TaskStatus = TaskStatus.RUNNING

    speed: float | None = None
    """Units per second, or None when unknown."""

    elapsed: float | None = None
    """Seconds since the task started."""

    remaining: float | None = None
    """Estimated seconds until completion."""

    @property
    def is_finished(self) -> bool:
        return self.status is TaskStatus.FINISHED

    @property
    def is_indeterminate(self) -> bool:
        return self.total is None

    @property
    def fraction(self) -> float | None:
        """Completed share of the total clamped to [0, 1], or None if unknown."""
        if self.total is None:
            return None
        if self.total <= 0:
            return 1.0 if self.is_finished else 0.0
        return min(max(self.completed / self.total, 0.0), 1.0)
