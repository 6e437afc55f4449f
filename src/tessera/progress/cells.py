"""Cell content: turning one ProgressState into one widget.

Every cell is a pure function of the state it is given. Values such as
speed or remaining time are formatted, never computed.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from rich.progress_bar import ProgressBar
from rich.text import Text

from tessera.foundation.errors import ErrorCode, definition_error
from tessera.progress.formatting import format_duration, format_si, si_divisor, si_scale
from tessera.progress.state import ProgressState
from tessera.progress.theme import (
    BAR_STYLES,
    COMPLETED_STYLE,
    ELAPSED_STYLE,
    PERCENTAGE_STYLE,
    REMAINING_STYLE,
    SPEED_STYLE,
    SPINNER_STYLE,
    SPINNERS,
    TEXT_STYLE,
)
from tessera.rendering import Widget

T = TypeVar("T")


@runtime_checkable
class Cell(Protocol[T]):
    """Draws one column of a progress bar for a given state."""

    def render(self, state: ProgressState[T]) -> Widget:
        """Build the widget for ``state``. Must not mutate anything."""
        ...


@dataclass(frozen=True, slots=True)
class FunctionCell(Generic[T]):
    """Adapts a plain ``state -> widget`` callable to the Cell protocol."""

    fn: Callable[[ProgressState[T]], Widget]

    def render(self, state: ProgressState[T]) -> Widget:
        return self.fn(state)


def as_cell(content: Any) -> Cell:
    """Return ``content`` as a Cell, wrapping bare callables.

    Raises:
        TesseraError: If ``content`` is a class, or neither a Cell nor callable.
    """
    if isinstance(content, type):
        raise definition_error(
            ErrorCode.DEFINITION_INVALID_CELL,
            detail=f"expected a cell instance, got the class {content.__name__}",
        )
    if isinstance(content, Cell):
        return content
    if callable(content):
        return FunctionCell(content)
    raise definition_error(ErrorCode.DEFINITION_INVALID_CELL, detail=repr(content))


@dataclass(frozen=True, slots=True)
class TextCell:
    """Static text, the same for every state."""

    text: str
    style: str = TEXT_STYLE

    def render(self, state: ProgressState) -> Widget:
        return Text(self.text, style=self.style, no_wrap=True)


@dataclass(frozen=True, slots=True)
class SpinnerCell:
    """One frame of a looping animation, picked from the animation clock."""

    frames: tuple[str, ...] = SPINNERS["dots"]
    interval: float = 0.08
    """Seconds each frame stays on screen."""
    style: str = SPINNER_STYLE

    @classmethod
    def named(cls, name: str, **kwargs: Any) -> "SpinnerCell":
        """Create a spinner from a frame set in SPINNERS.

        Raises:
            TesseraError: If ``name`` is not a known frame set.
        """
        if name not in SPINNERS:
            raise definition_error(
                ErrorCode.DEFINITION_INVALID_CELL,
                detail=f"unknown spinner {name!r}, expected one of {sorted(SPINNERS)}",
            )
        return cls(frames=SPINNERS[name], **kwargs)

    def frame_index(self, animation_time: float) -> int:
        if not self.frames or self.interval <= 0:
            return 0
        return int(animation_time / self.interval) % len(self.frames)

    def render(self, state: ProgressState) -> Widget:
        if not self.frames:
            return Text("")
        return Text(self.frames[self.frame_index(state.animation_time)], style=self.style)


@dataclass(frozen=True, slots=True)
class BarCell:
    """A rich progress bar; pulses while the total is unknown."""

    width: int | None = None
    """Bar width in cells, or None to fill the column."""

    def render(self, state: ProgressState) -> Widget:
        if state.is_indeterminate:
            return ProgressBar(
                total=None,
                width=self.width,
                pulse=not state.is_finished,
                animation_time=state.animation_time,
                **BAR_STYLES,
            )
        if state.total <= 0:
            # rich draws a zero total as a full bar, so follow fraction instead
            total, completed = 1, state.fraction
        else:
            total = state.total
            completed = total if state.is_finished else min(max(state.completed, 0), total)
        return ProgressBar(
            total=total,
            completed=completed,
            width=self.width,
            animation_time=state.animation_time,
            **BAR_STYLES,
        )


@dataclass(frozen=True, slots=True)
class PercentageCell:
    """Whole-number percentage, blank while the total is unknown."""

    style: str = PERCENTAGE_STYLE

    def render(self, state: ProgressState) -> Widget:
        fraction = state.fraction
        if fraction is None:
            return Text("")
        return Text(f"{int(fraction * 100)}%", style=self.style)


@dataclass(frozen=True, slots=True)
class CompletedCell:
    """Completed count, optionally over the total, with a shared SI prefix.

    ``1500 of 10000`` with suffix ``"B"`` renders as ``1.5/10.0KB``.
    """

    suffix: str = ""
    include_total: bool = True
    precision: int = 1
    style: str = COMPLETED_STYLE

    def render(self, state: ProgressState) -> Widget:
        if not self.include_total or state.total is None:
            return Text(f"{format_si(state.completed, self.precision)}{self.suffix}", style=self.style)
        # Both numbers share the total's prefix
        _, prefix = si_scale(state.total)
        divisor = si_divisor(prefix)
        if not prefix:
            text = f"{int(state.completed)}/{int(state.total)}"
        else:
            text = (
                f"{state.completed / divisor:.{self.precision}f}/"
                f"{state.total / divisor:.{self.precision}f}{prefix}"
            )
        return Text(f"{text}{self.suffix}", style=self.style)


@dataclass(frozen=True, slots=True)
class SpeedCell:
    """Throughput reported by the producer, e.g. ``12.5Kit/s``."""

    suffix: str = "it/s"
    precision: int = 1
    style: str = SPEED_STYLE

    def render(self, state: ProgressState) -> Widget:
        if state.speed is None or state.speed < 0:
            return Text(f"---.-{self.suffix}", style=self.style)
        scaled, prefix = si_scale(state.speed)
        return Text(f"{scaled:.{self.precision}f}{prefix}{self.suffix}", style=self.style)


@dataclass(frozen=True, slots=True)
class ElapsedCell:
    """Time since the task started, as ``H:MM:SS``."""

    style: str = ELAPSED_STYLE

    def render(self, state: ProgressState) -> Widget:
        return Text(format_duration(state.elapsed), style=self.style)


@dataclass(frozen=True, slots=True)
class RemainingCell:
    """Producer-supplied time remaining; shows elapsed time once finished."""

    prefix: str = "eta "
    elapsed_when_finished: bool = True
    style: str = REMAINING_STYLE

    def render(self, state: ProgressState) -> Widget:
        if state.is_finished and self.elapsed_when_finished:
            return Text(f"{' ' * len(self.prefix)}{format_duration(state.elapsed)}", style=self.style)
        return Text(f"{self.prefix}{format_duration(state.remaining)}", style=self.style)
