"""Declarative description of a progress bar's columns."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from tessera.foundation.errors import ErrorCode, definition_error
from tessera.progress.cells import Cell, as_cell
from tessera.progress.state import ProgressState
from tessera.rendering import FLEXIBLE, ColumnWidth, TextAlign, VerticalAlign, Widget

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ProgressBarCell(Generic[T]):
    """One column of a progress bar.

    ``content`` may be any Cell or a bare ``state -> widget`` callable.
    """

    content: Cell[T] | Callable[[ProgressState[T]], Widget]
    column_width: ColumnWidth = FLEXIBLE
    align: TextAlign = TextAlign.RIGHT
    vertical_align: VerticalAlign = VerticalAlign.BOTTOM

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", as_cell(self.content))

    def render(self, state: ProgressState[T]) -> Widget:
        return self.content.render(state)


@dataclass(frozen=True, slots=True)
class ProgressBarDefinition(Generic[T]):
    """Ordered cells plus the layout policy shared by every row.

    The cell at index ``i`` is the same column in every row.

    Attributes:
        cells: Column definitions, left to right
        spacing: Blank columns between adjacent cells
        align_columns: Line cells up in a grid across rows
    """

    cells: Sequence[ProgressBarCell[T]] = field(default_factory=tuple)
    spacing: int = 2
    align_columns: bool = True

    def __post_init__(self) -> None:
        if self.spacing < 0:
            raise definition_error(
                ErrorCode.DEFINITION_INVALID_SPACING,
                spacing=self.spacing,
            )
        object.__setattr__(self, "cells", tuple(self.cells))
