"""Fluent builder for ProgressBarDefinition.

Example:
    >>> definition = (
    ...     ProgressLayoutBuilder(spacing=1)
    ...     .spinner()
    ...     .text("download.zip")
    ...     .progress_bar()
    ...     .percentage()
    ...     .build()
    ... )
"""

from collections.abc import Callable
from typing import Any

from tessera.foundation.config import get_config
from tessera.progress.cells import (
    BarCell,
    Cell,
    CompletedCell,
    ElapsedCell,
    PercentageCell,
    RemainingCell,
    SpeedCell,
    SpinnerCell,
    TextCell,
)
from tessera.progress.definition import ProgressBarCell, ProgressBarDefinition
from tessera.progress.state import ProgressState
from tessera.rendering import (
    FLEXIBLE,
    ColumnWidth,
    Fixed,
    TextAlign,
    VerticalAlign,
    Widget,
)

# Widest output of the fixed-width cells
PERCENTAGE_WIDTH = 4  # "100%"
DURATION_WIDTH = 7  # "0:00:00"


class ProgressLayoutBuilder:
    """Accumulates cells and produces an immutable ProgressBarDefinition."""

    def __init__(self, spacing: int = 2, align_columns: bool = True) -> None:
        self.spacing = spacing
        self.align_columns = align_columns
        self._cells: list[ProgressBarCell] = []

    def cell(
        self,
        content: Cell | Callable[[ProgressState], Widget],
        width: ColumnWidth = FLEXIBLE,
        align: TextAlign = TextAlign.RIGHT,
        vertical_align: VerticalAlign = VerticalAlign.BOTTOM,
    ) -> "ProgressLayoutBuilder":
        """Add an arbitrary cell."""
        self._cells.append(
            ProgressBarCell(
                content=content,
                column_width=width,
                align=align,
                vertical_align=vertical_align,
            )
        )
        return self

    def text(self, text: str, align: TextAlign = TextAlign.LEFT, **kwargs: Any) -> "ProgressLayoutBuilder":
        return self.cell(TextCell(text), align=align, **kwargs)

    def spinner(self, name: str = "dots", interval: float = 0.08, **kwargs: Any) -> "ProgressLayoutBuilder":
        return self.cell(SpinnerCell.named(name, interval=interval), **kwargs)

    def progress_bar(self, width: int | None = None, **kwargs: Any) -> "ProgressLayoutBuilder":
        """Add a bar; a ``width`` fixes the column, otherwise it fills the row."""
        kwargs.setdefault("width", FLEXIBLE if width is None else Fixed(width))
        return self.cell(BarCell(width=width), **kwargs)

    def percentage(self, **kwargs: Any) -> "ProgressLayoutBuilder":
        kwargs.setdefault("width", Fixed(PERCENTAGE_WIDTH))
        return self.cell(PercentageCell(), **kwargs)

    def completed(
        self,
        suffix: str = "",
        include_total: bool = True,
        precision: int = 1,
        **kwargs: Any,
    ) -> "ProgressLayoutBuilder":
        return self.cell(
            CompletedCell(suffix=suffix, include_total=include_total, precision=precision),
            **kwargs,
        )

    def speed(self, suffix: str = "it/s", precision: int = 1, **kwargs: Any) -> "ProgressLayoutBuilder":
        return self.cell(SpeedCell(suffix=suffix, precision=precision), **kwargs)

    def time_elapsed(self, **kwargs: Any) -> "ProgressLayoutBuilder":
        kwargs.setdefault("width", Fixed(DURATION_WIDTH))
        return self.cell(ElapsedCell(), **kwargs)

    def time_remaining(self, prefix: str = "eta ", **kwargs: Any) -> "ProgressLayoutBuilder":
        kwargs.setdefault("width", Fixed(len(prefix) + DURATION_WIDTH))
        return self.cell(RemainingCell(prefix=prefix), **kwargs)

    def build(self) -> ProgressBarDefinition:
        return ProgressBarDefinition(
            cells=tuple(self._cells),
            spacing=self.spacing,
            align_columns=self.align_columns,
        )


def progress_bar_layout(
    spacing: int | None = None,
    align_columns: bool | None = None,
) -> ProgressLayoutBuilder:
    """Create a builder seeded from the configured progress defaults."""
    defaults = get_config().progress
    return ProgressLayoutBuilder(
        spacing=defaults.spacing if spacing is None else spacing,
        align_columns=defaults.align_columns if align_columns is None else align_columns,
    )
