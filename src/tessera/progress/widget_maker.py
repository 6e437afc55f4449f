"""Turns a progress bar definition and task states into widgets.

Three layouts are possible:
- no states: EMPTY_WIDGET
- align_columns: a border-free Table with one row per state
- otherwise: one HorizontalLayout per state, stacked when there are several
"""

import logging
from collections.abc import Sequence
from typing import Protocol, TypeVar

from tessera.progress.definition import ProgressBarDefinition
from tessera.progress.state import ProgressState
from tessera.rendering import (
    EMPTY_WIDGET,
    Borders,
    ColumnSpec,
    Fixed,
    HorizontalLayout,
    Padding,
    Table,
    Widget,
    horizontal_layout,
    vertical_layout,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProgressBarWidgetMaker(Protocol):
    """Builds widgets for progress bars."""

    def build(
        self,
        definition: ProgressBarDefinition[T],
        states: Sequence[ProgressState[T]],
    ) -> Widget:
        """Build a progress widget from ``definition`` and ``states``."""
        ...

    def build_cells(
        self,
        definition: ProgressBarDefinition[T],
        states: Sequence[ProgressState[T]],
    ) -> list[list[Widget]]:
        """Build the widgets for each cell of each state.

        Use this to place the individual cells in a larger layout, such as
        a table of your own.

        Returns:
            One row per state, each holding one widget per cell.
        """
        ...


class BaseProgressBarWidgetMaker:
    """Default ProgressBarWidgetMaker. Stateless; safe to share between threads."""

    def build(
        self,
        definition: ProgressBarDefinition[T],
        states: Sequence[ProgressState[T]],
    ) -> Widget:
        if not states:
            logger.debug("No states, building empty widget")
            return EMPTY_WIDGET
        if definition.align_columns:
            logger.debug(
                "Building %dx%d table", len(states), len(definition.cells)
            )
            return self._make_table(definition, states)
        logger.debug("Building linear layout for %d state(s)", len(states))
        return self._make_linear_layout(definition, states)

    def build_cells(
        self,
        definition: ProgressBarDefinition[T],
        states: Sequence[ProgressState[T]],
    ) -> list[list[Widget]]:
        return [
            [cell.render(state) for cell in definition.cells]
            for state in states
        ]

    def _make_linear_layout(
        self,
        definition: ProgressBarDefinition[T],
        states: Sequence[ProgressState[T]],
    ) -> Widget:
        rows = [
            self._make_horizontal_layout(definition, cells)
            for cells in self.build_cells(definition, states)
        ]
        if len(rows) == 1:
            return rows[0]
        return vertical_layout(rows)

    def _make_horizontal_layout(
        self,
        definition: ProgressBarDefinition,
        cells: list[Widget],
    ) -> HorizontalLayout:
        return horizontal_layout(
            cells,
            spacing=definition.spacing,
            columns={
                i: ColumnSpec(
                    width=cell.column_width,
                    align=cell.align,
                    vertical_align=cell.vertical_align,
                )
                for i, cell in enumerate(definition.cells)
            },
        )

    def _make_table(
        self,
        definition: ProgressBarDefinition[T],
        states: Sequence[ProgressState[T]],
    ) -> Table:
        spacing = definition.spacing
        table = Table(cell_borders=Borders.NONE, padding=Padding(left=spacing))
        for i, cell in enumerate(definition.cells):
            width = cell.column_width
            if i == 0:
                table.set_column(0, padding=Padding())
            elif isinstance(width, Fixed):
                # Fixed table widths include the column's padding
                width = Fixed(width.width + spacing)
            table.set_column(
                i,
                width=width,
                align=cell.align,
                vertical_align=cell.vertical_align,
            )
        for row in self.build_cells(definition, states):
            table.add_row(row)
        return table


BASE_WIDGET_MAKER = BaseProgressBarWidgetMaker()
