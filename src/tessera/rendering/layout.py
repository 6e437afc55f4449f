"""Linear layout containers: a single row of cells and a vertical stack."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from rich.console import Console, ConsoleOptions, Group, RenderResult
from rich.measure import Measurement
from rich.table import Table as RichTable

from tessera.rendering.widgets import ColumnSpec, Fixed, Widget


def rich_column_options(spec: ColumnSpec) -> dict:
    """Translate a ColumnSpec into ``rich.table.Table.add_column`` kwargs."""
    options: dict = {
        "justify": spec.align.value,
        "vertical": spec.vertical_align.value,
    }
    if isinstance(spec.width, Fixed):
        options["width"] = spec.width.width
        options["no_wrap"] = True
    return options


@dataclass
class HorizontalLayout:
    """Cells side by side on one row.

    ``spacing`` blank columns are inserted between adjacent cells as
    separate gap columns, so a ``Fixed`` width always describes the cell's
    own content box.
    """

    cells: list[Widget] = field(default_factory=list)
    spacing: int = 0
    columns: dict[int, ColumnSpec] = field(default_factory=dict)

    def column(self, index: int) -> ColumnSpec:
        return self.columns.get(index, ColumnSpec())

    def to_rich(self) -> RichTable:
        grid = RichTable.grid(padding=0, pad_edge=False)
        row: list[Widget] = []
        for i, cell in enumerate(self.cells):
            if i > 0 and self.spacing > 0:
                grid.add_column(width=self.spacing, no_wrap=True)
                row.append("")
            grid.add_column(**rich_column_options(self.column(i)))
            row.append(cell)
        if row:
            grid.add_row(*row)
        return grid

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield self.to_rich()

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        return Measurement.get(console, options, self.to_rich())


@dataclass
class VerticalLayout:
    """Widgets stacked top to bottom, each sized independently."""

    cells: list[Widget] = field(default_factory=list)

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield Group(*self.cells)

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        return Measurement.get(console, options, Group(*self.cells))


def horizontal_layout(
    cells: Sequence[Widget],
    spacing: int = 0,
    columns: dict[int, ColumnSpec] | None = None,
) -> HorizontalLayout:
    return HorizontalLayout(cells=list(cells), spacing=spacing, columns=dict(columns or {}))


def vertical_layout(cells: Sequence[Widget]) -> VerticalLayout:
    return VerticalLayout(cells=list(cells))
