"""Grid container whose columns share one width across all rows.

Padding is configured per column: a table-wide default plus optional
per-column overrides. A ``Fixed`` column width is the whole column box,
padding included, so content in a ``Fixed(w)`` column with left padding
``p`` gets ``w - p`` cells.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from rich import box
from rich.align import Align
from rich.console import Console, ConsoleOptions, RenderResult
from rich.measure import Measurement
from rich.padding import Padding as RichPadding
from rich.table import Table as RichTable

from tessera.rendering.layout import rich_column_options
from tessera.rendering.widgets import (
    Borders,
    ColumnSpec,
    ColumnWidth,
    Padding,
    TextAlign,
    VerticalAlign,
    Widget,
)

_UNSET = object()


@dataclass
class Table:
    """Rows of widgets laid out in aligned columns.

    Example:
        >>> t = Table(cell_borders=Borders.NONE, padding=Padding(left=1))
        >>> t.set_column(0, padding=Padding())
        >>> t.add_row(["a", "b"])
    """

    cell_borders: Borders = Borders.ALL
    padding: Padding = field(default_factory=Padding)
    columns: dict[int, ColumnSpec] = field(default_factory=dict)
    rows: list[list[Widget]] = field(default_factory=list)

    def set_column(
        self,
        index: int,
        *,
        width: ColumnWidth | object = _UNSET,
        align: TextAlign | object = _UNSET,
        vertical_align: VerticalAlign | object = _UNSET,
        padding: Padding | None | object = _UNSET,
    ) -> ColumnSpec:
        """Update the settings of column ``index``, keeping unspecified ones."""
        changes = {
            name: value
            for name, value in (
                ("width", width),
                ("align", align),
                ("vertical_align", vertical_align),
                ("padding", padding),
            )
            if value is not _UNSET
        }
        spec = replace(self.columns.get(index, ColumnSpec()), **changes)
        self.columns[index] = spec
        return spec

    def add_row(self, cells: Sequence[Widget]) -> None:
        self.rows.append(list(cells))

    @property
    def column_count(self) -> int:
        from_specs = max(self.columns, default=-1) + 1
        from_rows = max((len(row) for row in self.rows), default=0)
        return max(from_specs, from_rows)

    def column(self, index: int) -> ColumnSpec:
        return self.columns.get(index, ColumnSpec())

    def column_width(self, index: int) -> ColumnWidth:
        return self.column(index).width

    def column_padding(self, index: int) -> Padding:
        spec_padding = self.column(index).padding
        return self.padding if spec_padding is None else spec_padding

    def _pad(self, widget: Widget, index: int) -> Widget:
        padding = self.column_padding(index)
        if padding.is_zero:
            return widget
        spec = self.column(index)
        return RichPadding(Align(widget, align=spec.align.value), padding.as_tuple())

    def to_rich(self) -> RichTable:
        bordered = self.cell_borders is Borders.ALL
        table = RichTable(
            box=box.SQUARE if bordered else None,
            show_header=False,
            show_edge=bordered,
            show_lines=bordered,
            padding=0,
            pad_edge=False,
            collapse_padding=False,
        )
        count = self.column_count
        for i in range(count):
            table.add_column(**rich_column_options(self.column(i)))
        for row in self.rows:
            cells = [self._pad(widget, i) for i, widget in enumerate(row)]
            cells.extend("" for _ in range(count - len(cells)))
            table.add_row(*cells)
        return table

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield self.to_rich()

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        return Measurement.get(console, options, self.to_rich())
