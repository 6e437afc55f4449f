"""Tests for the rendering containers.

Tests cover:
- EmptyWidget measurement and output
- HorizontalLayout gap columns and per-cell widths
- VerticalLayout stacking
- Table column settings, padding model and borders
"""

import pytest
from rich import box
from rich.measure import Measurement
from rich.text import Text

from tessera.foundation.errors import ErrorCode, TesseraError
from tessera.rendering import (
    EMPTY_WIDGET,
    FLEXIBLE,
    Borders,
    ColumnSpec,
    Fixed,
    HorizontalLayout,
    Padding,
    Table,
    TextAlign,
    VerticalAlign,
    VerticalLayout,
    horizontal_layout,
    vertical_layout,
)


class TestEmptyWidget:
    """The empty widget takes no space."""

    def test_measures_zero(self, console) -> None:
        assert Measurement.get(console, console.options, EMPTY_WIDGET) == Measurement(0, 0)

    def test_renders_no_segments(self, console) -> None:
        assert list(console.render(EMPTY_WIDGET)) == []


class TestWidthPolicy:
    """Fixed and Flexible widths."""

    def test_negative_fixed_width_rejected(self) -> None:
        with pytest.raises(TesseraError) as exc_info:
            Fixed(-1)

        assert exc_info.value.code == ErrorCode.DEFINITION_INVALID_WIDTH

    def test_zero_fixed_width_allowed(self) -> None:
        assert Fixed(0).width == 0

    def test_flexible_instances_are_equal(self) -> None:
        from tessera.rendering import Flexible

        assert Flexible() == FLEXIBLE


class TestPadding:
    """Padding value type."""

    def test_defaults_to_zero(self) -> None:
        assert Padding().is_zero

    def test_as_tuple_is_css_order(self) -> None:
        assert Padding(1, 2, 3, 4).as_tuple() == (1, 2, 3, 4)


class TestHorizontalLayout:
    """Cells side by side with explicit gaps."""

    def test_gap_columns_between_cells(self) -> None:
        layout = horizontal_layout([Text("a"), Text("b"), Text("c")], spacing=2)

        grid = layout.to_rich()

        assert len(grid.columns) == 5
        assert [c.width for c in grid.columns][1::2] == [2, 2]

    def test_no_gap_columns_without_spacing(self) -> None:
        grid = horizontal_layout([Text("a"), Text("b")], spacing=0).to_rich()

        assert len(grid.columns) == 2

    def test_renders_spacing(self, render) -> None:
        assert render(horizontal_layout(["a", "b"], spacing=3)) == ["a   b"]

    def test_fixed_width_and_alignment(self, render) -> None:
        layout = HorizontalLayout(
            cells=[Text("x"), Text("y")],
            spacing=1,
            columns={
                0: ColumnSpec(width=Fixed(3), align=TextAlign.RIGHT),
                1: ColumnSpec(width=Fixed(3), align=TextAlign.CENTER),
            },
        )

        assert render(layout) == ["  x  y"]

    def test_unset_columns_use_defaults(self) -> None:
        layout = horizontal_layout([Text("a")])

        assert layout.column(0) == ColumnSpec()

    def test_measure_sums_cells_and_gaps(self, console) -> None:
        layout = horizontal_layout([Text("ab"), Text("cde")], spacing=1)

        assert Measurement.get(console, console.options, layout).maximum == 6

    def test_empty_row(self) -> None:
        assert horizontal_layout([]).to_rich().columns == []


class TestVerticalLayout:
    """Rows stacked without width coordination."""

    def test_stacks_rows(self, render) -> None:
        layout = vertical_layout([
            horizontal_layout(["a", "b"], spacing=1),
            horizontal_layout(["long", "b"], spacing=1),
        ])

        assert render(layout) == ["a b", "long b"]

    def test_keeps_cells(self) -> None:
        rows = [Text("1"), Text("2")]

        assert VerticalLayout(cells=rows).cells == rows


class TestTable:
    """Column-aligned grid."""

    def test_set_column_keeps_other_settings(self) -> None:
        table = Table()
        table.set_column(1, align=TextAlign.RIGHT)
        table.set_column(1, width=Fixed(4))

        assert table.column(1) == ColumnSpec(width=Fixed(4), align=TextAlign.RIGHT)

    def test_set_column_can_clear_padding(self) -> None:
        table = Table(padding=Padding(left=1))
        table.set_column(0, padding=Padding())
        table.set_column(0, padding=None)

        assert table.column_padding(0) == Padding(left=1)

    def test_column_padding_override(self) -> None:
        table = Table(padding=Padding(left=2))
        table.set_column(0, padding=Padding())

        assert table.column_padding(0) == Padding()
        assert table.column_padding(3) == Padding(left=2)

    def test_column_count_from_rows_and_specs(self) -> None:
        table = Table()
        table.add_row(["a", "b"])
        assert table.column_count == 2

        table.set_column(4, width=Fixed(1))
        assert table.column_count == 5

    def test_short_rows_are_filled(self) -> None:
        table = Table()
        table.add_row(["a", "b", "c"])
        table.add_row(["d"])

        rich_table = table.to_rich()

        assert rich_table.row_count == 2
        assert len(rich_table.columns) == 3

    def test_no_borders(self) -> None:
        rich_table = Table(cell_borders=Borders.NONE).to_rich()

        assert rich_table.box is None
        assert rich_table.show_header is False

    def test_all_borders(self, render) -> None:
        table = Table(cell_borders=Borders.ALL)
        table.add_row(["a"])

        assert rich_table_box(table) is box.SQUARE
        lines = render(table)
        assert lines[0].startswith("┌")
        assert lines[-1].startswith("└")

    def test_fixed_width_includes_padding(self, render) -> None:
        table = Table(cell_borders=Borders.NONE, padding=Padding(left=2))
        table.set_column(0, width=Fixed(3), align=TextAlign.RIGHT, padding=Padding())
        table.set_column(1, width=Fixed(5), align=TextAlign.RIGHT)
        table.add_row(["a", "b"])

        # Column 1 is 5 wide: 2 cells of padding and a 3-cell content box
        assert render(table) == ["  a    b"]

    def test_flexible_columns_share_width(self, render) -> None:
        table = Table(cell_borders=Borders.NONE)
        table.set_column(0, align=TextAlign.RIGHT)
        table.add_row(["a"])
        table.add_row(["abc"])

        assert render(table) == ["  a", "abc"]

    def test_vertical_alignment(self, render) -> None:
        table = Table(cell_borders=Borders.NONE)
        table.set_column(1, vertical_align=VerticalAlign.BOTTOM)
        table.add_row([Text("1\n2"), Text("x")])

        assert render(table) == ["1", "2x"]

    def test_default_column_is_flexible(self) -> None:
        assert Table().column_width(0) == FLEXIBLE


def rich_table_box(table: Table):
    return table.to_rich().box
