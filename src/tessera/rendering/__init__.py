"""Widget construction layer on top of rich.

Provides:
- EMPTY_WIDGET: renders nothing
- HorizontalLayout / VerticalLayout: linear arrangements
- Table: column-aligned grid
- ColumnWidth (Fixed | Flexible), TextAlign, VerticalAlign, Padding, Borders
"""

from tessera.rendering.layout import (
    HorizontalLayout,
    VerticalLayout,
    horizontal_layout,
    vertical_layout,
)
from tessera.rendering.table import Table
from tessera.rendering.widgets import (
    EMPTY_WIDGET,
    FLEXIBLE,
    Borders,
    ColumnSpec,
    ColumnWidth,
    EmptyWidget,
    Fixed,
    Flexible,
    Padding,
    TextAlign,
    VerticalAlign,
    Widget,
)

__all__ = [
    "EMPTY_WIDGET",
    "FLEXIBLE",
    "Borders",
    "ColumnSpec",
    "ColumnWidth",
    "EmptyWidget",
    "Fixed",
    "Flexible",
    "HorizontalLayout",
    "Padding",
    "Table",
    "TextAlign",
    "VerticalAlign",
    "VerticalLayout",
    "Widget",
    "horizontal_layout",
    "vertical_layout",
]
