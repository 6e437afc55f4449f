"""Widget value types shared by the layout containers.

A widget is any rich renderable. The containers in this package describe
their structure with the small value types below and lower it to rich
primitives at render time.
"""

from dataclasses import dataclass
from enum import Enum

from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.measure import Measurement

from tessera.foundation.errors import ErrorCode, definition_error

Widget = RenderableType


class TextAlign(Enum):
    """Horizontal alignment of a widget inside its column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlign(Enum):
    """Vertical alignment of a widget inside its row."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class Borders(Enum):
    """Which borders a table draws around its cells."""

    NONE = "none"
    ALL = "all"


@dataclass(frozen=True, slots=True)
class Fixed:
    """A column exactly ``width`` cells wide."""

    width: int

    def __post_init__(self) -> None:
        if self.width < 0:
            raise definition_error(ErrorCode.DEFINITION_INVALID_WIDTH, width=self.width)


@dataclass(frozen=True, slots=True)
class Flexible:
    """A column sized from its content and the available space."""


ColumnWidth = Fixed | Flexible
"""Width policy of a column."""

FLEXIBLE = Flexible()


@dataclass(frozen=True, slots=True)
class Padding:
    """Blank space around a cell, in terminal cells."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @property
    def is_zero(self) -> bool:
        return not (self.top or self.right or self.bottom or self.left)

    def as_tuple(self) -> tuple[int, int, int, int]:
        """CSS-style (top, right, bottom, left), as rich expects."""
        return (self.top, self.right, self.bottom, self.left)


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    """Width, alignment and padding of one column."""

    width: ColumnWidth = FLEXIBLE
    align: TextAlign = TextAlign.LEFT
    vertical_align: VerticalAlign = VerticalAlign.TOP
    padding: Padding | None = None
    """Overrides the container's default padding when set."""


class EmptyWidget:
    """Renders nothing and occupies no space."""

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        return ()

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        return Measurement(0, 0)

    def __repr__(self) -> str:
        return "EmptyWidget()"


EMPTY_WIDGET = EmptyWidget()
