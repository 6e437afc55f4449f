"""Progress bar layouts for one or many concurrent tasks.

Provides:
- ProgressBarDefinition / ProgressBarCell: which columns to draw
- ProgressLayoutBuilder: fluent construction of definitions
- ProgressState: the per-task snapshot cells draw from
- BaseProgressBarWidgetMaker: arranges cells as a row, a stack or a grid

Usage:
    from tessera.progress import BASE_WIDGET_MAKER, ProgressLayoutBuilder, ProgressState

    definition = ProgressLayoutBuilder(spacing=1).spinner().progress_bar().percentage().build()
    widget = BASE_WIDGET_MAKER.build(definition, [ProgressState("a", total=10, completed=3)])
    console.print(widget)
"""

from tessera.progress.builder import ProgressLayoutBuilder, progress_bar_layout
from tessera.progress.cells import (
    BarCell,
    Cell,
    CompletedCell,
    ElapsedCell,
    FunctionCell,
    PercentageCell,
    RemainingCell,
    SpeedCell,
    SpinnerCell,
    TextCell,
)
from tessera.progress.definition import ProgressBarCell, ProgressBarDefinition
from tessera.progress.state import ProgressState, TaskStatus
from tessera.progress.widget_maker import (
    BASE_WIDGET_MAKER,
    BaseProgressBarWidgetMaker,
    ProgressBarWidgetMaker,
)

__all__ = [
    "BASE_WIDGET_MAKER",
    "BarCell",
    "BaseProgressBarWidgetMaker",
    "Cell",
    "CompletedCell",
    "ElapsedCell",
    "FunctionCell",
    "PercentageCell",
    "ProgressBarCell",
    "ProgressBarDefinition",
    "ProgressBarWidgetMaker",
    "ProgressLayoutBuilder",
    "ProgressState",
    "RemainingCell",
    "SpeedCell",
    "SpinnerCell",
    "TaskStatus",
    "TextCell",
    "progress_bar_layout",
]
