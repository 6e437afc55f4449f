"""Tessera - progress bar layouts for rich terminals.

Arranges the cells of many concurrent progress bars as a single row,
a stack of rows, or a column-aligned grid.
"""

from tessera.foundation.errors import ErrorCode, TesseraError
from tessera.progress import (
    BASE_WIDGET_MAKER,
    BaseProgressBarWidgetMaker,
    ProgressBarCell,
    ProgressBarDefinition,
    ProgressLayoutBuilder,
    ProgressState,
    TaskStatus,
)

__version__ = "0.1.0"

__all__ = [
    "BASE_WIDGET_MAKER",
    "BaseProgressBarWidgetMaker",
    "ErrorCode",
    "ProgressBarCell",
    "ProgressBarDefinition",
    "ProgressLayoutBuilder",
    "ProgressState",
    "TaskStatus",
    "TesseraError",
    "__version__",
]
