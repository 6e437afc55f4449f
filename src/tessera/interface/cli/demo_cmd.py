"""Demo command - Render a snapshot of several synthetic downloads."""

import logging

import click
from rich.console import Console

from tessera.foundation.config import get_config
from tessera.progress import (
    BASE_WIDGET_MAKER,
    ProgressBarDefinition,
    ProgressState,
    TaskStatus,
    progress_bar_layout,
)
from tessera.rendering import TextAlign

logger = logging.getLogger(__name__)

_NAMES = ("ubuntu.iso", "model.bin", "dataset.tar", "notes.pdf", "video.mkv")


def demo_states(count: int, animation_time: float = 1.0) -> list[ProgressState[str]]:
    """Deterministic task snapshots at different stages."""
    states = []
    for i in range(count):
        name = _NAMES[i % len(_NAMES)]
        total = 1_000_000 * (i + 1)
        share = (i + 1) / (count + 1)
        if i == count - 1 and count > 1:
            status, completed = TaskStatus.FINISHED, total
        else:
            status, completed = TaskStatus.RUNNING, total * share
        speed = 250_000.0 * (i + 1)
        states.append(
            ProgressState(
                context=name,
                total=total,
                completed=completed,
                animation_time=animation_time + i * 0.1,
                status=status,
                speed=speed,
                elapsed=completed / speed,
                remaining=(total - completed) / speed,
            )
        )
    return states


def demo_definition(
    spacing: int | None,
    align: bool | None,
    bar_width: int | None,
) -> ProgressBarDefinition[str]:
    defaults = get_config().progress
    return (
        progress_bar_layout(spacing=spacing, align_columns=align)
        .spinner(defaults.spinner)
        .cell(lambda state: state.context, align=TextAlign.LEFT)
        .progress_bar(bar_width if bar_width is not None else defaults.bar_width)
        .percentage()
        .completed(suffix="B")
        .speed(suffix="B/s")
        .time_remaining()
        .build()
    )


@click.command()
@click.option("--tasks", "-n", default=3, show_default=True, type=click.IntRange(0, 20),
              help="Number of tasks to show")
@click.option("--align/--no-align", default=None, help="Align columns across tasks")
@click.option("--spacing", type=click.IntRange(min=0), help="Blank columns between cells")
@click.option("--bar-width", type=click.IntRange(min=1), help="Fixed bar width")
@click.option("--width", type=click.IntRange(min=20), help="Terminal width to render at")
def demo(
    tasks: int,
    align: bool | None,
    spacing: int | None,
    bar_width: int | None,
    width: int | None,
) -> None:
    """Print one frame of a multi-task progress display.

    Examples:

        tessera demo
        tessera demo -n 5 --no-align
        tessera demo --spacing 1 --bar-width 30
    """
    definition = demo_definition(spacing, align, bar_width)
    states = demo_states(tasks)
    logger.debug(
        "Rendering demo: tasks=%d spacing=%d align_columns=%s",
        tasks, definition.spacing, definition.align_columns,
    )
    Console(width=width).print(BASE_WIDGET_MAKER.build(definition, states))
