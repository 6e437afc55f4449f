"""Default styles and spinner frames used by the built-in cells.

Styles are plain rich style strings so cells render on any Console,
themed or not.
"""

SPINNER_STYLE = "bold yellow"
TEXT_STYLE = ""
PERCENTAGE_STYLE = "bold"
COMPLETED_STYLE = "green"
SPEED_STYLE = "cyan"
ELAPSED_STYLE = "yellow"
REMAINING_STYLE = "cyan"

BAR_STYLES = {
    "style": "bar.back",
    "complete_style": "bar.complete",
    "finished_style": "bar.finished",
    "pulse_style": "bar.pulse",
}
"""Keyword arguments for rich.progress_bar.ProgressBar, using rich's default theme."""

SPINNERS: dict[str, tuple[str, ...]] = {
    "dots": ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"),
    "line": ("-", "\\", "|", "/"),
    "mote": ("·", "✧", "✦", "✧", "·", " "),
    "spiral": ("◜", "◝", "◞", "◟"),
    "diamond": ("◇", "◈", "◆", "◈"),
}
