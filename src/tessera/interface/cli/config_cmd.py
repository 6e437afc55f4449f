"""Config command - Inspect Tessera configuration."""

import click
from rich.console import Console

from tessera.foundation.config import get_config, get_value, load_config
from tessera.foundation.config.loader import config_paths
from tessera.foundation.errors import TesseraError

console = Console()


@click.group()
def config() -> None:
    """Inspect Tessera configuration.

    Configuration is loaded from (in priority order):
    1. Environment variables (TESSERA_*)
    2. .tessera/config.yaml (project-local)
    3. ~/.tessera/config.yaml (user-global)
    4. Built-in defaults

    Examples:

        tessera config show
        tessera config get progress.spacing
        TESSERA_PROGRESS_SPACING=1 tessera demo
    """


@config.command()
@click.option("--path", type=click.Path(), help="Config file path to show")
def show(path: str | None) -> None:
    """Show current configuration."""
    cfg = load_config(path) if path else get_config()

    console.print("[bold]Tessera Configuration[/bold]")
    console.print("\n[cyan]Progress[/cyan]")
    console.print(f"  Spacing: {cfg.progress.spacing}")
    console.print(f"  Align columns: {cfg.progress.align_columns}")
    console.print(f"  Spinner: {cfg.progress.spinner}")
    bar_width = cfg.progress.bar_width if cfg.progress.bar_width is not None else "fill"
    console.print(f"  Bar width: {bar_width}")
    console.print(f"\nVerbose: {cfg.verbose}")

    console.print("\n[dim]Config sources:[/dim]")
    for candidate in config_paths(path):
        if candidate.exists():
            console.print(f"  [green]✓[/green] {candidate}")
        else:
            console.print(f"  [dim]○[/dim] {candidate} (not found)")


@config.command()
@click.argument("key")
@click.option("--path", type=click.Path(), help="Config file path to read")
def get(key: str, path: str | None) -> None:
    """Print a single configuration value.

    Examples:
        tessera config get progress.spacing
        tessera config get progress.align_columns
    """
    cfg = load_config(path) if path else get_config()

    try:
        value = get_value(cfg, key)
    except TesseraError as e:
        console.print(f"[red]✗[/red] {e.message}")
        console.print("\n[dim]Available keys:[/dim]")
        console.print("  progress.spacing, progress.align_columns, progress.spinner, progress.bar_width, verbose")
        raise SystemExit(1) from None
    # Plain output for scripting
    click.echo(value)
