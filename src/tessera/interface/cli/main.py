"""Main CLI entry point.

    tessera demo          # Render a multi-task progress snapshot
    tessera config show   # Show resolved configuration
"""

import sys

import click

from tessera import __version__
from tessera.foundation.logging import configure_logging
from tessera.interface.cli.config_cmd import config
from tessera.interface.cli.demo_cmd import demo


def cli_entrypoint() -> None:
    """Wrapped entrypoint with global error handling.

    Called from pyproject.toml [project.scripts].
    """
    try:
        main(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        sys.exit(130)
    except Exception as e:
        from tessera.interface.cli.error_handler import handle_error

        handle_error(e, json_output=False)


@click.group()
@click.version_option(__version__, prog_name="tessera")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Tessera - progress bar layouts for rich terminals."""
    configure_logging(debug=debug)


main.add_command(demo)
main.add_command(config)
