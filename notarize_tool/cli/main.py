# notarize_tool/cli/main.py
"""Main CLI entry point for notarize-tool"""

import sys
import logging

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT
from .commands import submit, doctor
from .utils.output import console, err_console


def setup_logging(debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        debug: Enable debug output (DEBUG level)
    """
    level = logging.DEBUG if debug else logging.INFO

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=err_console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )

    # Adjust third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)


class Context:
    """CLI context object"""

    def __init__(self):
        self.debug: bool = False
        self.quiet: bool = False


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.pass_context
def cli(ctx, debug, quiet):
    """Notarize Tool - Submit macOS products for notarization

    Archives an application bundle with ditto, submits it with
    notarytool using App Store Connect API credentials and waits
    for Apple's verdict.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.WARNING)
    else:
        setup_logging(debug=debug)

    ctx.obj = Context()
    ctx.obj.debug = debug
    ctx.obj.quiet = quiet


# Register commands
cli.add_command(submit.submit)
cli.add_command(doctor.doctor)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
