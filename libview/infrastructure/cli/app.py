"""libview CLI - Main application entry point and app structure."""

from typing import Annotated

from rich.console import Console
import typer

from libview import __version__
from libview.config import get_logger, log_startup_info, setup_loguru_logger
from libview.infrastructure.cli.list_commands import register_list_commands

console = Console(width=80)
logger = get_logger(__name__)

app = typer.Typer(
    help=f"📚 libview v{__version__} - Grouped views over your media library",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)

register_list_commands(app)


@app.command(name="version", rich_help_panel="⚙️ System")
def version_command() -> None:
    """Show version information."""
    console.print(f"[bold bright_blue]📚 libview[/bold bright_blue] [dim]v{__version__}[/dim]")


@app.callback()
def init_cli(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Grouped, sorted and filtered views over media library records."""
    setup_loguru_logger(verbose)
    if verbose:
        log_startup_info()


def main() -> None:
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    main()
