"""List commands for the libview CLI."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from libview.application.list_presets import PRESETS
from libview.application.use_cases.group_library import (
    GroupLibraryCommand,
    GroupLibraryUseCase,
)
from libview.config import get_logger, settings
from libview.infrastructure.cli.ui import (
    command_error_handler,
    display_grouped_list,
    display_presets,
)
from libview.infrastructure.sources.json_file import load_page

logger = get_logger(__name__)


class OutputFormat(StrEnum):
    """Output formats of the show command."""

    TABLE = "table"
    JSON = "json"


def register_list_commands(app: typer.Typer) -> None:
    """Register list commands with the Typer app."""
    app.command(
        name="show",
        help="Show a saved library page as a grouped list",
        rich_help_panel="📚 Library Lists",
    )(show)
    app.command(
        name="presets",
        help="List presets with their sort options and filters",
        rich_help_panel="📚 Library Lists",
    )(presets)


@command_error_handler
def show(
    file: Annotated[
        Path,
        typer.Argument(help="JSON page saved from the library API"),
    ],
    preset: Annotated[
        str,
        typer.Option("--preset", "-p", help="albums, artists, composers, tracks or playlists"),
    ] = "albums",
    sort: Annotated[
        str | None,
        typer.Option("--sort", "-s", help="Sort option of the preset (default: first)"),
    ] = None,
    hide_singles: Annotated[
        bool, typer.Option("--hide-singles", help="Hide singles")
    ] = False,
    hide_spotify: Annotated[
        bool, typer.Option("--hide-spotify", help="Hide items from Spotify")
    ] = False,
    hide_read_items: Annotated[
        bool, typer.Option("--hide-read-items", help="Hide played items")
    ] = False,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.TABLE,
) -> None:
    """Group a saved library page and print it."""
    hide = {
        name
        for name, enabled in (
            ("hide-singles", hide_singles),
            ("hide-spotify", hide_spotify),
            ("hide-read-items", hide_read_items),
        )
        if enabled
    }

    page = load_page(file)
    command = GroupLibraryCommand(
        preset=preset,
        items=page.items,
        sort=sort,
        hide=hide,
        total=page.total,
        offset=page.offset,
        limit=page.limit,
    )
    result = GroupLibraryUseCase(settings.indexing).execute(command)
    display_grouped_list(result, settings.labels, output_format)


def presets() -> None:
    """Show available presets."""
    display_presets(PRESETS.values())
