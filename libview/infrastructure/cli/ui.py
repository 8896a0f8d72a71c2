"""UI helpers for CLI interaction.

Rendering of grouped lists and presets with Rich, keeping presentation
separate from the grouping logic. Group keys are turned into display text
here (recency keys become "Today", "Last week", ...).
"""

from collections.abc import Callable, Iterable
import functools
import json
from typing import Any, ParamSpec, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import typer

from libview.application.list_presets import ListPreset
from libview.application.use_cases.group_library import GroupLibraryResult
from libview.config import get_logger
from libview.config.settings import LabelsConfig
from libview.domain.entities.rows import HeaderRow
from libview.domain.entities.shared import Record, read_field

# Initialize console and logger
console = Console()
logger = get_logger(__name__)


TITLE_FIELDS = ("title", "name", "name_sort", "title_sort", "path")
DETAIL_FIELDS = ("artist", "album_artist", "album", "date_released", "time_added")

P = ParamSpec("P")
R = TypeVar("R")


def command_error_handler(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    Logs the failure with Loguru, prints a short message with Rich and
    converts it to exit code 1.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except (typer.Exit, typer.Abort):
                raise

            except Exception as e:
                logger.exception(f"Error during {operation}")
                console.print(f"\n[bold red]✗ Error during {operation}:[/bold red] {escape(str(e))}")
                raise typer.Exit(code=1) from e

    return wrapper


def _first_present(record: Record, fields: Iterable[str]) -> str:
    for name in fields:
        value = read_field(record, name)
        if value not in (None, ""):
            return str(value)
    return ""


def grouped_list_document(result: GroupLibraryResult) -> dict[str, Any]:
    """Machine-readable form of a grouped list."""
    grouped_list = result.grouped_list
    return {
        "preset": result.preset.name,
        "sort": result.sort_option.name,
        "hidden": sorted(result.hidden),
        "indices": list(grouped_list.indices),
        "count": grouped_list.count,
        "total": grouped_list.total,
        "offset": grouped_list.offset,
        "limit": grouped_list.limit,
        "groups": [
            {"key": key, "items": list(items)}
            for key, items in grouped_list.grouped.items()
        ],
    }


def display_grouped_list(
    result: GroupLibraryResult,
    labels: LabelsConfig,
    output_format: str = "table",
) -> None:
    """Print a grouped list as a sectioned table or as JSON."""
    if output_format == "json":
        console.print_json(json.dumps(grouped_list_document(result), default=str))
        return

    grouped_list = result.grouped_list
    title = f"{result.preset.name.title()} ({result.sort_option.label})"

    if grouped_list.is_empty():
        console.print(f"\n[bold blue]{title}[/bold blue]")
        console.print("[dim]No items[/dim]")
        return

    table = Table(title=title, show_header=False, expand=False)
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("Details", style="dim")

    for row in grouped_list:
        if isinstance(row, HeaderRow):
            table.add_row(f"[bold yellow]{escape(labels.resolve(row.key))}[/bold yellow]", "")
        else:
            table.add_row(
                f"  {escape(_first_present(row.record, TITLE_FIELDS))}",
                escape(_first_present(row.record, DETAIL_FIELDS)),
            )

    console.print(table)

    summary = f"{grouped_list.count} of {len(grouped_list.items)} shown"
    if grouped_list.total > len(grouped_list.items):
        summary += f" (page of {grouped_list.total})"
    if grouped_list.indices and len(grouped_list.indices) > 1:
        summary += " | " + " ".join(escape(labels.resolve(key)) for key in grouped_list.indices)
    console.print(f"[dim]{summary}[/dim]")


def display_presets(presets: Iterable[ListPreset]) -> None:
    """Print every preset with its sort options and filter toggles."""
    table = Table(title="List presets")
    table.add_column("Preset", style="cyan")
    table.add_column("Sort options")
    table.add_column("Filters", style="dim")

    for preset in presets:
        sort_names = ", ".join(
            f"{option.name}{' (default)' if option is preset.default_sort else ''}"
            for option in preset.sort_options
        )
        toggles = ", ".join(toggle.name for toggle in preset.filter_toggles) or "-"
        table.add_row(preset.name, sort_names, toggles)

    console.print(table)
