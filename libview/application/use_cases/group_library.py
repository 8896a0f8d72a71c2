"""GroupLibrary use case: turn a page of library records into a grouped list.

Resolves the page's preset, sort option and filter toggles, applies the
configured indexing defaults and clock, and hands everything to the
``GroupedList`` engine.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from attrs import define, field

from libview.application.list_presets import ListPreset, SortOption, get_preset
from libview.config import get_logger, settings
from libview.config.settings import IndexingConfig
from libview.domain.entities.shared import Record
from libview.domain.grouped_list import GroupedList
from libview.domain.indexing.strategies import Clock, utc_now
from libview.domain.sorting.comparators import CollationKey, default_collation_key

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class GroupLibraryCommand:
    """Everything needed to build one list view.

    ``items`` and the pagination counters usually come straight from an API
    response; ``sort`` and ``hide`` from the page's controls.
    """

    preset: str
    items: Sequence[Record] = field(factory=tuple, converter=tuple)
    sort: str | None = None
    hide: frozenset[str] = field(factory=frozenset, converter=frozenset)
    total: int = 0
    offset: int = 0
    limit: int = -1

    @classmethod
    def from_page(
        cls,
        preset: str,
        page: Mapping[str, Any],
        sort: str | None = None,
        hide: frozenset[str] | set[str] = frozenset(),
    ) -> "GroupLibraryCommand":
        """Build a command from an API-shaped page dict."""
        return cls(
            preset=preset,
            items=page.get("items") or (),
            sort=sort,
            hide=hide,
            total=page.get("total", 0),
            offset=page.get("offset", 0),
            limit=page.get("limit", -1),
        )


@define(frozen=True, slots=True)
class GroupLibraryResult:
    """Grouped list plus the options that produced it."""

    grouped_list: GroupedList
    preset: ListPreset
    sort_option: SortOption
    hidden: frozenset[str] = field(factory=frozenset)

    @property
    def filtered_out(self) -> int:
        return len(self.grouped_list.items) - self.grouped_list.count


class GroupLibraryUseCase:
    """Build grouped list views from presets and configured defaults."""

    def __init__(
        self,
        indexing: IndexingConfig | None = None,
        clock: Clock = utc_now,
        collation_key: CollationKey = default_collation_key,
    ) -> None:
        self.indexing = indexing or settings.indexing
        self.clock = clock
        self.collation_key = collation_key

    def execute(self, command: GroupLibraryCommand) -> GroupLibraryResult:
        """Group the command's records.

        Raises:
            UnknownListOptionError: If the preset, sort option or a toggle
                does not exist
        """
        preset = get_preset(command.preset)
        sort_option = preset.sort_option(command.sort)
        filters = preset.filters(command.hide)

        grouped_list = GroupedList(
            items=command.items,
            total=command.total,
            offset=command.offset,
            limit=command.limit,
        ).group(
            criteria=sort_option.criteria,
            filters=filters,
            index_spec=sort_option.index,
            **self._grouping_options(),
        )

        logger.info(
            "Grouped {} {} by '{}': {} shown in {} groups",
            len(command.items),
            preset.name,
            sort_option.name,
            grouped_list.count,
            len(grouped_list.indices),
        )
        return GroupLibraryResult(
            grouped_list=grouped_list,
            preset=preset,
            sort_option=sort_option,
            hidden=command.hide,
        )

    def _grouping_options(self) -> dict[str, Any]:
        indexing = self.indexing
        return {
            "collation_key": self.collation_key,
            "text_fallback": indexing.text_fallback,
            "other_glyph": indexing.other_glyph,
            "date_fallback": indexing.date_fallback_label,
            "year_fallback": indexing.year_fallback,
            "now": self.clock,
            "today_hours": indexing.today_hours,
            "last_week_days": indexing.last_week_days,
            "last_month_days": indexing.last_month_days,
            "digits_bucket_size": indexing.digits_bucket_size,
        }
