"""Grouped list engine.

``GroupedList`` holds one page of library records (tracks, albums, artists,
composers, playlists) together with the pagination counters of the API
response it came from, and derives a filtered, sorted and sectioned view of
them for rendering as a list with section headers.

    albums = GroupedList(items=response["items"], total=response["total"])
    albums.group(
        criteria=[Criterion.descending("time_added", SortType.DATE)],
        filters=[is_not_spotify],
        index_spec=IndexSpec("time_added", IndexType.DATE),
    )
    for row in albums:
        ...  # HeaderRow("today"), ItemRow("today", {...}), ...

Grouping never mutates the records or the raw collection; it only replaces
the derived view, so ``group`` can be called again with other arguments.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from libview.config import get_logger
from libview.domain.entities.criteria import Criterion, IndexSpec
from libview.domain.entities.rows import GROUP_KEY_NONE, HeaderRow, ItemRow, Row
from libview.domain.entities.shared import DEFAULT_TEXT_FALLBACK, Record
from libview.domain.indexing.strategies import make_group_key_fn
from libview.domain.sorting.comparators import CollationKey, default_collation_key
from libview.domain.transforms.core import filter_records, group_records, sort_records
from libview.domain.transforms.predicates import Predicate

logger = get_logger(__name__)


def _traverse(groups: tuple[tuple[Any, tuple[Record, ...]], ...]) -> Iterator[Row]:
    for key, records in groups:
        if key != GROUP_KEY_NONE:
            yield HeaderRow(key)
        for record in records:
            yield ItemRow(key, record)


class GroupedList:
    """Sorted, filtered and grouped view over a page of records.

    Attributes:
        items: The raw records, never modified by grouping
        total: Total number of records on the server
        offset: Offset of this page
        limit: Page size requested (-1 for unlimited)
        count: Number of records in the current view (all records until
            the first filtered ``group`` call)
        indices: Group keys in display order
    """

    def __init__(
        self,
        items: Iterable[Record] | None = None,
        total: int = 0,
        offset: int = 0,
        limit: int = -1,
    ) -> None:
        self.items: tuple[Record, ...] = tuple(items or ())
        self.total = total
        self.offset = offset
        self.limit = limit
        self.count = len(self.items)
        self.indices: tuple[Any, ...] = ()
        self._grouped: dict[Any, tuple[Record, ...]] = {}
        self.group()

    @classmethod
    def from_page(cls, page: Mapping[str, Any]) -> "GroupedList":
        """Create from an API page: ``{"items": [...], "total": ..., ...}``."""
        return cls(
            items=page.get("items") or (),
            total=page.get("total", 0),
            offset=page.get("offset", 0),
            limit=page.get("limit", -1),
        )

    @property
    def index_list(self) -> list[Any]:
        """Group keys in display order, for a jump-to-section control."""
        return list(self.indices)

    @property
    def grouped(self) -> Mapping[Any, tuple[Record, ...]]:
        """Read-only view of the current groups."""
        return MappingProxyType(self._grouped)

    def is_empty(self) -> bool:
        """True if the page holds no records, whatever the filters."""
        return not self.items

    def group(
        self,
        criteria: Sequence[Criterion] | None = (),
        filters: Iterable[Predicate] | None = (),
        index_spec: IndexSpec | None = None,
        *,
        collation_key: CollationKey = default_collation_key,
        text_fallback: str = DEFAULT_TEXT_FALLBACK,
        **index_options: Any,
    ) -> "GroupedList":
        """Recompute the grouped view.

        Args:
            criteria: Sort criteria in priority order; empty keeps the
                filtered order
            filters: Predicates a record must all satisfy to be shown
            index_spec: How to derive section keys; None for a single
                section without header
            collation_key: Text ordering used by text criteria
            text_fallback: Text used for empty values when sorting and
                indexing text
            **index_options: Further options for ``make_group_key_fn``
                (``now``, ``other_glyph``, ``date_fallback``, ...)

        Returns:
            self, for chaining
        """
        criteria = tuple(criteria or ())
        filtered = filter_records(tuple(filters or ()), self.items)
        ordered = sort_records(
            criteria,
            filtered,
            collation_key=collation_key,
            text_fallback=text_fallback,
        )
        group_key_fn = make_group_key_fn(
            index_spec, text_fallback=text_fallback, **index_options
        )
        grouped = group_records(group_key_fn, ordered)

        self.count = len(filtered)
        self._grouped = grouped
        self.indices = tuple(grouped)

        logger.debug(
            "Regrouped list: {} of {} records in {} groups (criteria={}, index={})",
            self.count,
            len(self.items),
            len(self.indices),
            [criterion.field for criterion in criteria],
            index_spec.field if index_spec else None,
        )
        return self

    def rows(self) -> Iterator[Row]:
        """Start a new traversal of the current view.

        The traversal is a snapshot: regrouping while it is being consumed
        does not change what it yields. Each call returns an independent
        iterator starting from the first group.
        """
        return _traverse(tuple(self._grouped.items()))

    def __iter__(self) -> Iterator[Row]:
        return self.rows()

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(items={len(self.items)}, count={self.count}, "
            f"groups={len(self.indices)}, total={self.total}, offset={self.offset}, "
            f"limit={self.limit})"
        )
