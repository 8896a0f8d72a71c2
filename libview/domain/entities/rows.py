"""Rows produced when traversing a grouped list.

A traversal interleaves one header row per section with the item rows of
that section, which is what a list view with sticky headers renders.
"""

from typing import Any

from attrs import define

from .shared import read_field

# Group key assigned when no index spec is active. Sections with this key
# never get a header row.
GROUP_KEY_NONE = "GROUP_KEY_NONE"


@define(frozen=True, slots=True)
class HeaderRow:
    """Section header row."""

    key: Any

    @property
    def group_key(self) -> Any:
        return self.key

    @property
    def item_id(self) -> Any:
        return self.key

    @property
    def is_item(self) -> bool:
        return False


@define(frozen=True, slots=True)
class ItemRow:
    """Row carrying one record of a section."""

    key: Any
    record: Any

    @property
    def group_key(self) -> Any:
        return self.key

    @property
    def item_id(self) -> Any:
        return read_field(self.record, "id")

    @property
    def is_item(self) -> bool:
        return True


Row = HeaderRow | ItemRow
