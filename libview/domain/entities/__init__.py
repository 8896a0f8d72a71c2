"""Core domain entities for grouped library lists."""

from .criteria import Criterion, IndexSpec, IndexType, SortType
from .rows import GROUP_KEY_NONE, HeaderRow, ItemRow, Row
from .shared import Record, ensure_utc, parse_timestamp, read_field

__all__ = [
    "GROUP_KEY_NONE",
    # Criteria
    "Criterion",
    # Rows
    "HeaderRow",
    "IndexSpec",
    "IndexType",
    "ItemRow",
    # Shared utilities
    "Record",
    "Row",
    "SortType",
    "ensure_utc",
    "parse_timestamp",
    "read_field",
]
