"""libview domain layer - pure list grouping logic with no I/O."""

from . import entities, indexing, sorting, transforms
from .entities import (
    GROUP_KEY_NONE,
    Criterion,
    HeaderRow,
    IndexSpec,
    IndexType,
    ItemRow,
    Row,
    SortType,
)
from .grouped_list import GroupedList
from .indexing import make_group_key_fn
from .sorting import compare_by_criteria
from .transforms import create_pipeline, filter_records, group_records, sort_records

__all__ = [
    "GROUP_KEY_NONE",
    "Criterion",
    "GroupedList",
    "HeaderRow",
    "IndexSpec",
    "IndexType",
    "ItemRow",
    "Row",
    "SortType",
    "compare_by_criteria",
    "create_pipeline",
    # Modules
    "entities",
    "filter_records",
    "group_records",
    "indexing",
    "make_group_key_fn",
    "sort_records",
    "sorting",
    "transforms",
]
