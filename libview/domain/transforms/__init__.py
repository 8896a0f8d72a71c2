"""Pure functional transformations for library records."""

from .core import (
    Transform,
    create_pipeline,
    filter_records,
    group_records,
    sort_records,
)
from .predicates import (
    Predicate,
    all_of,
    field_at_most,
    field_equals,
    field_greater_than,
    field_in,
    field_not_equals,
    field_present,
    is_not_single_album,
    is_not_singles_artist,
    is_not_spotify,
    is_unplayed,
    negate,
)

__all__ = [
    # Predicates
    "Predicate",
    # Core pipeline functions
    "Transform",
    "all_of",
    "create_pipeline",
    "field_at_most",
    "field_equals",
    "field_greater_than",
    "field_in",
    "field_not_equals",
    "field_present",
    "filter_records",
    "group_records",
    "is_not_single_album",
    "is_not_singles_artist",
    "is_not_spotify",
    "is_unplayed",
    "negate",
    "sort_records",
]
