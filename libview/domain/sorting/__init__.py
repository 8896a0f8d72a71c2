"""Comparators used to order records by chained criteria."""

from .comparators import (
    CollationKey,
    RecordComparator,
    ValueComparator,
    chain_comparators,
    compare_by_criteria,
    compare_date,
    compare_number,
    compare_text,
    criterion_comparator,
    default_collation_key,
    sort_key,
    value_comparator,
)

__all__ = [
    "CollationKey",
    "RecordComparator",
    "ValueComparator",
    "chain_comparators",
    "compare_by_criteria",
    "compare_date",
    "compare_number",
    "compare_text",
    "criterion_comparator",
    "default_collation_key",
    "sort_key",
    "value_comparator",
]
