"""
Pure functional transformations over record sequences.

These are the three steps the grouped list engine runs on every regroup:
filter, sort and group. Each step is curried so it can be configured once
and composed with ``create_pipeline``:

    pipeline = create_pipeline(
        filter_records([is_not_spotify]),
        sort_records([Criterion.ascending("name_sort")]),
    )
    albums = pipeline(records)

Transformations never mutate their input; they return new tuples or dicts
holding the same record objects.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from toolz import compose_left, curry

from libview.config import get_logger
from libview.domain.entities.criteria import Criterion
from libview.domain.entities.shared import Record
from libview.domain.indexing.strategies import GroupKeyFn
from libview.domain.sorting.comparators import sort_key
from libview.domain.transforms.predicates import Predicate, all_of

logger = get_logger(__name__)

# Type alias for record transformation functions
Transform = Callable[[Sequence[Record]], Any]


# === Core Pipeline Functions ===


def create_pipeline(*operations: Transform) -> Transform:
    """
    Compose multiple transformations into a single operation.

    Args:
        *operations: Transformation functions to compose

    Returns:
        A single transformation function combining all operations
    """
    return compose_left(*operations)


# === Filtering ===


@curry
def filter_records(
    predicates: Iterable[Predicate],
    records: Sequence[Record],
) -> tuple[Record, ...]:
    """
    Keep records for which every predicate holds.

    Args:
        predicates: Predicates combined with logical AND
        records: Records to filter

    Returns:
        Surviving records in their original order
    """
    keep = all_of(predicates)
    return tuple(record for record in records if keep(record))


# === Sorting ===


@curry
def sort_records(
    criteria: Sequence[Criterion],
    records: Sequence[Record],
    **options: Any,
) -> tuple[Record, ...]:
    """
    Stable sort by chained criteria.

    Args:
        criteria: Criteria in priority order; empty keeps the input order
        records: Records to sort
        **options: ``text_fallback`` and ``collation_key`` for text criteria

    Returns:
        Sorted records
    """
    if not criteria:
        return tuple(records)
    return tuple(sorted(records, key=sort_key(criteria, **options)))


# === Grouping ===


@curry
def group_records(
    group_key_fn: GroupKeyFn,
    records: Sequence[Record],
) -> dict[Any, tuple[Record, ...]]:
    """
    Partition records by group key.

    Groups appear in the order their first member appears in ``records``,
    and members keep their relative order.

    Args:
        group_key_fn: Function deriving a record's group key
        records: Records, usually already sorted

    Returns:
        Insertion-ordered mapping of group key to records
    """
    groups: dict[Any, list[Record]] = {}
    for record in records:
        groups.setdefault(group_key_fn(record), []).append(record)

    logger.debug("Grouped {} records into {} groups", len(records), len(groups))
    return {key: tuple(members) for key, members in groups.items()}
