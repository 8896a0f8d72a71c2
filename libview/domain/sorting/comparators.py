"""Comparators for ordering library records.

Each comparator takes two field values and returns a negative, zero or
positive integer. Comparators never raise on record data: missing text sorts
as the text fallback, missing or non-numeric numbers sort as zero, and
unparseable dates sort after every valid date.

Criteria turn a value comparator into a record comparator (reading the
criterion's field and applying its direction), and a sequence of criteria
is chained so each criterion only breaks the ties left by the previous one.
"""

from collections.abc import Callable, Sequence
from functools import cmp_to_key, partial
import math
import unicodedata
from typing import Any

from libview.domain.entities.criteria import Criterion, SortType
from libview.domain.entities.shared import (
    DEFAULT_TEXT_FALLBACK,
    Record,
    parse_timestamp,
    read_field,
)

# Type aliases
ValueComparator = Callable[[Any, Any], int]
RecordComparator = Callable[[Record, Record], int]
CollationKey = Callable[[str], Any]


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def default_collation_key(text: str) -> tuple[str, str]:
    """Case and accent insensitive ordering with a deterministic tie-break."""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text


def _as_text(value: Any, fallback: str) -> str:
    if value is None or value == "":
        return fallback
    return value if isinstance(value, str) else str(value)


def _as_number(value: Any, default: float = 0) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return default if math.isnan(number) else number


# === Value Comparators ===


def compare_text(
    a: Any,
    b: Any,
    *,
    fallback: str = DEFAULT_TEXT_FALLBACK,
    collation_key: CollationKey = default_collation_key,
) -> int:
    """Compare two values as text using the given collation."""
    return _sign(
        collation_key(_as_text(a, fallback)),
        collation_key(_as_text(b, fallback)),
    )


def compare_number(a: Any, b: Any, *, default: float = 0) -> int:
    """Compare two values numerically."""
    return _sign(_as_number(a, default), _as_number(b, default))


def compare_date(a: Any, b: Any) -> int:
    """Compare two values as timestamps.

    An unparseable value sorts after a valid one; two unparseable values
    are equal.
    """
    ta = parse_timestamp(a)
    tb = parse_timestamp(b)

    if ta is None and tb is None:
        return 0
    if ta is None:
        return 1
    if tb is None:
        return -1
    return _sign(ta, tb)


def value_comparator(
    sort_type: SortType,
    *,
    text_fallback: str = DEFAULT_TEXT_FALLBACK,
    collation_key: CollationKey = default_collation_key,
) -> ValueComparator:
    """Return the value comparator for a semantic type."""
    match SortType(sort_type):
        case SortType.TEXT:
            return partial(
                compare_text, fallback=text_fallback, collation_key=collation_key
            )
        case SortType.NUMBER:
            return compare_number
        case SortType.DATE:
            return compare_date


# === Record Comparators ===


def criterion_comparator(criterion: Criterion, **options: Any) -> RecordComparator:
    """Build a record comparator for one criterion, honouring its order."""
    compare = value_comparator(criterion.type, **options)
    field = criterion.field
    order = criterion.order

    def compare_records(a: Record, b: Record) -> int:
        return order * compare(read_field(a, field), read_field(b, field))

    return compare_records


def chain_comparators(comparators: Sequence[RecordComparator]) -> RecordComparator:
    """Combine comparators by sequential tie-break.

    With no comparators every pair compares equal.
    """
    comparators = tuple(comparators)

    def compare_records(a: Record, b: Record) -> int:
        for compare in comparators:
            result = compare(a, b)
            if result:
                return result
        return 0

    return compare_records


def compare_by_criteria(
    criteria: Sequence[Criterion], **options: Any
) -> RecordComparator:
    """Build the chained record comparator for a sequence of criteria.

    Args:
        criteria: Criteria in priority order
        **options: ``text_fallback`` and ``collation_key`` for text criteria

    Returns:
        Comparator returning negative, zero or positive
    """
    return chain_comparators(
        [criterion_comparator(criterion, **options) for criterion in criteria]
    )


def sort_key(criteria: Sequence[Criterion], **options: Any) -> Callable[[Record], Any]:
    """Key function for ``sorted`` equivalent to ``compare_by_criteria``."""
    return cmp_to_key(compare_by_criteria(criteria, **options))
