"""Indexing strategies deriving a section key from a record.

A strategy is a single-argument function ``Record -> GroupKey``. The grouped
list engine applies it to every sorted record and opens a new section the
first time a key is seen.

Strategies never raise on record data. Missing or malformed values fall
back to a fixed bucket (the text fallback, the undefined date label, bucket
zero) so a list with incomplete records still renders.
"""

from collections.abc import Callable, Hashable
from datetime import UTC, datetime, timedelta
import math
from typing import Any

from libview.domain.entities.criteria import IndexSpec, IndexType
from libview.domain.entities.rows import GROUP_KEY_NONE
from libview.domain.entities.shared import (
    DEFAULT_TEXT_FALLBACK,
    Record,
    parse_timestamp,
    read_field,
)

GroupKeyFn = Callable[[Record], Any]
Clock = Callable[[], datetime]

DEFAULT_OTHER_GLYPH = "⌘"
DEFAULT_DATE_FALLBACK = "undefined"
DEFAULT_YEAR_FALLBACK = "0000"

# Recency keys, resolved to display text by the presentation layer
TODAY = "today"
LAST_WEEK = "last-week"
LAST_MONTH = "last-month"


def utc_now() -> datetime:
    return datetime.now(UTC)


def hashable_key(value: Any) -> Any:
    """Return ``value`` if usable as a group key, else its repr."""
    if isinstance(value, Hashable):
        try:
            hash(value)
        except TypeError:
            return repr(value)
        return value
    return repr(value)


# === Key Functions ===


def by_none() -> GroupKeyFn:
    """Put every record in the sentinel section that has no header."""

    def group_key(record: Record) -> str:
        return GROUP_KEY_NONE

    return group_key


def by_text(
    field: str,
    *,
    fallback: str = DEFAULT_TEXT_FALLBACK,
    other_glyph: str = DEFAULT_OTHER_GLYPH,
) -> GroupKeyFn:
    """Alphabetic index on the first character of ``field``.

    Letters map to their uppercase form, decimal digits to ``'#'`` and
    anything else to ``other_glyph``.
    """

    def group_key(record: Record) -> str:
        value = read_field(record, field)
        text = fallback if value is None or value == "" else str(value)

        first = text[:1]
        if first.isalpha():
            return first.upper()
        if first.isdecimal():
            return "#"
        return other_glyph

    return group_key


def by_number(field: str, *, default: Any = None) -> GroupKeyFn:
    """Group by the raw field value."""

    def group_key(record: Record) -> Any:
        value = read_field(record, field)
        return hashable_key(default if value is None else value)

    return group_key


def by_digits(field: str, *, bucket_size: int = 10, default: float = 0) -> GroupKeyFn:
    """Group numbers into buckets of ``bucket_size`` (deciles by default).

    A rating of 73 lands in bucket 7. Missing or non-numeric values use
    ``default``.
    """
    if bucket_size <= 0:
        raise ValueError(f"bucket_size must be positive, got {bucket_size}")

    def group_key(record: Record) -> int:
        value = read_field(record, field)
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = default
        if not math.isfinite(number):
            number = default
        return math.floor(number / bucket_size)

    return group_key


def by_year(field: str, *, default: str = DEFAULT_YEAR_FALLBACK) -> GroupKeyFn:
    """Group by the first four characters of a date field."""

    def group_key(record: Record) -> str:
        value = read_field(record, field)
        if isinstance(value, datetime):
            return f"{value.year:04d}"
        text = default if value is None or value == "" else str(value)
        return text[:4]

    return group_key


def by_date_since(
    field: str,
    *,
    now: Clock = utc_now,
    fallback: str = DEFAULT_DATE_FALLBACK,
    today_hours: float = 24,
    last_week_days: float = 7,
    last_month_days: float = 30,
) -> GroupKeyFn:
    """Recency index relative to ``now()``.

    Buckets are ``today`` (elapsed time up to ``today_hours``), then
    ``last-week`` and ``last-month``, whose windows count back from the start
    of the ``today`` window, then the four-digit year of the original value.
    All bounds are inclusive. Unparseable values get ``fallback``.
    """
    today = timedelta(hours=today_hours)
    last_week = today + timedelta(days=last_week_days)
    last_month = today + timedelta(days=last_month_days)

    def group_key(record: Record) -> str:
        value = read_field(record, field)
        timestamp = parse_timestamp(value)
        if timestamp is None:
            return fallback

        elapsed = now() - timestamp
        if elapsed <= today:
            return TODAY
        if elapsed <= last_week:
            return LAST_WEEK
        if elapsed <= last_month:
            return LAST_MONTH
        if isinstance(value, str) and value[:4].isdigit():
            return value[:4]
        return f"{timestamp.year:04d}"

    return group_key


# === Strategy Selection ===


def make_group_key_fn(
    index_spec: IndexSpec | None,
    *,
    text_fallback: str = DEFAULT_TEXT_FALLBACK,
    other_glyph: str = DEFAULT_OTHER_GLYPH,
    date_fallback: str = DEFAULT_DATE_FALLBACK,
    year_fallback: str = DEFAULT_YEAR_FALLBACK,
    now: Clock = utc_now,
    today_hours: float = 24,
    last_week_days: float = 7,
    last_month_days: float = 30,
    digits_bucket_size: int = 10,
) -> GroupKeyFn:
    """Return the key function for an index spec.

    Args:
        index_spec: Field and index type, or None for no sections
        text_fallback: Text used for empty values in a text index
        other_glyph: Key for text starting with neither letter nor digit
        date_fallback: Key for unparseable dates in a recency index
        year_fallback: Text used for empty values in a year index
        now: Clock used by the recency index
        today_hours: Upper bound of the ``today`` bucket
        last_week_days: Upper bound of the ``last-week`` bucket
        last_month_days: Upper bound of the ``last-month`` bucket
        digits_bucket_size: Bucket width of the digits index

    Returns:
        Function mapping a record to its group key
    """
    if index_spec is None:
        return by_none()

    field = index_spec.field
    match index_spec.type:
        case IndexType.TEXT:
            return by_text(field, fallback=text_fallback, other_glyph=other_glyph)
        case IndexType.NUMBER:
            return by_number(field)
        case IndexType.DATE:
            return by_date_since(
                field,
                now=now,
                fallback=date_fallback,
                today_hours=today_hours,
                last_week_days=last_week_days,
                last_month_days=last_month_days,
            )
        case IndexType.DIGITS:
            return by_digits(field, bucket_size=digits_bucket_size)
        case IndexType.YEAR:
            return by_year(field, default=year_fallback)
    raise ValueError(f"Unsupported index type: {index_spec.type!r}")
