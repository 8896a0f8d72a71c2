"""Indexing strategies mapping records to section keys."""

from .strategies import (
    LAST_MONTH,
    LAST_WEEK,
    TODAY,
    Clock,
    GroupKeyFn,
    by_date_since,
    by_digits,
    by_none,
    by_number,
    by_text,
    by_year,
    make_group_key_fn,
    utc_now,
)

__all__ = [
    "LAST_MONTH",
    "LAST_WEEK",
    "TODAY",
    "Clock",
    "GroupKeyFn",
    "by_date_since",
    "by_digits",
    "by_none",
    "by_number",
    "by_text",
    "by_year",
    "make_group_key_fn",
    "utc_now",
]
