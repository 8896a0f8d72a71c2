"""Filter predicates for library records.

Every predicate is curried: supply the configuration arguments to get a
``Record -> bool`` function, or pass the record as the last argument to
evaluate immediately. Predicates read fields through ``read_field`` and
treat missing or non-numeric values as absent rather than raising.
"""

from collections.abc import Callable, Collection, Hashable, Iterable
import math
from typing import Any

from toolz import curry

from libview.domain.entities.shared import Record, read_field

Predicate = Callable[[Record], bool]


def _number(value: Any) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


# === Field Predicates ===


@curry
def field_equals(field: str, value: Any, record: Record) -> bool:
    """True if ``field`` equals ``value``."""
    return read_field(record, field) == value


@curry
def field_not_equals(field: str, value: Any, record: Record) -> bool:
    """True if ``field`` is anything but ``value`` (missing included)."""
    return read_field(record, field) != value


@curry
def field_in(field: str, values: Collection[Any], record: Record) -> bool:
    """True if ``field`` is one of ``values``.

    Pass a set or frozenset for large choices. Unhashable field values (a
    list of genres, say) never match.
    """
    value = read_field(record, field)
    if not isinstance(value, Hashable):
        return False
    try:
        return value in values
    except TypeError:
        return False


@curry
def field_greater_than(field: str, threshold: float, record: Record) -> bool:
    """True if ``field`` is numeric and strictly above ``threshold``."""
    number = _number(read_field(record, field))
    return number is not None and number > threshold


@curry
def field_at_most(field: str, threshold: float, record: Record) -> bool:
    """True if ``field`` is numeric and at most ``threshold``."""
    number = _number(read_field(record, field))
    return number is not None and number <= threshold


@curry
def field_present(field: str, record: Record) -> bool:
    """True if ``field`` holds a non-empty value."""
    return read_field(record, field) not in (None, "")


# === Library Toggles ===


def is_not_spotify(record: Record) -> bool:
    """Hide items that come from Spotify rather than the local library."""
    return read_field(record, "data_kind") != "spotify"


def is_not_single_album(record: Record) -> bool:
    """Hide albums with two tracks or fewer."""
    return (_number(read_field(record, "track_count")) or 0) > 2


def is_not_singles_artist(record: Record) -> bool:
    """Hide artists (or composers) with on average two tracks per album or fewer."""
    track_count = _number(read_field(record, "track_count")) or 0
    album_count = _number(read_field(record, "album_count")) or 0
    return track_count > album_count * 2


def is_unplayed(record: Record) -> bool:
    """Hide items already played through (podcast episodes, audiobooks)."""
    return (_number(read_field(record, "play_count")) or 0) == 0


# === Combinators ===


def all_of(predicates: Iterable[Predicate]) -> Predicate:
    """Conjunction of predicates; vacuously true when empty."""
    predicates = tuple(predicates)

    def combined(record: Record) -> bool:
        return all(predicate(record) for predicate in predicates)

    return combined


def negate(predicate: Predicate) -> Predicate:
    """Invert a predicate."""

    def negated(record: Record) -> bool:
        return not predicate(record)

    return negated
