"""Shared utilities and helper functions for domain entities.

Pure utility functions for reading record fields and timestamps.
"""

from collections.abc import Mapping
from datetime import UTC, date, datetime
import re
from typing import Any

from toolz import get_in

# A record is any field-addressable value: usually a JSON object from the
# library API, occasionally an attrs entity.
Record = Any

# Text used in place of empty values when sorting and indexing text
DEFAULT_TEXT_FALLBACK = "_"

# ISO-8601 reduced precision: YYYY or YYYY-MM
_REDUCED_ISO_DATE = re.compile(r"(\d{4})(?:-(\d{2}))?")


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure datetime is timezone-aware with UTC."""
    if dt is None:
        return None
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt


def read_field(record: Record, field: str, default: Any = None) -> Any:
    """Read a (possibly dotted) field from a record.

    Mappings are read by key, anything else by attribute. Missing fields
    return ``default``.
    """
    path = field.split(".")
    if isinstance(record, Mapping):
        return get_in(path, record, default)

    value = record
    for name in path:
        if isinstance(value, Mapping):
            value = value.get(name, default)
        else:
            value = getattr(value, name, default)
        if value is default:
            return default
    return value


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a record value into an aware datetime.

    Accepts datetimes, dates, ISO-8601 strings and epoch seconds. Reduced
    precision dates start at their first day (``"2019"`` is 2019-01-01,
    ``"2024-06"`` is 2024-06-01). Returns None for empty or unparseable
    values.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return ensure_utc(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)

    if isinstance(value, int | float):
        try:
            return datetime.fromtimestamp(value, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None

    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    reduced = _REDUCED_ISO_DATE.fullmatch(text)
    if reduced:
        year, month = reduced.groups()
        try:
            return datetime(int(year), int(month or 1), 1, tzinfo=UTC)
        except ValueError:
            return None

    try:
        return ensure_utc(datetime.fromisoformat(text))
    except ValueError:
        pass

    try:
        return datetime.fromtimestamp(float(text), tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None
