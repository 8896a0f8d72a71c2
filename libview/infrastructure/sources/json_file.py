"""Load library pages saved from the server's JSON API.

The library endpoints answer with ``{"items": [...], "total": n,
"offset": n, "limit": n}``. Some endpoints nest the page under the entity
name (``{"tracks": {"items": [...]}}``) and exports are sometimes a bare
list; all three shapes are accepted.
"""

from collections.abc import Mapping
import json
from pathlib import Path
from typing import Any

from attrs import define, field

from libview.config import get_logger

logger = get_logger(__name__)

PAGE_KEYS = ("albums", "artists", "composers", "tracks", "playlists", "items")


class RecordSourceError(Exception):
    """Raised when a page of records cannot be read."""


@define(frozen=True, slots=True)
class RecordPage:
    """One page of records with its pagination counters."""

    items: tuple[Any, ...] = field(factory=tuple, converter=tuple)
    total: int = 0
    offset: int = 0
    limit: int = -1

    def as_dict(self) -> dict[str, Any]:
        return {
            "items": list(self.items),
            "total": self.total,
            "offset": self.offset,
            "limit": self.limit,
        }


def page_from_payload(payload: Any) -> RecordPage:
    """Normalize an API payload into a ``RecordPage``.

    Raises:
        RecordSourceError: If the payload holds no list of records
    """
    if isinstance(payload, list):
        return RecordPage(items=payload, total=len(payload))

    if not isinstance(payload, Mapping):
        raise RecordSourceError(
            f"Expected a JSON object or list, got {type(payload).__name__}"
        )

    if "items" not in payload:
        for key in PAGE_KEYS:
            nested = payload.get(key)
            if isinstance(nested, Mapping | list):
                return page_from_payload(nested)
        raise RecordSourceError("JSON object has no 'items' list")

    items = payload["items"]
    if not isinstance(items, list):
        raise RecordSourceError("'items' must be a list")

    return RecordPage(
        items=items,
        total=int(payload.get("total", len(items))),
        offset=int(payload.get("offset", 0)),
        limit=int(payload.get("limit", -1)),
    )


def load_page(path: Path | str) -> RecordPage:
    """Read a JSON page from disk.

    Raises:
        RecordSourceError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RecordSourceError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RecordSourceError(f"Invalid JSON in {path}: {e}") from e

    page = page_from_payload(payload)
    logger.debug("Loaded {} records from {}", len(page.items), path)
    return page
