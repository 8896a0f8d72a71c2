"""Sort criteria and index specifications.

Immutable value objects the caller hands to the grouped list engine to
declare how records are ordered and sectioned.
"""

from enum import StrEnum

import attrs
from attrs import define, validators


class SortType(StrEnum):
    """Semantic type used to compare two field values."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"


class IndexType(StrEnum):
    """Semantic type used to derive a section key from a field value."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    DIGITS = "digits"
    YEAR = "year"


def _check_order(instance: "Criterion", attribute: object, value: int) -> None:
    if value not in (1, -1):
        raise ValueError(f"Criterion order must be 1 or -1, got {value!r}")


@define(frozen=True, slots=True)
class Criterion:
    """One sort rule: compare records on ``field`` as ``type``.

    An ``order`` of -1 inverts the ascending result. Criteria are applied
    in sequence, each one only breaking ties left by the previous ones.
    """

    field: str = attrs.field(validator=validators.instance_of(str))
    type: SortType = attrs.field(default=SortType.TEXT, converter=SortType)
    order: int = attrs.field(default=1, validator=_check_order)

    @classmethod
    def ascending(cls, field_name: str, sort_type: SortType | str = SortType.TEXT) -> "Criterion":
        """Create an ascending criterion."""
        return cls(field=field_name, type=sort_type, order=1)

    @classmethod
    def descending(cls, field_name: str, sort_type: SortType | str = SortType.TEXT) -> "Criterion":
        """Create a descending criterion."""
        return cls(field=field_name, type=sort_type, order=-1)


@define(frozen=True, slots=True)
class IndexSpec:
    """Declares how a record's section key is derived."""

    field: str = attrs.field(validator=validators.instance_of(str))
    type: IndexType = attrs.field(default=IndexType.TEXT, converter=IndexType)
