"""Use cases orchestrating the grouped list engine."""

from .group_library import GroupLibraryCommand, GroupLibraryResult, GroupLibraryUseCase

__all__ = [
    "GroupLibraryCommand",
    "GroupLibraryResult",
    "GroupLibraryUseCase",
]
