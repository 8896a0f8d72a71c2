"""Tests for filter predicates and pipeline transforms.

These tests verify that the transforms are pure and composable.
"""

import pytest

from libview.domain.entities import Criterion, SortType
from libview.domain.indexing import by_text
from libview.domain.transforms import (
    all_of,
    create_pipeline,
    field_at_most,
    field_equals,
    field_greater_than,
    field_in,
    field_not_equals,
    field_present,
    filter_records,
    group_records,
    is_not_single_album,
    is_not_singles_artist,
    is_not_spotify,
    is_unplayed,
    negate,
    sort_records,
)


class TestPredicates:
    """Curried field predicates."""

    def test_curried_and_immediate_forms_agree(self, albums):
        is_music = field_equals("media_kind", "music")

        assert [is_music(a) for a in albums] == [
            field_equals("media_kind", "music", a) for a in albums
        ]

    def test_field_not_equals_includes_missing(self):
        assert field_not_equals("data_kind", "spotify", {})

    def test_field_in(self):
        assert field_in("media_kind", ["music", "podcast"], {"media_kind": "podcast"})
        assert not field_in("media_kind", ["music"], {"media_kind": "audiobook"})

    def test_field_in_unhashable_values_never_match(self):
        assert not field_in("genre", {"rock"}, {"genre": ["rock"]})
        assert not field_in("genre", frozenset({"rock"}), {"genre": ("rock", ["live"])})
        assert field_in("genre", frozenset({"rock"}), {"genre": "rock"})

    @pytest.mark.parametrize(
        ("record", "expected"),
        [({"track_count": 3}, True), ({"track_count": 2}, False), ({"track_count": "5"}, True), ({}, False)],
    )
    def test_field_greater_than(self, record, expected):
        assert field_greater_than("track_count", 2, record) is expected

    def test_field_at_most(self):
        assert field_at_most("track_count", 2, {"track_count": 2})
        assert not field_at_most("track_count", 2, {"track_count": None})

    def test_field_present(self):
        assert field_present("name", {"name": "Abba"})
        assert not field_present("name", {"name": ""})

    def test_library_toggles(self, albums, artists, tracks):
        assert [a["id"] for a in albums if is_not_spotify(a)] == [1, 3, 4, 5]
        assert [a["id"] for a in albums if is_not_single_album(a)] == [1, 3, 5]
        assert [a["id"] for a in artists if is_not_singles_artist(a)] == [10, 12]
        assert [t["id"] for t in tracks if is_unplayed(t)] == [20, 23]

    def test_all_of_is_vacuously_true(self):
        assert all_of([])({})

    def test_all_of_and_negate(self, albums):
        visible = all_of([is_not_spotify, is_not_single_album])

        assert [a["id"] for a in albums if visible(a)] == [1, 3, 5]
        assert [a["id"] for a in albums if negate(visible)(a)] == [2, 4]


class TestPipeline:
    """Filter, sort and group steps."""

    def test_filter_records_keeps_order(self, albums):
        result = filter_records([is_not_spotify], albums)

        assert [a["id"] for a in result] == [1, 3, 4, 5]
        assert isinstance(result, tuple)

    def test_sort_records_without_criteria_is_identity(self, albums):
        assert sort_records([], albums) == tuple(albums)

    def test_sort_records_does_not_mutate_input(self, albums):
        original = list(albums)
        sort_records([Criterion.ascending("name_sort")], albums)

        assert albums == original

    def test_group_records_first_encounter_order(self, albums):
        groups = group_records(by_text("name_sort"), albums)

        assert list(groups) == ["B", "#", "Å", "⌘"]
        assert [a["id"] for a in groups["B"]] == [1, 2]

    def test_create_pipeline(self, albums):
        pipeline = create_pipeline(
            filter_records([is_not_spotify]),
            sort_records([Criterion.descending("track_count", SortType.NUMBER)]),
            group_records(by_text("name_sort")),
        )

        groups = pipeline(albums)

        assert list(groups) == ["⌘", "B", "#", "Å"]
        assert [a["id"] for a in groups["⌘"]] == [5]
