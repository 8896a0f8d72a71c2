"""Tests for list presets and the group-library use case."""

import pytest

from libview.application.list_presets import (
    ALBUMS,
    ARTISTS,
    PRESETS,
    UnknownListOptionError,
    get_preset,
)
from libview.application.use_cases import GroupLibraryCommand, GroupLibraryUseCase
from libview.config.settings import IndexingConfig
from libview.domain.transforms import is_not_single_album, is_not_singles_artist, is_not_spotify


class TestListPresets:
    """Preset lookup and configuration."""

    def test_all_pages_have_presets(self):
        assert set(PRESETS) == {"albums", "artists", "composers", "tracks", "playlists"}

    def test_default_sort_is_first_option(self):
        assert ALBUMS.sort_option().name == "name"
        assert ALBUMS.default_sort is ALBUMS.sort_options[0]

    def test_sort_option_lookup(self):
        option = ALBUMS.sort_option("recently-added")

        assert option.criteria[0].field == "time_added"
        assert option.criteria[0].order == -1

    def test_unknown_preset(self):
        with pytest.raises(UnknownListOptionError, match="Unknown preset 'genres'"):
            get_preset("genres")

    def test_unknown_sort_option_lists_choices(self):
        with pytest.raises(LookupError) as exc_info:
            ARTISTS.sort_option("rating")

        assert exc_info.value.choices == ("name", "recently-added")

    def test_filters_follow_preset_order(self):
        assert ALBUMS.filters({"hide-spotify", "hide-singles"}) == (
            is_not_single_album,
            is_not_spotify,
        )

    def test_hide_singles_differs_per_page(self):
        assert ARTISTS.filters(["hide-singles"]) == (is_not_singles_artist,)

    def test_unknown_filter(self):
        with pytest.raises(UnknownListOptionError, match="hide-podcasts"):
            ALBUMS.filters(["hide-podcasts"])

    def test_playlists_have_unsorted_option(self):
        option = get_preset("playlists").sort_option("unsorted")

        assert option.criteria == ()
        assert option.index is None


class TestGroupLibraryUseCase:
    """Use case wiring presets into the engine."""

    @pytest.fixture
    def use_case(self, clock):
        return GroupLibraryUseCase(IndexingConfig(), clock=clock)

    def test_default_sort_by_name(self, use_case, albums):
        result = use_case.execute(GroupLibraryCommand(preset="albums", items=albums))

        assert result.sort_option.name == "name"
        assert result.grouped_list.index_list == ["⌘", "#", "Å", "B"]

    def test_recently_added_with_hidden_spotify(self, use_case, albums):
        result = use_case.execute(
            GroupLibraryCommand(
                preset="albums",
                items=albums,
                sort="recently-added",
                hide={"hide-spotify"},
            )
        )

        assert result.grouped_list.index_list == ["today", "last-month", "2024"]
        assert result.filtered_out == 1
        assert result.hidden == frozenset({"hide-spotify"})

    def test_recently_released_puts_missing_dates_first(self, use_case, albums):
        result = use_case.execute(
            GroupLibraryCommand(preset="albums", items=albums, sort="recently-released")
        )

        assert result.grouped_list.index_list == ["0000", "2002", "2000", "1985", "1977"]

    def test_release_date_puts_missing_dates_last(self, use_case, albums):
        result = use_case.execute(
            GroupLibraryCommand(preset="albums", items=albums, sort="release-date")
        )

        assert result.grouped_list.index_list == ["1977", "1985", "2000", "2002", "0000"]

    def test_track_ratings(self, use_case, tracks):
        result = use_case.execute(
            GroupLibraryCommand(preset="tracks", items=tracks, sort="rating")
        )

        assert result.grouped_list.index_list == [10, 7, 0]
        assert [t["id"] for t in result.grouped_list.grouped[7]] == [22, 20]

    def test_track_discs(self, use_case, tracks):
        result = use_case.execute(
            GroupLibraryCommand(preset="tracks", items=tracks, sort="disc")
        )

        assert result.grouped_list.index_list == [1, 2]
        assert [t["id"] for t in result.grouped_list.grouped[1]] == [22, 20, 23]

    def test_pagination_from_page(self, use_case, artists):
        command = GroupLibraryCommand.from_page(
            "artists",
            {"items": artists, "total": 300, "offset": 100, "limit": 3},
            hide={"hide-singles"},
        )
        grouped_list = use_case.execute(command).grouped_list

        assert (grouped_list.total, grouped_list.offset, grouped_list.limit) == (300, 100, 3)
        assert grouped_list.index_list == ["A", "Z"]

    def test_configured_fallbacks_are_used(self, clock):
        use_case = GroupLibraryUseCase(
            IndexingConfig(date_fallback_label="never", last_month_days=365), clock=clock
        )
        items = [{"id": 1, "time_added": "2023-07-01"}, {"id": 2, "time_added": None}]

        result = use_case.execute(
            GroupLibraryCommand(preset="artists", items=items, sort="recently-added")
        )

        # Descending order places the unparseable date first
        assert result.grouped_list.index_list == ["never", "last-month"]

    def test_unknown_options_raise(self, use_case, albums):
        with pytest.raises(UnknownListOptionError):
            use_case.execute(GroupLibraryCommand(preset="albums", items=albums, sort="rating"))
