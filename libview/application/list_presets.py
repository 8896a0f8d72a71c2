"""List presets for the library views.

Each library page (albums, artists, composers, tracks, playlists) offers a
fixed set of sort options and filter toggles. A preset declares them as data
(criteria, index spec and predicates) for the single ``GroupedList`` engine,
so no page carries its own filter/sort/group code.
"""

from collections.abc import Iterable

from attrs import define, field

from libview.domain.entities.criteria import Criterion, IndexSpec, IndexType, SortType
from libview.domain.transforms.predicates import (
    Predicate,
    is_not_single_album,
    is_not_singles_artist,
    is_not_spotify,
    is_unplayed,
)


class UnknownListOptionError(LookupError):
    """Raised when a preset, sort option or filter toggle does not exist."""

    def __init__(self, kind: str, name: str, choices: Iterable[str]) -> None:
        self.kind = kind
        self.name = name
        self.choices = tuple(choices)
        super().__init__(
            f"Unknown {kind} '{name}'. Choose one of: {', '.join(self.choices)}"
        )


@define(frozen=True, slots=True)
class SortOption:
    """One entry of a page's sort menu."""

    name: str
    label: str
    criteria: tuple[Criterion, ...] = field(factory=tuple, converter=tuple)
    index: IndexSpec | None = None


@define(frozen=True, slots=True)
class FilterToggle:
    """A "hide ..." switch shown above a list; the predicate keeps visible records."""

    name: str
    label: str
    predicate: Predicate


@define(frozen=True, slots=True)
class ListPreset:
    """Sort options and filter toggles of one library page."""

    name: str
    sort_options: tuple[SortOption, ...] = field(converter=tuple)
    filter_toggles: tuple[FilterToggle, ...] = field(factory=tuple, converter=tuple)

    @property
    def default_sort(self) -> SortOption:
        return self.sort_options[0]

    def sort_option(self, name: str | None = None) -> SortOption:
        """Look up a sort option by name; None selects the default."""
        if name is None:
            return self.default_sort
        for option in self.sort_options:
            if option.name == name:
                return option
        raise UnknownListOptionError(
            "sort option", name, (option.name for option in self.sort_options)
        )

    def filters(self, enabled: Iterable[str] = ()) -> tuple[Predicate, ...]:
        """Predicates for the enabled toggles, in preset order."""
        enabled = set(enabled)
        known = {toggle.name for toggle in self.filter_toggles}
        unknown = sorted(enabled - known)
        if unknown:
            raise UnknownListOptionError("filter", unknown[0], sorted(known))
        return tuple(
            toggle.predicate
            for toggle in self.filter_toggles
            if toggle.name in enabled
        )


# === Shared Options ===

HIDE_SPOTIFY = FilterToggle(
    name="hide-spotify",
    label="Hide items from Spotify",
    predicate=is_not_spotify,
)

HIDE_SINGLE_ALBUMS = FilterToggle(
    name="hide-singles",
    label="Hide singles",
    predicate=is_not_single_album,
)

HIDE_SINGLES_ARTISTS = FilterToggle(
    name="hide-singles",
    label="Hide artists with only singles",
    predicate=is_not_singles_artist,
)

HIDE_READ_ITEMS = FilterToggle(
    name="hide-read-items",
    label="Hide played items",
    predicate=is_unplayed,
)


def _by_name(field_name: str) -> SortOption:
    return SortOption(
        name="name",
        label="Name",
        criteria=(Criterion.ascending(field_name, SortType.TEXT),),
        index=IndexSpec(field_name, IndexType.TEXT),
    )


def _recently_added(field_name: str = "time_added") -> SortOption:
    return SortOption(
        name="recently-added",
        label="Recently added",
        criteria=(Criterion.descending(field_name, SortType.DATE),),
        index=IndexSpec(field_name, IndexType.DATE),
    )


# === Presets ===

ALBUMS = ListPreset(
    name="albums",
    sort_options=(
        _by_name("name_sort"),
        _recently_added(),
        # Descending order also reverses the date fallback: undated albums lead
        SortOption(
            name="recently-released",
            label="Recently released",
            criteria=(Criterion.descending("date_released", SortType.DATE),),
            index=IndexSpec("date_released", IndexType.YEAR),
        ),
        SortOption(
            name="release-date",
            label="Release date",
            criteria=(Criterion.ascending("date_released", SortType.DATE),),
            index=IndexSpec("date_released", IndexType.YEAR),
        ),
    ),
    filter_toggles=(HIDE_SINGLE_ALBUMS, HIDE_SPOTIFY),
)

ARTISTS = ListPreset(
    name="artists",
    sort_options=(_by_name("name_sort"), _recently_added()),
    filter_toggles=(HIDE_SINGLES_ARTISTS, HIDE_SPOTIFY),
)

COMPOSERS = ListPreset(
    name="composers",
    sort_options=(_by_name("name_sort"), _recently_added()),
    filter_toggles=(HIDE_SINGLES_ARTISTS, HIDE_SPOTIFY),
)

TRACKS = ListPreset(
    name="tracks",
    sort_options=(
        _by_name("title_sort"),
        SortOption(
            name="rating",
            label="Rating",
            criteria=(
                Criterion.descending("rating", SortType.NUMBER),
                Criterion.ascending("title_sort", SortType.TEXT),
            ),
            index=IndexSpec("rating", IndexType.DIGITS),
        ),
        SortOption(
            name="disc",
            label="Disc",
            criteria=(
                Criterion.ascending("disc_number", SortType.NUMBER),
                Criterion.ascending("track_number", SortType.NUMBER),
            ),
            index=IndexSpec("disc_number", IndexType.NUMBER),
        ),
        SortOption(
            name="release-date",
            label="Release date",
            criteria=(
                Criterion.ascending("date_released", SortType.DATE),
                Criterion.ascending("title_sort", SortType.TEXT),
            ),
            index=IndexSpec("date_released", IndexType.YEAR),
        ),
        _recently_added(),
    ),
    filter_toggles=(HIDE_SPOTIFY, HIDE_READ_ITEMS),
)

PLAYLISTS = ListPreset(
    name="playlists",
    sort_options=(
        _by_name("name"),
        SortOption(name="unsorted", label="Server order"),
    ),
)

PRESETS: dict[str, ListPreset] = {
    preset.name: preset for preset in (ALBUMS, ARTISTS, COMPOSERS, TRACKS, PLAYLISTS)
}


def get_preset(name: str) -> ListPreset:
    """Look up a preset by name."""
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownListOptionError("preset", name, PRESETS) from None
