"""Shared test fixtures - library records shaped like the server's JSON API.

Fast creation, no external dependencies, function-scoped for isolation.
"""

from datetime import UTC, datetime

import pytest

# Fixed "now" for recency indexes
NOW = datetime(2024, 6, 10, tzinfo=UTC)


@pytest.fixture
def now():
    """Fixed current time used by recency tests."""
    return NOW


@pytest.fixture
def clock():
    """Clock returning the fixed current time."""
    return lambda: NOW


@pytest.fixture
def albums():
    """Albums with a mix of names, dates, sources and track counts."""
    return [
        {
            "id": 1,
            "name": "Bach",
            "name_sort": "Bach",
            "time_added": "2024-01-01T00:00:00Z",
            "date_released": "1985-03-01",
            "track_count": 12,
            "data_kind": "file",
            "media_kind": "music",
        },
        {
            "id": 2,
            "name": "bee gees",
            "name_sort": "bee gees",
            "time_added": "2023-06-01T00:00:00Z",
            "date_released": "1977-11-15",
            "track_count": 2,
            "data_kind": "spotify",
            "media_kind": "music",
        },
        {
            "id": 3,
            "name": "3 Doors Down",
            "name_sort": "3 Doors Down",
            "time_added": "2024-06-01T00:00:00Z",
            "date_released": "2000-02-08",
            "track_count": 11,
            "data_kind": "file",
            "media_kind": "music",
        },
        {
            "id": 4,
            "name": "Åsa Jinder",
            "name_sort": "Åsa Jinder",
            "time_added": "2024-06-09T12:00:00Z",
            "date_released": "",
            "track_count": 1,
            "data_kind": "file",
            "media_kind": "audiobook",
        },
        {
            "id": 5,
            "name": "...And You Will Know Us",
            "name_sort": "...And You Will Know Us",
            "time_added": "2024-05-20T00:00:00Z",
            "date_released": "2002-01-22",
            "track_count": 13,
            "data_kind": "file",
            "media_kind": "music",
        },
    ]


@pytest.fixture
def artists():
    """Artists with album and track counts."""
    return [
        {"id": 10, "name": "Zappa", "name_sort": "Zappa", "album_count": 3, "track_count": 40, "data_kind": "file", "time_added": "2022-01-01"},
        {"id": 11, "name": "One Hit", "name_sort": "One Hit", "album_count": 2, "track_count": 3, "data_kind": "file", "time_added": "2024-06-08"},
        {"id": 12, "name": "Abba", "name_sort": "Abba", "album_count": 1, "track_count": 10, "data_kind": "spotify", "time_added": "2023-02-01"},
    ]


@pytest.fixture
def tracks():
    """Tracks with ratings, disc and track numbers."""
    return [
        {"id": 20, "title": "Intro", "title_sort": "Intro", "rating": 73, "disc_number": 1, "track_number": 2, "play_count": 0},
        {"id": 21, "title": "Outro", "title_sort": "Outro", "rating": 100, "disc_number": 2, "track_number": 1, "play_count": 4},
        {"id": 22, "title": "Bridge", "title_sort": "Bridge", "rating": 78, "disc_number": 1, "track_number": 1, "play_count": 1},
        {"id": 23, "title": "Unrated", "title_sort": "Unrated", "disc_number": 1, "track_number": 3},
    ]
