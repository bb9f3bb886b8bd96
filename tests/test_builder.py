"""Tests for building playlist records."""

from __future__ import annotations

from datetime import datetime

import pytest

from radio_playlist.domain.models import DateFragment, ParsedSchedule, SongEntry
from radio_playlist.errors import DateResolutionError, MissingScheduleDateError
from radio_playlist.scraper.builder import build_playlist, format_date
from radio_playlist.scraper.parser import parse_schedule


def test_format_date() -> None:
    assert format_date(datetime(2024, 3, 24, 12)) == "Sun 2024-03-24"
    assert format_date(datetime(2024, 3, 25, 12)) == "Mon 2024-03-25"


def test_build_playlist_from_page(playlist_html: str) -> None:
    parsed = parse_schedule(playlist_html)
    record = build_playlist(parsed, days_offset=1, now=datetime(2024, 3, 25, 10))

    assert record.date == datetime(2024, 3, 24, 12)
    assert record.formatted_date == "Sun 2024-03-24"
    assert record.days_offset == 1
    assert record.lines()[0] == "Sun 2024-03-24 08:15\tArtist — Title"
    assert record.lines()[1] == "Sun 2024-03-24 08:11:30\tSecond Artist - Second Song"


def test_build_playlist_without_date_fails() -> None:
    parsed = ParsedSchedule(songs=(SongEntry("08:15", "Song"),), date=None)
    with pytest.raises(MissingScheduleDateError):
        build_playlist(parsed, days_offset=2)


def test_build_playlist_propagates_resolution_error() -> None:
    parsed = ParsedSchedule(songs=(SongEntry("08:15", "Song"),), date=DateFragment(31, 4))
    with pytest.raises(DateResolutionError):
        build_playlist(parsed, days_offset=2, now=datetime(2024, 5, 1))


def test_build_playlist_keeps_song_order() -> None:
    songs = (SongEntry("10:00", "B"), SongEntry("09:00", "A"))
    record = build_playlist(
        ParsedSchedule(songs=songs, date=DateFragment(1, 6)),
        days_offset=3,
        now=datetime(2024, 6, 4, 8),
    )
    assert record.songs == songs
    assert record.formatted_date == "Sat 2024-06-01"
