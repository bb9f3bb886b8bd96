# radio_playlist/domain/models.py

"""Core domain models for broadcast playlists."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class SongEntry:
    """A single played song from the schedule table."""

    time: str  # e.g. "08:15" or "08:15:30"
    title: str
    raw_cells: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DateFragment:
    """Day and month taken from the active schedule tab. No year."""

    day: int
    month: int


@dataclass(frozen=True, slots=True)
class ParsedSchedule:
    """Raw parser output for one playlist page."""

    songs: tuple[SongEntry, ...] = ()
    date: DateFragment | None = None


@dataclass(frozen=True, slots=True)
class PlaylistRecord:
    """A playlist with its resolved broadcast date."""

    date: datetime
    formatted_date: str  # e.g. "Sun 2024-03-24"
    days_offset: int = 0
    songs: tuple[SongEntry, ...] = field(default_factory=tuple)

    def lines(self) -> list[str]:
        """Return one '<date> <time>\\t<title>' line per song."""
        return [
            f"{self.formatted_date} {song.time}\t{song.title}" for song in self.songs
        ]
