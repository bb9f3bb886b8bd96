# src/radio_playlist/scraper/builder.py

from __future__ import annotations

from datetime import datetime

from radio_playlist.domain.models import ParsedSchedule, PlaylistRecord
from radio_playlist.errors import MissingScheduleDateError
from radio_playlist.scraper.dates import resolve_date

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def format_date(value: datetime) -> str:
    """Format a date as 'Dow YYYY-MM-DD' in the local timezone."""
    if value.tzinfo is not None:
        value = value.astimezone()
    return f"{WEEKDAY_NAMES[value.weekday()]} {value.date().isoformat()}"


def build_playlist(
    parsed: ParsedSchedule,
    days_offset: int = 0,
    now: datetime | None = None,
) -> PlaylistRecord:
    """Combine parsed songs and the resolved schedule date into a record.

    Raises:
        MissingScheduleDateError: if the page had no schedule date.
        DateResolutionError: if the date cannot be placed in any nearby year.
    """
    if parsed.date is None:
        msg = (
            f"Found {len(parsed.songs)} songs but no schedule date "
            f"(offset={days_offset})."
        )
        raise MissingScheduleDateError(msg)

    resolved = resolve_date(parsed.date, now=now)

    return PlaylistRecord(
        date=resolved,
        formatted_date=format_date(resolved),
        days_offset=days_offset,
        songs=parsed.songs,
    )
