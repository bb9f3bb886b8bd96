from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from radio_playlist.domain.models import DateFragment, ParsedSchedule, SongEntry

logger = logging.getLogger(__name__)

SCHEDULE_TABLE_CLASS = "tablelist-schedule"
SCHEDULE_LIST_CLASS = "playlist__schedule"
ACTIVE_CLASS = "active"

_TIME_RE = re.compile(r"^\d+:\d+(:\d+)?$")
_DAY_MONTH_RE = re.compile(r"\b(\d{1,2})\.(\d{1,2})\b")


def parse_schedule(html: str) -> ParsedSchedule:
    """Parse a station playlist page into songs and the schedule date.

    Songs come out in document order. The date is None if no active
    schedule tab carries a 'D.M' fragment.
    """
    soup = BeautifulSoup(html, "lxml")

    songs = tuple(_parse_songs(soup))
    fragment = _parse_date_fragment(soup)

    logger.debug(
        "Parsed %s songs (date=%s).",
        len(songs),
        f"{fragment.day}.{fragment.month}" if fragment else None,
    )
    return ParsedSchedule(songs=songs, date=fragment)


# ---------------------------------------------------------------------------
# Songs
# ---------------------------------------------------------------------------


def _parse_songs(soup: BeautifulSoup) -> list[SongEntry]:
    songs: list[SongEntry] = []

    for table in soup.find_all("table"):
        if not _has_class(table, SCHEDULE_TABLE_CLASS):
            continue
        for row in table.find_all("tr"):
            song = _parse_row(row)
            if song is not None:
                songs.append(song)

    return songs


def _parse_row(row: Tag) -> SongEntry | None:
    """Turn one table row into a SongEntry, or None if it is not a song."""
    cells = [
        " ".join(cell.get_text(" ").split())
        for cell in row.find_all(["td", "th"], recursive=False)
    ]

    if len(cells) < 2 or not cells[0] or not cells[1]:
        return None

    time_text, title = cells[0], cells[1]

    # "live" marks the currently playing slot
    if time_text.lower() == "live":
        return None

    if not _TIME_RE.match(time_text):
        logger.debug("Skipping row with non-time first cell %r.", time_text)
        return None

    return SongEntry(time=time_text, title=title, raw_cells=tuple(cells))


# ---------------------------------------------------------------------------
# Schedule date
# ---------------------------------------------------------------------------


def _parse_date_fragment(soup: BeautifulSoup) -> DateFragment | None:
    """Find the 'D.M' fragment in the active tab of the schedule list."""
    for schedule in soup.find_all(["ul", "ol"]):
        if not _has_class(schedule, SCHEDULE_LIST_CLASS):
            continue

        active = next(
            (li for li in schedule.find_all("li") if _has_class(li, ACTIVE_CLASS)),
            None,
        )
        if active is None:
            continue

        fragment = extract_day_month(active.get_text().strip())
        if fragment is not None:
            return fragment

    return None


def extract_day_month(text: str) -> DateFragment | None:
    """Extract the first plausible day.month pair from text like 'Mon 24.03'."""
    for m in _DAY_MONTH_RE.finditer(text):
        day, month = int(m.group(1)), int(m.group(2))
        if 1 <= day <= 31 and 1 <= month <= 12:
            return DateFragment(day=day, month=month)
    return None


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------


def _has_class(tag: Tag, token: str) -> bool:
    """Return True if `token` is one of the tag's whitespace-separated classes."""
    cls = tag.get("class")
    # cls can be a string ("a b") or a list (["a", "b"])
    if cls is None:
        return False
    if isinstance(cls, str):
        classes = cls.split()
    else:
        classes = [str(c) for c in cls]
    return token in classes
