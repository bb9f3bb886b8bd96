# src/radio_playlist/scraper/dates.py

"""Resolve a year-less day.month fragment to a concrete date."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from radio_playlist.domain.models import DateFragment
from radio_playlist.errors import DateResolutionError

logger = logging.getLogger(__name__)

# Candidates sit at local noon so DST shifts never move them across midnight.
CANDIDATE_HOUR = 12


def resolve_date(fragment: DateFragment, now: datetime | None = None) -> datetime:
    """Return the candidate date closest to `now`.

    Candidates are the fragment's day and month in the previous, current and
    next year, in that order. A later candidate only wins if it is strictly
    closer, so ties go to the earlier year. Candidates that are not valid
    calendar dates (e.g. 29.02 in a non-leap year) are skipped.

    Raises:
        DateResolutionError: if no candidate year gives a valid date.
    """
    if now is None:
        now = datetime.now().astimezone()

    best: datetime | None = None
    best_diff: timedelta | None = None

    for year in (now.year - 1, now.year, now.year + 1):
        try:
            candidate = datetime(
                year,
                fragment.month,
                fragment.day,
                CANDIDATE_HOUR,
                tzinfo=now.tzinfo,
            )
        except ValueError:
            logger.debug(
                "Skipping invalid candidate %02d.%02d.%s.",
                fragment.day,
                fragment.month,
                year,
            )
            continue

        diff = abs(candidate - now)
        if best_diff is None or diff < best_diff:
            best, best_diff = candidate, diff

    if best is None:
        msg = (
            f"No valid date for {fragment.day:02d}.{fragment.month:02d} "
            f"around {now.year}."
        )
        raise DateResolutionError(msg)

    return best
