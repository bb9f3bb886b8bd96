# src/radio_playlist/scraper/storage.py

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from radio_playlist.domain.models import PlaylistRecord
from radio_playlist.errors import ArchiveWriteError

logger = logging.getLogger(__name__)


def archive_path(base_dir: Path, station: str, day: datetime) -> Path:
    """Return <base_dir>/<station>/<YYYY>/<MM>/<YYYY-MM-DD>.tsv."""
    if day.tzinfo is not None:
        day = day.astimezone()
    return (
        base_dir
        / station
        / f"{day.year:04d}"
        / f"{day.month:02d}"
        / f"{day.date().isoformat()}.tsv"
    )


def archive_playlist(
    record: PlaylistRecord,
    station: str,
    base_dir: Path,
    *,
    dry_run: bool = False,
) -> Path | None:
    """Write the playlist to its archive file unless it already exists.

    Returns:
        The written path, or None if nothing was written.

    Raises:
        ArchiveWriteError: if the file cannot be created or written.
    """
    if record.days_offset == 0:
        logger.debug("Not archiving today's playlist for %s.", station)
        return None
    if not record.songs:
        logger.debug("Not archiving empty playlist for %s.", station)
        return None

    path = archive_path(base_dir, station, record.date)

    if dry_run:
        logger.info("Test mode: would archive %s songs to %s.", len(record.songs), path)
        return None

    content = "".join(line + "\n" for line in record.lines())

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Could not create archive directory {path.parent}: {exc}"
        raise ArchiveWriteError(msg) from exc

    try:
        # "x" fails if the file exists, so an archive is never replaced
        f = path.open("x", encoding="utf-8")
    except FileExistsError:
        logger.warning("Archive %s already exists, skipping.", path)
        return None
    except OSError as exc:
        msg = f"Could not create archive {path}: {exc}"
        raise ArchiveWriteError(msg) from exc

    try:
        with f:
            f.write(content)
    except OSError as exc:
        # a partial file would block every later attempt
        path.unlink(missing_ok=True)
        msg = f"Could not write archive {path}: {exc}"
        raise ArchiveWriteError(msg) from exc

    logger.info("Archived %s songs to %s.", len(record.songs), path)
    return path
