# src/radio_playlist/scraper/cli.py

from __future__ import annotations

import argparse
import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from radio_playlist.config import get_archive_dir, get_base_url, get_timeout
from radio_playlist.errors import ArchiveWriteError, PlaylistError
from radio_playlist.scraper.builder import build_playlist
from radio_playlist.scraper.client import PlaylistClient, is_valid_offset
from radio_playlist.scraper.parser import parse_schedule
from radio_playlist.scraper.storage import archive_playlist

logger = logging.getLogger(__name__)

_NUMERIC_RE = re.compile(r"^-?\d+$")


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Read-only settings shared by all offsets of one run."""

    station: str
    archive: bool = False
    test: bool = False
    quiet: bool = False
    archive_dir: Path = Path("data/playlists")


def main(argv: list[str] | None = None) -> int:
    """Entry point for the radio-playlist CLI."""
    parser = _build_arg_parser()
    args = parser.parse_intermixed_args(argv)

    _configure_logging(verbosity=args.verbose)

    station, offsets = _split_tokens(parser, args.tokens)
    if args.days is not None:
        offsets.append(args.days)
    if not offsets:
        offsets = [0]

    options = RunOptions(
        station=station,
        archive=args.archive,
        test=args.test,
        quiet=args.quiet,
        archive_dir=Path(args.archive_dir) if args.archive_dir else get_archive_dir(),
    )
    timeout = args.timeout if args.timeout is not None else get_timeout()

    try:
        with PlaylistClient(
            base_url=args.base_url or get_base_url(),
            timeout=timeout,
        ) as client:
            return run(client, options, offsets)
    except ArchiveWriteError as exc:
        logger.error("Aborting: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user. Exiting.")
        return 1


def run(client: PlaylistClient, options: RunOptions, offsets: Iterable[int]) -> int:
    """Process each requested day offset in turn.

    Returns 0 if every valid offset was processed, 1 if any playlist had
    unusable date data. ArchiveWriteError propagates and ends the run.
    """
    exit_code = 0

    for days in offsets:
        if not is_valid_offset(days):
            logger.warning("Ignoring invalid day offset %s (allowed: 0-6).", days)
            continue

        try:
            _process_offset(client, options, days)
        except ArchiveWriteError:
            raise
        except PlaylistError as exc:
            logger.error("Offset %s for %s: %s", days, options.station, exc)
            exit_code = 1

    return exit_code


def _process_offset(client: PlaylistClient, options: RunOptions, days: int) -> None:
    html = client.fetch_html(options.station, days)
    if html is None:
        return

    parsed = parse_schedule(html)
    if not parsed.songs:
        logger.info("No songs found for %s (offset=%s).", options.station, days)
        return

    record = build_playlist(parsed, days_offset=days)

    if not options.quiet:
        for line in record.lines():
            print(line)

    if options.archive:
        archive_playlist(
            record,
            options.station,
            options.archive_dir,
            dry_run=options.test,
        )


def _split_tokens(
    parser: argparse.ArgumentParser,
    tokens: list[str],
) -> tuple[str, list[int]]:
    """Separate the station id from numeric day offsets."""
    stations: list[str] = []
    offsets: list[int] = []

    for token in tokens:
        if _NUMERIC_RE.match(token):
            offsets.append(int(token))
        else:
            stations.append(token)

    if not stations:
        parser.error("a station id is required")
    if len(stations) > 1:
        parser.error(f"expected one station id, got {len(stations)}: {' '.join(stations)}")

    station = stations[0]
    if "/" in station or "\\" in station or ".." in station:
        parser.error(f"invalid station id: {station!r}")

    return station, offsets


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radio-playlist",
        description=(
            "Print a radio station's playlist for today or one of the last six "
            "days, and optionally archive it as TSV."
        ),
        epilog="Example: radio-playlist swr3 1 2 --archive",
    )

    parser.add_argument(
        "tokens",
        nargs="*",
        metavar="STATION|DAYS",
        help="Station id (e.g. 'swr3') and any number of day offsets 0-6.",
    )
    parser.add_argument(
        "-a",
        "--archive",
        action="store_true",
        help="Archive past days (offset > 0) to TSV files.",
    )
    parser.add_argument(
        "-t",
        "--test",
        action="store_true",
        help="Test mode: report archive paths without writing them.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v warnings/info, -vv debug).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print songs to stdout.",
    )
    parser.add_argument(
        "-d",
        "--days",
        type=int,
        default=None,
        help="Day offset to fetch, as an alternative to positional offsets.",
    )
    parser.add_argument(
        "--archive-dir",
        default=None,
        help="Archive base directory (default: $RADIO_PLAYLIST_ARCHIVE_DIR or data/playlists).",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Playlist site base URL (default: $RADIO_PLAYLIST_BASE_URL).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds (default: $RADIO_PLAYLIST_TIMEOUT or 10).",
    )

    return parser


def _configure_logging(*, verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("radio_playlist").setLevel(level)


if __name__ == "__main__":
    # python -m radio_playlist.scraper.cli -v swr3 1 2 --archive
    sys.exit(main())
