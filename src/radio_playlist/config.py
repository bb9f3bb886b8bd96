# radio_playlist/config.py

"""Shared configuration and environment setup."""

from __future__ import annotations

from os import getenv
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=True)

DEFAULT_BASE_URL = "https://onlineradiobox.com/de"
DEFAULT_TIMEOUT = 10.0


def get_project_root() -> Path:
    """Return the project root directory.

    Prefers RADIO_PLAYLIST_PROJECT_ROOT env var. Falls back to current working
    directory.
    """
    if root := getenv("RADIO_PLAYLIST_PROJECT_ROOT"):
        return Path(root).resolve()
    return Path.cwd()


def get_archive_dir() -> Path:
    """Return the base directory for archived playlists."""
    if archive_dir := getenv("RADIO_PLAYLIST_ARCHIVE_DIR"):
        return Path(archive_dir).expanduser()
    return get_project_root() / "data" / "playlists"


def get_base_url() -> str:
    return getenv("RADIO_PLAYLIST_BASE_URL") or DEFAULT_BASE_URL


def get_timeout() -> float:
    """Return the HTTP timeout in seconds (RADIO_PLAYLIST_TIMEOUT)."""
    raw = getenv("RADIO_PLAYLIST_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        msg = f"RADIO_PLAYLIST_TIMEOUT must be a number, got {raw!r}."
        raise ValueError(msg) from None
    if value <= 0:
        msg = "RADIO_PLAYLIST_TIMEOUT must be positive."
        raise ValueError(msg)
    return value
