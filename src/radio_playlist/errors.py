# radio_playlist/errors.py

"""Exceptions raised by the playlist pipeline."""

from __future__ import annotations


class PlaylistError(Exception):
    """Base class for all radio-playlist errors."""


class MissingScheduleDateError(PlaylistError):
    """Songs were found but the page carried no schedule date."""


class DateResolutionError(PlaylistError):
    """No candidate year yields a valid calendar date."""


class ArchiveWriteError(PlaylistError):
    """Writing an archive file failed."""
