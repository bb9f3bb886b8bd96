"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from radio_playlist import config


def test_archive_dir_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RADIO_PLAYLIST_ARCHIVE_DIR", str(tmp_path / "arch"))
    assert config.get_archive_dir() == tmp_path / "arch"


def test_archive_dir_defaults_under_project_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("RADIO_PLAYLIST_ARCHIVE_DIR", raising=False)
    monkeypatch.setenv("RADIO_PLAYLIST_PROJECT_ROOT", str(tmp_path))
    assert config.get_archive_dir() == tmp_path.resolve() / "data" / "playlists"


def test_base_url_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RADIO_PLAYLIST_BASE_URL", raising=False)
    assert config.get_base_url() == config.DEFAULT_BASE_URL


def test_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RADIO_PLAYLIST_TIMEOUT", raising=False)
    assert config.get_timeout() == config.DEFAULT_TIMEOUT

    monkeypatch.setenv("RADIO_PLAYLIST_TIMEOUT", "3.5")
    assert config.get_timeout() == 3.5

    monkeypatch.setenv("RADIO_PLAYLIST_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        config.get_timeout()
