"""Shared fixtures for playlist tests."""

from __future__ import annotations

import pytest

PLAYLIST_HTML = """
<html>
<body>
  <ul class="playlist__schedule">
    <li><a href="/de/swr3/playlist/2">Fr 22.03</a></li>
    <li><a href="/de/swr3/playlist/1">Sa 23.03</a></li>
    <li class="active"><a href="/de/swr3/playlist/">Mon 24.03</a></li>
  </ul>
  <table class="tablelist-schedule">
    <tr><td class="tablelist-schedule__time">Live</td><td>Now Playing - Song</td></tr>
    <tr>
      <td class="tablelist-schedule__time"><span class="time--schedule"> 08:15 </span></td>
      <td class="track_history_item"><a href="/track/1">Artist — Title</a></td>
    </tr>
    <tr><td>08:11:30</td><td>Second Artist - Second Song</td><td>extra</td></tr>
    <tr><td>News</td><td>Headlines</td></tr>
    <tr><td>08:05</td><td>   </td></tr>
    <tr><td>08:00</td></tr>
  </table>
</body>
</html>
"""


@pytest.fixture
def playlist_html() -> str:
    return PLAYLIST_HTML
