# src/radio_playlist/scraper/client.py

from __future__ import annotations

import logging

import httpx

from radio_playlist.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


MAX_DAYS_OFFSET = 6


def is_valid_offset(days: int) -> bool:
    """Return True if `days` is a supported playlist offset (0 = today)."""
    return 0 <= days <= MAX_DAYS_OFFSET


class PlaylistClient:
    """HTTP client for fetching station playlist pages.

    One GET per page, no retries. The underlying ``httpx.Client`` is created
    eagerly, or can be passed in (e.g. with a mock transport).
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        if timeout <= 0:
            msg = "timeout must be positive."
            raise ValueError(msg)

        self._base_url = base_url.rstrip("/")

        if client is None:
            headers = {
                "User-Agent": user_agent
                or "radio-playlist/0.1 (+https://example.com)",
                "Accept": "text/html,application/xhtml+xml",
            }
            client = httpx.Client(
                headers=headers,
                timeout=timeout,
                follow_redirects=True,
            )
        self._client = client

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "PlaylistClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.close()

    def build_url(self, station: str, days: int = 0) -> str:
        """Build the playlist URL for a station and day offset."""
        if not is_valid_offset(days):
            msg = f"days must be between 0 and {MAX_DAYS_OFFSET}, got {days}."
            raise ValueError(msg)
        url = f"{self._base_url}/{station}/playlist/"
        if days:
            url += str(days)
        return url

    def fetch_html(self, station: str, days: int = 0) -> str | None:
        """Fetch the raw playlist HTML for a station.

        Returns:
            The HTML content as a string, or None on a non-success status or
            a transport error.
        """
        url = self.build_url(station, days)

        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "HTTP error fetching %s (status=%s).",
                url,
                exc.response.status_code,
            )
            return None
        except httpx.RequestError as exc:
            logger.warning("Request error fetching %s: %s", url, exc)
            return None

        logger.debug("Fetched %s (status=%s).", url, response.status_code)
        return response.text
