"""Stream eligibility filter.

Artwork lookups hit a rate-limited, authenticated API, so they are only
attempted for streams from providers whose "now playing" text is known to
be clean ``Artist - Title`` metadata.  The check is a pure function of the
stream URL's host.
"""

from __future__ import annotations

from collections.abc import Iterable

import httpx

DEFAULT_HOST_PATTERNS: tuple[str, ...] = ("di.fm", "digitallyimported")


class StreamEligibilityFilter:
    """Host-substring allow-list for stream sources.

    Parameters
    ----------
    host_patterns:
        Substrings matched case-insensitively against the stream host.
        A stream is eligible if its host contains any of them.
    """

    def __init__(self, host_patterns: Iterable[str] = DEFAULT_HOST_PATTERNS) -> None:
        self._patterns: tuple[str, ...] = tuple(
            p.strip().lower() for p in host_patterns if p and p.strip()
        )

    @property
    def host_patterns(self) -> tuple[str, ...]:
        return self._patterns

    def is_eligible(self, stream_source: str | httpx.URL | None) -> bool:
        """Return ``True`` if *stream_source* is served by a supported provider.

        Values that cannot be parsed as a URL, or that have no host, are
        not eligible.
        """
        if not stream_source:
            return False
        try:
            host = httpx.URL(str(stream_source)).host.lower()
        except httpx.InvalidURL:
            return False
        if not host:
            return False
        return any(pattern in host for pattern in self._patterns)
