"""Abstract base class for artwork lookup providers.

Defines the contract the resolver uses to turn an ``(artist, title)`` pair
into a cover-image URL.  The resolver only ever sees this interface, so
tests and alternative backends can be swapped in without touching the
coalescing logic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IArtworkProvider(ABC):
    """Contract for services that look up cover artwork for a track."""

    @abstractmethod
    async def lookup_artwork(self, artist: str, title: str) -> str | None:
        """Look up a cover-image URL for *artist* / *title*.

        Parameters
        ----------
        artist:
            The performing artist, already trimmed.
        title:
            The track title, already trimmed.

        Returns
        -------
        str or None
            An absolute image URL, or ``None`` when no artwork is available
            for any reason (no credentials, transport failure, malformed
            response, no image in the result).  Implementations must not
            raise for these expected outcomes.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this provider, e.g. ``"discogs"``."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if the provider is configured to make lookups.

        Implementations should check for required credentials without
        performing a query.
        """
