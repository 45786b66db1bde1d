"""radioArt domain models -- re-exports all public model classes."""

from radioart.models.artwork import (
    DiscogsSearchResponse,
    DiscogsSearchResult,
    TrackQuery,
    Waiter,
)

__all__ = [
    "DiscogsSearchResponse",
    "DiscogsSearchResult",
    "TrackQuery",
    "Waiter",
]
