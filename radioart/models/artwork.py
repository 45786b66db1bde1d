"""Domain models for artwork resolution.

- ``TrackQuery`` -- the parsed (artist, title) pair plus its canonical key.
- ``Waiter`` -- an opaque caller reference with a liveness predicate.
- ``DiscogsSearchResult`` / ``DiscogsSearchResponse`` -- the subset of the
  Discogs ``/database/search`` payload that artwork lookup reads.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from radioart.utils.text_normalizer import canonical_key


def _always_alive() -> bool:
    return True


class TrackQuery(BaseModel):
    """A parsed now-playing track ready for lookup."""

    model_config = ConfigDict(frozen=True)

    artist: str
    title: str

    @property
    def key(self) -> str:
        """Canonical lookup key shared by every spelling of this track."""
        return canonical_key(self.artist, self.title)


@dataclass(frozen=True)
class Waiter:
    """Who asked for artwork.

    ``ref`` is owned by the caller (a UI row handle, a model index, a
    session id) and is handed back untouched when artwork resolves.
    ``is_alive`` reports whether that reference is still worth notifying;
    it is checked both when the request arrives and again at delivery time.

    This is a plain dataclass rather than a Pydantic model because it holds
    arbitrary caller objects and a callable.
    """

    ref: Any
    is_alive: Callable[[], bool] = field(default=_always_alive, compare=False)

    def is_valid(self) -> bool:
        """Return ``True`` if the waiter may still be notified.

        A liveness predicate that raises counts as dead.
        """
        try:
            return bool(self.is_alive())
        except Exception:
            return False


class DiscogsSearchResult(BaseModel):
    """One entry of the Discogs search ``results`` array."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    cover_image: str | None = None
    thumb: str | None = None

    def best_image(self) -> str:
        """Return ``cover_image``, falling back to ``thumb``; ``""`` if neither."""
        return (self.cover_image or "").strip() or (self.thumb or "").strip()


class DiscogsSearchResponse(BaseModel):
    """Top-level Discogs search payload."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    results: list[DiscogsSearchResult] = Field(default_factory=list)
