"""Request-coalescing artwork resolver for internet-radio tracks.

UI models ask for artwork on every metadata refresh, so the same track is
requested many times in quick succession.  This service makes sure that:

- at most one provider lookup is outstanding per canonical track key;
- every caller that asked while the lookup was running is notified with
  the result, in the order they asked;
- successful results are cached for the lifetime of the resolver;
- empty results are not cached, so a later request retries.

# ─── STATE MACHINE ─────────────────────────────────────────────────────
#
#   Absent ──request──→ InFlight ──lookup ok──→ Cached
#                          │
#                          └──lookup empty──→ Absent  (waiters dropped)
#
# Three maps hold all state, keyed by canonical key:
#   _cache      key → artwork URL      (success only, never evicted)
#   _pending    key → [Waiter, ...]    (drained when the key resolves)
#   _in_flight  {key, ...}             (dispatch → completion)
#
# All three are touched only from the event loop that owns the resolver.
# Lookups run as asyncio tasks and complete on that same loop, so no
# locking is needed.  Callers on other threads must go through
# request_artwork_threadsafe().
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from typing import Any

import structlog

from radioart.interfaces.artwork_provider import IArtworkProvider
from radioart.models.artwork import TrackQuery, Waiter
from radioart.services.stream_eligibility import StreamEligibilityFilter
from radioart.utils.errors import NotParseableError
from radioart.utils.logging import get_logger
from radioart.utils.text_normalizer import derive_artist_title

ArtworkListener = Callable[[Any, str], Any]


class RadioArtworkResolver:
    """Coalesces artwork requests per track and fans results out to waiters.

    Results are delivered through listeners registered with
    :meth:`add_listener`; each is called as ``listener(waiter_ref, url)``
    once per still-valid waiter, and only on success.
    """

    def __init__(
        self,
        provider: IArtworkProvider,
        eligibility: StreamEligibilityFilter | None = None,
    ) -> None:
        self._provider = provider
        self._eligibility = eligibility or StreamEligibilityFilter()
        self._cache: dict[str, str] = {}
        self._pending: dict[str, list[Waiter]] = {}
        self._in_flight: set[str] = set()
        self._tasks: set[asyncio.Task] = set()
        self._listeners: list[ArtworkListener] = []
        self._logger: structlog.BoundLogger = get_logger(__name__)

    # -- Listeners ------------------------------------------------------------

    def add_listener(self, callback: ArtworkListener) -> None:
        """Register a sync or async ``callback(waiter_ref, artwork_url)``."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: ArtworkListener) -> None:
        """Remove a previously registered callback (no-op if absent)."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    # -- Public API -----------------------------------------------------------

    def request_artwork(
        self,
        waiter: Waiter | Any,
        stream_source: Any,
        now_playing: str,
        station_fallback: str = "",
    ) -> None:
        """Ask for artwork for the track currently playing on a stream.

        Never blocks and never raises for bad input: invalid waiters,
        ineligible streams and unparseable text are silently ignored.
        A cached result is delivered to *waiter* before this returns;
        otherwise delivery happens when the lookup completes.

        Must be called from the event loop that owns the resolver.

        Parameters
        ----------
        waiter:
            A :class:`Waiter`, or any object to be used as the waiter
            reference with no liveness check.
        stream_source:
            The stream URL; used only for the eligibility check.
        now_playing:
            Free-form now-playing text, usually ``"Artist - Title"``.
        station_fallback:
            Station name used as the artist when the text has no separator.
        """
        if not isinstance(waiter, Waiter):
            waiter = Waiter(ref=waiter)
        if not waiter.is_valid():
            return
        if not self._eligibility.is_eligible(stream_source):
            self._logger.debug("artwork_request_ineligible", stream=str(stream_source))
            return
        try:
            artist, title = derive_artist_title(now_playing, station_fallback)
        except NotParseableError:
            self._logger.debug("artwork_request_unparseable", now_playing=now_playing)
            return

        query = TrackQuery(artist=artist, title=title)
        key = query.key

        cached = self._cache.get(key)
        if cached:
            self._logger.debug("artwork_cache_hit", key=key)
            self._notify(waiter, cached)
            return

        loop = asyncio.get_running_loop()

        self._pending.setdefault(key, []).append(waiter)
        if key in self._in_flight:
            self._logger.debug(
                "artwork_lookup_joined", key=key, waiters=len(self._pending[key])
            )
            return

        self._in_flight.add(key)
        task = loop.create_task(self._run_lookup(query), name=f"artwork-lookup:{key}")
        self._track(task)
        self._logger.debug("artwork_lookup_dispatched", key=key)

    def request_artwork_threadsafe(
        self,
        loop: asyncio.AbstractEventLoop,
        waiter: Waiter | Any,
        stream_source: Any,
        now_playing: str,
        station_fallback: str = "",
    ) -> None:
        """Schedule :meth:`request_artwork` on *loop* from another thread."""
        loop.call_soon_threadsafe(
            self.request_artwork, waiter, stream_source, now_playing, station_fallback
        )

    async def wait_idle(self) -> None:
        """Wait until every outstanding lookup and async notification is done."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def cached_artwork(self, key: str) -> str | None:
        """Return the cached artwork URL for a canonical *key*, if any."""
        return self._cache.get(key)

    def is_in_flight(self, key: str) -> bool:
        return key in self._in_flight

    def pending_count(self, key: str) -> int:
        return len(self._pending.get(key, ()))

    # -- Lookup lifecycle -----------------------------------------------------

    async def _run_lookup(self, query: TrackQuery) -> None:
        """Run one provider lookup and resolve its key exactly once."""
        artwork_url: str | None = None
        try:
            artwork_url = await self._provider.lookup_artwork(query.artist, query.title)
        except Exception as exc:
            self._logger.error(
                "artwork_lookup_crashed",
                key=query.key,
                provider=self._provider.get_provider_name(),
                error=str(exc),
            )
        finally:
            self._resolve_key(query.key, artwork_url)

    def _resolve_key(self, key: str, artwork_url: str | None) -> None:
        """Move *key* out of flight, cache a hit, and notify its waiters."""
        self._in_flight.discard(key)
        if artwork_url:
            self._cache[key] = artwork_url

        waiters = self._pending.pop(key, [])
        if not artwork_url:
            self._logger.info("artwork_key_resolved_empty", key=key, dropped=len(waiters))
            return

        self._logger.info("artwork_key_resolved", key=key, waiters=len(waiters))
        for waiter in waiters:
            if waiter.is_valid():
                self._notify(waiter, artwork_url)

    # -- Private helpers ------------------------------------------------------

    def _notify(self, waiter: Waiter, artwork_url: str) -> None:
        """Deliver *artwork_url* for *waiter* to every listener.

        A failing listener is logged and skipped; the remaining listeners
        and waiters are still notified.
        """
        for callback in list(self._listeners):
            try:
                result = callback(waiter.ref, artwork_url)
                if asyncio.iscoroutine(result):
                    self._schedule(result)
            except Exception as exc:
                self._logger.warning(
                    "artwork_listener_error",
                    error=str(exc),
                    callback=getattr(callback, "__name__", repr(callback)),
                )

    def _schedule(self, coro: Coroutine[Any, Any, Any]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        self._track(loop.create_task(self._guard_listener(coro)))

    async def _guard_listener(self, coro: Coroutine[Any, Any, Any]) -> None:
        try:
            await coro
        except Exception as exc:
            self._logger.warning("artwork_listener_error", error=str(exc))

    def _track(self, task: asyncio.Task) -> None:
        # Strong references keep fire-and-forget tasks from being collected.
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
