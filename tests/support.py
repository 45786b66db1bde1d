"""Test doubles shared across the radioArt test suite."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from radioart.config.settings import Settings
from radioart.interfaces.artwork_provider import IArtworkProvider

DI_STREAM = "https://listen.di.fm/public3/trance.pls"
OTHER_STREAM = "https://example.com/stream"
COVER_URL = "https://i.discogs.com/cover.jpg"


def make_settings(**overrides: Any) -> Settings:
    """Build Settings that ignore the developer's .env file."""
    defaults: dict[str, Any] = {"discogs_token": "test-token"}
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


class GatedArtworkProvider(IArtworkProvider):
    """In-memory provider whose lookups block until ``release()`` is called.

    ``results`` is consumed one item per lookup; the last item repeats.
    An item that is an exception instance is raised instead of returned.
    """

    def __init__(self, *results: Any, gated: bool = True) -> None:
        self.results: list[Any] = list(results) or [COVER_URL]
        self.calls: list[tuple[str, str]] = []
        self._gate = asyncio.Event()
        if not gated:
            self._gate.set()

    def release(self) -> None:
        self._gate.set()

    async def lookup_artwork(self, artist: str, title: str) -> str | None:
        self.calls.append((artist, title))
        await self._gate.wait()
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, BaseException):
            raise result
        return result

    def get_provider_name(self) -> str:
        return "gated"

    def is_available(self) -> bool:
        return True


def discogs_transport(
    payload: Any = None,
    status_code: int = 200,
    calls: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """MockTransport answering every request with *payload* as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return httpx.Response(status_code, json=payload if payload is not None else {})

    return httpx.MockTransport(handler)
