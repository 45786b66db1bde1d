"""radioArt wiring -- builds the resolver and its collaborators from Settings.

Typical use from an asyncio application::

    async with open_resolver() as resolver:
        resolver.add_listener(on_artwork)
        resolver.request_artwork(row, stream_url, "Artist - Title", "Station")

``open_resolver`` owns the shared ``httpx.AsyncClient`` and closes it on
exit after outstanding lookups have finished.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import httpx
import structlog

from radioart.config.loader import load_settings
from radioart.config.settings import Settings
from radioart.providers.artwork.discogs_artwork_provider import DiscogsArtworkProvider
from radioart.services.artwork_resolver import RadioArtworkResolver
from radioart.services.stream_eligibility import StreamEligibilityFilter
from radioart.utils.logging import configure_logging, get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


def build_components(
    app_settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """Construct every component of the artwork resolver.

    Returns a flat dict of named components.  ``owns_http_client`` is
    ``True`` when the client was created here and must be closed by the
    caller.
    """
    owns_http_client = http_client is None
    if http_client is None:
        http_client = httpx.AsyncClient(timeout=app_settings.request_timeout)

    eligibility = StreamEligibilityFilter(app_settings.eligible_host_patterns)
    provider = DiscogsArtworkProvider(settings=app_settings, http_client=http_client)
    resolver = RadioArtworkResolver(provider=provider, eligibility=eligibility)

    return {
        "settings": app_settings,
        "http_client": http_client,
        "owns_http_client": owns_http_client,
        "eligibility": eligibility,
        "provider": provider,
        "resolver": resolver,
    }


def build_resolver(
    app_settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> RadioArtworkResolver:
    """Build a resolver; the caller is responsible for the HTTP client."""
    if app_settings is None:
        app_settings = Settings()
    return build_components(app_settings, http_client)["resolver"]


@asynccontextmanager
async def open_resolver(
    app_settings: Settings | None = None,
    config_path: str | Path = "config/radioart.yaml",
) -> AsyncIterator[RadioArtworkResolver]:
    """Build a resolver, yield it, then drain lookups and close the client."""
    if app_settings is None:
        app_settings = load_settings(config_path)

    configure_logging(
        log_level=app_settings.log_level,
        json_output=(app_settings.app_env == "production"),
    )

    components = build_components(app_settings)
    resolver: RadioArtworkResolver = components["resolver"]
    _logger.info(
        "resolver_startup",
        provider=components["provider"].get_provider_name(),
        provider_available=components["provider"].is_available(),
        eligible_hosts=list(components["eligibility"].host_patterns),
    )

    try:
        yield resolver
    finally:
        await resolver.wait_idle()
        if components["owns_http_client"]:
            http_client: httpx.AsyncClient = components["http_client"]
            await http_client.aclose()
        _logger.info("resolver_shutdown", message="HTTP client closed")
