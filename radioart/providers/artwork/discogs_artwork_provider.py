"""Discogs database-search artwork provider.

Implements IArtworkProvider by issuing one authenticated
``GET /database/search`` per lookup, constrained to the first release that
matches the artist and track, and reading the cover image (or thumbnail)
from that result.

Every failure mode -- missing token, network error, non-success status,
unsafe redirect, undecodable or unexpected payload, no image -- ends in
``None``.  Each one is raised internally as a named ``LookupFailedError``
subclass so it is logged precisely before being collapsed.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from radioart.config.settings import Settings
from radioart.interfaces.artwork_provider import IArtworkProvider
from radioart.models.artwork import DiscogsSearchResponse
from radioart.utils.errors import (
    LookupFailedError,
    MalformedResponseError,
    NoArtworkError,
    TransportError,
    UnauthenticatedError,
)
from radioart.utils.logging import get_logger

_PROVIDER_NAME = "discogs"
_MAX_REDIRECTS = 5


class DiscogsArtworkProvider(IArtworkProvider):
    """Artwork provider backed by the Discogs REST search endpoint.

    The token is read from *settings* on every lookup rather than captured
    at construction, so configuring it later takes effect for the next
    lookup without rebuilding the provider.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http_client
        self._logger = get_logger(__name__)

    # -- Private helpers -------------------------------------------------------

    def _build_headers(self, token: str) -> dict[str, str]:
        # Content-Type is sent even though the GET has no body.
        return {
            "User-Agent": self._settings.user_agent,
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Discogs token={token}",
        }

    @staticmethod
    def _build_params(artist: str, title: str) -> dict[str, str]:
        return {
            "artist": artist,
            "track": title,
            "type": "release",
            "per_page": "1",
            "page": "1",
        }

    async def _get(self, artist: str, title: str) -> httpx.Response:
        """Send the search request, following only non-downgrading redirects."""
        token = self._settings.discogs_token.strip()
        if not token:
            raise UnauthenticatedError(provider_name=_PROVIDER_NAME)

        try:
            response = await self._http.get(
                self._settings.discogs_search_url,
                params=self._build_params(artist, title),
                headers=self._build_headers(token),
                follow_redirects=False,
            )
            hops = 0
            while response.is_redirect and response.next_request is not None:
                next_request = response.next_request
                if response.url.scheme == "https" and next_request.url.scheme != "https":
                    raise TransportError(
                        f"Refusing redirect from {response.url} to {next_request.url}",
                        provider_name=_PROVIDER_NAME,
                    )
                hops += 1
                if hops > _MAX_REDIRECTS:
                    raise TransportError("Too many redirects", provider_name=_PROVIDER_NAME)
                response = await self._http.send(next_request, follow_redirects=False)
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or type(exc).__name__, provider_name=_PROVIDER_NAME) from exc

        if not response.is_success:
            raise TransportError(f"HTTP {response.status_code}", provider_name=_PROVIDER_NAME)
        return response

    @staticmethod
    def _parse_payload(response: httpx.Response) -> DiscogsSearchResponse:
        try:
            return DiscogsSearchResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise MalformedResponseError(
                f"Unexpected search payload: {exc}", provider_name=_PROVIDER_NAME
            ) from exc

    @staticmethod
    def _validate_image_url(raw: str) -> str:
        """Return *raw* if it is an absolute http(s) URL."""
        try:
            url = httpx.URL(raw)
        except (httpx.InvalidURL, TypeError) as exc:
            raise NoArtworkError(f"Invalid image URL {raw!r}", provider_name=_PROVIDER_NAME) from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise NoArtworkError(f"Invalid image URL {raw!r}", provider_name=_PROVIDER_NAME)
        return raw

    async def _search_artwork(self, artist: str, title: str) -> str:
        response = await self._get(artist, title)
        payload = self._parse_payload(response)
        if not payload.results:
            raise NoArtworkError("Search returned no results", provider_name=_PROVIDER_NAME)

        image = payload.results[0].best_image()
        if not image:
            raise NoArtworkError("First result has no image", provider_name=_PROVIDER_NAME)
        return self._validate_image_url(image)

    # -- IArtworkProvider implementation ---------------------------------------

    async def lookup_artwork(self, artist: str, title: str) -> str | None:
        """Return the cover image URL for the first matching release, or ``None``."""
        try:
            url = await self._search_artwork(artist, title)
        except UnauthenticatedError:
            self._logger.debug("discogs_lookup_skipped_no_token", artist=artist, title=title)
            return None
        except NoArtworkError as exc:
            self._logger.debug("discogs_no_artwork", artist=artist, title=title, reason=exc.message)
            return None
        except LookupFailedError as exc:
            self._logger.warning(
                "discogs_lookup_failed",
                artist=artist,
                title=title,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return None

        self._logger.info("discogs_artwork_found", artist=artist, title=title, url=url)
        return url

    def get_provider_name(self) -> str:
        """Return ``'discogs'``."""
        return _PROVIDER_NAME

    def is_available(self) -> bool:
        """Return ``True`` if a Discogs token is configured."""
        return self._settings.has_discogs_token()
