"""Custom exception hierarchy for radioArt.

All application exceptions inherit from :class:`RadioArtError`, which
carries an optional ``provider_name`` so log handlers can tell which
external service (e.g. "discogs") produced the failure.

The hierarchy follows the outcomes of an artwork request:

    RadioArtError  (base -- catch-all for any radioArt error)
    +-- IneligibleStreamError    (stream host is not a supported provider)
    +-- NotParseableError        (now-playing text yields no artist + title)
    +-- UnauthenticatedError     (no API token configured)
    +-- LookupFailedError        (base for upstream lookup failures)
    |   +-- TransportError           (network error / non-success status)
    |   +-- MalformedResponseError   (undecodable or schema-mismatched payload)
    |   +-- NoArtworkError           (well-formed response, no usable image)
    +-- ConfigurationError       (unreadable or invalid config file)

None of these reach the caller of ``RadioArtworkResolver.request_artwork``.
They exist so that each rejection or failure path is named and logged
precisely before collapsing to "no artwork".
"""


class RadioArtError(Exception):
    """Base exception for all radioArt errors.

    The ``__str__`` method prefixes the provider name in brackets for log
    output, e.g. ``[discogs] HTTP 503``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Request rejections (silent no-ops at the resolver boundary)
# ---------------------------------------------------------------------------

class IneligibleStreamError(RadioArtError):
    """Raised when a stream source is not served by a supported provider."""

    def __init__(
        self,
        message: str = "Stream is not eligible for artwork lookup",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class NotParseableError(RadioArtError):
    """Raised when now-playing text cannot yield both an artist and a title."""

    def __init__(
        self,
        message: str = "Now-playing text is not parseable",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class UnauthenticatedError(RadioArtError):
    """Raised when no API token is configured for the artwork provider."""

    def __init__(
        self,
        message: str = "No API token configured",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Upstream lookup failures (all resolve to "no artwork")
# ---------------------------------------------------------------------------

class LookupFailedError(RadioArtError):
    """Base class for failures while querying the artwork provider."""

    def __init__(
        self,
        message: str = "Artwork lookup failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class TransportError(LookupFailedError):
    """Raised on network errors, non-success statuses and unsafe redirects."""

    def __init__(
        self,
        message: str = "Transport failure",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class MalformedResponseError(LookupFailedError):
    """Raised when the response body is not the expected JSON structure."""

    def __init__(
        self,
        message: str = "Malformed response",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class NoArtworkError(LookupFailedError):
    """Raised when a well-formed response carries no usable image URL."""

    def __init__(
        self,
        message: str = "No artwork in response",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class ConfigurationError(RadioArtError):
    """Raised when a configuration file is unreadable or invalid."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
