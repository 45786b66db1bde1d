"""Utility modules for radioArt.

- **errors** -- Exception hierarchy rooted at RadioArtError; one subclass
  per rejection or lookup-failure outcome.
- **logging** -- structlog setup with coloured console output in development
  and structured JSON in production.
- **text_normalizer** -- Now-playing text parsing and canonical key derivation.
"""

# -- Domain exception hierarchy --------------------------------------------
from radioart.utils.errors import (
    ConfigurationError,
    IneligibleStreamError,
    LookupFailedError,
    MalformedResponseError,
    NoArtworkError,
    NotParseableError,
    RadioArtError,
    TransportError,
    UnauthenticatedError,
)

# -- Structured logging setup ----------------------------------------------
from radioart.utils.logging import configure_logging, get_logger

# -- Now-playing parsing ---------------------------------------------------
from radioart.utils.text_normalizer import canonical_key, derive_artist_title

__all__ = [
    "ConfigurationError",
    "IneligibleStreamError",
    "LookupFailedError",
    "MalformedResponseError",
    "NoArtworkError",
    "NotParseableError",
    "RadioArtError",
    "TransportError",
    "UnauthenticatedError",
    "canonical_key",
    "configure_logging",
    "derive_artist_title",
    "get_logger",
]
