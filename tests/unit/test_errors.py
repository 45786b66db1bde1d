"""Unit tests for the radioArt exception hierarchy."""

from __future__ import annotations

import pytest

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


class TestRadioArtError:
    def test_str_without_provider(self) -> None:
        assert str(RadioArtError("boom")) == "boom"

    def test_str_prefixes_provider(self) -> None:
        err = TransportError("HTTP 503", provider_name="discogs")
        assert str(err) == "[discogs] HTTP 503"
        assert err.message == "HTTP 503"
        assert err.provider_name == "discogs"

    @pytest.mark.parametrize(
        "cls",
        [TransportError, MalformedResponseError, NoArtworkError],
    )
    def test_lookup_failures_share_base(self, cls: type[RadioArtError]) -> None:
        assert issubclass(cls, LookupFailedError)
        assert issubclass(cls, RadioArtError)

    @pytest.mark.parametrize(
        "cls",
        [IneligibleStreamError, NotParseableError, UnauthenticatedError, ConfigurationError],
    )
    def test_rejections_are_not_lookup_failures(self, cls: type[RadioArtError]) -> None:
        assert not issubclass(cls, LookupFailedError)
        assert cls().message
