"""Unit tests for now-playing parsing and canonical keys."""

from __future__ import annotations

import pytest

from radioart.utils.errors import NotParseableError
from radioart.utils.text_normalizer import canonical_key, derive_artist_title


# ======================================================================
# derive_artist_title
# ======================================================================


class TestDeriveArtistTitle:
    """Tests for the derive_artist_title function."""

    def test_splits_artist_and_title(self) -> None:
        assert derive_artist_title("Daft Punk - One More Time", "StationX") == (
            "Daft Punk",
            "One More Time",
        )

    def test_station_fallback_without_separator(self) -> None:
        assert derive_artist_title("One More Time", "Daft Punk Radio") == (
            "Daft Punk Radio",
            "One More Time",
        )

    def test_title_keeps_extra_separators(self) -> None:
        assert derive_artist_title("A - B - C", "") == ("A", "B - C")

    def test_trims_both_parts(self) -> None:
        assert derive_artist_title("   Moby  -   Porcelain  ", "") == ("Moby", "Porcelain")

    def test_trims_station_fallback(self) -> None:
        assert derive_artist_title("Porcelain", "  Chillout  ") == ("Chillout", "Porcelain")

    def test_empty_text_and_station_fails(self) -> None:
        with pytest.raises(NotParseableError):
            derive_artist_title("", "")

    def test_text_without_separator_and_no_station_fails(self) -> None:
        with pytest.raises(NotParseableError):
            derive_artist_title("One More Time", "   ")

    def test_empty_text_with_station_fails(self) -> None:
        with pytest.raises(NotParseableError):
            derive_artist_title("   ", "Daft Punk Radio")

    def test_dangling_separator_without_station_fails(self) -> None:
        # Trimming "Artist - " leaves "Artist -", which has no separator.
        with pytest.raises(NotParseableError):
            derive_artist_title("Artist - ", "")

    def test_separator_requires_spaces(self) -> None:
        # "A-B" has no " - " so the station becomes the artist.
        assert derive_artist_title("A-B", "Station") == ("Station", "A-B")

    def test_none_inputs_fail(self) -> None:
        with pytest.raises(NotParseableError):
            derive_artist_title(None, None)  # type: ignore[arg-type]


# ======================================================================
# canonical_key
# ======================================================================


class TestCanonicalKey:
    def test_lowercases_and_joins(self) -> None:
        assert canonical_key("Daft Punk", "One More Time") == "daft punk - one more time"

    def test_trims_parts(self) -> None:
        assert canonical_key("  Daft Punk ", " One More Time  ") == "daft punk - one more time"

    def test_same_track_different_spelling_same_key(self) -> None:
        first = canonical_key(*derive_artist_title("Daft Punk - One More Time", ""))
        second = canonical_key(*derive_artist_title("  DAFT PUNK -   one more time ", ""))
        assert first == second

    def test_no_fuzzy_matching(self) -> None:
        assert canonical_key("Daft Punk", "One More Time") != canonical_key(
            "Daft Punk", "One More Time (Radio Edit)"
        )
