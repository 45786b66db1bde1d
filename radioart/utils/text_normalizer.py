"""Now-playing text parsing and lookup-key normalization.

Internet-radio streams publish a single free-form "now playing" string,
usually ``"Artist - Title"``.  This module turns that string (plus the
station name as a fallback artist) into an ``(artist, title)`` pair and
derives the canonical key used to deduplicate artwork lookups.

Equivalence is deliberately narrow: whitespace trimming and case folding
only.  "Daft Punk - One More Time" and "  daft punk -  ONE MORE TIME "
share a key; "Daft Punk - One More Time (Radio Edit)" does not.
"""

from radioart.utils.errors import NotParseableError

SEPARATOR = " - "


def derive_artist_title(now_playing: str, station_fallback: str = "") -> tuple[str, str]:
    """Split now-playing text into an ``(artist, title)`` pair.

    When the text contains ``" - "`` the first segment is the artist and
    every remaining segment, re-joined with the separator, is the title,
    so ``"A - B - C"`` gives ``("A", "B - C")``.  Without a separator the
    station name stands in for the artist and the whole text is the title.

    Args:
        now_playing: Raw stream title as published by the station.
        station_fallback: Station name used as the artist when the text
            has no separator.

    Returns:
        The trimmed ``(artist, title)`` pair.

    Raises:
        NotParseableError: If either the artist or the title ends up empty.
    """
    text = (now_playing or "").strip()
    station = (station_fallback or "").strip()

    artist = ""
    title = ""
    if SEPARATOR in text:
        parts = text.split(SEPARATOR)
        artist = parts[0].strip()
        title = SEPARATOR.join(parts[1:]).strip()
    elif station and text:
        artist = station
        title = text

    if not artist or not title:
        raise NotParseableError(f"Cannot derive artist and title from {now_playing!r}")

    return artist, title


def canonical_key(artist: str, title: str) -> str:
    """Return the lookup key for an ``(artist, title)`` pair.

    Args:
        artist: Artist name.
        title: Track title.

    Returns:
        ``"artist - title"`` trimmed and lower-cased.
    """
    return f"{artist.strip()}{SEPARATOR}{title.strip()}".lower()
