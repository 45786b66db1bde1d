"""Artwork provider implementations."""

from radioart.providers.artwork.discogs_artwork_provider import DiscogsArtworkProvider

__all__ = ["DiscogsArtworkProvider"]
