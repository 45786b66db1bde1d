"""Abstract provider contracts for radioArt."""

from radioart.interfaces.artwork_provider import IArtworkProvider

__all__ = ["IArtworkProvider"]
