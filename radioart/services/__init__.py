"""radioArt services: stream eligibility and the coalescing artwork resolver."""

from radioart.services.artwork_resolver import RadioArtworkResolver
from radioart.services.stream_eligibility import StreamEligibilityFilter

__all__ = ["RadioArtworkResolver", "StreamEligibilityFilter"]
