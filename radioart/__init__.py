"""radioArt -- cover artwork for internet-radio "now playing" text.

Public entry points:

- :class:`radioart.services.RadioArtworkResolver` -- coalescing resolver
- :class:`radioart.models.Waiter` -- caller reference with liveness check
- :func:`radioart.main.open_resolver` -- wired resolver as an async context
"""

__version__ = "0.1.0"
