"""Shared pytest fixtures for the radioArt test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from radioart.config.settings import Settings
from tests.support import make_settings


@pytest.fixture
def settings() -> Settings:
    """Settings with a Discogs token configured."""
    return make_settings()


@pytest.fixture
def received() -> list[tuple[Any, str]]:
    """Collector for ``(waiter_ref, url)`` notifications."""
    return []


@pytest.fixture
def recorder(received: list[tuple[Any, str]]) -> Callable[[Any, str], None]:
    """A sync listener that appends into ``received``."""

    def _record(ref: Any, url: str) -> None:
        received.append((ref, url))

    return _record
