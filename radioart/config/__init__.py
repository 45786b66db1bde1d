"""Configuration module -- exports Settings and load_settings."""

from radioart.config.loader import load_settings
from radioart.config.settings import Settings

__all__ = ["Settings", "load_settings"]
