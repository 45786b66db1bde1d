"""Application settings loaded from environment variables via pydantic-settings.

Values are read, in priority order, from:

  1. Environment variables, e.g. ``DISCOGS_TOKEN=abc123``
  2. A ``.env`` file in the working directory (local development)
  3. The defaults below

Field ``discogs_token`` maps to env var ``DISCOGS_TOKEN`` and so on.
List fields such as ``eligible_host_patterns`` are given as JSON in the
environment: ``ELIGIBLE_HOST_PATTERNS='["di.fm", "radiotunes"]'``.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """radioArt settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Discogs ===
    # Empty string = "not configured"; lookups then complete empty without
    # touching the network.
    discogs_token: str = ""
    discogs_search_url: str = "https://api.discogs.com/database/search"
    user_agent: str = "radioArt/0.1.0 (+https://github.com/radioart)"
    request_timeout: float = 30.0

    # === Stream eligibility ===
    # Case-insensitive substrings matched against the stream host.
    eligible_host_patterns: list[str] = ["di.fm", "digitallyimported"]

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    def has_discogs_token(self) -> bool:
        """Return ``True`` if a non-blank Discogs token is configured."""
        return bool(self.discogs_token.strip())
