"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API runs out of the box with seeded demo content.  In a production
deployment you should at least override ``SECRET_KEY`` and
``ADMIN_TOKENS``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Spirit Emeraude API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # Prefix under which the content routes are mounted.  The storefront
    # builds its URLs as ``<base><prefix>/product`` and so on.
    api_prefix: str = os.getenv("API_PREFIX", "/api/spiritemeraude")

    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Comma-separated list of static bearer tokens that are accepted as
    # administrator credentials without JWT decoding.  Intended for
    # trusted integrations.  Example: ADMIN_TOKENS="token1,token2".
    admin_tokens: str = os.getenv("ADMIN_TOKENS", "")

    # Populate the in-memory store with demo content at startup.
    seed_data: bool = _env_flag("SEED_DATA", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    def admin_token_list(self) -> list[str]:
        """Return the configured static admin tokens, stripped of blanks."""
        return [t.strip() for t in self.admin_tokens.split(",") if t.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
