"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any configuration at all.  In a production
deployment you should override these via environment variables.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Landing Page API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When empty only the console handler
    # is attached.
    log_file: str = os.getenv("LOG_FILE", "")

    # Shared secret that must be passed as ``?password=`` to read the
    # whitelist.  This is a placeholder gate for the site owner, not an
    # authentication scheme.
    whitelist_password: str = os.getenv("WHITELIST_PASSWORD", "172374")

    # When enabled the store is populated with the hero, about,
    # solutions and team sections before the first request.
    seed_default_content: bool = _env_flag("SEED_DEFAULT_CONTENT", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
