"""Configuration management utilities for the Maslow needs tools.

Provides:
- A base Config class with dict/JSON round-tripping
- AppConfig, populated from environment variables with working defaults
"""

import json
import os
from pathlib import Path
from typing import Any, Dict

DEFAULT_PUBLISHING_API_URL = "http://publishing-api.dev.gov.uk"


class Config:
    """Base configuration class for organizing application settings."""

    def __init__(self):
        """Initialize configuration with default values."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary.

        Returns:
            Dictionary of all public config attributes
        """
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary.

        Unrecognised keys are set as attributes as well, so a saved config
        from a newer version still loads.
        """
        config = cls()
        for key, value in data.items():
            setattr(config, key, value)
        return config

    def save_json(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2, default=str)

    @classmethod
    def load_json(cls, path: Path) -> "Config":
        """Load configuration from JSON file.

        Raises:
            FileNotFoundError: If file doesn't exist
            json.JSONDecodeError: If file is not valid JSON
        """
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)


class AppConfig(Config):
    """Application-level configuration loaded from environment variables.

    Environment variables:
        PUBLISHING_API_URL: Base URL of the Publishing API
            (default: http://publishing-api.dev.gov.uk)
        PUBLISHING_API_BEARER_TOKEN: Bearer token sent with every request
            (default: empty, no Authorization header)
        PUBLISHING_API_TIMEOUT: Request timeout in seconds (default: 15)
        PUBLISHING_API_MAX_RETRIES: Retries for idempotent reads (default: 3)
        ORGANISATION_CACHE_TTL: Seconds to keep the organisation list (default: 3600)
        NEEDS_PER_PAGE: Page size used when listing needs (default: 50)
        MASLOW_LOG_LEVEL: DEBUG, INFO, WARNING or ERROR (default: INFO)
        MASLOW_LOG_FORMAT: "text" or "json" (default: text)
    """

    def __init__(self) -> None:
        super().__init__()
        self.publishing_api_url = os.getenv(
            "PUBLISHING_API_URL", DEFAULT_PUBLISHING_API_URL
        ).rstrip("/")
        self.publishing_api_bearer_token = os.getenv("PUBLISHING_API_BEARER_TOKEN", "")
        self.publishing_api_timeout = float(os.getenv("PUBLISHING_API_TIMEOUT", "15"))
        self.publishing_api_max_retries = int(os.getenv("PUBLISHING_API_MAX_RETRIES", "3"))
        self.organisation_cache_ttl = float(os.getenv("ORGANISATION_CACHE_TTL", "3600"))
        self.needs_per_page = int(os.getenv("NEEDS_PER_PAGE", "50"))
        self.log_level = os.getenv("MASLOW_LOG_LEVEL", "INFO").upper()
        self.log_format = os.getenv("MASLOW_LOG_FORMAT", "text")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()
