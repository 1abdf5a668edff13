"""
Configuration settings for the terminal.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from webterm.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Terminal settings loaded from environment variables."""

    def __init__(self):
        self.user: str = self._get_env("WEBTERM_USER", "user")
        self.hostname: str = self._get_env("WEBTERM_HOSTNAME", "linux-box")
        self.backend_url: str = self._get_env(
            "WEBTERM_BACKEND_URL", "http://127.0.0.1:8000"
        )
        self.api_prefix: str = self._get_env("WEBTERM_API_PREFIX", "/api")
        self.entities_path: str = self._get_env(
            "WEBTERM_ENTITIES_PATH", "/terminal/listamaschere"
        )
        self.api_token: Optional[str] = os.getenv("WEBTERM_API_TOKEN") or None
        self.timeout: float = self._get_float_env("WEBTERM_TIMEOUT", 10.0)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_float_env(self, key: str, default: float) -> float:
        """Get a numeric environment variable, raise error if malformed."""
        value = os.getenv(key)
        if value is None or value == "":
            return default
        try:
            return float(value)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be a number, got {value!r}"
            )


# Global settings instance
settings = Settings()
