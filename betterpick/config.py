"""Configuration for the Betterpick API client."""

import logging
import os
from dataclasses import dataclass


# Hosted API and the local development server
PRODUCTION_BASE_URL = "https://betterpick.dvdblk.com/api/v1"
LOCAL_BASE_URL = "http://localhost:8080"

# Seconds before a request is abandoned
DEFAULT_TIMEOUT = 20.0


@dataclass
class APIConfig:
    """
    Settings for talking to the Betterpick API.

    Attributes:
        base_url: URL every endpoint path is resolved against.
        timeout: Request timeout in seconds.
    """

    base_url: str = PRODUCTION_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def from_env(cls) -> "APIConfig":
        """
        Build a config from environment variables.

        BETTERPICK_BASE_URL wins over BETTERPICK_ENV; BETTERPICK_ENV=local
        points at the development server.
        """
        default_url = LOCAL_BASE_URL if os.getenv("BETTERPICK_ENV") == "local" else PRODUCTION_BASE_URL
        return cls(
            base_url=os.getenv("BETTERPICK_BASE_URL", default_url),
            timeout=float(os.getenv("BETTERPICK_TIMEOUT", DEFAULT_TIMEOUT)),
        )


def get_log_level() -> str:
    """Get log level from environment or default to INFO."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logging() -> None:
    """Configure root logging for the app."""
    log_level = get_log_level()

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
