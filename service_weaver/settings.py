"""Environment-driven configuration for the bundled httpx transport."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for runtime configuration."""

    base_url: str
    api_timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "Settings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so developers can rely on a local .env file without
        exporting variables globally.
        """
        load_dotenv()

        base_url = os.getenv("SERVICE_WEAVER_BASE_URL", "").strip()
        if not base_url:
            raise ValueError("SERVICE_WEAVER_BASE_URL is required but was not provided.")

        api_timeout_raw = os.getenv("API_TIMEOUT", "").strip() or "30"
        try:
            api_timeout = float(api_timeout_raw)
        except ValueError as exc:
            raise ValueError("API_TIMEOUT must be a numeric value.") from exc
        if api_timeout <= 0:
            raise ValueError("API_TIMEOUT must be greater than zero.")

        log_level = os.getenv("LOG_LEVEL", "").strip().upper() or "INFO"
        if log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {log_level!r}.")

        return cls(
            base_url=base_url,
            api_timeout=api_timeout,
            log_level=log_level,
        )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for scripts and applications embedding the library."""
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
