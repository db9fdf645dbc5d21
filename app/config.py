"""
Configuration settings for the product scraper API.
"""

import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Levels shared by the logging module and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings:
    """Application settings and configuration."""

    # Server Configuration
    PORT: str = os.environ.get("PORT", "8000")
    ADDRESS: str = os.environ.get("ADDRESS", "0.0.0.0")

    # Public URL advertised in the usage hints of the root endpoint
    DEPLOYMENT_URL: str = os.environ.get("DEPLOYMENT_URL", "https://0.0.0.0:10000")

    # Product fragments are joined onto this origin
    BASE_ORIGIN: str = os.environ.get("BASE_ORIGIN", "https://www.flipkart.com")

    # Scraper Configuration ("package.module:attribute")
    SEARCH_BACKEND: Optional[str] = os.environ.get("SEARCH_BACKEND")
    PRODUCT_BACKEND: Optional[str] = os.environ.get("PRODUCT_BACKEND")
    SCRAPER_TIMEOUT: str = os.environ.get("SCRAPER_TIMEOUT", "15")

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    # API Configuration
    API_TITLE: str = "Product Scraper API"

    @property
    def port(self) -> int:
        """Listen port; raises ValueError for anything but 1-65535."""
        try:
            port = int(self.PORT)
        except ValueError:
            raise ValueError(f"PORT must be a valid number, got {self.PORT!r}") from None
        if not 0 < port < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {port}")
        return port

    @property
    def scraper_timeout(self) -> float:
        """Seconds allowed for a single scraper call."""
        try:
            timeout = float(self.SCRAPER_TIMEOUT)
        except ValueError:
            raise ValueError(f"SCRAPER_TIMEOUT must be a number, got {self.SCRAPER_TIMEOUT!r}") from None
        if timeout <= 0:
            raise ValueError(f"SCRAPER_TIMEOUT must be positive, got {timeout}")
        return timeout

    @property
    def log_level(self) -> str:
        """Upper-cased level name understood by both logging and uvicorn."""
        level = self.LOG_LEVEL.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.LOG_LEVEL!r}")
        return level

    @property
    def base_origin(self) -> str:
        return self.BASE_ORIGIN.rstrip("/")

    def validate(self):
        """Validate settings that would otherwise fail on the first request."""
        problems = []

        for name in ("port", "scraper_timeout", "log_level"):
            try:
                getattr(self, name)
            except ValueError as e:
                problems.append(str(e))

        if not self.BASE_ORIGIN.startswith(("http://", "https://")):
            problems.append(f"BASE_ORIGIN must be an http(s) origin, got {self.BASE_ORIGIN!r}")

        if problems:
            raise ValueError(f"Invalid configuration: {'; '.join(problems)}")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return settings
