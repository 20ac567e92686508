"""
Configuration settings for the storefront API and its client.
"""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Where the SDK and CLI find the API
    API_URL: str = os.getenv("STOREFRONT_API_URL", "http://localhost:5000/api")
    REQUEST_TIMEOUT: float = float(os.getenv("STOREFRONT_REQUEST_TIMEOUT", "10"))

    # Server
    HOST: str = os.getenv("STOREFRONT_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("STOREFRONT_PORT", "5000"))
    CORS_ORIGINS: str = os.getenv("STOREFRONT_CORS_ORIGINS", "*")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def cors_origins(self) -> List[str]:
        """Comma separated origins, ``*`` allows everything."""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()] or ["*"]


settings = Settings()
