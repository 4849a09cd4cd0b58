import os
import logging
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
DEFAULT_LASTFM_URL = "https://ws.audioscrobbler.com/2.0/"
DEFAULT_MUSIXMATCH_URL = "https://api.musixmatch.com/ws/1.1/"


@dataclass(frozen=True)
class Settings:
    """
    Process configuration, read once at startup.

    API keys are not validated here; an empty key simply makes the
    upstream reject the request.
    """
    lastfm_api_key: str = ""
    musixmatch_api_key: str = ""
    port: int = DEFAULT_PORT
    lastfm_api_url: str = DEFAULT_LASTFM_URL
    musixmatch_api_url: str = DEFAULT_MUSIXMATCH_URL
    http_timeout: float = 20.0

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """Build settings from environment variables (and `.env` if present)."""
        if dotenv and load_dotenv():
            logger.info("Loaded environment from .env")

        settings = cls(
            lastfm_api_key=os.getenv("LASTFM_API_KEY", ""),
            musixmatch_api_key=os.getenv("MUSIXMATCH_API_KEY", ""),
            port=int(os.getenv("PORT") or DEFAULT_PORT),
            lastfm_api_url=os.getenv("LASTFM_API_URL") or DEFAULT_LASTFM_URL,
            musixmatch_api_url=os.getenv("MUSIXMATCH_API_URL") or DEFAULT_MUSIXMATCH_URL,
            http_timeout=float(os.getenv("HTTP_TIMEOUT") or 20.0),
        )

        if not settings.lastfm_api_key:
            logger.warning("LASTFM_API_KEY not set. Last.fm requests will be rejected upstream.")
        if not settings.musixmatch_api_key:
            logger.warning("MUSIXMATCH_API_KEY not set. Musixmatch requests will be rejected upstream.")
        return settings
