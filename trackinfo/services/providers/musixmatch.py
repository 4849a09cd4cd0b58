import logging
from typing import Optional

import httpx

from trackinfo.schemas.models import LyricsResponse
from trackinfo.services.providers.base import BaseProvider

logger = logging.getLogger(__name__)


class MusixmatchProvider(BaseProvider):
    NAME = "Musixmatch"

    def __init__(self, api_key: str, base_url: str, client: Optional[httpx.AsyncClient] = None):
        super().__init__(client)
        self.api_key = api_key
        self.base_url = base_url

    @property
    def provider_name(self) -> str:
        return self.NAME

    async def get_lyrics(self, track: str, artist: str) -> str:
        """
        Fetch lyrics using matcher.lyrics.get

        A response without a lyrics body is not an error: the result is
        just an empty string.
        """
        params = {
            "q_track": track,
            "q_artist": artist,
            "apikey": self.api_key,
            "format": "json",
        }
        data = await self._get_json(f"{self.base_url}matcher.lyrics.get", params, LyricsResponse)

        if not data.text:
            logger.info(f"No lyrics for {track} - {artist}")
        return data.text
