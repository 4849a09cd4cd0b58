import logging
from typing import Optional

import httpx

from trackinfo.core.errors import MalformedUpstreamResponse, NotFound
from trackinfo.schemas.models import ArtistInfoResponse, TopTrack, TopTracksResponse
from trackinfo.services.providers.base import BaseProvider

logger = logging.getLogger(__name__)


class LastfmProvider(BaseProvider):
    NAME = "Last.fm"
    # Last.fm orders images small, medium, large, extralarge, mega
    IMAGE_INDEX = 3

    def __init__(self, api_key: str, base_url: str, client: Optional[httpx.AsyncClient] = None):
        super().__init__(client)
        self.api_key = api_key
        self.base_url = base_url

    @property
    def provider_name(self) -> str:
        return self.NAME

    def _params(self, method: str, **kwargs) -> dict:
        return {"method": method, **kwargs, "api_key": self.api_key, "format": "json"}

    async def get_top_track(self, region: str) -> TopTrack:
        """First entry of the region's top tracks chart."""
        data = await self._get_json(
            self.base_url,
            self._params("geo.gettoptracks", country=region),
            TopTracksResponse,
        )
        tracks = data.tracks.track
        if not tracks:
            logger.info(f"No top tracks for region '{region}'")
            raise NotFound("No tracks found")
        return tracks[0]

    async def get_artist_image(self, artist: str) -> str:
        data = await self._get_json(
            self.base_url,
            self._params("artist.getinfo", artist=artist),
            ArtistInfoResponse,
        )
        urls = data.image_urls
        if len(urls) <= self.IMAGE_INDEX:
            logger.warning(f"Artist '{artist}' has {len(urls)} images, need at least {self.IMAGE_INDEX + 1}")
            raise MalformedUpstreamResponse(
                f"{self.NAME}: expected at least {self.IMAGE_INDEX + 1} images for artist, got {len(urls)}"
            )
        return urls[self.IMAGE_INDEX]
