import logging
from typing import Optional

import httpx

from trackinfo.core.config import Settings
from trackinfo.schemas.models import ArtistInfo, TrackInfo
from trackinfo.services.providers.lastfm import LastfmProvider
from trackinfo.services.providers.musixmatch import MusixmatchProvider

logger = logging.getLogger(__name__)


class TrackInfoService:
    """
    Composes the top track of a region with its lyrics and artist image.

    Pipeline (each step needs the previous one's output):
    - Top track -> via LastfmProvider
    - Lyrics -> via MusixmatchProvider
    - Artist image -> via LastfmProvider

    Any TrackInfoError raised by a step aborts the remaining steps.
    """

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        self.lastfm = LastfmProvider(settings.lastfm_api_key, settings.lastfm_api_url, client)
        self.musixmatch = MusixmatchProvider(settings.musixmatch_api_key, settings.musixmatch_api_url, client)

    async def get_top_track_info(self, region: str) -> TrackInfo:
        track = await self.lastfm.get_top_track(region)
        logger.info(f"Top track for '{region}': {track.name} - {track.artist_name}")

        lyrics = await self.musixmatch.get_lyrics(track.name, track.artist_name)
        image_url = await self.lastfm.get_artist_image(track.artist_name)

        return TrackInfo(
            name=track.name,
            lyrics=lyrics,
            artist=ArtistInfo(name=track.artist_name, image_url=image_url),
        )
