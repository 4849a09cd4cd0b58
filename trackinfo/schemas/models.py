from typing import Annotated, Any, List
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


# --- Outbound (our API) ---

class ArtistInfo(BaseModel):
    name: str
    image_url: str


class TrackInfo(BaseModel):
    name: str
    lyrics: str
    artist: ArtistInfo

    model_config = ConfigDict(extra='forbid')


# --- Upstream views ---
# Only the fields we read are declared; anything else is ignored.


def _null_to_empty(value: Any) -> Any:
    if value is None:
        return ""
    return value


# JSON null decodes to an empty string
NullableStr = Annotated[str, BeforeValidator(_null_to_empty)]


class TrackArtist(BaseModel):
    name: NullableStr = ""


class TopTrack(BaseModel):
    name: NullableStr = ""
    artist: TrackArtist = TrackArtist()

    @property
    def artist_name(self) -> str:
        return self.artist.name


class TrackList(BaseModel):
    track: List[TopTrack] = []


class TopTracksResponse(BaseModel):
    """Last.fm geo.gettoptracks"""
    tracks: TrackList = TrackList()


def _empty_to_default(value: Any) -> Any:
    # Musixmatch sends `"body": []` when it has nothing for the query
    if value is None or value == []:
        return {}
    return value


class LyricsPayload(BaseModel):
    lyrics_body: NullableStr = ""


class LyricsBody(BaseModel):
    lyrics: Annotated[LyricsPayload, BeforeValidator(_empty_to_default)] = LyricsPayload()


class LyricsMessage(BaseModel):
    body: Annotated[LyricsBody, BeforeValidator(_empty_to_default)] = LyricsBody()


class LyricsResponse(BaseModel):
    """Musixmatch matcher.lyrics.get"""
    message: LyricsMessage = LyricsMessage()

    @property
    def text(self) -> str:
        return self.message.body.lyrics.lyrics_body


class ArtistImage(BaseModel):
    url: NullableStr = Field("", alias="#text")


class ArtistDetails(BaseModel):
    image: List[ArtistImage] = []


class ArtistInfoResponse(BaseModel):
    """Last.fm artist.getinfo"""
    artist: ArtistDetails = ArtistDetails()

    @property
    def image_urls(self) -> List[str]:
        return [img.url for img in self.artist.image]
