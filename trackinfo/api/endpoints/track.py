from fastapi import APIRouter, Depends, Request
from trackinfo.core.config import Settings
from trackinfo.schemas.models import TrackInfo
from trackinfo.services.track_service import TrackInfoService
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

# Dependency Injection for Service
def get_track_service(settings: Settings = Depends(get_settings)):
    return TrackInfoService(settings)

@router.get(
    "/track/{region}",
    response_model=TrackInfo,
    summary="Top track of a region with lyrics and artist image",
    responses={404: {"description": "No tracks found"}, 500: {"description": "Upstream failure"}},
)
async def get_top_track_info(
    region: str,
    service: TrackInfoService = Depends(get_track_service)
):
    """
    Looks up the region's top track on Last.fm, then its lyrics on Musixmatch
    and the artist's image on Last.fm.
    """
    logger.info(f"Received track request for region: {region}")
    return await service.get_top_track_info(region)
