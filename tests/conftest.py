import pytest
from fastapi.testclient import TestClient

from tests.fakes import LASTFM_URL, MUSIXMATCH_URL, FakeUpstreams
from trackinfo.api.endpoints.track import get_track_service
from trackinfo.core.config import Settings
from trackinfo.main import create_app
from trackinfo.services.track_service import TrackInfoService


@pytest.fixture
def settings() -> Settings:
    return Settings(
        lastfm_api_key="lfm-key",
        musixmatch_api_key="mxm-key",
        lastfm_api_url=LASTFM_URL,
        musixmatch_api_url=MUSIXMATCH_URL,
    )


@pytest.fixture
def upstreams() -> FakeUpstreams:
    return FakeUpstreams()


@pytest.fixture
def service(settings, upstreams) -> TrackInfoService:
    return TrackInfoService(settings, client=upstreams.client())


@pytest.fixture
def api(settings, service) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[get_track_service] = lambda: service
    return TestClient(app)
