import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from trackinfo.api.endpoints import track
from trackinfo.core.config import Settings
from trackinfo.core.errors import TrackInfoError
from trackinfo.core.http_client import HttpClientManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await HttpClientManager.close()


async def track_info_error_handler(request: Request, exc: TrackInfoError):
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    HttpClientManager.configure(timeout=settings.http_timeout)

    app = FastAPI(
        title="TrackInfo",
        description="Top track of a region, with lyrics and artist image.",
        version="1.0.0",
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.add_exception_handler(TrackInfoError, track_info_error_handler)
    app.include_router(track.router)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app
