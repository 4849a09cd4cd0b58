import json
import logging
from abc import ABC, abstractmethod
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from trackinfo.core.errors import MalformedUpstreamResponse, UpstreamUnavailable
from trackinfo.core.http_client import HttpClientManager

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseProvider(ABC):
    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._client = client

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @property
    def client(self) -> httpx.AsyncClient:
        """Injected client, or the shared one for all providers."""
        if self._client is not None:
            return self._client
        return HttpClientManager.get_client()

    async def _get_json(self, url: str, params: dict, model: Type[ModelT]) -> ModelT:
        """
        GET `url` and decode the body into `model`.

        The status code is not inspected: whatever the upstream sends back
        has to decode into the expected shape.

        Raises:
            UpstreamUnavailable: transport failure.
            MalformedUpstreamResponse: body is not JSON or has the wrong shape.
        """
        try:
            response = await self.client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.error(f"{self.provider_name} request failed: {e!r}")
            raise UpstreamUnavailable(str(e) or type(e).__name__) from e

        try:
            return model.model_validate(response.json())
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"{self.provider_name} returned non-JSON body (HTTP {response.status_code})")
            raise MalformedUpstreamResponse(f"{self.provider_name}: invalid JSON: {e}") from e
        except ValidationError as e:
            logger.warning(f"{self.provider_name} returned unexpected payload: {e.error_count()} errors")
            raise MalformedUpstreamResponse(f"{self.provider_name}: unexpected payload: {e}") from e
