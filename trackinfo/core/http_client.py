# trackinfo/core/http_client.py
"""
Global HTTP client manager for connection reuse.
All providers share a single httpx.AsyncClient instance.
"""

import logging

import httpx

logger = logging.getLogger(__name__)


class HttpClientManager:
    """
    Singleton HTTP client manager that provides a shared AsyncClient.

    Features:
    - HTTP/2 support for multiplexing
    - Connection pooling (20 keepalive, 40 max)
    - Custom User-Agent
    """
    _client: httpx.AsyncClient | None = None
    timeout: float = 20.0

    @classmethod
    def configure(cls, timeout: float) -> None:
        """
        Set client options used the next time the client is created.
        An already open client keeps its options until it is closed.
        """
        if cls._client is not None and not cls._client.is_closed and timeout != cls.timeout:
            logger.warning(
                f"Shared HTTP client already open with timeout={cls.timeout}s; "
                f"timeout={timeout}s applies after it is closed"
            )
        cls.timeout = timeout

    @classmethod
    def get_client(cls) -> httpx.AsyncClient:
        """Get or create the shared HTTP client instance."""
        if cls._client is None or cls._client.is_closed:
            limits = httpx.Limits(
                max_keepalive_connections=20,
                max_connections=40
            )
            cls._client = httpx.AsyncClient(
                http2=True,  # requires httpx[http2]
                timeout=cls.timeout,
                limits=limits,
                headers={
                    'User-Agent': 'TrackInfo/1.0',
                    'Accept': 'application/json',
                }
            )
        return cls._client

    @classmethod
    async def close(cls) -> None:
        """Close the shared client. Call on app shutdown."""
        if cls._client is not None and not cls._client.is_closed:
            await cls._client.aclose()
            cls._client = None
