"""Shared pooled HTTP client for the dashboard backend."""
# Standard library imports
import logging
from typing import Optional

# External package imports
import httpx

# Local application imports
from ..core.config import get_settings

logger = logging.getLogger(__name__)

_shared_client: Optional[httpx.AsyncClient] = None


def build_limits(settings) -> httpx.Limits:
    """Pool limits from HTTP_MAX_CONNECTIONS and the keep-alive settings"""
    return httpx.Limits(
        max_connections=settings.http_max_connections,
        max_keepalive_connections=min(
            settings.http_max_keepalive_connections, settings.http_max_connections
        ),
        keepalive_expiry=settings.http_keepalive_expiry_seconds,
    )


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Return the client every backend API client shares, creating it on first use.

    One snapshot refresh issues a health, history and ticket request per
    camera against the same host, all through this pool.

    Returns:
        Shared AsyncClient instance
    """
    global _shared_client

    if _shared_client is None or _shared_client.is_closed:
        settings = get_settings()
        limits = build_limits(settings)
        _shared_client = httpx.AsyncClient(
            timeout=settings.http_timeout_seconds,
            limits=limits,
            http2=True,
        )
        logger.info(
            f"Created shared HTTP client (max {limits.max_connections} connections, "
            f"timeout {settings.http_timeout_seconds}s)"
        )

    return _shared_client


async def close_shared_http_client() -> None:
    """Close the shared client; the next call to get_shared_http_client opens a new one."""
    global _shared_client

    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("Closed shared HTTP client")
