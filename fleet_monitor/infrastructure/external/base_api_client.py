# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


def as_record_list(payload: Any, description: str) -> List[Dict[str, Any]]:
    """Keep only the dict items of a list payload; anything else becomes an empty list"""
    if payload is None:
        return []
    if not isinstance(payload, list):
        logger.warning(f"Expected a list for {description}, got {type(payload).__name__}")
        return []
    return [item for item in payload if isinstance(item, dict)]


class BaseApiClient:
    """
    Base class for dashboard backend API clients.

    Provides common initialization for base_url and the HTTP client, plus
    request helpers that log failures and return None instead of raising.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize base API client.

        Args:
            base_url: Base URL of the backend API. If None, reads from env.
            http_client: Client to use. If None, the shared pooled client is used.
        """
        settings = get_settings()
        self.base_url = (base_url or settings.fleet_api_url).rstrip("/")
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = get_shared_http_client()
        return self._http_client

    async def _request_json(
        self,
        method: str,
        path: str,
        description: str,
        **kwargs: Any,
    ) -> Optional[Any]:
        """
        Send a request and decode the JSON body.

        Args:
            method: HTTP method
            path: Path relative to base_url
            description: Human-readable label for log messages

        Returns:
            Decoded JSON, or None on timeout, HTTP error or unexpected failure
        """
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.request(method, url, **kwargs)
            response.raise_for_status()
            return response.json()

        except httpx.TimeoutException:
            logger.error(f"Timeout while fetching {description} from {url}")
            return None
        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error fetching {description}: "
                f"{e.response.status_code} - {e.response.text}"
            )
            return None
        except Exception as e:
            logger.error(
                f"Unexpected error fetching {description}: {e}",
                exc_info=True
            )
            return None
