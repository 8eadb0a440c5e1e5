# Standard library imports
import logging
from datetime import datetime
from typing import Optional, Dict, Any, List

# Local application imports
from .base_api_client import BaseApiClient, as_record_list
from ...domain.repositories import FleetDirectoryProvider
from ...utils.datetime_utils import parse_iso

logger = logging.getLogger(__name__)


class DirectoryClient(BaseApiClient, FleetDirectoryProvider):
    """
    HTTP client for fleet-wide records: cameras, developers, projects,
    last-picture snapshots and the maintenance-cycle setting.
    """

    async def list_cameras(self) -> List[Dict[str, Any]]:
        payload = await self._request_json("GET", "/cameras", "camera list")
        return as_record_list(payload, "camera list")

    async def list_developers(self) -> List[Dict[str, Any]]:
        payload = await self._request_json("GET", "/developers", "developer list")
        return as_record_list(payload, "developer list")

    async def list_projects(self) -> List[Dict[str, Any]]:
        payload = await self._request_json("GET", "/projects", "project list")
        return as_record_list(payload, "project list")

    async def list_last_pictures(self) -> List[Dict[str, Any]]:
        payload = await self._request_json("GET", "/cameras/pics/last", "last pictures")
        return as_record_list(payload, "last pictures")

    async def get_maintenance_cycle_start(self) -> Optional[datetime]:
        """
        Get the globally configured maintenance-cycle start date.

        Returns:
            UTC datetime, or None if unset, unreachable or unparseable
        """
        payload = await self._request_json(
            "GET", "/settings/maintenance-cycle", "maintenance cycle start"
        )
        if not isinstance(payload, dict):
            return None
        start = parse_iso(payload.get("startDate"))
        if payload.get("startDate") and start is None:
            logger.warning(f"Ignoring unparseable maintenance cycle start: {payload.get('startDate')!r}")
        return start
