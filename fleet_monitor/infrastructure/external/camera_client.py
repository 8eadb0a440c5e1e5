# Standard library imports
import logging
from typing import Optional, Dict, Any, List
from urllib.parse import quote

# Local application imports
from .base_api_client import BaseApiClient, as_record_list
from ...domain.constants import CameraFields
from ...domain.repositories import CameraSignalProvider, CameraStatusWriter

logger = logging.getLogger(__name__)


class CameraClient(BaseApiClient, CameraSignalProvider, CameraStatusWriter):
    """
    HTTP client for per-camera signals on the dashboard backend.

    Reads health metrics, maintenance-flag history and maintenance tickets,
    and writes manual overrides and maintenance flags. Read failures are
    logged and reported as missing data so one camera never fails a batch.
    """

    async def get_health(
        self,
        developer_tag: str,
        project_tag: str,
        camera_name: str
    ) -> Optional[Dict[str, Any]]:
        """
        Get device-health metrics for a camera.

        Args:
            developer_tag: Developer tag (e.g., "acme")
            project_tag: Project tag (e.g., "tower-a")
            camera_name: Camera name within the project

        Returns:
            Health payload (may carry an 'error' key), or None if the request failed
        """
        path = (
            f"/cameras/health/{quote(developer_tag, safe='')}"
            f"/{quote(project_tag, safe='')}/{quote(camera_name, safe='')}"
        )
        payload = await self._request_json(
            "GET", path, f"health for camera {developer_tag}/{project_tag}/{camera_name}"
        )
        if payload is not None and not isinstance(payload, dict):
            logger.warning(f"Unexpected health payload for camera {camera_name}: {payload!r}")
            return None
        return payload

    async def get_status_history(self, camera_id: str) -> List[Dict[str, Any]]:
        """
        Get the maintenance-flag audit history for a camera.

        Args:
            camera_id: Camera ID

        Returns:
            List of history entries (empty if unavailable)
        """
        payload = await self._request_json(
            "GET",
            f"/cameras/{quote(camera_id, safe='')}/maintenance-status/history",
            f"maintenance-status history for camera {camera_id}",
        )
        if isinstance(payload, dict):
            # Some deployments wrap the list
            payload = payload.get("history")
        return as_record_list(payload, f"history of camera {camera_id}")

    async def list_maintenance_tasks(self, camera_id: str) -> List[Dict[str, Any]]:
        """
        Get maintenance tickets raised for a camera.

        Args:
            camera_id: Camera ID

        Returns:
            List of tickets (empty if unavailable)
        """
        payload = await self._request_json(
            "GET",
            f"/maintenance/camera/{quote(camera_id, safe='')}",
            f"maintenance tickets for camera {camera_id}",
        )
        return as_record_list(payload, f"maintenance tickets of camera {camera_id}")

    async def update_status(self, camera_id: str, status: str) -> Optional[Dict[str, Any]]:
        """
        Set the manual raw status ('' clears it).

        Args:
            camera_id: Camera ID
            status: One of '', 'hold', 'network', 'finished'

        Returns:
            Updated camera record, or None if the update failed
        """
        logger.info(f"Updating raw status of camera {camera_id} to {status!r}")
        payload = await self._request_json(
            "PUT",
            f"/cameras/{quote(camera_id, safe='')}/status",
            f"status update for camera {camera_id}",
            json={CameraFields.STATUS: status},
        )
        return payload if isinstance(payload, dict) else None

    async def update_maintenance_flag(
        self,
        camera_id: str,
        flag: str,
        value: bool
    ) -> Optional[Dict[str, Any]]:
        """
        Toggle one maintenance flag; the backend appends the audit entry.

        Args:
            camera_id: Camera ID
            flag: Flag name (e.g., "photoDirty")
            value: New value

        Returns:
            Updated camera record, or None if the update failed
        """
        logger.info(f"Setting maintenance flag {flag}={value} on camera {camera_id}")
        payload = await self._request_json(
            "PUT",
            f"/cameras/{quote(camera_id, safe='')}/maintenance-status",
            f"maintenance flag update for camera {camera_id}",
            json={flag: value},
        )
        return payload if isinstance(payload, dict) else None
