# Standard library imports
import logging
from typing import Any, Dict, Union

# Local application imports
from ....core.exceptions import CameraUpdateError
from ....domain.constants import MaintenanceFlagType
from ....domain.repositories import CameraStatusWriter
from ....infrastructure.cache.signal_cache import SignalCache

logger = logging.getLogger(__name__)


class SetMaintenanceFlagUseCase:
    """Use case for switching one maintenance flag of a camera on or off"""

    def __init__(self, writer: CameraStatusWriter, cache: SignalCache) -> None:
        self.writer = writer
        self.cache = cache

    def current_value(self, camera_id: str, flag: MaintenanceFlagType) -> bool:
        snapshot = self.cache.peek()
        camera = snapshot.find(camera_id) if snapshot is not None else None
        if camera is None:
            return False
        return camera.signals.maintenance_flags.get(flag)

    async def execute(
        self,
        camera_id: str,
        flag: Union[MaintenanceFlagType, str],
        value: bool,
    ) -> Dict[str, Any]:
        """
        Write a maintenance flag

        Args:
            camera_id: Camera ID
            flag: Flag name (photoDirty, betterView, ...)
            value: True to switch the flag on

        Returns:
            Updated camera payload from the backend

        Raises:
            ValueError: If `flag` is not a maintenance flag
            CameraUpdateError: If the backend rejected or failed the write
        """
        flag = MaintenanceFlagType(flag)
        updated = await self.writer.update_maintenance_flag(camera_id, flag.value, value)
        if updated is None:
            raise CameraUpdateError(
                f"Failed to set {flag.value}={value} for camera {camera_id}",
                user_message="Unable to update maintenance status. Please try again.",
                details={"camera_id": camera_id, "flag": flag.value, "value": value},
            )

        self.cache.invalidate()
        logger.info(f"Camera {camera_id} maintenance flag {flag.value} set to {value}")
        return updated

    async def toggle(self, camera_id: str, flag: Union[MaintenanceFlagType, str]) -> bool:
        """Flip a flag using the value from the last snapshot; returns the new value"""
        flag = MaintenanceFlagType(flag)
        new_value = not self.current_value(camera_id, flag)
        await self.execute(camera_id, flag, new_value)
        return new_value
