# Standard library imports
import logging
from typing import Optional, Union

# Local application imports
from ....core.exceptions import CameraUpdateError
from ....domain.constants import RawOverride
from ....domain.repositories import CameraStatusWriter
from ....infrastructure.cache.signal_cache import SignalCache

logger = logging.getLogger(__name__)


class UpdateCameraOverrideUseCase:
    """
    Use case for setting, toggling and clearing the manual camera override.

    Every successful write invalidates the signal cache so the next read
    reclassifies the camera.
    """

    def __init__(self, writer: CameraStatusWriter, cache: SignalCache) -> None:
        self.writer = writer
        self.cache = cache

    def current_override(self, camera_id: str) -> RawOverride:
        """Override of the camera in the last snapshot, NONE if unknown"""
        snapshot = self.cache.peek()
        camera = snapshot.find(camera_id) if snapshot is not None else None
        if camera is None:
            return RawOverride.NONE
        return camera.signals.raw_override

    async def execute(self, camera_id: str, status: Union[RawOverride, str]) -> RawOverride:
        """
        Store `status` as the camera's override

        Args:
            camera_id: Camera ID
            status: New override; an empty value clears it

        Returns:
            Override stored by the backend

        Raises:
            CameraUpdateError: If the backend rejected or failed the write
        """
        override = RawOverride.parse(status)
        updated = await self.writer.update_status(camera_id, override.value)
        if updated is None:
            action = f"set status '{override.value}'" if override.value else "clear status"
            raise CameraUpdateError(
                f"Failed to {action} for camera {camera_id}",
                user_message="Unable to update camera status. Please try again.",
                details={"camera_id": camera_id, "status": override.value},
            )

        self.cache.invalidate()
        stored = RawOverride.parse(updated.get("status", override.value))
        logger.info(f"Camera {camera_id} override is now {stored.value or 'none'}")
        return stored

    async def toggle(
        self,
        camera_id: str,
        status: Union[RawOverride, str],
        current: Optional[RawOverride] = None,
    ) -> RawOverride:
        """
        Set `status`, or clear the override when it is already `status`

        Args:
            camera_id: Camera ID
            status: hold, network or finished
            current: Known current override; looked up in the cache if omitted
        """
        target = RawOverride.parse(status)
        if target == RawOverride.NONE:
            raise ValueError(f"Cannot toggle to an empty override: {status!r}")

        if current is None:
            current = self.current_override(camera_id)
        next_override = RawOverride.NONE if current == target else target
        return await self.execute(camera_id, next_override)

    async def clear(self, camera_id: str) -> RawOverride:
        return await self.execute(camera_id, RawOverride.NONE)
