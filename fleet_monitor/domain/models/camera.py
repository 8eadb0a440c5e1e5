# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

# Local application imports
from .signals import CameraSignals


@dataclass(frozen=True)
class MonitoredCamera:
    """
    Pure domain model for a camera as seen by the monitor - no external dependencies.

    Directory information (developer, project, location) travels together
    with the signal snapshot the classifier consumes.
    """
    id: str
    name: str
    developer_id: str
    project_id: str
    developer_name: str = "Unknown developer"
    project_name: str = "Unknown project"
    developer_tag: Optional[str] = None
    project_tag: Optional[str] = None
    project_status: str = "unknown"
    description: str = ""
    country: str = ""
    server_folder: str = ""
    last_photo: Optional[str] = None
    last_photo_time: Optional[str] = None
    signals: CameraSignals = field(default_factory=CameraSignals)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.id:
            raise ValueError("Camera ID is required")


@dataclass(frozen=True)
class FleetSnapshot:
    """Immutable result of one signal fetch across the whole fleet"""
    cameras: Tuple[MonitoredCamera, ...]
    fetched_at: datetime

    def find(self, camera_id: str) -> Optional[MonitoredCamera]:
        for camera in self.cameras:
            if camera.id == camera_id:
                return camera
        return None

    def __len__(self) -> int:
        return len(self.cameras)
