from .signals import (
    CameraHealth,
    StatusHistoryEntry,
    MaintenanceFlags,
    CameraSignals,
    ClassifiedCamera,
)
from .camera import MonitoredCamera, FleetSnapshot

__all__ = [
    "CameraHealth",
    "StatusHistoryEntry",
    "MaintenanceFlags",
    "CameraSignals",
    "ClassifiedCamera",
    "MonitoredCamera",
    "FleetSnapshot",
]
