from .build_fleet_snapshot import BuildFleetSnapshotUseCase
from .get_monitor_view import GetMonitorViewUseCase
from .update_camera_override import UpdateCameraOverrideUseCase
from .set_maintenance_flag import SetMaintenanceFlagUseCase

__all__ = [
    "BuildFleetSnapshotUseCase",
    "GetMonitorViewUseCase",
    "UpdateCameraOverrideUseCase",
    "SetMaintenanceFlagUseCase",
]
