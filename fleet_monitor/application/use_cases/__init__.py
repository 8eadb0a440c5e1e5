from .monitor import (
    BuildFleetSnapshotUseCase,
    GetMonitorViewUseCase,
    UpdateCameraOverrideUseCase,
    SetMaintenanceFlagUseCase,
)

__all__ = [
    "BuildFleetSnapshotUseCase",
    "GetMonitorViewUseCase",
    "UpdateCameraOverrideUseCase",
    "SetMaintenanceFlagUseCase",
]
