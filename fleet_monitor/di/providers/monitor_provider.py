from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories import CameraSignalProvider, CameraStatusWriter, FleetDirectoryProvider
from ...domain.services.status_classifier import ClassifierThresholds
from ...infrastructure.cache.signal_cache import SignalCache
from ...utils.datetime_utils import parse_iso
from ...application.use_cases.monitor import (
    BuildFleetSnapshotUseCase,
    GetMonitorViewUseCase,
    SetMaintenanceFlagUseCase,
    UpdateCameraOverrideUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MonitorProvider:
    """Monitor use case provider - registers the camera monitor use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all monitor use cases.
        Use cases are created on-demand via factories.
        """
        settings = get_settings()
        thresholds = ClassifierThresholds.from_settings(settings)
        fallback_cycle_start = parse_iso(settings.maintenance_cycle_start_date)

        container.register_factory(
            BuildFleetSnapshotUseCase,
            lambda: BuildFleetSnapshotUseCase(
                directory=container.get(FleetDirectoryProvider),
                camera_signals=container.get(CameraSignalProvider),
                last_photo_offset_hours=settings.last_photo_offset_hours,
                fallback_cycle_start=fallback_cycle_start,
            )
        )

        container.register_factory(
            GetMonitorViewUseCase,
            lambda: GetMonitorViewUseCase(
                build_snapshot=container.get(BuildFleetSnapshotUseCase),
                cache=container.get(SignalCache),
                thresholds=thresholds,
            )
        )

        container.register_factory(
            UpdateCameraOverrideUseCase,
            lambda: UpdateCameraOverrideUseCase(
                writer=container.get(CameraStatusWriter),
                cache=container.get(SignalCache),
            )
        )

        container.register_factory(
            SetMaintenanceFlagUseCase,
            lambda: SetMaintenanceFlagUseCase(
                writer=container.get(CameraStatusWriter),
                cache=container.get(SignalCache),
            )
        )
