# Standard library imports
from datetime import datetime
from typing import Optional

# Local application imports
from ....domain.models import FleetSnapshot
from ....domain.services.status_classifier import DEFAULT_THRESHOLDS, ClassifierThresholds
from ....infrastructure.cache.signal_cache import SignalCache
from ....utils.datetime_utils import utc_now
from ...dto.monitor_dto import MonitorQuery, MonitorView
from ...services.monitor_view import build_monitor_view
from .build_fleet_snapshot import BuildFleetSnapshotUseCase


class GetMonitorViewUseCase:
    """Use case for the camera monitor list: cached snapshot, classified and filtered"""

    def __init__(
        self,
        build_snapshot: BuildFleetSnapshotUseCase,
        cache: SignalCache,
        thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
    ) -> None:
        self.build_snapshot = build_snapshot
        self.cache = cache
        self.thresholds = thresholds

    async def get_snapshot(self, force_refresh: bool = False) -> FleetSnapshot:
        return await self.cache.get(self.build_snapshot.execute, force_refresh=force_refresh)

    async def execute(
        self,
        query: Optional[MonitorQuery] = None,
        now: Optional[datetime] = None,
        force_refresh: bool = False,
    ) -> MonitorView:
        """
        Build the monitor view for the given filters

        Args:
            query: Dashboard filters (defaults to no filtering)
            now: Evaluation instant (defaults to the current UTC time)
            force_refresh: Refetch signals even if the cached snapshot is fresh

        Returns:
            MonitorView
        """
        snapshot = await self.get_snapshot(force_refresh=force_refresh)
        return build_monitor_view(
            snapshot,
            query or MonitorQuery(),
            now or utc_now(),
            self.thresholds,
        )
