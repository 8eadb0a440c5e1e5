# Standard library imports
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, Iterable, Optional, Tuple

# Local application imports
from ..constants import (
    OFFLINE_FAMILY,
    CameraStatus,
    FlagAction,
    MaintenanceFlagType,
    RawOverride,
)


@dataclass(frozen=True)
class CameraHealth:
    """
    Device-health metrics reported for one camera.

    A response carrying `error` is kept for display but is not a usable
    health signal.
    """
    total_images: Optional[int] = None
    has_device_expired: bool = False
    has_shutter_expiry: bool = False
    has_memory_assigned: bool = False
    memory_available: Optional[str] = None
    shutter_count: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_usable(self) -> bool:
        return not self.error


@dataclass(frozen=True)
class StatusHistoryEntry:
    """One on/off toggle of a maintenance flag"""
    status_type: MaintenanceFlagType
    action: FlagAction
    performed_by: str
    performed_at: datetime


_FLAG_ATTRIBUTES: Dict[MaintenanceFlagType, str] = {
    MaintenanceFlagType.PHOTO_DIRTY: "photo_dirty",
    MaintenanceFlagType.BETTER_VIEW: "better_view",
    MaintenanceFlagType.LOW_IMAGES: "low_images",
    MaintenanceFlagType.WRONG_TIME: "wrong_time",
    MaintenanceFlagType.SHUTTER_EXPIRY: "shutter_expiry",
    MaintenanceFlagType.DEVICE_EXPIRY: "device_expiry",
}


@dataclass(frozen=True)
class MaintenanceFlags:
    """Current value of the six maintenance flags"""
    photo_dirty: bool = False
    better_view: bool = False
    low_images: bool = False
    wrong_time: bool = False
    shutter_expiry: bool = False
    device_expiry: bool = False

    def get(self, flag: MaintenanceFlagType) -> bool:
        return getattr(self, _FLAG_ATTRIBUTES[flag])

    def with_flag(self, flag: MaintenanceFlagType, value: bool) -> "MaintenanceFlags":
        return replace(self, **{_FLAG_ATTRIBUTES[flag]: value})

    @classmethod
    def from_history(cls, entries: Iterable[StatusHistoryEntry]) -> "MaintenanceFlags":
        """
        Fold an audit history into current flag values.

        Each flag takes the action of its most recent entry by `performed_at`;
        a flag with no entries stays off. Input order does not matter.
        """
        latest: Dict[MaintenanceFlagType, StatusHistoryEntry] = {}
        for entry in entries:
            current = latest.get(entry.status_type)
            if current is None or entry.performed_at > current.performed_at:
                latest[entry.status_type] = entry

        flags = cls()
        for flag_type, entry in latest.items():
            flags = flags.with_flag(flag_type, entry.action == FlagAction.ON)
        return flags


@dataclass(frozen=True)
class CameraSignals:
    """
    Snapshot of every signal the classifier consumes for one camera.

    All fields are independently optional; missing values take the
    documented defaults rather than raising.
    """
    raw_override: RawOverride = RawOverride.NONE
    last_updated_at: Optional[datetime] = None
    project_status: str = ""
    health: Optional[CameraHealth] = None
    maintenance_flags: MaintenanceFlags = field(default_factory=MaintenanceFlags)
    last_maintenance_completed_at: Optional[datetime] = None
    maintenance_cycle_start_date: Optional[datetime] = None

    @property
    def usable_health(self) -> Optional[CameraHealth]:
        if self.health is not None and self.health.is_usable:
            return self.health
        return None


@dataclass(frozen=True)
class ClassifiedCamera:
    """
    Classification result plus the derived reasons the filter matcher needs.

    `shutter_expiry` and `any_device_expiry` combine the audit flag with the
    health response. `device_expired` is the value the `device_expired`
    filter reads: health response first, audit flag as fallback.
    """
    status: CameraStatus
    signals: CameraSignals
    has_low_images: bool = False
    is_long_time: bool = False
    low_memory: bool = False
    device_expired: bool = False
    any_device_expiry: bool = False
    shutter_expiry: bool = False

    @property
    def flags(self) -> MaintenanceFlags:
        return self.signals.maintenance_flags

    @property
    def is_connected(self) -> bool:
        return self.status not in OFFLINE_FAMILY and self.status != CameraStatus.FINISHED

    @property
    def reasons(self) -> Tuple[str, ...]:
        """Names of the maintenance reasons that are currently set; empty unless connected"""
        if not self.is_connected:
            return ()
        flags = self.flags
        candidates = (
            ("low_images", self.has_low_images or flags.low_images),
            ("photo_dirty", flags.photo_dirty),
            ("better_view", flags.better_view),
            ("wrong_time", flags.wrong_time),
            ("low_memory", self.low_memory),
            ("shutter_expiry", self.shutter_expiry),
            ("device_expired", self.device_expired or self.any_device_expiry),
            ("long_time", self.is_long_time),
        )
        return tuple(name for name, active in candidates if active)
