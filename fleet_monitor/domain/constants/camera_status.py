"""Closed value sets used by status classification and dashboard filtering"""

# Standard library imports
from enum import Enum
from typing import Any, FrozenSet, Optional


class CameraStatus(str, Enum):
    """Operational status derived for a camera on every evaluation."""
    ONLINE = "online"
    OFFLINE = "offline"
    OFFLINE_HOLD = "offline_hold"
    OFFLINE_NETWORK = "offline_network"
    MAINTENANCE = "maintenance"
    MAINTENANCE_HOLD = "maintenance_hold"
    MAINTENANCE_LONG_TIME = "maintenance_long_time"
    FINISHED = "finished"


class RawOverride(str, Enum):
    """Manual operator override stored on the camera record."""
    NONE = ""
    HOLD = "hold"
    NETWORK = "network"
    FINISHED = "finished"

    @classmethod
    def parse(cls, value: Optional[Any]) -> "RawOverride":
        """Normalize a free-form status string; unknown values mean no override."""
        if isinstance(value, cls):
            return value
        normalized = str(value if value is not None else "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.NONE


class MaintenanceFlagType(str, Enum):
    """Independently toggled maintenance annotations, each with its own audit history."""
    PHOTO_DIRTY = "photoDirty"
    BETTER_VIEW = "betterView"
    LOW_IMAGES = "lowImages"
    WRONG_TIME = "wrongTime"
    SHUTTER_EXPIRY = "shutterExpiry"
    DEVICE_EXPIRY = "deviceExpiry"


class FlagAction(str, Enum):
    ON = "on"
    OFF = "off"


class FilterSelector(str, Enum):
    """Dashboard status filter: a literal status or a composite virtual filter."""
    ALL = "all"

    ONLINE = "online"
    OFFLINE = "offline"
    OFFLINE_HOLD = "offline_hold"
    OFFLINE_NETWORK = "offline_network"
    MAINTENANCE = "maintenance"
    MAINTENANCE_HOLD = "maintenance_hold"
    MAINTENANCE_LONG_TIME = "maintenance_long_time"
    FINISHED = "finished"

    MAINTENANCE_LESS_IMAGES = "maintenance_less_images"
    MAINTENANCE_PHOTO_DIRTY = "maintenance_photo_dirty"
    MAINTENANCE_BETTER_VIEW = "maintenance_better_view"
    MAINTENANCE_WRONG_TIME = "maintenance_wrong_time"
    MAINTENANCE_SHUTTER_EXPIRY = "maintenance_shutter_expiry"
    DEVICE_EXPIRED = "device_expired"
    MEMORY_FULL = "memory_full"


class ProjectStatusValues:
    """Project status values that affect camera classification"""
    MAINTENANCE = "maintenance"
    MAINTENANCE_HOLD = "maintenance_hold"


# Status families used by the filter matcher
OFFLINE_FAMILY: FrozenSet[CameraStatus] = frozenset({
    CameraStatus.OFFLINE,
    CameraStatus.OFFLINE_HOLD,
    CameraStatus.OFFLINE_NETWORK,
})

# Maintenance without the hold tab
ACTIVE_MAINTENANCE: FrozenSet[CameraStatus] = frozenset({
    CameraStatus.MAINTENANCE,
    CameraStatus.MAINTENANCE_LONG_TIME,
})

ANY_MAINTENANCE: FrozenSet[CameraStatus] = ACTIVE_MAINTENANCE | {CameraStatus.MAINTENANCE_HOLD}

STATUS_LABELS = {
    CameraStatus.ONLINE: "100% health",
    CameraStatus.OFFLINE: "Offline",
    CameraStatus.OFFLINE_HOLD: "Offline",
    CameraStatus.OFFLINE_NETWORK: "Offline",
    CameraStatus.MAINTENANCE: "Maintenance",
    CameraStatus.MAINTENANCE_HOLD: "Maintenance",
    CameraStatus.MAINTENANCE_LONG_TIME: "Maintenance",
    CameraStatus.FINISHED: "Finished",
}
