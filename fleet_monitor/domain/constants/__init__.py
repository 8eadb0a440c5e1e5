"""Constants for domain value sets and payload field names"""

from .camera_status import (
    CameraStatus,
    RawOverride,
    MaintenanceFlagType,
    FlagAction,
    FilterSelector,
    ProjectStatusValues,
    OFFLINE_FAMILY,
    ACTIVE_MAINTENANCE,
    ANY_MAINTENANCE,
    STATUS_LABELS,
)
from .camera_fields import CameraFields, LastPictureFields, HealthFields, MaintenanceFields

__all__ = [
    "CameraStatus",
    "RawOverride",
    "MaintenanceFlagType",
    "FlagAction",
    "FilterSelector",
    "ProjectStatusValues",
    "OFFLINE_FAMILY",
    "ACTIVE_MAINTENANCE",
    "ANY_MAINTENANCE",
    "STATUS_LABELS",
    "CameraFields",
    "LastPictureFields",
    "HealthFields",
    "MaintenanceFields",
]
