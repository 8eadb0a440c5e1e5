"""
Camera status classification.

Combines connectivity, device health, maintenance flags, manual overrides
and project state into exactly one CameraStatus. Evaluation order, first
match wins:

1. finished override
2. offline family (no photo within the offline threshold)
3. online when no maintenance reason is present
4. maintenance_hold, maintenance_long_time, maintenance

Everything here is a pure function of its arguments: no I/O, no clock
reads, no exceptions for missing signals.
"""
# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ..constants import CameraStatus, ProjectStatusValues, RawOverride
from ..models.signals import CameraSignals, ClassifiedCamera
from .memory_size import DEFAULT_LOW_MEMORY_THRESHOLD_GB, is_low_memory
from ...utils.datetime_utils import ensure_utc

OFFLINE_THRESHOLD_MINUTES = 60
MAINTENANCE_LONG_TIME_DAYS = 30
LOW_IMAGES_THRESHOLD = 140

_PROJECT_MAINTENANCE_STATUSES = frozenset({
    ProjectStatusValues.MAINTENANCE,
    ProjectStatusValues.MAINTENANCE_HOLD,
})


@dataclass(frozen=True)
class ClassifierThresholds:
    """Tunable limits of the classifier; defaults are the production values."""
    offline_threshold_minutes: float = OFFLINE_THRESHOLD_MINUTES
    maintenance_long_time_days: float = MAINTENANCE_LONG_TIME_DAYS
    low_images_threshold: int = LOW_IMAGES_THRESHOLD
    low_memory_threshold_gb: float = DEFAULT_LOW_MEMORY_THRESHOLD_GB
    # Better-view is an annotation; it only forces maintenance when enabled
    better_view_forces_maintenance: bool = False

    @classmethod
    def from_settings(cls, settings) -> "ClassifierThresholds":
        return cls(
            offline_threshold_minutes=settings.offline_threshold_minutes,
            maintenance_long_time_days=settings.maintenance_long_time_days,
            low_images_threshold=settings.low_images_threshold,
            low_memory_threshold_gb=settings.low_memory_threshold_gb,
            better_view_forces_maintenance=settings.better_view_forces_maintenance,
        )


DEFAULT_THRESHOLDS = ClassifierThresholds()


def minutes_since(timestamp: Optional[datetime], now: datetime) -> Optional[float]:
    """Minutes elapsed from `timestamp` to `now`, or None when the timestamp is unknown."""
    if timestamp is None:
        return None
    return (ensure_utc(now) - ensure_utc(timestamp)).total_seconds() / 60.0


def is_offline(
    signals: CameraSignals,
    now: datetime,
    thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
) -> bool:
    minutes = minutes_since(signals.last_updated_at, now)
    return minutes is None or minutes >= thresholds.offline_threshold_minutes


def has_low_images(
    signals: CameraSignals,
    thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
) -> bool:
    """Image count from the latest health fetch is below the threshold."""
    health = signals.usable_health
    return (
        health is not None
        and health.total_images is not None
        and health.total_images < thresholds.low_images_threshold
    )


def is_long_time_since_maintenance(
    signals: CameraSignals,
    now: datetime,
    thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
) -> bool:
    """
    True when the last completed maintenance (or the cycle start) is older
    than the long-time window, or when neither is known.
    """
    reference = signals.last_maintenance_completed_at or signals.maintenance_cycle_start_date
    if reference is None:
        return True
    days = (ensure_utc(now) - ensure_utc(reference)).total_seconds() / 86400.0
    return days > thresholds.maintenance_long_time_days


def has_low_memory(
    signals: CameraSignals,
    thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
) -> bool:
    health = signals.usable_health
    if health is None:
        return False
    return is_low_memory(
        health.memory_available,
        health.has_memory_assigned,
        thresholds.low_memory_threshold_gb,
    )


def resolve_device_expired(signals: CameraSignals) -> bool:
    """Device expiry for the `device_expired` filter: health response when usable, audit flag otherwise."""
    health = signals.usable_health
    if health is not None:
        return health.has_device_expired
    return signals.maintenance_flags.device_expiry


def has_device_expiry(signals: CameraSignals) -> bool:
    """Audit flag or usable health response reports an expired device."""
    health = signals.usable_health
    return signals.maintenance_flags.device_expiry or (
        health is not None and health.has_device_expired
    )


def has_shutter_expiry(signals: CameraSignals) -> bool:
    """Audit flag or usable health response reports an expired shutter."""
    health = signals.usable_health
    return signals.maintenance_flags.shutter_expiry or (
        health is not None and health.has_shutter_expiry
    )


def evaluate(
    signals: CameraSignals,
    now: datetime,
    thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
) -> ClassifiedCamera:
    """
    Classify a camera and keep the derived reasons for filtering.

    Offline and finished cameras report no maintenance reasons.

    Args:
        signals: Signal snapshot for one camera
        now: Evaluation instant (naive values are taken as UTC)
        thresholds: Classifier limits

    Returns:
        ClassifiedCamera with the status and derived reasons
    """
    override = signals.raw_override

    if override == RawOverride.FINISHED:
        return ClassifiedCamera(status=CameraStatus.FINISHED, signals=signals)

    if is_offline(signals, now, thresholds):
        if override == RawOverride.NETWORK:
            status = CameraStatus.OFFLINE_NETWORK
        elif override == RawOverride.HOLD:
            status = CameraStatus.OFFLINE_HOLD
        else:
            status = CameraStatus.OFFLINE
        return ClassifiedCamera(status=status, signals=signals)

    flags = signals.maintenance_flags
    project_status = (signals.project_status or "").strip().lower()

    low_images = has_low_images(signals, thresholds)
    long_time = is_long_time_since_maintenance(signals, now, thresholds)
    low_memory = has_low_memory(signals, thresholds)
    device_expired = resolve_device_expired(signals)
    any_device_expiry = has_device_expiry(signals)
    shutter_expiry = has_shutter_expiry(signals)
    project_maintenance = project_status in _PROJECT_MAINTENANCE_STATUSES

    any_reason = (
        project_maintenance
        or low_images
        or flags.photo_dirty
        or (flags.better_view and thresholds.better_view_forces_maintenance)
        or flags.wrong_time
        or low_memory
        or shutter_expiry
        or any_device_expiry
        or long_time
    )

    if not any_reason:
        status = CameraStatus.ONLINE
    elif override == RawOverride.HOLD or project_status == ProjectStatusValues.MAINTENANCE_HOLD:
        status = CameraStatus.MAINTENANCE_HOLD
    elif long_time:
        status = CameraStatus.MAINTENANCE_LONG_TIME
    else:
        status = CameraStatus.MAINTENANCE

    return ClassifiedCamera(
        status=status,
        signals=signals,
        has_low_images=low_images,
        is_long_time=long_time,
        low_memory=low_memory,
        device_expired=device_expired,
        any_device_expiry=any_device_expiry,
        shutter_expiry=shutter_expiry,
    )


def classify(
    signals: CameraSignals,
    now: datetime,
    thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
) -> CameraStatus:
    """Assign exactly one CameraStatus to a camera's signals at instant `now`."""
    return evaluate(signals, now, thresholds).status
