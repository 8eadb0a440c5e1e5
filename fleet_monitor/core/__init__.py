from .config import Settings, get_settings, reset_settings
from .exceptions import (
    FleetMonitorError,
    InvalidFilterError,
    CameraUpdateError,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "FleetMonitorError",
    "InvalidFilterError",
    "CameraUpdateError",
]
