# Standard library imports
import os
from pathlib import Path
from typing import Final, Optional

# External package imports
from dotenv import load_dotenv


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Dashboard backend API
        self.fleet_api_url: Final[str] = os.getenv(
            "FLEET_API_URL",
            "http://localhost:5000/api"
        ).rstrip("/")
        self.http_timeout_seconds: Final[float] = float(
            os.getenv("HTTP_TIMEOUT_SECONDS", "30")
        )
        # Connection pool of the shared client used by the per-camera fan-out
        self.http_max_connections: Final[int] = int(os.getenv("HTTP_MAX_CONNECTIONS", "100"))
        self.http_max_keepalive_connections: Final[int] = int(
            os.getenv("HTTP_MAX_KEEPALIVE_CONNECTIONS", "20")
        )
        self.http_keepalive_expiry_seconds: Final[float] = float(
            os.getenv("HTTP_KEEPALIVE_EXPIRY_SECONDS", "30")
        )

        # Status classification thresholds
        self.offline_threshold_minutes: Final[float] = float(
            os.getenv("OFFLINE_THRESHOLD_MINUTES", "60")
        )
        self.maintenance_long_time_days: Final[float] = float(
            os.getenv("MAINTENANCE_LONG_TIME_DAYS", "30")
        )
        self.low_images_threshold: Final[int] = int(os.getenv("LOW_IMAGES_THRESHOLD", "140"))
        self.low_memory_threshold_gb: Final[float] = float(
            os.getenv("LOW_MEMORY_THRESHOLD_GB", "10")
        )
        self.better_view_forces_maintenance: Final[bool] = _env_bool(
            "BETTER_VIEW_FORCES_MAINTENANCE"
        )

        # Maintenance cycle fallback (ISO 8601, empty = not configured)
        self.maintenance_cycle_start_date: Final[str] = os.getenv(
            "MAINTENANCE_CYCLE_START_DATE", ""
        )

        # Fixed correction applied to last-photo timestamps, in hours
        # (e.g. -3 when the camera servers stamp photos in UTC-3 local time)
        self.last_photo_offset_hours: Final[float] = float(
            os.getenv("LAST_PHOTO_OFFSET_HOURS", "0")
        )

        # Snapshot cache
        self.signal_cache_ttl_seconds: Final[float] = float(
            os.getenv("SIGNAL_CACHE_TTL_SECONDS", "60")
        )


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Loads a `.env` file from the project root on first use.

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        env_path = Path(__file__).resolve().parent.parent.parent / ".env"
        load_dotenv(env_path)
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
