"""
Shared pytest fixtures for fleet monitor tests.
"""
import os
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest

from fleet_monitor.core.config import reset_settings
from fleet_monitor.domain.constants import RawOverride
from fleet_monitor.domain.models import CameraHealth, CameraSignals, MaintenanceFlags

NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed evaluation instant shared by classifier tests."""
    return NOW


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "FLEET_API_URL": "http://fleet.test/api/",
        "OFFLINE_THRESHOLD_MINUTES": "60",
        "LOW_IMAGES_THRESHOLD": "140",
        "SIGNAL_CACHE_TTL_SECONDS": "60",
    }
    reset_settings()
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars
    reset_settings()


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.fleet_api_url = "http://fleet.test/api"
    mock.http_timeout_seconds = 5.0
    mock.http_max_connections = 8
    mock.http_max_keepalive_connections = 4
    mock.http_keepalive_expiry_seconds = 15.0
    mock.offline_threshold_minutes = 60
    mock.maintenance_long_time_days = 30
    mock.low_images_threshold = 140
    mock.low_memory_threshold_gb = 10.0
    mock.better_view_forces_maintenance = False
    mock.maintenance_cycle_start_date = ""
    mock.last_photo_offset_hours = 0.0
    mock.signal_cache_ttl_seconds = 60.0

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("fleet_monitor.core.config.get_settings", return_value=mock), patch(
        "fleet_monitor.infrastructure.external.base_api_client.get_settings", return_value=mock
    ), patch(
        "fleet_monitor.infrastructure.http_client_factory.get_settings", return_value=mock
    ), patch(
        "fleet_monitor.di.providers.client_provider.get_settings", return_value=mock
    ), patch(
        "fleet_monitor.di.providers.monitor_provider.get_settings", return_value=mock
    ):
        yield mock


def make_signals(
    minutes_ago=10,
    now=NOW,
    raw_override=RawOverride.NONE,
    project_status="active",
    health=None,
    flags=None,
    completed_days_ago=5,
    cycle_start=None,
):
    """Build CameraSignals relative to `now`; None for an argument means unknown."""
    return CameraSignals(
        raw_override=raw_override,
        last_updated_at=None if minutes_ago is None else now - timedelta(minutes=minutes_ago),
        project_status=project_status,
        health=health,
        maintenance_flags=flags or MaintenanceFlags(),
        last_maintenance_completed_at=(
            None if completed_days_ago is None else now - timedelta(days=completed_days_ago)
        ),
        maintenance_cycle_start_date=cycle_start,
    )


def make_health(**overrides):
    values = {
        "total_images": 500,
        "has_device_expired": False,
        "has_shutter_expiry": False,
        "has_memory_assigned": False,
        "memory_available": None,
    }
    values.update(overrides)
    return CameraHealth(**values)


@pytest.fixture
def signals_factory():
    """Factory fixture for CameraSignals (see make_signals)."""
    return make_signals


@pytest.fixture
def health_factory():
    """Factory fixture for CameraHealth with healthy defaults."""
    return make_health
