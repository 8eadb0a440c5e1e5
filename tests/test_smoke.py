"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_package():
    """Verify fleet_monitor package can be imported."""
    from fleet_monitor.core.config import Settings

    settings = Settings()
    assert settings is not None
    assert hasattr(settings, "fleet_api_url")


def test_settings_from_env(mock_env):
    from fleet_monitor.core.config import get_settings

    settings = get_settings()
    assert settings.fleet_api_url == "http://fleet.test/api"
    assert settings.low_images_threshold == 140


def test_pytest_runs():
    """Basic sanity check that pytest executes tests."""
    assert True
