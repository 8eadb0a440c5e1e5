"""
Unit tests for monitor use cases (BuildFleetSnapshot, GetMonitorView).
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from fleet_monitor.application.dto.monitor_dto import MonitorQuery
from fleet_monitor.application.use_cases.monitor.build_fleet_snapshot import (
    BuildFleetSnapshotUseCase,
)
from fleet_monitor.application.use_cases.monitor.get_monitor_view import GetMonitorViewUseCase
from fleet_monitor.domain.constants import CameraStatus, RawOverride
from fleet_monitor.infrastructure.cache.signal_cache import SignalCache

NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def _iso(dt):
    return dt.isoformat().replace("+00:00", "Z")


def _directory(cameras, developers=None, projects=None, pictures=None, cycle_start=None):
    directory = AsyncMock()
    directory.list_cameras.return_value = cameras
    directory.list_developers.return_value = developers or []
    directory.list_projects.return_value = projects or []
    directory.list_last_pictures.return_value = pictures or []
    directory.get_maintenance_cycle_start.return_value = cycle_start
    return directory


def _signals(health=None, history=None, tasks=None):
    provider = AsyncMock()
    provider.get_health.return_value = health
    provider.get_status_history.return_value = history or []
    provider.list_maintenance_tasks.return_value = tasks or []
    return provider


DEVELOPERS = [
    {"_id": "dev-1", "developerName": "Acme Builders", "developerTag": "acme"},
    {"_id": "dev-2", "developerName": "Beta Homes", "developerTag": "beta"},
]
PROJECTS = [
    {"_id": "proj-1", "projectName": "Tower A", "projectTag": "tower-a", "status": "Active"},
    {"_id": "proj-2", "projectName": "Villa B", "projectTag": "villa-b", "status": "maintenance_hold"},
]


def _picture(dev, proj, name, minutes_ago):
    return {
        "developerId": dev,
        "projectId": proj,
        "cameraName": name,
        "lastPhoto": "20250601115000.jpg",
        "lastPhotoTime": _iso(NOW - timedelta(minutes=minutes_ago)),
    }


class TestBuildFleetSnapshotUseCase:
    """Tests for BuildFleetSnapshotUseCase"""

    @pytest.mark.asyncio
    async def test_assembles_camera_signals(self):
        directory = _directory(
            cameras=[
                {
                    "_id": "cam-1",
                    "camera": "north",
                    "developer": "dev-1",
                    "project": "proj-1",
                    "status": " HOLD ",
                    "country": " Brazil ",
                }
            ],
            developers=DEVELOPERS,
            projects=PROJECTS,
            pictures=[_picture("dev-1", "proj-1", "north", 5)],
        )
        provider = _signals(
            health={"totalImages": 42, "hasDeviceExpired": True},
            history=[
                {"statusType": "photoDirty", "action": "on", "performedAt": "2025-05-01T00:00:00Z"},
                {"statusType": "photoDirty", "action": "off", "performedAt": "2025-05-02T00:00:00Z"},
                {"statusType": "wrongTime", "action": "on", "performedAt": "2025-05-03T00:00:00Z"},
            ],
            tasks=[
                {"status": "completed", "completionTime": "2025-05-20T00:00:00Z"},
                {"status": "completed", "completionTime": "2025-05-25T00:00:00Z"},
                {"status": "pending", "completionTime": "2025-05-30T00:00:00Z"},
                {"status": "completed", "completionTime": "garbage"},
            ],
        )

        snapshot = await BuildFleetSnapshotUseCase(directory, provider).execute()

        assert len(snapshot) == 1
        camera = snapshot.find("cam-1")
        assert camera.developer_name == "Acme Builders"
        assert camera.project_name == "Tower A"
        assert camera.country == "Brazil"
        signals = camera.signals
        assert signals.raw_override == RawOverride.HOLD
        assert signals.project_status == "active"
        assert signals.last_updated_at == NOW - timedelta(minutes=5)
        assert signals.health.total_images == 42
        assert signals.health.has_device_expired is True
        assert signals.maintenance_flags.photo_dirty is False
        assert signals.maintenance_flags.wrong_time is True
        assert signals.last_maintenance_completed_at == datetime(2025, 5, 25, tzinfo=timezone.utc)
        provider.get_health.assert_awaited_once_with("acme", "tower-a", "north")

    @pytest.mark.asyncio
    async def test_tags_fall_back_to_last_picture(self):
        picture = _picture("dev-9", "proj-9", "south", 5)
        picture.update({"developerTag": "ghost", "projectTag": "ghost-site", "serverfolder": "srv-9"})
        directory = _directory(
            cameras=[{"_id": "cam-9", "camera": "south", "developer": "dev-9", "project": "proj-9"}],
            pictures=[picture],
        )
        provider = _signals()

        snapshot = await BuildFleetSnapshotUseCase(directory, provider).execute()

        camera = snapshot.find("cam-9")
        assert camera.developer_name == "Unknown developer"
        assert camera.project_status == "unknown"
        assert camera.developer_tag == "ghost"
        assert camera.server_folder == "srv-9"
        provider.get_health.assert_awaited_once_with("ghost", "ghost-site", "south")

    @pytest.mark.asyncio
    async def test_health_skipped_without_tags(self):
        directory = _directory(
            cameras=[{"_id": "cam-1", "camera": "north", "developer": "dev-x", "project": "proj-x"}]
        )
        provider = _signals()

        snapshot = await BuildFleetSnapshotUseCase(directory, provider).execute()

        provider.get_health.assert_not_called()
        assert snapshot.find("cam-1").signals.health is None
        assert snapshot.find("cam-1").signals.last_updated_at is None

    @pytest.mark.asyncio
    async def test_per_camera_failure_is_isolated(self):
        directory = _directory(
            cameras=[
                {"_id": "cam-1", "camera": "north", "developer": "dev-1", "project": "proj-1"},
                {"_id": "cam-2", "camera": "south", "developer": "dev-1", "project": "proj-1"},
            ],
            developers=DEVELOPERS,
            projects=PROJECTS,
        )
        provider = _signals(health={"totalImages": 500})

        async def history(camera_id):
            if camera_id == "cam-1":
                raise RuntimeError("history backend down")
            return [{"statusType": "photoDirty", "action": "on", "performedAt": "2025-05-01T00:00:00Z"}]

        provider.get_status_history.side_effect = history

        snapshot = await BuildFleetSnapshotUseCase(directory, provider).execute()

        assert len(snapshot) == 2
        assert snapshot.find("cam-1").signals.maintenance_flags.photo_dirty is False
        assert snapshot.find("cam-1").signals.health.total_images == 500
        assert snapshot.find("cam-2").signals.maintenance_flags.photo_dirty is True

    @pytest.mark.asyncio
    async def test_directory_failure_gives_empty_snapshot(self):
        directory = _directory(cameras=[])
        directory.list_cameras.side_effect = RuntimeError("unreachable")

        snapshot = await BuildFleetSnapshotUseCase(directory, _signals()).execute()

        assert len(snapshot) == 0

    @pytest.mark.asyncio
    async def test_malformed_records_skipped(self):
        directory = _directory(
            cameras=[{"camera": "no id"}, {"_id": "cam-1", "camera": "north"}],
        )
        snapshot = await BuildFleetSnapshotUseCase(directory, _signals()).execute()
        assert [camera.id for camera in snapshot.cameras] == ["cam-1"]

    @pytest.mark.asyncio
    async def test_cycle_start_resolution(self):
        global_start = datetime(2025, 3, 1, tzinfo=timezone.utc)
        fallback = datetime(2024, 1, 1, tzinfo=timezone.utc)
        directory = _directory(
            cameras=[
                {"_id": "cam-1", "camera": "a", "maintenanceCycleStartDate": "2025-05-01T00:00:00Z"},
                {"_id": "cam-2", "camera": "b"},
            ],
            cycle_start=global_start,
        )
        use_case = BuildFleetSnapshotUseCase(directory, _signals(), fallback_cycle_start=fallback)

        snapshot = await use_case.execute()

        assert snapshot.find("cam-1").signals.maintenance_cycle_start_date == datetime(
            2025, 5, 1, tzinfo=timezone.utc
        )
        assert snapshot.find("cam-2").signals.maintenance_cycle_start_date == global_start

        directory.get_maintenance_cycle_start.return_value = None
        snapshot = await use_case.execute()
        assert snapshot.find("cam-2").signals.maintenance_cycle_start_date == fallback

    @pytest.mark.asyncio
    async def test_last_photo_offset(self):
        directory = _directory(
            cameras=[{"_id": "cam-1", "camera": "north", "developer": "dev-1", "project": "proj-1"}],
            pictures=[_picture("dev-1", "proj-1", "north", 0)],
        )
        use_case = BuildFleetSnapshotUseCase(directory, _signals(), last_photo_offset_hours=-3)

        snapshot = await use_case.execute()

        assert snapshot.find("cam-1").signals.last_updated_at == NOW - timedelta(hours=3)


class TestGetMonitorViewUseCase:
    """Tests for GetMonitorViewUseCase"""

    @staticmethod
    def _use_case():
        directory = _directory(
            cameras=[
                {"_id": "cam-1", "camera": "north", "developer": "dev-1", "project": "proj-1",
                 "country": "Brazil", "serverFolder": "srv-b"},
                {"_id": "cam-2", "camera": "east", "developer": "dev-1", "project": "proj-1",
                 "country": "brazil", "serverFolder": "srv-a"},
                {"_id": "cam-3", "camera": "west", "developer": "dev-2", "project": "proj-2",
                 "serverFolder": "srv-c"},
                {"_id": "cam-4", "camera": "dark", "developer": "dev-2", "project": "proj-2",
                 "status": "network"},
            ],
            developers=DEVELOPERS,
            projects=PROJECTS,
            pictures=[
                _picture("dev-1", "proj-1", "north", 5),
                _picture("dev-1", "proj-1", "east", 10),
                _picture("dev-2", "proj-2", "west", 5),
                _picture("dev-2", "proj-2", "dark", 60 * 26 + 5),
            ],
        )
        completed = [{"status": "completed", "completionTime": _iso(NOW - timedelta(days=2))}]
        provider = _signals(health={"totalImages": 500}, tasks=completed)

        async def health(developer_tag, project_tag, camera_name):
            if camera_name == "east":
                return {"totalImages": 12}
            return {"totalImages": 500}

        provider.get_health.side_effect = health
        build = BuildFleetSnapshotUseCase(directory, provider)
        return GetMonitorViewUseCase(build, SignalCache(ttl_seconds=60)), directory

    @pytest.mark.asyncio
    async def test_full_view(self):
        use_case, _ = self._use_case()

        view = await use_case.execute(now=NOW)

        assert view.total_count == 4
        assert view.filtered_count == 4
        statuses = {row.id: row.status for row in view.cameras}
        assert statuses == {
            "cam-1": CameraStatus.ONLINE,
            "cam-2": CameraStatus.MAINTENANCE,
            "cam-3": CameraStatus.MAINTENANCE_HOLD,
            "cam-4": CameraStatus.OFFLINE_NETWORK,
        }
        # developer, project, camera name order
        assert [row.id for row in view.cameras] == ["cam-2", "cam-1", "cam-4", "cam-3"]
        assert view.metrics.online == 1
        assert view.metrics.offline == 0
        assert view.metrics.developers == 2
        assert view.metrics.projects == 2

    @pytest.mark.asyncio
    async def test_rows_carry_labels(self):
        use_case, _ = self._use_case()

        view = await use_case.execute(now=NOW)

        rows = {row.id: row for row in view.cameras}
        assert rows["cam-1"].last_update_label == "Updated"
        assert rows["cam-1"].status_label == "100% health"
        assert rows["cam-4"].last_update_label == "Not updated (1 day 2 hours 5 minutes)"
        assert rows["cam-4"].raw_status == "network"
        assert rows["cam-2"].reasons == ["low_images"]

    @pytest.mark.asyncio
    async def test_filters(self):
        use_case, _ = self._use_case()

        by_country = await use_case.execute(MonitorQuery(country="BRAZIL"), now=NOW)
        assert {row.id for row in by_country.cameras} == {"cam-1", "cam-2"}

        no_country = await use_case.execute(MonitorQuery(country="__no_country__"), now=NOW)
        assert {row.id for row in no_country.cameras} == {"cam-3", "cam-4"}

        less_images = await use_case.execute(MonitorQuery(status="maintenance_less_images"), now=NOW)
        assert [row.id for row in less_images.cameras] == ["cam-2"]

        search = await use_case.execute(MonitorQuery(search="VILLA"), now=NOW)
        assert {row.id for row in search.cameras} == {"cam-3", "cam-4"}
        assert search.metrics.active_filters == 1

        project = await use_case.execute(MonitorQuery(developer_id="dev-1", project_id="proj-1"), now=NOW)
        assert project.filtered_count == 2

    @pytest.mark.asyncio
    async def test_accessible_developers(self):
        use_case, _ = self._use_case()

        restricted = await use_case.execute(MonitorQuery(accessible_developers=["dev-2"]), now=NOW)
        assert {row.developer_id for row in restricted.cameras} == {"dev-2"}

        everyone = await use_case.execute(MonitorQuery(accessible_developers=["all"]), now=NOW)
        assert everyone.filtered_count == 4

    @pytest.mark.asyncio
    async def test_server_sort(self):
        use_case, _ = self._use_case()

        view = await use_case.execute(MonitorQuery(sort_mode="server"), now=NOW)

        assert [row.id for row in view.cameras] == ["cam-4", "cam-2", "cam-1", "cam-3"]

    @pytest.mark.asyncio
    async def test_hierarchy(self):
        use_case, _ = self._use_case()

        view = await use_case.execute(now=NOW)

        assert [group.name for group in view.hierarchy] == ["Acme Builders", "Beta Homes"]
        tower = view.hierarchy[0].projects[0]
        assert tower.name == "Tower A"
        assert [row.name for row in tower.cameras] == ["east", "north"]

    @pytest.mark.asyncio
    async def test_snapshot_cached_between_calls(self):
        use_case, directory = self._use_case()

        await use_case.execute(now=NOW)
        await use_case.execute(MonitorQuery(status="online"), now=NOW)
        assert directory.list_cameras.await_count == 1

        await use_case.execute(now=NOW, force_refresh=True)
        assert directory.list_cameras.await_count == 2
