# Standard library imports
import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

# External package imports
from pydantic import BaseModel, ValidationError

# Local application imports
from ....domain.constants import RawOverride
from ....domain.models import (
    CameraHealth,
    CameraSignals,
    FleetSnapshot,
    MaintenanceFlags,
    MonitoredCamera,
)
from ....domain.repositories import CameraSignalProvider, FleetDirectoryProvider
from ....utils.datetime_utils import parse_iso, parse_last_photo_time, utc_now
from ...dto.signals_dto import (
    CameraHealthResponse,
    CameraRecord,
    DeveloperRecord,
    LastPicturePayload,
    MaintenanceTaskPayload,
    ProjectRecord,
    StatusHistoryEntryPayload,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse_records(model: Type[ModelT], payloads: Iterable[Dict[str, Any]], label: str) -> List[ModelT]:
    """Validate payloads, dropping (and logging) the ones that do not fit the model"""
    records: List[ModelT] = []
    for payload in payloads:
        try:
            records.append(model.model_validate(payload))
        except ValidationError as e:
            logger.warning(f"Skipping malformed {label} record: {e.error_count()} validation error(s)")
    return records


def _result_or_default(result: Any, default: Any, label: str) -> Any:
    """Unwrap an asyncio.gather(return_exceptions=True) result"""
    if isinstance(result, BaseException):
        logger.error(f"Failed to fetch {label}: {result}", exc_info=result)
        return default
    return default if result is None else result


def latest_completed_maintenance(tasks: Iterable[MaintenanceTaskPayload]) -> Optional[datetime]:
    """
    Latest completion instant among completed tickets.

    A ticket's instant is the first present of completion, start, request
    and creation time; tickets whose instant does not parse are skipped.
    """
    latest: Optional[datetime] = None
    for task in tasks:
        if not task.is_completed:
            continue
        completed_at = task.completed_at()
        if completed_at is None:
            continue
        if latest is None or completed_at > latest:
            latest = completed_at
    return latest


def fold_health(payload: Optional[Dict[str, Any]], camera_label: str) -> Optional[CameraHealth]:
    if payload is None:
        return None
    try:
        return CameraHealthResponse.model_validate(payload).to_domain()
    except ValidationError as e:
        logger.warning(f"Ignoring malformed health payload for camera {camera_label}: {e}")
        return None


def fold_history(payloads: Iterable[Dict[str, Any]]) -> MaintenanceFlags:
    entries = []
    for record in _parse_records(StatusHistoryEntryPayload, payloads, "status history"):
        entry = record.to_domain()
        if entry is not None:
            entries.append(entry)
    return MaintenanceFlags.from_history(entries)


@dataclass(frozen=True)
class _CameraContext:
    """Directory data resolved for one camera before its signals are fetched"""
    record: CameraRecord
    developer: Optional[DeveloperRecord]
    project: Optional[ProjectRecord]
    picture: Optional[LastPicturePayload]

    @property
    def developer_tag(self) -> Optional[str]:
        if self.developer and self.developer.developer_tag:
            return self.developer.developer_tag
        return self.picture.developer_tag if self.picture else None

    @property
    def project_tag(self) -> Optional[str]:
        if self.project and self.project.project_tag:
            return self.project.project_tag
        return self.picture.project_tag if self.picture else None


class BuildFleetSnapshotUseCase:
    """
    Use case for assembling CameraSignals for the whole fleet.

    Fleet-wide records are fetched concurrently, then every camera's health,
    flag history and maintenance tickets are fetched concurrently and
    joined. A failure in any single request only degrades that signal to
    its default.
    """

    def __init__(
        self,
        directory: FleetDirectoryProvider,
        camera_signals: CameraSignalProvider,
        last_photo_offset_hours: float = 0.0,
        fallback_cycle_start: Optional[datetime] = None,
    ) -> None:
        self.directory = directory
        self.camera_signals = camera_signals
        self.last_photo_offset_hours = last_photo_offset_hours
        self.fallback_cycle_start = fallback_cycle_start

    async def execute(self) -> FleetSnapshot:
        """
        Fetch and assemble a fresh fleet snapshot.

        Returns:
            FleetSnapshot (empty when the camera list is unavailable)
        """
        results = await asyncio.gather(
            self.directory.list_cameras(),
            self.directory.list_developers(),
            self.directory.list_projects(),
            self.directory.list_last_pictures(),
            self.directory.get_maintenance_cycle_start(),
            return_exceptions=True,
        )
        cameras_raw = _result_or_default(results[0], [], "cameras")
        developers_raw = _result_or_default(results[1], [], "developers")
        projects_raw = _result_or_default(results[2], [], "projects")
        pictures_raw = _result_or_default(results[3], [], "last pictures")
        cycle_start = _result_or_default(results[4], None, "maintenance cycle start")
        if cycle_start is None:
            cycle_start = self.fallback_cycle_start

        contexts = self._resolve_contexts(
            _parse_records(CameraRecord, cameras_raw, "camera"),
            _parse_records(DeveloperRecord, developers_raw, "developer"),
            _parse_records(ProjectRecord, projects_raw, "project"),
            _parse_records(LastPicturePayload, pictures_raw, "last picture"),
        )

        cameras = await asyncio.gather(
            *(self._build_camera(context, cycle_start) for context in contexts)
        )

        logger.info(f"Built fleet snapshot with {len(cameras)} cameras")
        return FleetSnapshot(cameras=tuple(cameras), fetched_at=utc_now())

    def _resolve_contexts(
        self,
        cameras: List[CameraRecord],
        developers: List[DeveloperRecord],
        projects: List[ProjectRecord],
        pictures: List[LastPicturePayload],
    ) -> List[_CameraContext]:
        developer_by_id = {developer.id: developer for developer in developers}
        project_by_id = {project.id: project for project in projects}
        picture_by_key = {picture.key: picture for picture in pictures if picture.key}

        contexts = []
        for record in cameras:
            key = f"{record.developer_id}|{record.project_id}|{record.camera}"
            contexts.append(
                _CameraContext(
                    record=record,
                    developer=developer_by_id.get(record.developer_id),
                    project=project_by_id.get(record.project_id),
                    picture=picture_by_key.get(key),
                )
            )
        return contexts

    async def _fetch_per_camera(
        self, context: _CameraContext
    ) -> Tuple[Optional[CameraHealth], MaintenanceFlags, Optional[datetime]]:
        record = context.record
        developer_tag = context.developer_tag
        project_tag = context.project_tag

        async def _no_health() -> None:
            return None

        if developer_tag and project_tag and record.camera:
            health_request = self.camera_signals.get_health(developer_tag, project_tag, record.camera)
        else:
            health_request = _no_health()

        health_result, history_result, tasks_result = await asyncio.gather(
            health_request,
            self.camera_signals.get_status_history(record.id),
            self.camera_signals.list_maintenance_tasks(record.id),
            return_exceptions=True,
        )

        label = f"{record.camera} ({record.id})"
        health = fold_health(_result_or_default(health_result, None, f"health of {label}"), label)
        flags = fold_history(_result_or_default(history_result, [], f"history of {label}"))
        tasks = _parse_records(
            MaintenanceTaskPayload,
            _result_or_default(tasks_result, [], f"maintenance tickets of {label}"),
            "maintenance ticket",
        )
        return health, flags, latest_completed_maintenance(tasks)

    async def _build_camera(
        self, context: _CameraContext, global_cycle_start: Optional[datetime]
    ) -> MonitoredCamera:
        health, flags, last_completed = await self._fetch_per_camera(context)

        record = context.record
        developer = context.developer
        project = context.project
        picture = context.picture

        last_photo = picture.last_photo if picture else None
        last_photo_time = picture.last_photo_time if picture else None
        cycle_start = parse_iso(record.maintenance_cycle_start_date) or global_cycle_start

        signals = CameraSignals(
            raw_override=RawOverride.parse(record.status),
            last_updated_at=parse_last_photo_time(
                last_photo_time, last_photo, self.last_photo_offset_hours
            ),
            project_status=(project.status if project and project.status else "").strip().lower(),
            health=health,
            maintenance_flags=flags,
            last_maintenance_completed_at=last_completed,
            maintenance_cycle_start_date=cycle_start,
        )

        return MonitoredCamera(
            id=record.id,
            name=record.camera,
            developer_id=record.developer_id,
            project_id=record.project_id,
            developer_name=(developer.developer_name if developer else None) or "Unknown developer",
            project_name=(project.project_name if project else None) or "Unknown project",
            developer_tag=context.developer_tag,
            project_tag=context.project_tag,
            project_status=(project.status if project else None) or "unknown",
            description=record.camera_description or "",
            country=(record.country or "").strip(),
            server_folder=record.server_folder or (picture.server_folder if picture else None) or "",
            last_photo=last_photo,
            last_photo_time=last_photo_time,
            signals=signals,
        )
