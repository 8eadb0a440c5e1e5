"""
Monitor view assembly.

Turns a FleetSnapshot into the filtered, sorted rows, hierarchy and
headline metrics the dashboard displays. Everything here is synchronous and
free of I/O; classification happens once per camera per call.
"""
# Standard library imports
import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple

# Local application imports
from ...domain.constants import STATUS_LABELS, CameraStatus
from ...domain.models import ClassifiedCamera, FleetSnapshot, MonitoredCamera
from ...domain.services.filter_matcher import matches
from ...domain.services.status_classifier import (
    DEFAULT_THRESHOLDS,
    ClassifierThresholds,
    evaluate,
    minutes_since,
)
from ...utils.datetime_utils import to_iso
from ..dto.monitor_dto import (
    NO_COUNTRY_VALUE,
    CameraRow,
    DeveloperGroup,
    MonitorMetrics,
    MonitorQuery,
    MonitorView,
    ProjectGroup,
)

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 60 * 24

EvaluatedCamera = Tuple[MonitoredCamera, ClassifiedCamera]


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def last_update_label(
    last_updated_at: Optional[datetime],
    now: datetime,
    threshold_minutes: float = DEFAULT_THRESHOLDS.offline_threshold_minutes,
) -> str:
    """
    Human-readable freshness of the camera's last photo.

    Examples:
        "No photo available", "Updated", "Not updated (1 day 3 hours 5 minutes)"
    """
    minutes = minutes_since(last_updated_at, now)
    if minutes is None:
        return "No photo available"
    if minutes < threshold_minutes:
        return "Updated"

    whole_minutes = int(minutes)
    days, remainder = divmod(whole_minutes, MINUTES_PER_DAY)
    hours, mins = divmod(remainder, 60)
    parts = []
    if days > 0:
        parts.append(_plural(days, "day"))
    if hours > 0:
        parts.append(_plural(hours, "hour"))
    if mins > 0:
        parts.append(_plural(mins, "minute"))
    return f"Not updated ({' '.join(parts)})" if parts else "Not updated"


def is_accessible(camera: MonitoredCamera, accessible_developers: List[str]) -> bool:
    if not accessible_developers or accessible_developers[0] == "all":
        return True
    return camera.developer_id in accessible_developers


def matches_country(camera: MonitoredCamera, country: Optional[str]) -> bool:
    if not country:
        return True
    camera_country = (camera.country or "").strip()
    if country == NO_COUNTRY_VALUE:
        return not camera_country
    return camera_country.lower() == country.strip().lower()


def matches_search(camera: MonitoredCamera, search: str) -> bool:
    term = search.strip().lower()
    if not term:
        return True
    fields = (
        camera.name,
        camera.description,
        camera.developer_name,
        camera.developer_tag or "",
        camera.project_name,
        camera.project_tag or "",
        camera.server_folder,
        camera.country,
    )
    return any(term in (value or "").lower() for value in fields)


def _developer_sort_key(camera: MonitoredCamera) -> Tuple[str, str, str]:
    return (
        camera.developer_name.casefold(),
        camera.project_name.casefold(),
        camera.name.casefold(),
    )


def _server_sort_key(camera: MonitoredCamera) -> Tuple[str, str]:
    return ((camera.server_folder or "").casefold(), camera.name.casefold())


def filter_cameras(
    evaluated: List[EvaluatedCamera], query: MonitorQuery
) -> List[EvaluatedCamera]:
    """Apply access, directory, country, status and search filters, then sort"""
    result = [
        (camera, classified)
        for camera, classified in evaluated
        if is_accessible(camera, query.accessible_developers)
        and (not query.developer_id or camera.developer_id == query.developer_id)
        and (not query.project_id or camera.project_id == query.project_id)
        and matches_country(camera, query.country)
        and matches(classified, query.status)
        and matches_search(camera, query.search)
    ]

    sort_key = _server_sort_key if query.sort_mode == "server" else _developer_sort_key
    result.sort(key=lambda item: sort_key(item[0]))
    return result


def to_row(
    camera: MonitoredCamera,
    classified: ClassifiedCamera,
    now: datetime,
    threshold_minutes: float,
) -> CameraRow:
    signals = camera.signals
    return CameraRow(
        id=camera.id,
        name=camera.name,
        description=camera.description,
        developer_id=camera.developer_id,
        developer_name=camera.developer_name,
        developer_tag=camera.developer_tag,
        project_id=camera.project_id,
        project_name=camera.project_name,
        project_tag=camera.project_tag,
        project_status=camera.project_status,
        country=camera.country,
        server_folder=camera.server_folder,
        raw_status=signals.raw_override.value,
        status=classified.status,
        status_label=STATUS_LABELS[classified.status],
        last_photo=camera.last_photo,
        last_updated_at=to_iso(signals.last_updated_at),
        last_update_label=last_update_label(signals.last_updated_at, now, threshold_minutes),
        reasons=list(classified.reasons),
    )


def build_hierarchy(rows: List[CameraRow]) -> List[DeveloperGroup]:
    """Group rows developer -> project -> camera, each level sorted by name"""
    developers: Dict[str, DeveloperGroup] = {}
    projects: Dict[Tuple[str, str], ProjectGroup] = {}

    for row in rows:
        developer = developers.get(row.developer_id)
        if developer is None:
            developer = DeveloperGroup(id=row.developer_id, name=row.developer_name, tag=row.developer_tag)
            developers[row.developer_id] = developer

        project_key = (row.developer_id, row.project_id)
        project = projects.get(project_key)
        if project is None:
            project = ProjectGroup(
                id=row.project_id,
                name=row.project_name,
                tag=row.project_tag,
                status=row.project_status,
            )
            projects[project_key] = project
            developer.projects.append(project)

        project.cameras.append(row)

    for developer in developers.values():
        for project in developer.projects:
            project.cameras.sort(key=lambda row: row.name.casefold())
        developer.projects.sort(key=lambda project: project.name.casefold())

    return sorted(developers.values(), key=lambda developer: developer.name.casefold())


def compute_metrics(rows: List[CameraRow], active_filters: int) -> MonitorMetrics:
    return MonitorMetrics(
        total=len(rows),
        online=sum(1 for row in rows if row.status == CameraStatus.ONLINE),
        offline=sum(1 for row in rows if row.status == CameraStatus.OFFLINE),
        developers=len({row.developer_id for row in rows}),
        projects=len({row.project_id for row in rows}),
        active_filters=active_filters,
    )


def build_monitor_view(
    snapshot: FleetSnapshot,
    query: MonitorQuery,
    now: datetime,
    thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
) -> MonitorView:
    """
    Classify every camera in the snapshot and assemble the monitor view.

    Args:
        snapshot: Fleet snapshot to display
        query: Dashboard filters
        now: Evaluation instant shared by every camera
        thresholds: Classifier limits

    Returns:
        MonitorView with rows, hierarchy and metrics
    """
    evaluated = [(camera, evaluate(camera.signals, now, thresholds)) for camera in snapshot.cameras]
    visible = filter_cameras(evaluated, query)

    rows = [
        to_row(camera, classified, now, thresholds.offline_threshold_minutes)
        for camera, classified in visible
    ]

    logger.debug(f"Monitor view: {len(rows)} of {len(snapshot)} cameras match the filters")
    return MonitorView(
        cameras=rows,
        hierarchy=build_hierarchy(rows),
        metrics=compute_metrics(rows, query.active_filter_count),
        total_count=len(snapshot),
        filtered_count=len(rows),
        fetched_at=to_iso(snapshot.fetched_at),
    )
