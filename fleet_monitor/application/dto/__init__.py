from .signals_dto import (
    CameraHealthResponse,
    StatusHistoryEntryPayload,
    LastPicturePayload,
    MaintenanceTaskPayload,
    DeveloperRecord,
    ProjectRecord,
    CameraRecord,
)
from .monitor_dto import (
    NO_COUNTRY_VALUE,
    MonitorQuery,
    CameraRow,
    ProjectGroup,
    DeveloperGroup,
    MonitorMetrics,
    MonitorView,
)

__all__ = [
    "CameraHealthResponse",
    "StatusHistoryEntryPayload",
    "LastPicturePayload",
    "MaintenanceTaskPayload",
    "DeveloperRecord",
    "ProjectRecord",
    "CameraRecord",
    "NO_COUNTRY_VALUE",
    "MonitorQuery",
    "CameraRow",
    "ProjectGroup",
    "DeveloperGroup",
    "MonitorMetrics",
    "MonitorView",
]
