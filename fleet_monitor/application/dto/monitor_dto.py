from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ...core.exceptions import InvalidFilterError
from ...domain.constants import CameraStatus, FilterSelector
from ...domain.services.filter_matcher import parse_selector

NO_COUNTRY_VALUE = "__no_country__"
SORT_MODES = ("developer", "server")


class MonitorQuery(BaseModel):
    """DTO for the camera monitor filters"""
    developer_id: Optional[str] = None
    project_id: Optional[str] = None
    country: Optional[str] = None
    status: FilterSelector = FilterSelector.ALL
    search: str = ""
    sort_mode: str = "developer"
    # Empty or ["all"] means every developer is visible
    accessible_developers: List[str] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value):
        return parse_selector(value)

    @field_validator("sort_mode", mode="before")
    @classmethod
    def _parse_sort_mode(cls, value):
        normalized = (value or "developer").strip().lower()
        if normalized not in SORT_MODES:
            raise InvalidFilterError(value, kind="sort mode")
        return normalized

    @property
    def active_filter_count(self) -> int:
        count = 0
        if self.developer_id:
            count += 1
        if self.project_id:
            count += 1
        if self.country:
            count += 1
        if self.status != FilterSelector.ALL:
            count += 1
        if self.search.strip():
            count += 1
        if self.sort_mode != "developer":
            count += 1
        return count


class CameraRow(BaseModel):
    """DTO for one camera in the monitor list"""
    id: str
    name: str
    description: str = ""
    developer_id: str
    developer_name: str
    developer_tag: Optional[str] = None
    project_id: str
    project_name: str
    project_tag: Optional[str] = None
    project_status: str = "unknown"
    country: str = ""
    server_folder: str = ""
    raw_status: str = ""
    status: CameraStatus
    status_label: str
    last_photo: Optional[str] = None
    last_updated_at: Optional[str] = None
    last_update_label: str
    reasons: List[str] = Field(default_factory=list)


class ProjectGroup(BaseModel):
    id: str
    name: str
    tag: Optional[str] = None
    status: Optional[str] = None
    cameras: List[CameraRow] = Field(default_factory=list)


class DeveloperGroup(BaseModel):
    id: str
    name: str
    tag: Optional[str] = None
    projects: List[ProjectGroup] = Field(default_factory=list)


class MonitorMetrics(BaseModel):
    """Headline counters over the filtered list"""
    total: int = 0
    online: int = 0
    offline: int = 0
    developers: int = 0
    projects: int = 0
    active_filters: int = 0


class MonitorView(BaseModel):
    """DTO for the camera monitor response"""
    cameras: List[CameraRow] = Field(default_factory=list)
    hierarchy: List[DeveloperGroup] = Field(default_factory=list)
    metrics: MonitorMetrics = Field(default_factory=MonitorMetrics)
    total_count: int = 0
    filtered_count: int = 0
    fetched_at: Optional[str] = None
