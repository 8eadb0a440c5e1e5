"""
Wire payloads of the dashboard backend API.

Every model tolerates extra fields; the backend adds attributes freely.
"""
from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...domain.constants import (
    CameraFields,
    FlagAction,
    HealthFields,
    LastPictureFields,
    MaintenanceFields,
    MaintenanceFlagType,
)
from ...domain.models import CameraHealth, StatusHistoryEntry
from ...utils.datetime_utils import parse_iso


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


def _reference_id(value: Union[str, Dict[str, Any], None]) -> str:
    """Extract an id from either a plain id string or an embedded {'_id': ...} object"""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return str(value.get("_id") or "")
    return ""


class CameraHealthResponse(_ApiModel):
    """DTO for the camera health endpoint"""
    total_images: Optional[int] = Field(default=None, alias=HealthFields.TOTAL_IMAGES)
    has_device_expired: bool = Field(default=False, alias=HealthFields.HAS_DEVICE_EXPIRED)
    has_shutter_expiry: bool = Field(default=False, alias=HealthFields.HAS_SHUTTER_EXPIRY)
    has_memory_assigned: bool = Field(default=False, alias=HealthFields.HAS_MEMORY_ASSIGNED)
    memory_available: Optional[str] = Field(default=None, alias=HealthFields.MEMORY_AVAILABLE)
    shutter_count: Optional[int] = Field(default=None, alias=HealthFields.SHUTTER_COUNT)
    error: Optional[str] = None

    @field_validator("has_device_expired", "has_shutter_expiry", "has_memory_assigned", mode="before")
    @classmethod
    def _none_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("memory_available", mode="before")
    @classmethod
    def _memory_as_text(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    def to_domain(self) -> CameraHealth:
        return CameraHealth(
            total_images=self.total_images,
            has_device_expired=self.has_device_expired,
            has_shutter_expiry=self.has_shutter_expiry,
            has_memory_assigned=self.has_memory_assigned,
            memory_available=self.memory_available,
            shutter_count=self.shutter_count,
            error=self.error or None,
        )


class StatusHistoryEntryPayload(_ApiModel):
    """DTO for one maintenance-flag audit entry"""
    status_type: str = Field(alias="statusType")
    action: str
    performed_by: str = Field(default="", alias="performedBy")
    performed_at: Optional[str] = Field(default=None, alias="performedAt")

    @field_validator("action", mode="before")
    @classmethod
    def _bool_action(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return FlagAction.ON.value if value else FlagAction.OFF.value
        return value

    @field_validator("performed_at", mode="before")
    @classmethod
    def _datetime_as_text(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.isoformat()
        return value

    def to_domain(self) -> Optional[StatusHistoryEntry]:
        """Domain entry, or None when the flag type, action or timestamp is unusable"""
        performed_at = parse_iso(self.performed_at)
        if performed_at is None:
            return None
        try:
            status_type = MaintenanceFlagType(self.status_type)
            action = FlagAction(str(self.action).strip().lower())
        except ValueError:
            return None
        return StatusHistoryEntry(
            status_type=status_type,
            action=action,
            performed_by=self.performed_by,
            performed_at=performed_at,
        )


class LastPicturePayload(_ApiModel):
    """DTO for one last-picture snapshot record"""
    developer_id: Optional[str] = Field(default=None, alias=LastPictureFields.DEVELOPER_ID)
    project_id: Optional[str] = Field(default=None, alias=LastPictureFields.PROJECT_ID)
    developer_tag: Optional[str] = Field(default=None, alias=LastPictureFields.DEVELOPER_TAG)
    project_tag: Optional[str] = Field(default=None, alias=LastPictureFields.PROJECT_TAG)
    camera_name: Optional[str] = Field(default=None, alias=LastPictureFields.CAMERA_NAME)
    server_folder: Optional[str] = Field(default=None, alias=LastPictureFields.SERVER_FOLDER)
    last_photo: Optional[str] = Field(default=None, alias=LastPictureFields.LAST_PHOTO)
    last_photo_time: Optional[str] = Field(default=None, alias=LastPictureFields.LAST_PHOTO_TIME)
    error: Optional[str] = None

    @property
    def key(self) -> Optional[str]:
        if self.developer_id and self.project_id and self.camera_name:
            return f"{self.developer_id}|{self.project_id}|{self.camera_name}"
        return None


class MaintenanceTaskPayload(_ApiModel):
    """DTO for a maintenance ticket (only the fields the monitor reads)"""
    id: Optional[str] = Field(default=None, alias="_id")
    status: Optional[str] = None
    completion_time: Optional[str] = Field(default=None, alias=MaintenanceFields.COMPLETION_TIME)
    start_time: Optional[str] = Field(default=None, alias=MaintenanceFields.START_TIME)
    date_of_request: Optional[str] = Field(default=None, alias=MaintenanceFields.DATE_OF_REQUEST)
    created_date: Optional[str] = Field(default=None, alias=MaintenanceFields.CREATED_DATE)

    @property
    def is_completed(self) -> bool:
        return (self.status or "").strip().lower() == MaintenanceFields.STATUS_COMPLETED

    def completed_at(self) -> Optional[datetime]:
        """First present timestamp among completion, start, request and creation time"""
        for value in (self.completion_time, self.start_time, self.date_of_request, self.created_date):
            if value:
                return parse_iso(value)
        return None


class DeveloperRecord(_ApiModel):
    """DTO for a developer record"""
    id: str = Field(alias="_id")
    developer_name: Optional[str] = Field(default=None, alias="developerName")
    developer_tag: Optional[str] = Field(default=None, alias="developerTag")


class ProjectRecord(_ApiModel):
    """DTO for a project record"""
    id: str = Field(alias="_id")
    project_name: Optional[str] = Field(default=None, alias="projectName")
    project_tag: Optional[str] = Field(default=None, alias="projectTag")
    status: Optional[str] = None
    developer: Union[str, Dict[str, Any], None] = None

    @property
    def developer_id(self) -> str:
        return _reference_id(self.developer)


class CameraRecord(_ApiModel):
    """DTO for a camera record"""
    id: str = Field(alias=CameraFields.MONGO_ID)
    camera: str = ""
    developer: Union[str, Dict[str, Any], None] = None
    project: Union[str, Dict[str, Any], None] = None
    camera_description: Optional[str] = Field(default=None, alias=CameraFields.DESCRIPTION)
    server_folder: Optional[str] = Field(default=None, alias=CameraFields.SERVER_FOLDER)
    country: Optional[str] = None
    status: Optional[str] = None
    maintenance_cycle_start_date: Optional[str] = Field(
        default=None, alias=CameraFields.MAINTENANCE_CYCLE_START_DATE
    )

    @property
    def developer_id(self) -> str:
        return _reference_id(self.developer)

    @property
    def project_id(self) -> str:
        return _reference_id(self.project)
