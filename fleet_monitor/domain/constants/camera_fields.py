"""Constants for field names of the dashboard backend API payloads"""


class CameraFields:
    """Field name constants for Camera records"""
    MONGO_ID = "_id"
    CAMERA = "camera"
    DEVELOPER = "developer"
    PROJECT = "project"
    DESCRIPTION = "cameraDescription"
    SERVER_FOLDER = "serverFolder"
    COUNTRY = "country"
    STATUS = "status"
    MAINTENANCE_CYCLE_START_DATE = "maintenanceCycleStartDate"


class LastPictureFields:
    """Field name constants for last-picture snapshot records"""
    DEVELOPER_ID = "developerId"
    PROJECT_ID = "projectId"
    DEVELOPER_TAG = "developerTag"
    PROJECT_TAG = "projectTag"
    CAMERA_NAME = "cameraName"
    SERVER_FOLDER = "serverfolder"
    LAST_PHOTO = "lastPhoto"
    LAST_PHOTO_TIME = "lastPhotoTime"


class HealthFields:
    """Field name constants for camera health responses"""
    TOTAL_IMAGES = "totalImages"
    HAS_DEVICE_EXPIRED = "hasDeviceExpired"
    HAS_SHUTTER_EXPIRY = "hasShutterExpiry"
    HAS_MEMORY_ASSIGNED = "hasMemoryAssigned"
    MEMORY_AVAILABLE = "memoryAvailable"
    SHUTTER_COUNT = "shutterCount"


class MaintenanceFields:
    """Field name constants for maintenance tickets"""
    STATUS = "status"
    COMPLETION_TIME = "completionTime"
    START_TIME = "startTime"
    DATE_OF_REQUEST = "dateOfRequest"
    CREATED_DATE = "createdDate"

    STATUS_COMPLETED = "completed"
