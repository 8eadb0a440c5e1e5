"""External service clients for the dashboard backend API"""

from .base_api_client import BaseApiClient
from .camera_client import CameraClient
from .directory_client import DirectoryClient

__all__ = [
    "BaseApiClient",
    "CameraClient",
    "DirectoryClient",
]
