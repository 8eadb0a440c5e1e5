from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional


class FleetDirectoryProvider(ABC):
    """Provider interface - fleet-wide records fetched once per refresh"""

    @abstractmethod
    async def list_cameras(self) -> List[Dict[str, Any]]:
        """All camera records"""
        pass

    @abstractmethod
    async def list_developers(self) -> List[Dict[str, Any]]:
        """All developer records"""
        pass

    @abstractmethod
    async def list_projects(self) -> List[Dict[str, Any]]:
        """All project records"""
        pass

    @abstractmethod
    async def list_last_pictures(self) -> List[Dict[str, Any]]:
        """Last-picture snapshot for every camera"""
        pass

    @abstractmethod
    async def get_maintenance_cycle_start(self) -> Optional[datetime]:
        """Globally configured maintenance-cycle start date"""
        pass


class CameraSignalProvider(ABC):
    """Provider interface - per-camera signal sources"""

    @abstractmethod
    async def get_health(
        self, developer_tag: str, project_tag: str, camera_name: str
    ) -> Optional[Dict[str, Any]]:
        """Device-health metrics for one camera, or None if unavailable"""
        pass

    @abstractmethod
    async def get_status_history(self, camera_id: str) -> List[Dict[str, Any]]:
        """Maintenance-flag audit history for one camera"""
        pass

    @abstractmethod
    async def list_maintenance_tasks(self, camera_id: str) -> List[Dict[str, Any]]:
        """Maintenance tickets raised for one camera"""
        pass


class CameraStatusWriter(ABC):
    """Writer interface - manual overrides and maintenance flags"""

    @abstractmethod
    async def update_status(self, camera_id: str, status: str) -> Optional[Dict[str, Any]]:
        """Set the raw override; returns the updated camera or None on failure"""
        pass

    @abstractmethod
    async def update_maintenance_flag(
        self, camera_id: str, flag: str, value: bool
    ) -> Optional[Dict[str, Any]]:
        """Toggle one maintenance flag; returns the updated camera or None on failure"""
        pass
