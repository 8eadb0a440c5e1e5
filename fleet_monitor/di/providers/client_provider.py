from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories import CameraSignalProvider, CameraStatusWriter, FleetDirectoryProvider
from ...infrastructure.cache.signal_cache import SignalCache
from ...infrastructure.external.camera_client import CameraClient
from ...infrastructure.external.directory_client import DirectoryClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ClientProvider:
    """Client registration provider - wires provider interfaces to the HTTP clients"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the backend clients and the signal cache as singletons.
        One CameraClient serves both the signal reads and the writes.
        """
        settings = get_settings()

        camera_client = CameraClient()
        container.register_singleton(CameraClient, camera_client)
        container.register_singleton(CameraSignalProvider, camera_client)
        container.register_singleton(CameraStatusWriter, camera_client)

        directory_client = DirectoryClient()
        container.register_singleton(DirectoryClient, directory_client)
        container.register_singleton(FleetDirectoryProvider, directory_client)

        container.register_singleton(
            SignalCache,
            SignalCache(ttl_seconds=settings.signal_cache_ttl_seconds)
        )
