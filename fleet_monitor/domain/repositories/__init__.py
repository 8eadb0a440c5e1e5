from .signal_provider import FleetDirectoryProvider, CameraSignalProvider, CameraStatusWriter

__all__ = ["FleetDirectoryProvider", "CameraSignalProvider", "CameraStatusWriter"]
