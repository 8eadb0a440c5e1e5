from .client_provider import ClientProvider
from .monitor_provider import MonitorProvider


__all__ = [
    "ClientProvider",
    "MonitorProvider",
]
