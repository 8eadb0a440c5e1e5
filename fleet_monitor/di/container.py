# Local application imports
from .base_container import BaseContainer
from .providers import ClientProvider, MonitorProvider


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Backend clients and the signal cache (ClientProvider)
    2. Use cases (MonitorProvider) - depend on the clients
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: clients -> use cases
        """
        ClientProvider.register(self)
        MonitorProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container (used by tests)"""
    global _container
    _container = None
