"""Base service provider interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from mkservice.config import Settings
from mkservice.exceptions import UnsupportedInitSystemError
from mkservice.models.service import ServiceSpec


class ServiceProvider(ABC):
    """Installs a ServiceSpec into one init system."""

    def __init__(self, service: ServiceSpec, settings: Settings) -> None:
        self.service = service
        self.settings = settings

    @abstractmethod
    def install(self) -> Path:
        """Write the service definition and enable it.

        Returns:
            Path of the written definition.
        """
        pass

    @abstractmethod
    def start(self) -> None:
        """Start the installed service now."""
        pass


def get_provider(service: ServiceSpec, settings: Settings | None = None) -> ServiceProvider:
    """Get the provider for the init system running on this host.

    Args:
        service: The service to install.
        settings: Runtime settings. Defaults to ``Settings.from_env()``.

    Returns:
        ServiceProvider bound to the service.

    Raises:
        UnsupportedInitSystemError: If no supported init system is running.
    """
    settings = settings or Settings.from_env()

    if settings.systemd_runtime_dir.exists():
        from mkservice.provider.systemd import SystemdProvider

        return SystemdProvider(service, settings)
    raise UnsupportedInitSystemError("Unknown init system, cannot add service.")
