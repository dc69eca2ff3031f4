"""
Service lookup for the numbers service.

The registry maps logical service names (``numbers-service``) to base URLs
and carries the identifier of the local instance. It is built once from
configuration and passed to the components that need it.
"""

import logging
from typing import Optional

from primecloud.settings import NUMBERS_SERVICE, CoreSettings, load_core_settings

logger = logging.getLogger(__name__)


class ServiceNotFoundError(LookupError):
    """Raised when a logical service name has no registered address."""


class ServiceRegistry:
    def __init__(self, instance_id: str) -> None:
        self.instance_id = instance_id
        self._services: dict[str, str] = {}

    def register(self, name: str, url: str) -> None:
        self._services[name] = url.rstrip("/")
        logger.debug(f"Registered service '{name}' at {url}")

    def resolve(self, name: str) -> str:
        try:
            return self._services[name]
        except KeyError:
            raise ServiceNotFoundError(f"Service '{name}' is not registered") from None

    def list_all(self) -> list[str]:
        return list(self._services.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._services


def from_settings(settings: Optional[CoreSettings] = None) -> ServiceRegistry:
    settings = settings or load_core_settings()
    registry = ServiceRegistry(instance_id=settings.instance_id)
    registry.register(NUMBERS_SERVICE, settings.numbers_service_url)
    return registry
