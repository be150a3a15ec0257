"""Abstract REST provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RESTProvider(ABC):
    """Base class for connectors driven by endpoint specs.

    Subclasses resolve an endpoint ID to a spec and adapter and execute it
    through a ``RestRunner``. The async context manager closes the
    underlying HTTP session.
    """

    @abstractmethod
    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Execute a single request against ``endpoint_id``."""

    async def fetch_health(self) -> dict[str, object]:
        """Fetch provider health information."""
        raise NotImplementedError("fetch_health is not implemented for this provider")

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""

    async def __aenter__(self) -> RESTProvider:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
