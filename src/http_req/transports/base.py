"""Abstract base class for HTTP transports."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class RequestError(Exception):
    """Raised by a transport when a request fails for any reason."""


@dataclass
class TransportResult:
    """Response payload: text, or a structured value decoded from JSON."""
    data: Any


class Transport(ABC):  # pylint: disable=too-few-public-methods
    """Abstract base class for HTTP transports."""

    @abstractmethod
    async def perform(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        data: str | None = None,
    ) -> TransportResult:
        """Send one request and return its payload, or raise RequestError."""
