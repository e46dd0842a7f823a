"""HTTP transports used by the dispatcher."""

from .base import RequestError, Transport, TransportResult
from .httpx_transport import HttpxTransport

__all__ = ["HttpxTransport", "RequestError", "Transport", "TransportResult"]
