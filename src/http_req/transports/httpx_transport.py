"""httpx-backed HTTP transport."""

import logging

import httpx

from ..formatting import strict_loads
from .base import RequestError, Transport, TransportResult

logger = logging.getLogger(__name__)


def decode_payload(text: str):
    """Return the body decoded from JSON when it parses, else the text itself."""
    try:
        return strict_loads(text)
    except (ValueError, RecursionError):
        return text


class HttpxTransport(Transport):
    """Send requests with httpx. Each request gets its own client."""

    def __init__(self, follow_redirects: bool = True):
        self.follow_redirects = follow_redirects

    async def perform(self, method, url, headers=None, data=None) -> TransportResult:
        try:
            async with httpx.AsyncClient(follow_redirects=self.follow_redirects) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    content=data,
                )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.debug("%s request failed: %s", method, type(exc).__name__)
            raise RequestError(str(exc) or type(exc).__name__) from exc

        logger.debug("%s request -> %d", method, response.status_code)
        if not response.is_success:
            raise RequestError(f"Request failed with status code {response.status_code}")

        return TransportResult(data=decode_payload(response.text))
