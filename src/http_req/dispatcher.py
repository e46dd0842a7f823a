"""Request dispatch: one outbound call in, one display string out."""

import logging

from .formatting import format_display, to_text
from .request import RequestSpec, ResponseView
from .transports.base import RequestError, Transport

logger = logging.getLogger(__name__)


class Dispatcher:
    """Perform a single request through the injected transport.

    Failures never escape ``dispatch``: they are rendered as
    ``Error: <message>`` in the returned view.
    """

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    async def dispatch(self, spec: RequestSpec) -> ResponseView:
        """Send ``spec`` and return the formatted response or error text."""
        logger.info("Dispatching %s request", spec.method.value)
        try:
            result = await self.transport.perform(
                spec.method.value,
                spec.url,
                headers=spec.headers or None,
                data=spec.payload,
            )
        except RequestError as exc:
            logger.info("%s request failed", spec.method.value)
            return ResponseView(display_text=f"Error: {exc}", success=False)
        except Exception as exc:
            logger.warning("%s request failed: %s", spec.method.value, type(exc).__name__)
            return ResponseView(display_text=f"Error: {exc}", success=False)

        return ResponseView(display_text=format_display(to_text(result.data)))
