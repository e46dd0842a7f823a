"""Wire a host and a transport into the registered commands."""

import logging

from .commands import CommandRegistry, default_registry
from .config import Settings
from .dispatcher import Dispatcher
from .host.base import HostUI
from .panel import PanelAdapter
from .prompt_flow import PromptAdapter
from .transports import HttpxTransport, Transport

logger = logging.getLogger(__name__)


def activate(
    host: HostUI,
    transport: Transport | None = None,
    settings: Settings | None = None,
) -> CommandRegistry:
    """Build the dispatcher and both adapters, and register every command."""
    settings = settings or Settings()
    if transport is None:
        transport = HttpxTransport(follow_redirects=settings.follow_redirects)

    dispatcher = Dispatcher(transport)
    registry = default_registry(
        PanelAdapter(host, dispatcher),
        PromptAdapter(host, dispatcher),
    )
    logger.info("http-req active with %d commands", len(registry.list_commands()))
    return registry
