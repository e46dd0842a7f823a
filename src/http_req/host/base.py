"""Capabilities the adapters need from the host runtime."""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

MessageHandler = Callable[[Any], Awaitable[None]]


class Panel(ABC):
    """A surface that renders markup and exchanges messages with it."""

    @abstractmethod
    def render_markup(self, html: str) -> None:
        """Replace the panel contents with ``html``."""

    @abstractmethod
    def on_message(self, handler: MessageHandler) -> None:
        """Call ``handler`` with each message the panel sends."""

    @abstractmethod
    async def post_message(self, data: Any) -> None:
        """Send ``data`` to the panel."""


class OutputSurface(ABC):
    """A named, append-only text log."""

    @abstractmethod
    def append_line(self, text: str) -> None:
        ...

    @abstractmethod
    def show(self) -> None:
        ...


class HostUI(ABC):
    """UI services provided by whatever hosts the tool."""

    @abstractmethod
    def create_panel(self, title: str) -> Panel:
        ...

    @abstractmethod
    def create_output_surface(self, name: str) -> OutputSurface:
        ...

    @abstractmethod
    async def prompt_text(self, label: str) -> str | None:
        """Ask for a line of text. Returns None if the user cancels."""

    @abstractmethod
    def notify_error(self, message: str) -> None:
        ...
