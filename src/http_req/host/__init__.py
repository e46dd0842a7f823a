"""Host capabilities and the built-in hosts."""

from .base import HostUI, OutputSurface, Panel
from .browser import BrowserPanel, PanelServer
from .terminal import TerminalHost, TerminalOutput

__all__ = [
    "BrowserPanel",
    "HostUI",
    "OutputSurface",
    "Panel",
    "PanelServer",
    "TerminalHost",
    "TerminalOutput",
]
