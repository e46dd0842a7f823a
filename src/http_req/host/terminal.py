"""Host the tool in a terminal: prompts on stdin, output on stdout."""

import sys

from .base import HostUI, OutputSurface
from .browser import BrowserPanel, PanelServer


class TerminalOutput(OutputSurface):
    """Buffer lines until shown, then print them under a ``[name]`` header."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.lines: list[str] = []
        self.visible = False

    def append_line(self, text: str) -> None:
        self.lines.append(text)
        if self.visible:
            print(text)

    def show(self) -> None:
        if self.visible:
            return
        self.visible = True
        print(f"[{self.name}]")
        for line in self.lines:
            print(line)


class TerminalHost(HostUI):
    """HostUI for the command line. Panels are served to a browser."""

    def __init__(self, server: PanelServer | None = None) -> None:
        self.server = server or PanelServer()

    def create_panel(self, title: str) -> BrowserPanel:
        return self.server.create_panel(title)

    def create_output_surface(self, name: str) -> TerminalOutput:
        return TerminalOutput(name)

    async def prompt_text(self, label: str) -> str | None:
        try:
            return input(f"{label}: ")
        except (EOFError, KeyboardInterrupt):
            return None

    def notify_error(self, message: str) -> None:
        print(f"❌ {message}", file=sys.stderr)
