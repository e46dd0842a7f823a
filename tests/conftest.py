import pytest

from http_req.host.base import HostUI, OutputSurface, Panel
from http_req.transports.base import Transport, TransportResult


class FakeTransport(Transport):
    """A transport that records calls and returns pre-scripted outcomes."""

    def __init__(self, outcomes=None):
        self._outcomes = list(outcomes or [])
        self.calls: list[dict] = []

    async def perform(self, method, url, headers=None, data=None):
        self.calls.append({"method": method, "url": url, "headers": headers, "data": data})
        outcome = self._outcomes.pop(0) if self._outcomes else ""
        if isinstance(outcome, Exception):
            raise outcome
        return TransportResult(data=outcome)


class FakePanel(Panel):
    def __init__(self, title):
        self.title = title
        self.markup = None
        self.handlers = []
        self.posted = []

    def render_markup(self, html):
        self.markup = html

    def on_message(self, handler):
        self.handlers.append(handler)

    async def post_message(self, data):
        self.posted.append(data)

    async def submit(self, message):
        """Deliver ``message`` as if the form had been submitted."""
        for handler in self.handlers:
            await handler(message)


class FakeSurface(OutputSurface):
    def __init__(self, name):
        self.name = name
        self.lines = []
        self.shown = False

    def append_line(self, text):
        self.lines.append(text)

    def show(self):
        self.shown = True


class FakeHost(HostUI):
    """A host that answers prompts from a script and records everything shown."""

    def __init__(self, answers=None):
        self._answers = iter(answers or [])
        self.prompts: list[str] = []
        self.errors: list[str] = []
        self.panels: list[FakePanel] = []
        self.surfaces: list[FakeSurface] = []

    def create_panel(self, title):
        panel = FakePanel(title)
        self.panels.append(panel)
        return panel

    def create_output_surface(self, name):
        surface = FakeSurface(name)
        self.surfaces.append(surface)
        return surface

    async def prompt_text(self, label):
        self.prompts.append(label)
        return next(self._answers, None)

    def notify_error(self, message):
        self.errors.append(message)


@pytest.fixture
def make_transport():
    """Factory: make_transport([outcome, ...]) -> FakeTransport."""
    return FakeTransport


@pytest.fixture
def make_host():
    """Factory: make_host([answer, ...]) -> FakeHost."""
    return FakeHost
