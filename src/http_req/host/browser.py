"""Serve panels to a web browser with aiohttp.

The panel markup is served at ``/``. A bridge script injected ahead of the
markup's own scripts opens a WebSocket to ``/ws`` and exposes
``acquireHostApi().postMessage(data)``; messages the host posts arrive in the
page as window ``message`` events.
"""

import asyncio
import json
import logging
import webbrowser
from typing import Any

from aiohttp import WSMsgType, web

from .base import MessageHandler, Panel

logger = logging.getLogger(__name__)

LOOPBACK_HOSTS = {"127.0.0.1", "localhost", "[::1]"}

BRIDGE_SCRIPT = """<script>
(() => {
  const socket = new WebSocket(`ws://${location.host}/ws`);
  const pending = [];
  socket.addEventListener('open', () => {
    while (pending.length) socket.send(pending.shift());
  });
  socket.addEventListener('message', event => {
    window.dispatchEvent(new MessageEvent('message', { data: JSON.parse(event.data) }));
  });
  window.acquireHostApi = () => ({
    postMessage: data => {
      const text = JSON.stringify(data);
      if (socket.readyState === WebSocket.OPEN) socket.send(text);
      else pending.push(text);
    },
  });
})();
</script>
"""


def inject_bridge(html: str) -> str:
    """Insert the bridge script before the first script in ``html``."""
    index = html.find("<script")
    if index < 0:
        index = html.rfind("</body>")
    if index < 0:
        return html + BRIDGE_SCRIPT
    return html[:index] + BRIDGE_SCRIPT + html[index:]


def strip_port(host: str) -> str:
    """'localhost:8765' -> 'localhost', '[::1]:8765' -> '[::1]'"""
    host = host.lower()
    if host.startswith("["):
        end = host.find("]")
        if end != -1:
            host = host[: end + 1]
    elif ":" in host:
        host = host.rsplit(":", 1)[0]
    return host.rstrip(".")


def host_validation(allowed: set[str]):
    """Build a middleware that rejects requests for any Host not in ``allowed``."""

    @web.middleware
    async def middleware(request: web.Request, handler: Any) -> web.StreamResponse:
        if strip_port(request.host or "") not in allowed:
            return web.json_response({"error": "Forbidden: invalid Host header"}, status=403)
        return await handler(request)

    return middleware


class BrowserPanel(Panel):
    """A panel whose page lives in a browser tab."""

    def __init__(self, title: str) -> None:
        self.title = title
        self.html = ""
        self._handlers: list[MessageHandler] = []
        self._sockets: set[web.WebSocketResponse] = set()
        self._tasks: set[asyncio.Task] = set()

    def render_markup(self, html: str) -> None:
        self.html = inject_bridge(html)

    def on_message(self, handler: MessageHandler) -> None:
        self._handlers.append(handler)

    async def post_message(self, data: Any) -> None:
        for socket in list(self._sockets):
            if not socket.closed:
                await socket.send_json(data)

    def attach(self, socket: web.WebSocketResponse) -> None:
        self._sockets.add(socket)

    def detach(self, socket: web.WebSocketResponse) -> None:
        self._sockets.discard(socket)

    def receive(self, data: Any) -> list[asyncio.Task]:
        """Hand ``data`` to every handler, each in its own task.

        Returns the scheduled tasks; they run alongside any later submissions.
        """
        tasks = []
        for handler in self._handlers:
            task = asyncio.ensure_future(handler(data))
            self._tasks.add(task)
            task.add_done_callback(self._finished)
            tasks.append(task)
        return tasks

    def _finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Panel message handler failed", exc_info=task.exception())


class PanelServer:
    """Local web server that shows the most recently created panel."""

    def __init__(self, host: str = "127.0.0.1", port: int = 8765) -> None:
        self.host = host
        self.port = port
        self.panel: BrowserPanel | None = None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    def create_panel(self, title: str) -> BrowserPanel:
        """Replace the current panel with a new, empty one."""
        self.panel = BrowserPanel(title)
        return self.panel

    def create_app(self) -> web.Application:
        """Create the aiohttp application."""
        allowed = LOOPBACK_HOSTS | {self.host.lower()}
        app = web.Application(middlewares=[host_validation(allowed)])
        app.router.add_get("/", self.handle_index)
        app.router.add_get("/ws", self.handle_socket)
        return app

    async def handle_index(self, request: web.Request) -> web.Response:
        """Handle GET / with the current panel's markup."""
        if self.panel is None:
            raise web.HTTPNotFound(text="No panel is open")
        return web.Response(text=self.panel.html, content_type="text/html")

    async def handle_socket(self, request: web.Request) -> web.WebSocketResponse:
        """Handle the /ws bridge between the page and the current panel."""
        panel = self.panel
        if panel is None:
            raise web.HTTPNotFound(text="No panel is open")

        socket = web.WebSocketResponse()
        await socket.prepare(request)
        panel.attach(socket)
        try:
            async for msg in socket:
                if msg.type == WSMsgType.TEXT:
                    try:
                        data = json.loads(msg.data)
                    except json.JSONDecodeError:
                        logger.warning("Ignoring panel message that is not JSON")
                        continue
                    panel.receive(data)
                elif msg.type == WSMsgType.ERROR:
                    logger.warning("Panel socket closed with %s", socket.exception())
        finally:
            panel.detach(socket)
        return socket

    async def serve(self, open_browser: bool = False) -> None:
        """Serve until cancelled."""
        runner = web.AppRunner(self.create_app())
        await runner.setup()
        try:
            site = web.TCPSite(runner, self.host, self.port)
            await site.start()
            print(f"🌐 {self.panel.title if self.panel else 'Panel'} at {self.url}")
            if open_browser:
                webbrowser.open(self.url)
            while True:
                await asyncio.sleep(3600)
        finally:
            await runner.cleanup()
