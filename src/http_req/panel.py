"""Form-based panel: collect a request from an HTML form, show the response."""

import json
import logging
from typing import Any

from .dispatcher import Dispatcher
from .host.base import HostUI, Panel
from .request import Method, RequestSpec

logger = logging.getLogger(__name__)

PANEL_TITLE = "HTTP Client"

_OPTIONS = "\n".join(f"      <option>{m.value}</option>" for m in Method)

FORM_MARKUP = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{PANEL_TITLE}</title>
  <style>
    body {{ font-family: sans-serif; margin: 0; background: #1e1e1e; color: #d4d4d4; }}
    .container {{ padding: 16px; }}
    input, select, textarea {{ width: 100%; box-sizing: border-box; margin-bottom: 8px; padding: 8px;
      border-radius: 4px; border: 1px solid #333; background: #252526; color: #d4d4d4; }}
    label {{ font-weight: bold; margin-top: 8px; display: block; }}
    button {{ background: #007acc; color: white; border: none; padding: 10px 20px;
      border-radius: 4px; cursor: pointer; }}
    button:hover {{ background: #005a9e; }}
    .response {{ margin-top: 16px; background: #232323; padding: 12px; border-radius: 4px;
      white-space: pre-wrap; max-height: 300px; overflow: auto; }}
  </style>
</head>
<body>
  <div class="container">
    <label for="method">Method</label>
    <select id="method">
{_OPTIONS}
    </select>
    <label for="url">URL</label>
    <input id="url" type="text" placeholder="https://api.example.com/data" />
    <label for="headers">Headers (JSON)</label>
    <textarea id="headers" rows="2" placeholder='{{"Authorization": "Bearer ..."}}'></textarea>
    <label for="body">Body (for POST/PUT/PATCH)</label>
    <textarea id="body" rows="4" placeholder='{{"key": "value"}}'></textarea>
    <button id="send">Send Request</button>
    <div class="response" id="response"></div>
  </div>
  <script>
    const host = acquireHostApi();
    const field = id => document.getElementById(id).value;
    document.getElementById('send').onclick = () => {{
      host.postMessage({{
        method: field('method'),
        url: field('url'),
        headers: field('headers'),
        body: field('body'),
      }});
    }};
    window.addEventListener('message', event => {{
      document.getElementById('response').textContent = event.data.response;
    }});
  </script>
</body>
</html>
"""


def parse_headers(raw: Any) -> dict[str, str]:
    """Turn the headers field into a header dict.

    Anything that is not a JSON object yields no headers.
    """
    if isinstance(raw, dict):
        parsed = raw
    else:
        if not raw:
            return {}
        try:
            parsed = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring headers: not valid JSON")
            return {}
        if not isinstance(parsed, dict):
            logger.warning("Ignoring headers: expected a JSON object")
            return {}
    return {
        str(k): v if isinstance(v, str) else json.dumps(v)
        for k, v in parsed.items()
        if v is not None
    }


class PanelAdapter:
    """Drive dispatches from the HTTP Client form."""

    def __init__(self, host: HostUI, dispatcher: Dispatcher) -> None:
        self.host = host
        self.dispatcher = dispatcher

    def open(self) -> Panel:
        """Open a fresh panel with an empty form."""
        panel = self.host.create_panel(PANEL_TITLE)
        panel.render_markup(FORM_MARKUP)

        async def on_submit(message: Any) -> None:
            await self.handle_message(panel, message)

        panel.on_message(on_submit)
        return panel

    async def handle_message(self, panel: Panel, message: Any) -> None:
        """Dispatch one form submission and post the result back to ``panel``."""
        if not isinstance(message, dict):
            message = {}
        name = str(message.get("method") or "GET").strip().upper()
        url = str(message.get("url") or "").strip()
        body = message.get("body")

        if name not in Method.__members__:
            await panel.post_message({"response": f"Error: Unsupported method '{name}'"})
            return
        if not url:
            await panel.post_message({"response": "Error: No URL provided."})
            return

        spec = RequestSpec(
            method=Method(name),
            url=url,
            headers=parse_headers(message.get("headers")),
            body=body if isinstance(body, str) else None,
        )
        view = await self.dispatcher.dispatch(spec)
        await panel.post_message({"response": view.display_text})
