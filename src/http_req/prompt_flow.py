"""Prompt-driven requests: one command per HTTP method."""

from .dispatcher import Dispatcher
from .host.base import HostUI
from .request import BODY_METHODS, Method, RequestSpec, ResponseView

BODY_PROMPT = "Enter request body (JSON or text, leave empty for none)"


def url_prompt(method: Method) -> str:
    return f"Enter URL for {method.value} request"


def surface_name(method: Method) -> str:
    return f"HTTP {method.value}"


class PromptAdapter:
    """Ask for a URL (and a body where the method takes one), then dispatch."""

    def __init__(self, host: HostUI, dispatcher: Dispatcher) -> None:
        self.host = host
        self.dispatcher = dispatcher

    async def run(self, method: Method) -> ResponseView | None:
        """Run the prompt flow for ``method``.

        Returns None, without touching the network, when no URL is given.
        """
        method = Method(method)
        url = await self.host.prompt_text(url_prompt(method))
        if not url:
            self.host.notify_error("No URL provided.")
            return None

        body = None
        if method in BODY_METHODS:
            body = await self.host.prompt_text(BODY_PROMPT) or None

        headers = {"Content-Type": "application/json"} if body else {}
        view = await self.dispatcher.dispatch(
            RequestSpec(method=method, url=url, headers=headers, body=body)
        )

        # Fresh surface per run; earlier runs keep their own output.
        surface = self.host.create_output_surface(surface_name(method))
        surface.append_line(view.display_text)
        surface.show()
        return view
