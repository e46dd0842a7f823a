"""Request and response value types."""

from dataclasses import dataclass, field
from enum import Enum


class Method(str, Enum):
    """The HTTP methods the tool can send."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


BODY_METHODS = frozenset({Method.POST, Method.PUT, Method.PATCH})


@dataclass(frozen=True)
class RequestSpec:
    """One outbound request: method, URL, headers and an optional body."""

    method: Method
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("No URL provided.")
        object.__setattr__(self, "method", Method(self.method))

    @property
    def payload(self) -> str | None:
        """Body to send, or None when the method carries no body."""
        if self.method in BODY_METHODS and self.body:
            return self.body
        return None


@dataclass
class ResponseView:
    """Display-ready outcome of a dispatch."""
    display_text: str
    success: bool = True
