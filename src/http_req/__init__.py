"""Send one-off HTTP requests from a form panel or per-method prompts."""

from .dispatcher import Dispatcher
from .extension import activate
from .request import BODY_METHODS, Method, RequestSpec, ResponseView

__version__ = "0.1.0"

__all__ = [
    "BODY_METHODS",
    "Dispatcher",
    "Method",
    "RequestSpec",
    "ResponseView",
    "activate",
]
