"""JSON helpers for turning response payloads into display text."""

import json
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def strict_loads(text: str) -> Any:
    """json.loads that refuses the NaN/Infinity extensions."""
    return json.loads(text, parse_constant=_reject_constant)


def to_text(data: Any) -> str:
    """Text payloads pass through; anything else becomes compact JSON."""
    if isinstance(data, str):
        return data
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def format_display(text: str) -> str:
    """Pretty-print text that parses as JSON, otherwise return it unchanged."""
    try:
        parsed = strict_loads(text)
    except (ValueError, RecursionError):
        return text
    return json.dumps(parsed, indent=2, ensure_ascii=False)
