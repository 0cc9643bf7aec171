"""Suffix test primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text
from commonlib.primitives.api import scalar_spec
from commonlib.primitives.string._code_units import encode


def execute(text, suffix) -> bool:
    """True when text ends with suffix; always True for an empty suffix."""
    return encode(as_text(text, name="endsWith text")).endswith(
        encode(as_text(suffix, name="endsWith suffix"))
    )


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "endsWith",
    ("text", "text"),
    "boolean",
    "Suffix match",
)
