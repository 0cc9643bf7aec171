"""Prefix test primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text
from commonlib.primitives.api import scalar_spec
from commonlib.primitives.string._code_units import encode


def execute(text, prefix) -> bool:
    """True when text begins with prefix; always True for an empty prefix."""
    return encode(as_text(text, name="startsWith text")).startswith(
        encode(as_text(prefix, name="startsWith prefix"))
    )


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "startsWith",
    ("text", "text"),
    "boolean",
    "Prefix match",
)
