"""Uppercase conversion primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text
from commonlib.primitives.api import scalar_spec


def execute(text) -> str:
    """Full Unicode uppercase mapping, locale independent: "ß" becomes "SS"."""
    return as_text(text, name="toUppercase argument").upper()


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "toUppercase",
    ("text",),
    "text",
    "Convert a text to uppercase",
)
