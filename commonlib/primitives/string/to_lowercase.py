"""Lowercase conversion primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text
from commonlib.primitives.api import scalar_spec


def execute(text) -> str:
    return as_text(text, name="toLowercase argument").lower()


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "toLowercase",
    ("text",),
    "text",
    "Convert a text to lowercase",
)
