"""Emptiness test primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text
from commonlib.primitives.api import scalar_spec


def execute(text) -> bool:
    return len(as_text(text, name="isEmpty argument")) == 0


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "isEmpty",
    ("text",),
    "boolean",
    "True for the empty text",
)
