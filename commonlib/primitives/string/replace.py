"""Replace-all primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text
from commonlib.primitives.api import scalar_spec
from commonlib.primitives.string._code_units import decode, encode, split_on


def execute(text, old, new) -> str:
    """Replace every non-overlapping occurrence of old, scanning left to right.

    An empty `old` leaves text unchanged.
    """
    source = as_text(text, name="replace text")
    target = as_text(old, name="replace old")
    replacement = as_text(new, name="replace new")
    if not target:
        return source
    return decode(encode(replacement).join(split_on(encode(source), encode(target))))


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "replace",
    ("text", "text", "text"),
    "text",
    "Replace all occurrences of a substring",
)
