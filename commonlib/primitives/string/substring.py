"""Substring primitive with inclusive, clamped code-unit bounds."""

from __future__ import annotations

from commonlib.primitives._coerce import as_integer, as_text
from commonlib.primitives.api import scalar_spec
from commonlib.primitives.string._code_units import slice_units, unit_length


def execute(text, start, end) -> str:
    """Return code units start..end of text, both ends inclusive.

    Examples:
    - `substring("Hello", 1, 3)` -> `"ell"`
    - `substring("Test", 2, 1)` -> `""`
    - `substring("Test", -5, 99)` -> `"Test"`
    """
    source = as_text(text, name="substring text")
    first = max(0, as_integer(start, name="substring start"))
    last = min(as_integer(end, name="substring end"), unit_length(source) - 1)
    if first > last:
        return ""
    return slice_units(source, first, last + 1)


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "substring",
    ("text", "integer", "integer"),
    "text",
    "Extract a text slice by inclusive code-unit range",
)
