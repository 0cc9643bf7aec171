"""Literal-delimiter split primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text
from commonlib.primitives.api import scalar_spec
from commonlib.primitives.string._code_units import code_units, decode, encode, split_on


def execute(text, delimiter) -> list[str]:
    """Split text on every occurrence of delimiter.

    Examples:
    - `split("a,,b", ",")` -> `["a", "", "b"]`
    - `split("abc", "")` -> `["a", "b", "c"]` (one element per code unit)
    - `split("abc", ";")` -> `["abc"]`
    """
    source = as_text(text, name="split text")
    separator = as_text(delimiter, name="split delimiter")
    if not separator:
        return code_units(source)
    return [decode(piece) for piece in split_on(encode(source), encode(separator))]


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "split",
    ("text", "text"),
    "text_array",
    "Split a text on a literal delimiter",
)
