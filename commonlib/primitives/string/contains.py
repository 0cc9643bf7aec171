"""Substring membership primitive."""

from __future__ import annotations

from commonlib.primitives.api import scalar_spec
from commonlib.primitives.string import index_of


def execute(text, needle) -> bool:
    return index_of.execute(text, needle) != -1


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "contains",
    ("text", "text"),
    "boolean",
    "True when the needle occurs in the text",
)
