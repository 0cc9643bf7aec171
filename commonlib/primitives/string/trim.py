"""Whitespace trimming primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text
from commonlib.primitives.api import scalar_spec

# Unicode White_Space property (PropList.txt). U+001C..U+001F are not in it,
# although str.isspace accepts them.
WHITE_SPACE = (
    "\t\n\u000b\u000c\r\u0020\u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def execute(text) -> str:
    """Strip leading and trailing White_Space characters.

    Internal whitespace is preserved.
    """
    return as_text(text, name="trim argument").strip(WHITE_SPACE)


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "trim",
    ("text",),
    "text",
    "Strip leading and trailing whitespace",
)
