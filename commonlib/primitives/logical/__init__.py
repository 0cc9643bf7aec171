"""
Logical namespace for commonlib primitives

Two-valued boolean algebra. The registered names are `and`, `or` and
`not`; the modules carry a trailing underscore because those names are
Python keywords.
"""

from pathlib import Path

from commonlib.primitives._listing import list_namespace_primitives


def list_primitives():
    """List all primitives available in this namespace"""
    return list_namespace_primitives(__name__, Path(__file__).parent)
