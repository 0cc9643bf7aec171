"""
String namespace for commonlib primitives

Positions and lengths are measured in UTF-16 code units, so a character
outside the Basic Multilingual Plane (most emoji) counts as two.
"""

from pathlib import Path

from commonlib.primitives._listing import list_namespace_primitives


def list_primitives():
    """List all primitives available in this namespace"""
    return list_namespace_primitives(__name__, Path(__file__).parent)
