"""
Comparison namespace for commonlib primitives

IEEE 754 comparisons returning booleans. Every ordering comparison with
a NaN operand is false; notEqual is the negation of equal.
"""

from pathlib import Path

from commonlib.primitives._listing import list_namespace_primitives


def list_primitives():
    """List all primitives available in this namespace"""
    return list_namespace_primitives(__name__, Path(__file__).parent)
