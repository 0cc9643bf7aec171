"""
Arithmetic namespace for commonlib primitives

Contains the IEEE 754 double-precision operations: add, subtract,
multiply, divide and modulo. None of them raise for numeric input;
division and modulo by zero produce Infinity or NaN.
"""

from pathlib import Path

from commonlib.primitives._listing import list_namespace_primitives


def list_primitives():
    """List all primitives available in this namespace"""
    return list_namespace_primitives(__name__, Path(__file__).parent)
