"""
commonlib - conformance-pinned primitive operations

Arithmetic, comparison, logical and string primitives whose edge-case
behaviour (IEEE 754 special values, truncated modulo, UTF-16 code-unit
indexing) is fixed so that ports in other languages can be checked
against the same conformance matrix.
"""

from commonlib.version import __version__
from commonlib.namespaces import Arithmetic, Comparison, Logical, String

__all__ = ["Arithmetic", "Comparison", "Logical", "String", "__version__"]
