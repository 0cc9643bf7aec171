# commonlib Primitives Directory
"""
This directory contains the primitive operation implementations of commonlib.
Each namespace package holds one module per primitive; every module exports a
`PRIMITIVE_SPEC` and a `KERNEL` that `PrimitiveRegistry` discovers and
resolves with deterministic namespace rules.
"""
