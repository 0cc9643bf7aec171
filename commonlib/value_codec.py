"""JSON-safe encoding and display rendering of primitive values.

Strict JSON has no NaN or Infinity and cannot tell -0.0 from 0.0, all of
which are results the arithmetic primitives must report faithfully. Those
floats are encoded as tagged objects: `{"$float": "NaN"}`,
`{"$float": "Infinity"}`, `{"$float": "-Infinity"}`, `{"$float": "-0.0"}`.
"""

from __future__ import annotations

from typing import Any
import json
import math

FLOAT_TAG = "$float"

_SPECIAL_FLOATS = {
    "NaN": math.nan,
    "Infinity": math.inf,
    "-Infinity": -math.inf,
    "-0.0": -0.0,
}


def _special_float_name(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0.0 and math.copysign(1.0, value) < 0:
        return "-0.0"
    return None


def encode_value(value: Any) -> Any:
    """Return a structure that `json.dumps(..., allow_nan=False)` accepts."""
    if isinstance(value, float):
        special = _special_float_name(value)
        if special is not None:
            return {FLOAT_TAG: special}
        return value
    if isinstance(value, dict):
        return {str(key): encode_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    return value


def decode_value(value: Any) -> Any:
    """Inverse of encode_value."""
    if isinstance(value, dict):
        if set(value.keys()) == {FLOAT_TAG}:
            tag = value[FLOAT_TAG]
            if tag not in _SPECIAL_FLOATS:
                raise ValueError(f"Unknown special float tag: {tag!r}")
            return _SPECIAL_FLOATS[tag]
        return {key: decode_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [decode_value(item) for item in value]
    return value


def dumps(value: Any, **kwargs: Any) -> str:
    return json.dumps(encode_value(value), allow_nan=False, **kwargs)


def loads(text: str) -> Any:
    return decode_value(json.loads(text))


def render(value: Any) -> str:
    """Human readable rendering used by the CLI and script `print` output."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        special = _special_float_name(value)
        if special is not None:
            return special
        return repr(value)
    if isinstance(value, str):
        # Lone surrogates cannot be written to a UTF-8 stream; show them escaped.
        quoted = json.dumps(value, ensure_ascii=False)
        return quoted.encode("utf-8", "backslashreplace").decode("utf-8")
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(render(item) for item in value) + "]"
    return str(value)
