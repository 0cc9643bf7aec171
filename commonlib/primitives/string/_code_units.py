"""UTF-16 code-unit view over Python strings.

Python indexes `str` by code point. The string primitives count and search
in UTF-16 code units instead, which is done here on the little-endian
UTF-16 encoding: every code unit is two bytes, and byte offsets are only
meaningful when even. `surrogatepass` lets lone surrogate halves (what
slicing through a surrogate pair produces) survive the round trip, and
decoding adjacent halves recombines them into a single character.
"""

from __future__ import annotations

_ENCODING = "utf-16-le"
_ERRORS = "surrogatepass"
UNIT_SIZE = 2


def encode(text: str) -> bytes:
    return text.encode(_ENCODING, _ERRORS)


def decode(data: bytes) -> str:
    return data.decode(_ENCODING, _ERRORS)


def unit_length(text: str) -> int:
    return len(encode(text)) // UNIT_SIZE


def find_unit(haystack: bytes, needle: bytes, start: int = 0) -> int:
    """Byte offset of the first code-unit-aligned match at or after start, or -1."""
    position = haystack.find(needle, start)
    while position != -1 and position % UNIT_SIZE:
        position = haystack.find(needle, position + 1)
    return position


def split_on(haystack: bytes, needle: bytes) -> list[bytes]:
    """Split encoded text on every aligned, non-overlapping match of a non-empty needle."""
    pieces: list[bytes] = []
    position = 0
    while True:
        found = find_unit(haystack, needle, position)
        if found == -1:
            break
        pieces.append(haystack[position:found])
        position = found + len(needle)
    pieces.append(haystack[position:])
    return pieces


def code_units(text: str) -> list[str]:
    data = encode(text)
    return [decode(data[i:i + UNIT_SIZE]) for i in range(0, len(data), UNIT_SIZE)]


def slice_units(text: str, start: int, stop: int) -> str:
    """Code units [start, stop) of text; bounds must already be clamped."""
    return decode(encode(text)[start * UNIT_SIZE:stop * UNIT_SIZE])
