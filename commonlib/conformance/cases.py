"""The conformance matrix.

Every port of the library must reproduce these results. Floats that carry
rounding error are checked with "approx"; special values with the
dedicated predicates, since NaN never compares equal and -0.0 == 0.0.
"""

from __future__ import annotations

import math

from commonlib.conformance.runner import ConformanceCase

NAN = math.nan
INF = math.inf

GRINNING_FACE = "\U0001F600"  # outside the BMP: two UTF-16 code units
HIGH_SURROGATE = "\ud83d"
LOW_SURROGATE = "\ude00"


def _exact(primitive, *args, expected):
    return ConformanceCase(primitive, args, expected, "exact")


def _approx(primitive, *args, expected):
    return ConformanceCase(primitive, args, expected, "approx")


def _special(primitive, *args, check):
    return ConformanceCase(primitive, args, None, check)


ARITHMETIC_CASES = [
    _exact("arithmetic.add", 2.0, 3.0, expected=5.0),
    _exact("arithmetic.add", -10.0, -20.0, expected=-30.0),
    _exact("arithmetic.add", -5.0, 5.0, expected=0.0),
    _exact("arithmetic.add", 7.5, 0.0, expected=7.5),
    _approx("arithmetic.add", 0.1, 0.2, expected=0.3),
    _special("arithmetic.add", 1e308, 1e308, check="positive_infinity"),
    _special("arithmetic.add", INF, 1.0, check="positive_infinity"),
    _special("arithmetic.add", INF, -INF, check="nan"),
    _special("arithmetic.add", NAN, 1.0, check="nan"),
    _special("arithmetic.add", -0.0, -0.0, check="negative_zero"),
    _exact("arithmetic.subtract", 10.0, 3.0, expected=7.0),
    _exact("arithmetic.subtract", 1.5, 2.5, expected=-1.0),
    _exact("arithmetic.subtract", 5.0, 0.0, expected=5.0),
    _exact("arithmetic.subtract", 0.0, 5.0, expected=-5.0),
    _approx("arithmetic.subtract", 0.3, 0.1, expected=0.2),
    _special("arithmetic.subtract", INF, INF, check="nan"),
    _special("arithmetic.subtract", -INF, 1.0, check="negative_infinity"),
    _special("arithmetic.subtract", NAN, NAN, check="nan"),
    _exact("arithmetic.multiply", 3.0, 4.0, expected=12.0),
    _exact("arithmetic.multiply", -2.0, 3.0, expected=-6.0),
    _exact("arithmetic.multiply", -2.0, -3.0, expected=6.0),
    _exact("arithmetic.multiply", 5.0, 0.0, expected=0.0),
    _exact("arithmetic.multiply", 5.0, 1.0, expected=5.0),
    _approx("arithmetic.multiply", 0.1, 3.0, expected=0.3),
    _special("arithmetic.multiply", INF, 0.0, check="nan"),
    _special("arithmetic.multiply", 1e200, 1e200, check="positive_infinity"),
    _special("arithmetic.multiply", -1e200, 1e200, check="negative_infinity"),
    _special("arithmetic.multiply", -0.0, 5.0, check="negative_zero"),
    _exact("arithmetic.divide", 10.0, 2.0, expected=5.0),
    _exact("arithmetic.divide", 7.0, 1.0, expected=7.0),
    _exact("arithmetic.divide", -9.0, 3.0, expected=-3.0),
    _approx("arithmetic.divide", 1.0, 3.0, expected=0.3333),
    _special("arithmetic.divide", 5.0, 0.0, check="positive_infinity"),
    _special("arithmetic.divide", 5.0, 0.0, check="infinite"),
    _special("arithmetic.divide", -5.0, 0.0, check="negative_infinity"),
    _special("arithmetic.divide", 5.0, -0.0, check="negative_infinity"),
    _special("arithmetic.divide", 0.0, 0.0, check="nan"),
    _special("arithmetic.divide", NAN, 0.0, check="nan"),
    _special("arithmetic.divide", INF, INF, check="nan"),
    _exact("arithmetic.divide", 1.0, INF, expected=0.0),
    _special("arithmetic.divide", -1.0, INF, check="negative_zero"),
    _exact("arithmetic.modulo", 10.0, 3.0, expected=1.0),
    _exact("arithmetic.modulo", -10.0, 3.0, expected=-1.0),
    _exact("arithmetic.modulo", 10.0, -3.0, expected=1.0),
    _exact("arithmetic.modulo", -10.0, -3.0, expected=-1.0),
    _exact("arithmetic.modulo", 5.5, 2.0, expected=1.5),
    _exact("arithmetic.modulo", 0.0, 5.0, expected=0.0),
    _exact("arithmetic.modulo", 6.0, 3.0, expected=0.0),
    _exact("arithmetic.modulo", 5.0, INF, expected=5.0),
    _special("arithmetic.modulo", -6.0, 3.0, check="negative_zero"),
    _special("arithmetic.modulo", 5.0, 0.0, check="nan"),
    _special("arithmetic.modulo", INF, 2.0, check="nan"),
    _special("arithmetic.modulo", NAN, 2.0, check="nan"),
]

COMPARISON_CASES = [
    _exact("comparison.lessThan", 1.0, 2.0, expected=True),
    _exact("comparison.lessThan", 2.0, 1.0, expected=False),
    _exact("comparison.lessThan", 1.0, 1.0, expected=False),
    _exact("comparison.lessThan", NAN, 1.0, expected=False),
    _exact("comparison.lessThan", 1.0, NAN, expected=False),
    _exact("comparison.lessThan", -INF, INF, expected=True),
    _exact("comparison.lessThan", -0.0, 0.0, expected=False),
    _exact("comparison.greaterThan", 2.0, 1.0, expected=True),
    _exact("comparison.greaterThan", 1.0, 2.0, expected=False),
    _exact("comparison.greaterThan", 1.0, 1.0, expected=False),
    _exact("comparison.greaterThan", NAN, NAN, expected=False),
    _exact("comparison.greaterThan", INF, 1e308, expected=True),
    _exact("comparison.equal", 1.0, 1.0, expected=True),
    _exact("comparison.equal", 1.0, 2.0, expected=False),
    _exact("comparison.equal", NAN, NAN, expected=False),
    _exact("comparison.equal", -0.0, 0.0, expected=True),
    _exact("comparison.equal", INF, INF, expected=True),
    _exact("comparison.equal", INF, -INF, expected=False),
    _exact("comparison.equal", 0.1 + 0.2, 0.3, expected=False),
    _exact("comparison.notEqual", 1.0, 2.0, expected=True),
    _exact("comparison.notEqual", 1.0, 1.0, expected=False),
    _exact("comparison.notEqual", NAN, NAN, expected=True),
    _exact("comparison.notEqual", NAN, 1.0, expected=True),
    _exact("comparison.notEqual", -0.0, 0.0, expected=False),
    _exact("comparison.lessEqual", 1.0, 1.0, expected=True),
    _exact("comparison.lessEqual", 1.0, 2.0, expected=True),
    _exact("comparison.lessEqual", 2.0, 1.0, expected=False),
    _exact("comparison.lessEqual", NAN, NAN, expected=False),
    _exact("comparison.lessEqual", -0.0, 0.0, expected=True),
    _exact("comparison.lessEqual", -INF, -INF, expected=True),
    _exact("comparison.greaterEqual", 1.0, 1.0, expected=True),
    _exact("comparison.greaterEqual", 2.0, 1.0, expected=True),
    _exact("comparison.greaterEqual", 1.0, 2.0, expected=False),
    _exact("comparison.greaterEqual", NAN, 1.0, expected=False),
    _exact("comparison.greaterEqual", INF, INF, expected=True),
]

LOGICAL_CASES = [
    _exact("logical.and", True, True, expected=True),
    _exact("logical.and", True, False, expected=False),
    _exact("logical.and", False, True, expected=False),
    _exact("logical.and", False, False, expected=False),
    _exact("logical.or", True, True, expected=True),
    _exact("logical.or", True, False, expected=True),
    _exact("logical.or", False, True, expected=True),
    _exact("logical.or", False, False, expected=False),
    _exact("logical.not", True, expected=False),
    _exact("logical.not", False, expected=True),
]

STRING_CASES = [
    _exact("string.concat", "Hello", " World", expected="Hello World"),
    _exact("string.concat", "", "abc", expected="abc"),
    _exact("string.concat", "abc", "", expected="abc"),
    _exact("string.concat", "", "", expected=""),
    _exact("string.concat", HIGH_SURROGATE, LOW_SURROGATE, expected=GRINNING_FACE),
    _exact("string.length", "", expected=0),
    _exact("string.length", "Hello", expected=5),
    _exact("string.length", " ", expected=1),
    _exact("string.length", "héllo", expected=5),
    _exact("string.length", GRINNING_FACE, expected=2),
    _exact("string.length", f"a{GRINNING_FACE}b", expected=4),
    _exact("string.substring", "Hello", 0.0, 4.0, expected="Hello"),
    _exact("string.substring", "Hello", 1.0, 3.0, expected="ell"),
    _exact("string.substring", "Test", 0.0, 0.0, expected="T"),
    _exact("string.substring", "Test", 2.0, 1.0, expected=""),
    _exact("string.substring", "Test", -3.0, 1.0, expected="Te"),
    _exact("string.substring", "Test", 2.0, 100.0, expected="st"),
    _exact("string.substring", "Test", 4.0, 10.0, expected=""),
    _exact("string.substring", "", 0.0, 0.0, expected=""),
    _exact("string.substring", f"a{GRINNING_FACE}b", 1.0, 2.0, expected=GRINNING_FACE),
    _exact("string.substring", f"a{GRINNING_FACE}b", 0.0, 1.0, expected=f"a{HIGH_SURROGATE}"),
    _exact("string.indexOf", "Hello", "l", expected=2),
    _exact("string.indexOf", "Hello", "xyz", expected=-1),
    _exact("string.indexOf", "Hello", "", expected=0),
    _exact("string.indexOf", "", "", expected=0),
    _exact("string.indexOf", "", "a", expected=-1),
    _exact("string.indexOf", "Hello", "Hello", expected=0),
    _exact("string.indexOf", "abcabc", "ca", expected=2),
    _exact("string.indexOf", f"{GRINNING_FACE}x", "x", expected=2),
    _exact("string.contains", "Hello World", "World", expected=True),
    _exact("string.contains", "Hello", "xyz", expected=False),
    _exact("string.contains", "Hello", "", expected=True),
    _exact("string.contains", "", "", expected=True),
    _exact("string.contains", "abc", "abc", expected=True),
    _exact("string.contains", "abc", "ABC", expected=False),
    _exact("string.startsWith", "Hello", "He", expected=True),
    _exact("string.startsWith", "Hello", "lo", expected=False),
    _exact("string.startsWith", "Hello", "", expected=True),
    _exact("string.startsWith", "Hello", "Hello", expected=True),
    _exact("string.startsWith", "He", "Hello", expected=False),
    _exact("string.endsWith", "Hello", "lo", expected=True),
    _exact("string.endsWith", "Hello", "He", expected=False),
    _exact("string.endsWith", "Hello", "", expected=True),
    _exact("string.endsWith", "Hello", "Hello", expected=True),
    _exact("string.toUppercase", "hello", expected="HELLO"),
    _exact("string.toUppercase", "Hello World 123", expected="HELLO WORLD 123"),
    _exact("string.toUppercase", "héllo", expected="HÉLLO"),
    _exact("string.toUppercase", "straße", expected="STRASSE"),
    _exact("string.toUppercase", "", expected=""),
    _exact("string.toLowercase", "HELLO", expected="hello"),
    _exact("string.toLowercase", "ÀÉÎ", expected="àéî"),
    _exact("string.toLowercase", "MiXeD 42", expected="mixed 42"),
    _exact("string.toLowercase", "", expected=""),
    _exact("string.trim", "  hello  ", expected="hello"),
    _exact("string.trim", "\t\nhello\n\t", expected="hello"),
    _exact("string.trim", "hello", expected="hello"),
    _exact("string.trim", "  hello   world  ", expected="hello   world"),
    _exact("string.trim", "   ", expected=""),
    _exact("string.trim", "", expected=""),
    _exact("string.split", "a,b,c", ",", expected=["a", "b", "c"]),
    _exact("string.split", "a,,b", ",", expected=["a", "", "b"]),
    _exact("string.split", ",a,", ",", expected=["", "a", ""]),
    _exact("string.split", "a::b::c", "::", expected=["a", "b", "c"]),
    _exact("string.split", "abc", "", expected=["a", "b", "c"]),
    _exact("string.split", "abc", ";", expected=["abc"]),
    _exact("string.split", "", ",", expected=[""]),
    _exact("string.split", "", "", expected=[]),
    _exact("string.split", GRINNING_FACE, "", expected=[HIGH_SURROGATE, LOW_SURROGATE]),
    _exact("string.join", ["a", "b", "c"], ",", expected="a,b,c"),
    _exact("string.join", [], ",", expected=""),
    _exact("string.join", ["only"], ",", expected="only"),
    _exact("string.join", ["a", "", "b"], ",", expected="a,,b"),
    _exact("string.join", ["a", "b"], "", expected="ab"),
    _exact("string.join", [HIGH_SURROGATE, LOW_SURROGATE], "", expected=GRINNING_FACE),
    _exact("string.replace", "Hello World", "o", "0", expected="Hell0 W0rld"),
    _exact("string.replace", "Hello", "", "x", expected="Hello"),
    _exact("string.replace", "Hello", "xyz", "abc", expected="Hello"),
    _exact("string.replace", "aaa", "aa", "b", expected="ba"),
    _exact("string.replace", "abc", "b", "", expected="ac"),
    _exact("string.replace", "", "a", "b", expected=""),
    _exact("string.isEmpty", "", expected=True),
    _exact("string.isEmpty", "a", expected=False),
    _exact("string.isEmpty", " ", expected=False),
]

CASES = ARITHMETIC_CASES + COMPARISON_CASES + LOGICAL_CASES + STRING_CASES
