from __future__ import annotations

import math

import pytest

from commonlib.error_msg import PrimitiveTypeError
from commonlib.primitives.comparison import (
    equal,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
    not_equal,
)

ORDERINGS = (less_than, greater_than, less_equal, greater_equal)


@pytest.mark.unit
def test_basic_ordering():
    assert less_than.execute(1, 2) is True
    assert less_than.execute(2, 1) is False
    assert greater_than.execute(2, 1) is True
    assert less_equal.execute(2, 2) is True
    assert greater_equal.execute(1, 2) is False


@pytest.mark.unit
def test_nan_is_unordered_and_unequal():
    for kernel in ORDERINGS:
        assert kernel.execute(math.nan, 1.0) is False
        assert kernel.execute(1.0, math.nan) is False
        assert kernel.execute(math.nan, math.nan) is False
    assert equal.execute(math.nan, math.nan) is False
    assert not_equal.execute(math.nan, math.nan) is True


@pytest.mark.unit
def test_signed_zero_and_infinities():
    assert equal.execute(-0.0, 0.0) is True
    assert not_equal.execute(-0.0, 0.0) is False
    assert less_than.execute(-0.0, 0.0) is False
    assert equal.execute(math.inf, math.inf) is True
    assert equal.execute(math.inf, -math.inf) is False
    assert less_than.execute(-math.inf, math.inf) is True
    assert greater_than.execute(math.inf, 1e308) is True


@pytest.mark.unit
def test_int_and_float_compare_by_value():
    assert equal.execute(1, 1.0) is True
    assert less_equal.execute(2, 2.0) is True


@pytest.mark.unit
def test_booleans_are_not_numbers():
    with pytest.raises(PrimitiveTypeError):
        equal.execute(True, 1.0)
    with pytest.raises(PrimitiveTypeError):
        less_than.execute(0.0, "1")


@pytest.mark.unit
def test_oversized_ints_compare_as_infinities():
    huge = 10**400
    assert equal.execute(huge, 1.0) is False
    assert greater_than.execute(huge, 1e308) is True
    assert less_than.execute(-huge, -1e308) is True
    assert equal.execute(huge, math.inf) is True
