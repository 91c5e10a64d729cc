"""Tests for src/core/pool/math.py: width-checked arithmetic."""

import pytest

from src.core.pool.errors import ArithmeticOverflowError
from src.core.pool.math import checked_add, checked_sub, in_domain, require_width

U64_MAX = 2**64 - 1


class TestCheckedAdd:
    def test_at_limit(self):
        assert checked_add(U64_MAX - 1, 1, limit=U64_MAX, what="x") == U64_MAX

    def test_over_limit(self):
        with pytest.raises(ArithmeticOverflowError, match="reserve_a"):
            checked_add(U64_MAX, 1, limit=U64_MAX, what="reserve_a")


class TestCheckedSub:
    def test_ok(self):
        assert checked_sub(5, 5, what="x") == 0

    def test_negative(self):
        with pytest.raises(ArithmeticOverflowError):
            checked_sub(4, 5, what="x")


class TestRequireWidth:
    def test_ok(self):
        assert require_width(0, limit=10, what="x") == 0

    @pytest.mark.parametrize("v", [-1, 11])
    def test_out_of_range(self, v):
        with pytest.raises(ArithmeticOverflowError):
            require_width(v, limit=10, what="x")


class TestInDomain:
    @pytest.mark.parametrize("v,expected", [(0, False), (1, True), (10, True), (11, False), (-3, False)])
    def test_bounds(self, v, expected):
        assert in_domain(v, limit=10) is expected
