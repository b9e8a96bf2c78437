"""
Tests for the typed operator wrappers: equality, boolean logic, ordering
and arithmetic.
"""

import pytest

from fnkit import (
    add, sub, mul, div, rem, mod,
    eq, ne, eqv, not_, and_, or_,
    lt, gt, le, ge, max_, min_, compare,
)


class TestEquality:

    def test_eq_same_type(self):
        assert eq(1, 1) is True
        assert eq(1, 2) is False

    def test_eq_int_float(self):
        """Both are numbers, so they compare by value."""
        assert eq(1, 1.0) is True

    def test_eq_rejects_bool_number_mix(self):
        assert eq(1, True) is False

    def test_eq_compares_lists_by_contents(self):
        assert eq([1, 2], [1, 2]) is True
        assert eq([1, 2], [2, 1]) is False

    def test_ne(self):
        assert ne(1, 1) is False
        assert ne(1, 2) is True

    def test_eq_is_curried(self):
        is_one = eq(1)
        assert is_one(1) is True
        assert is_one(2) is False

    def test_eqv(self):
        assert eqv({"a": 1}, {"a": 1}) is True
        assert eqv({"a": 1, "b": {"c": 2}})({"a": 1, "b": {"c": 3}}) is False


class TestBooleans:

    def test_not(self):
        assert not_(True) is False
        assert not_(False) is True

    def test_not_rejects_truthy(self):
        with pytest.raises(TypeError, match="Expected Boolean value, got: number"):
            not_(1)

    def test_and_or(self):
        assert and_(True, True) is True
        assert and_(False, True) is False
        assert or_(False, True) is True
        assert or_(False, False) is False

    def test_and_rejects_non_booleans(self):
        with pytest.raises(TypeError, match="got: number, boolean"):
            and_(1, True)

    def test_or_rejects_none(self):
        with pytest.raises(TypeError):
            or_(None, False)


class TestOrdering:

    def test_numbers(self):
        assert lt(2, 4) is True
        assert lt(5, 1) is False
        assert lt(3, 3) is False
        assert gt(5, 1) is True

    def test_strings(self):
        assert lt("abc", "abd") is True
        assert gt("b", "a") is True

    def test_lists_lexicographic(self):
        assert lt([1, 2, 3], [1, 2, 4]) is True
        assert lt([1, 2, 4], [1, 2, 3]) is False
        assert gt([2], [1, 9]) is True

    def test_list_prefix_is_smaller(self):
        assert lt([1, 2], [1, 2, 3]) is True
        assert gt([1, 2, 3], [1, 2]) is True
        assert lt([1, 2], [1, 2]) is False

    def test_list_ties_use_equivalence(self):
        """1 and 1.0 are equivalent, so the next element decides."""
        assert lt([1, 2], [1.0, 3]) is True

    def test_nested_lists(self):
        assert lt([[1, 2], "a"], [[1, 3], "a"]) is True

    def test_tuples_order_like_lists(self):
        assert lt((1, 2), [1, 3]) is True

    def test_mixed_types_raise(self):
        with pytest.raises(TypeError, match="Cannot compare type number with type string"):
            lt(2, "a")

    def test_mixed_element_types_raise(self):
        with pytest.raises(TypeError):
            lt([1], ["a"])

    def test_bool_not_orderable_against_number(self):
        with pytest.raises(TypeError):
            gt(True, 0)

    def test_unorderable_type(self):
        with pytest.raises(TypeError, match="Cannot order values of type dict"):
            lt({}, {})

    def test_le_ge(self):
        assert le(2, 4) is True
        assert le(3, 3) is True
        assert le(5, 1) is False
        assert ge(3, 3) is True
        assert ge(2, 4) is False

    def test_max_min(self):
        assert max_(1, 5) == 5
        assert min_(1, 5) == 1
        assert max_([1, 2, 3], [2, 3, 4]) == [2, 3, 4]
        assert min_([1, 2, 3], [2, 3, 4]) == [1, 2, 3]

    def test_compare(self):
        assert compare(1, 2) == -1
        assert compare([1, 2, 3], [1, 2, 3]) == 0
        assert compare(5, 3) == 1

    def test_curried_predicate(self):
        below_ten = gt(10)
        assert below_ten(3) is True


class TestArithmetic:

    def test_basic(self):
        assert add(1, 2) == 3
        assert sub(2, 1) == 1
        assert mul(5, 5) == 25
        assert div(15, 5) == 3
        assert div(2, 4) == 0.5

    def test_curried(self):
        add1 = add(1)
        assert add1(41) == 42

    def test_rem_vs_mod(self):
        assert rem(-1, 5) == -1
        assert mod(-1, 5) == 4

    def test_rem_takes_dividend_sign(self):
        assert rem(7, -3) == 1
        assert rem(-7, -3) == -1
        assert rem(7, 3) == 1

    def test_mod_takes_divisor_sign(self):
        assert mod(7, -3) == -2
        assert mod(-7, 3) == 2

    def test_floats(self):
        assert rem(-5.5, 2) == -1.5
        assert mod(-5.5, 2) == 0.5

    @pytest.mark.parametrize("op", [add, sub, mul, div, rem, mod])
    def test_rejects_non_numbers(self, op):
        with pytest.raises(TypeError, match="Expecting two Number arguments, got: string, number"):
            op("1", 2)

    def test_rejects_booleans(self):
        with pytest.raises(TypeError):
            add(True, 1)

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            div(1, 0)
        with pytest.raises(ZeroDivisionError):
            mod(1, 0)
