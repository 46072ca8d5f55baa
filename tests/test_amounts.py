# tests/test_amounts.py

from decimal import Decimal

import pytest

from cosmos_indexer.utils.amounts import (
    add_amounts,
    amount_to_decimal,
    amount_to_str,
    negate,
    sum_amounts,
    uint_amount,
)


UINT128_MAX = "340282366920938463463374607431768211455"


class TestAmountToDecimal:

    def test_parses_decimal_strings(self):
        assert amount_to_decimal("1500") == Decimal(1500)
        assert amount_to_decimal(" 42 ") == Decimal(42)

    def test_missing_or_blank_is_zero(self):
        assert amount_to_decimal(None) == Decimal(0)
        assert amount_to_decimal("") == Decimal(0)

    @pytest.mark.parametrize("value", ["abc", "1e", "NaN", "Infinity", True])
    def test_rejects_malformed_amounts(self, value):
        with pytest.raises(ValueError):
            amount_to_decimal(value)


def test_sums_beyond_float_precision_are_exact():
    total = add_amounts(UINT128_MAX, "1")
    assert total == Decimal("340282366920938463463374607431768211456")
    assert amount_to_str(total) == "340282366920938463463374607431768211456"


def test_sum_of_many_large_values():
    values = [UINT128_MAX] * 1000
    assert sum_amounts(values) == Decimal(UINT128_MAX + "000")


def test_negate_keeps_every_digit():
    assert negate(UINT128_MAX) == Decimal("-" + UINT128_MAX)
    assert add_amounts(negate(UINT128_MAX), UINT128_MAX) == Decimal(0)


class TestUintAmount:

    def test_accepts_whole_non_negative_amounts(self):
        assert uint_amount("0") == Decimal(0)
        assert uint_amount(UINT128_MAX) == Decimal(UINT128_MAX)
        assert uint_amount("7.0") == Decimal(7)

    @pytest.mark.parametrize("value", ["-50", "1.5", "0.000001", "abc"])
    def test_rejects_negative_and_fractional_amounts(self, value):
        with pytest.raises(ValueError):
            uint_amount(value)
