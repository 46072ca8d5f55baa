# cosmos_indexer/utils/amounts.py
"""
Utility functions for handling string amounts in blockchain operations.

Amounts arrive as decimal strings (cw20 Uint128) and are handled as
``decimal.Decimal`` with an exact context, so sums never round.
"""

from decimal import Decimal, Context, InvalidOperation, localcontext
from typing import Union, Iterable


AmountLike = Union[str, int, Decimal, None]

# wide enough for sums of many Uint128 values
EXACT_CONTEXT = Context(prec=200)


def amount_to_decimal(amount: AmountLike) -> Decimal:
    """Convert amount to Decimal; a missing or blank amount is zero.

    Malformed strings raise ValueError rather than defaulting to zero.
    """
    if amount is None:
        return Decimal(0)
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool):
        raise ValueError(f"Invalid amount: {amount!r}")
    if isinstance(amount, int):
        return Decimal(amount)
    if isinstance(amount, str):
        if amount.strip() == "":
            return Decimal(0)
        try:
            value = Decimal(amount.strip())
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {amount!r}") from e
        if not value.is_finite():
            raise ValueError(f"Invalid amount: {amount!r}")
        return Decimal(int(value))
    raise ValueError(f"Invalid amount type: {type(amount).__name__}")


def amount_to_str(amount: AmountLike) -> str:
    """Convert amount to a plain (non-exponent) decimal string"""
    return format(amount_to_decimal(amount), 'f')


def add_amounts(*amounts: AmountLike) -> Decimal:
    with localcontext(EXACT_CONTEXT):
        total = Decimal(0)
        for amount in amounts:
            total += amount_to_decimal(amount)
        return total


def sum_amounts(amounts: Iterable[AmountLike]) -> Decimal:
    return add_amounts(*amounts)


def negate(amount: AmountLike) -> Decimal:
    # unary minus rounds to the active context precision
    with localcontext(EXACT_CONTEXT):
        return -amount_to_decimal(amount)


def uint_amount(amount: AmountLike) -> Decimal:
    """Parse a cw20 Uint128 amount: a whole, non-negative number.

    Negative or fractional values raise ValueError.
    """
    value = amount_to_decimal(amount)
    if value < 0 or value != value.to_integral_value():
        raise ValueError(f"Invalid token amount: {amount!r}")
    return Decimal(int(value))
