"""Currency rounding helpers - all monetary values are Decimal"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENT = Decimal("0.01")


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    """Convert to Decimal via str() so floats keep their printed value"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round2(value: Decimal) -> Decimal:
    """Round to cents, half away from zero"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
