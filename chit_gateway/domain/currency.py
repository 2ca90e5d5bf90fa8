"""Money coercion and INR display formatting"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from babel.numbers import format_currency as babel_format_currency

from chit_gateway.domain.exceptions import InvalidChitParametersError

Amount = Union[Decimal, int, float, str]

CURRENCY_CODE = "INR"
DEFAULT_LOCALE = "en_IN"

# Whole rupees with Indian digit grouping (1,00,000)
WHOLE_UNIT_PATTERN = "¤#,##,##0"

WHOLE_UNIT = Decimal("1")


def to_decimal(value: Amount) -> Decimal:
    """
    Coerce a monetary input to Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1") rather than its
    binary expansion. Booleans, NaN and infinities are rejected.
    """
    if isinstance(value, bool):
        raise InvalidChitParametersError(f"Expected a number, got {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidChitParametersError(f"Not a valid amount: {value!r}")
    else:
        raise InvalidChitParametersError(f"Expected a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidChitParametersError(f"Amount must be finite, got {value!r}")

    return result


def format_currency(amount: Amount, locale: str = DEFAULT_LOCALE) -> str:
    """
    Format an amount as INR with no fractional digits.

    Examples (en_IN):
        9000    -> "₹9,000"
        -2000   -> "-₹2,000"
        0       -> "₹0"
        100000  -> "₹1,00,000"
    """
    rounded = to_decimal(amount).quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP)

    # -0.4 rounds to Decimal("-0"), which would render as "-₹0"
    if rounded.is_zero():
        rounded = Decimal(0)

    return babel_format_currency(
        rounded,
        CURRENCY_CODE,
        format=WHOLE_UNIT_PATTERN,
        locale=locale,
        currency_digits=False,
    )


def format_signed_currency(amount: Amount, locale: str = DEFAULT_LOCALE) -> str:
    """Like format_currency, but with an explicit "+" on non-negative values"""
    formatted = format_currency(amount, locale)
    if formatted.startswith("-"):
        return formatted
    return f"+{formatted}"
