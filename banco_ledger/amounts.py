"""
Amount Handling Module

Converts user and caller supplied values to Decimal and formats them for
display. Amounts are never stored as float.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Union
import re

from .errors import InvalidArgumentError

AmountLike = Union[Decimal, int, float, str]

TWO_PLACES = Decimal('0.01')

CURRENCY_NOISE = re.compile(r'[\s$€£¥]')
AMOUNT_CHARS = re.compile(r'[+-]?[\d.,]+')


def to_amount(value: AmountLike) -> Decimal:
    """
    Convert a numeric value to Decimal

    Floats go through str() so 0.1 becomes Decimal('0.1') rather than its
    binary expansion.

    Raises:
        InvalidArgumentError: If the value is not a finite number
    """
    if isinstance(value, bool) or value is None:
        raise InvalidArgumentError(f"Invalid amount: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidArgumentError(f"Invalid amount: {value!r}") from None
    else:
        raise InvalidArgumentError(f"Invalid amount: {value!r}")

    if not result.is_finite():
        raise InvalidArgumentError(f"Amount must be a finite number: {value!r}")
    return result


def decimal_from_string(value: str) -> Decimal:
    """
    Parse an amount typed by a user

    Strips currency symbols and whitespace, rejects any other non-numeric
    characters, and accepts a comma as decimal separator ("12,50") or as
    thousands separator ("1,250.00").

    Raises:
        InvalidArgumentError: If the text cannot be read as a number
    """
    if not value or not isinstance(value, str):
        raise InvalidArgumentError("Value must be a non-empty string")

    clean_value = CURRENCY_NOISE.sub('', value)
    if not AMOUNT_CHARS.fullmatch(clean_value):
        raise InvalidArgumentError(f"Cannot convert '{value}' to an amount")

    if ',' in clean_value and '.' in clean_value:
        clean_value = clean_value.replace(',', '')
    elif clean_value.count(',') == 1:
        whole, fraction = clean_value.split(',')
        if len(fraction) <= 2:
            clean_value = f"{whole}.{fraction}"
        else:
            clean_value = whole + fraction

    try:
        return to_amount(clean_value)
    except InvalidArgumentError:
        raise InvalidArgumentError(f"Cannot convert '{value}' to an amount") from None


def format_amount(value: Decimal) -> str:
    """Format an amount with two decimal places, whatever its magnitude"""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return str(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def format_rate(rate: Decimal) -> str:
    """Format a fractional rate as a percentage without trailing zeros (0.005 -> "0.5")"""
    text = f"{rate * 100:f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text
