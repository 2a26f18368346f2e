"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENTS = Decimal("0.01")
# Largest accepted decimal exponent; anything bigger is not a currency amount.
_MAX_ADJUSTED = 15


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_amount(value) -> Decimal | None:
    """Parse a user-entered amount into a finite Decimal.

    Args:
        value: Raw amount (string, number, Decimal or None).

    Returns:
        Decimal | None: Parsed amount, or None when the value is empty or
        not a finite number within currency range.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        parsed = value
    else:
        raw = str(value).strip()
        if not raw:
            return None
        try:
            parsed = Decimal(raw)
        except InvalidOperation:
            return None
    if not parsed.is_finite():
        return None
    if parsed and parsed.adjusted() > _MAX_ADJUSTED:
        return None
    return parsed


def quantize_currency(value) -> Decimal:
    """Round a value to two decimal places for currency display."""
    return coerce_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "parse_amount", "quantize_currency"]
