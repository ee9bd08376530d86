"""Currency helpers shared by every monetary value the dashboard displays.

Amounts are stored as integer cents. Three named types keep the unit of each
value visible at the boundary:

* :data:`Cents` - the stored integer representation.
* :data:`CurrencyUnits` - a :class:`~decimal.Decimal` in display units.
* :data:`FormattedCurrency` - the display string produced by
  :func:`format_currency`.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import NewType

Cents = NewType("Cents", int)
CurrencyUnits = NewType("CurrencyUnits", Decimal)
FormattedCurrency = NewType("FormattedCurrency", str)

DEFAULT_CURRENCY_SYMBOL = "$"
_CENTS_PER_UNIT = Decimal(100)
_TWO_PLACES = Decimal("0.01")


def _as_decimal(amount: int | float | Decimal | str | None) -> Decimal:
    if amount is None:
        return Decimal(0)
    if isinstance(amount, Decimal):
        return amount
    try:
        return Decimal(str(amount).strip() or "0")
    except InvalidOperation as exc:
        raise ValueError(f"Invalid monetary amount: {amount!r}") from exc


def cents_to_units(amount: int | float | Decimal | str | None) -> CurrencyUnits:
    """Convert an amount in cents to display units. ``None`` counts as zero."""

    units = (_as_decimal(amount) / _CENTS_PER_UNIT).quantize(
        _TWO_PLACES, rounding=ROUND_HALF_UP
    )
    return CurrencyUnits(units)


def format_currency(
    amount: int | float | Decimal | str | None,
    *,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> FormattedCurrency:
    """Render an amount in cents as a currency string, e.g. ``"$1,234.56"``."""

    units = cents_to_units(amount)
    sign = "-" if units < 0 else ""
    return FormattedCurrency(f"{sign}{symbol}{abs(units):,.2f}")


__all__ = [
    "Cents",
    "CurrencyUnits",
    "DEFAULT_CURRENCY_SYMBOL",
    "FormattedCurrency",
    "cents_to_units",
    "format_currency",
]
