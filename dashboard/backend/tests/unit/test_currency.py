"""Unit tests for the currency formatting helpers."""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

import pytest

from dashboard.backend.src.services.currency import cents_to_units, format_currency


@pytest.mark.parametrize(
    ("cents", "expected"),
    [
        (0, "$0.00"),
        (1, "$0.01"),
        (10000, "$100.00"),
        (123456, "$1,234.56"),
        (123456789, "$1,234,567.89"),
        (-1250, "-$12.50"),
    ],
)
def test_format_currency_renders_cents_as_dollars(cents: int, expected: str) -> None:
    assert format_currency(cents) == expected


def test_format_currency_treats_none_as_zero() -> None:
    assert format_currency(None) == format_currency(0) == "$0.00"


def test_format_currency_accepts_store_numeric_types() -> None:
    assert format_currency(Decimal("5000")) == "$50.00"
    assert format_currency("0") == "$0.00"
    assert format_currency("15795") == "$157.95"


def test_format_currency_uses_custom_symbol() -> None:
    assert format_currency(250000, symbol="€") == "€2,500.00"


def test_cents_to_units_divides_by_one_hundred() -> None:
    assert cents_to_units(250000) == Decimal("2500")
    assert cents_to_units(15795) == Decimal("157.95")
    assert cents_to_units(None) == Decimal("0")


def test_format_currency_rejects_non_numeric_input() -> None:
    with pytest.raises(ValueError):
        format_currency("not-a-number")
