"""Test Kubernetes quantity parsing."""

from decimal import Decimal

import pytest

from kubeskew.utils.quantity import parse_quantity, quantity_value


class TestParseQuantity:
    @pytest.mark.parametrize(
        "quantity, expected",
        [
            ("4", Decimal(4)),
            ("500m", Decimal("0.5")),
            ("16393052Ki", Decimal(16393052 * 1024)),
            ("8Gi", Decimal(8 * 1024**3)),
            ("1Ti", Decimal(1024**4)),
            ("100M", Decimal(100 * 1000**2)),
            ("2k", Decimal(2000)),
            ("1e3", Decimal(1000)),
            ("250n", Decimal("0.000000250")),
        ],
    )
    def test_parse(self, quantity, expected):
        assert parse_quantity(quantity) == expected

    @pytest.mark.parametrize("quantity", [None, "", "abc", "Gi", "NaN"])
    def test_invalid_is_zero(self, quantity):
        assert parse_quantity(quantity) == 0

    def test_numeric_input(self):
        assert parse_quantity(3) == Decimal(3)


class TestQuantityValue:
    def test_rounds_up(self):
        assert quantity_value("1500m") == 2
        assert quantity_value("100m") == 1

    def test_whole_values(self):
        assert quantity_value("4") == 4
        assert quantity_value("1Ki") == 1024

    def test_missing(self):
        assert quantity_value(None) == 0
