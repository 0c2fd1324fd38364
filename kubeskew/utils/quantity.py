"""Kubernetes resource quantity parsing."""

from decimal import ROUND_CEILING, Decimal, InvalidOperation
from typing import Optional, Union

BINARY_SUFFIXES = {
    "Ki": Decimal(1024),
    "Mi": Decimal(1024) ** 2,
    "Gi": Decimal(1024) ** 3,
    "Ti": Decimal(1024) ** 4,
    "Pi": Decimal(1024) ** 5,
    "Ei": Decimal(1024) ** 6,
}

DECIMAL_SUFFIXES = {
    "n": Decimal("0.000000001"),
    "u": Decimal("0.000001"),
    "m": Decimal("0.001"),
    "k": Decimal(1000),
    "M": Decimal(1000) ** 2,
    "G": Decimal(1000) ** 3,
    "T": Decimal(1000) ** 4,
    "P": Decimal(1000) ** 5,
    "E": Decimal(1000) ** 6,
}


def parse_quantity(quantity: Optional[Union[str, int, float, Decimal]]) -> Decimal:
    """
    Parse a Kubernetes quantity ("4", "500m", "16393052Ki", "100Gi") to Decimal.

    Unparseable input yields 0.
    """
    if quantity is None:
        return Decimal(0)
    if isinstance(quantity, (int, float, Decimal)):
        return Decimal(quantity)

    quantity = str(quantity).strip()
    number = quantity
    multiplier = Decimal(1)

    if quantity[-2:] in BINARY_SUFFIXES:
        number = quantity[:-2]
        multiplier = BINARY_SUFFIXES[quantity[-2:]]
    elif quantity[-1:] in DECIMAL_SUFFIXES:
        # "1e3" style exponents end in a digit, so an "E" suffix is unambiguous here
        number = quantity[:-1]
        multiplier = DECIMAL_SUFFIXES[quantity[-1:]]

    try:
        value = Decimal(number)
    except InvalidOperation:
        return Decimal(0)

    if not value.is_finite():
        return Decimal(0)
    return value * multiplier


def quantity_value(quantity: Optional[Union[str, int, float, Decimal]]) -> int:
    """Integer value of a quantity, rounded up (e.g. "1500m" CPU is 2)."""
    value = parse_quantity(quantity)
    return int(value.to_integral_value(rounding=ROUND_CEILING))
