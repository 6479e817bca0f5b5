"""Exact fixed-point arithmetic for plate and bar weights.

Plate sizes are usually fractional (2.5, 1.25, ...). Summing them as floats in
different orders can produce totals that differ in the last bit, which would
make two identical loadings look like distinct weights. Every value is
therefore scaled to an integer number of the finest unit present in the input
(tenths, hundredths, ...) and all sums and comparisons happen on integers.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Union

Number = Union[int, float, str, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert a number to ``Decimal`` without picking up binary float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def _fraction_digits(value: Decimal) -> int:
    exponent = value.normalize().as_tuple().exponent
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)


@dataclass(frozen=True)
class Precision:
    """Number of decimal places kept when converting weights to integer units."""

    decimals: int = 0

    @classmethod
    def for_values(cls, values: Iterable[Number]) -> "Precision":
        digits = [_fraction_digits(to_decimal(value)) for value in values]
        return cls(max(digits, default=0))

    @property
    def scale(self) -> int:
        return 10 ** self.decimals

    def to_units(self, value: Number) -> int:
        scaled = to_decimal(value).scaleb(self.decimals)
        return int(scaled.to_integral_value())

    def threshold(self, value: Number) -> Decimal:
        """Scale ``value`` into units without rounding, for comparisons."""
        return to_decimal(value).scaleb(self.decimals)

    def from_units(self, units: int) -> Decimal:
        return Decimal(units).scaleb(-self.decimals)


def format_decimal(value: Decimal) -> str:
    """Render a weight with no exponent and no trailing zeros (``45``, ``47.5``)."""
    return format(value.normalize(), "f")
