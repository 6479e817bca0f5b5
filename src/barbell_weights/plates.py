"""Parsing of plate sizes given as text."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable, List


class PlateParseError(ValueError):
    """Raised when a plate token is not a finite, non-negative number."""


def parse_plate_tokens(tokens: Iterable[str]) -> List[Decimal]:
    """Convert plate tokens to decimals.

    Each token is one plate per side of the bar. List a size twice to say you
    own four plates of it.
    """
    plates: List[Decimal] = []
    for token in tokens:
        text = token.strip()
        try:
            value = Decimal(text)
        except InvalidOperation as exc:
            raise PlateParseError(f"Plate size '{token}' is not a number") from exc
        if not value.is_finite():
            raise PlateParseError(f"Plate size '{token}' is not finite")
        if value < 0:
            raise PlateParseError(f"Plate size '{token}' is negative")
        plates.append(value)
    return plates
