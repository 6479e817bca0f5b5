"""Bar configurations and the enumeration of every plate subset."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from itertools import combinations
from typing import Iterator, Sequence, Tuple

from .precision import Number, Precision, format_decimal


@dataclass(frozen=True, eq=False)
class Configuration:
    """One way of loading the bar: the plates on a single side plus the bar.

    Plates are mirrored on both sides, so ``weight = bar + 2 * sum(plates)``.
    Weights and plates are held in integer units of ``precision``.

    Two configurations are equal when their weights are equal, whatever plates
    produce them. Sorting uses :func:`ordering_key`, which additionally breaks
    weight ties on plate count; the two relations deliberately disagree.
    """

    plates: Tuple[int, ...]
    bar: int
    precision: Precision
    weight: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "plates", tuple(self.plates))
        object.__setattr__(self, "weight", self.bar + 2 * sum(self.plates))

    @property
    def plate_count(self) -> int:
        return len(self.plates)

    @property
    def weight_value(self) -> Decimal:
        return self.precision.from_units(self.weight)

    def sorted_plates(self) -> Tuple[Decimal, ...]:
        return tuple(self.precision.from_units(plate) for plate in sorted(self.plates))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self.weight == other.weight

    def __hash__(self) -> int:
        return hash(self.weight)

    def __repr__(self) -> str:
        plates = ", ".join(format_decimal(p) for p in self.sorted_plates())
        return f"Configuration(weight={format_decimal(self.weight_value)}, plates=({plates}))"


def ordering_key(configuration: Configuration) -> Tuple[int, int]:
    """Sort by weight, then by fewest plates when weights are identical."""
    return configuration.weight, configuration.plate_count


@dataclass(frozen=True)
class ConfigurationSpace:
    """All ``2 ** N`` subsets of a plate list, generated lazily.

    Each input value is one plate per side; repeated values are separate
    plates, so identical subsets of equal plates are all produced. Iterating
    again restarts the enumeration.
    """

    plates: Tuple[int, ...]
    bar: int
    precision: Precision

    @classmethod
    def from_values(cls, plates: Sequence[Number], bar: Number) -> "ConfigurationSpace":
        precision = Precision.for_values([*plates, bar])
        return cls(
            plates=tuple(precision.to_units(plate) for plate in plates),
            bar=precision.to_units(bar),
            precision=precision,
        )

    def __len__(self) -> int:
        return 2 ** len(self.plates)

    def __iter__(self) -> Iterator[Configuration]:
        indices = range(len(self.plates))
        for size in range(len(self.plates) + 1):
            for chosen in combinations(indices, size):
                yield Configuration(
                    tuple(self.plates[idx] for idx in chosen),
                    self.bar,
                    self.precision,
                )
