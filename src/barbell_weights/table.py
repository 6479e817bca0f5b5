"""Result containers for computed weight lists."""

from __future__ import annotations

import csv
import os
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Iterable, List, Tuple

import numpy as np

from .configuration import Configuration
from .precision import format_decimal


@dataclass(frozen=True)
class WeightOption:
    """A presentable weight: total, number of plates per side, and those plates."""

    weight: Decimal
    plate_count: int
    plates: Tuple[Decimal, ...]

    @classmethod
    def from_configuration(cls, configuration: Configuration) -> "WeightOption":
        return cls(
            weight=configuration.weight_value,
            plate_count=configuration.plate_count,
            plates=configuration.sorted_plates(),
        )

    def label(self) -> str:
        plates = ", ".join(format_decimal(plate) for plate in self.plates)
        return f"{format_decimal(self.weight)} ({plates})"


@dataclass
class WeightTable:
    """Stores the weights that survive spacing selection for one ``min_step``."""

    options: List[WeightOption]
    bar: Decimal
    min_step: float
    metadata: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_configurations(
        cls,
        configurations: Iterable[Configuration],
        bar: Decimal,
        min_step: float,
        metadata: dict[str, str] | None = None,
    ) -> "WeightTable":
        return cls(
            options=[WeightOption.from_configuration(c) for c in configurations],
            bar=bar,
            min_step=min_step,
            metadata=metadata or {},
        )

    def __len__(self) -> int:
        return len(self.options)

    @property
    def weights(self) -> np.ndarray:
        return np.array([float(option.weight) for option in self.options], dtype=np.float64)

    @property
    def plate_counts(self) -> np.ndarray:
        return np.array([option.plate_count for option in self.options], dtype=np.int64)

    def steps(self) -> np.ndarray:
        """Differences between consecutive weights."""
        return np.diff(self.weights)

    def summary(self) -> str:
        return (
            f"bar {format_decimal(self.bar)}, min step {self.min_step:g}: "
            f"{len(self.options)} weights"
        )

    def to_text(self) -> str:
        return os.linesep.join(option.label() for option in self.options)

    def write_text(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as text_file:
            text_file.write(self.to_text())
            text_file.write(os.linesep)

    def to_csv(self, path: Path) -> None:
        """Serialize the table to disk."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="") as csv_file:
            writer = csv.writer(csv_file)
            writer.writerow(["weight", "plate_count", "plates"])
            for option in self.options:
                writer.writerow(
                    [
                        format_decimal(option.weight),
                        option.plate_count,
                        " ".join(format_decimal(plate) for plate in option.plates),
                    ]
                )


def steps_filename(min_step: float, suffix: str = ".txt") -> str:
    return f"steps_{float(min_step)}{suffix}"
