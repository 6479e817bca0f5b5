"""Pipeline that turns a plate list into a well-spaced weight table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .configuration import Configuration, ConfigurationSpace
from .dedup import deduplicate
from .precision import Number, to_decimal
from .spacing import SpacingSelector
from .table import WeightTable

log = logging.getLogger(__name__)


@dataclass
class WeightCalculatorConfig:
    bar: float = 45.0
    min_step: float = 2.0


class WeightCalculator:
    def __init__(self, config: WeightCalculatorConfig) -> None:
        bar = to_decimal(config.bar)
        if not bar.is_finite():
            raise ValueError("Bar weight must be a finite number.")
        if bar < 0:
            raise ValueError("Bar weight must be non-negative.")
        if not to_decimal(config.min_step).is_finite():
            raise ValueError("Minimum step must be a finite number.")
        self.config = config

    def configurations(self, plates: Sequence[Number]) -> ConfigurationSpace:
        return ConfigurationSpace.from_values(plates, self.config.bar)

    def achievable(self, plates: Sequence[Number]) -> List[Configuration]:
        """Every distinct weight the plates can make, fewest plates first on ties."""
        return deduplicate(self.configurations(plates))

    def calculate(self, plates: Sequence[Number]) -> WeightTable:
        space = self.configurations(plates)
        achievable = deduplicate(space)
        selected = SpacingSelector(self.config.min_step).select(achievable)
        log.info(
            "min step %s: %d subsets, %d distinct weights, %d kept",
            self.config.min_step,
            len(space),
            len(achievable),
            len(selected),
        )
        return WeightTable.from_configurations(
            selected,
            bar=space.precision.from_units(space.bar),
            min_step=self.config.min_step,
            metadata={
                "plates": " ".join(str(to_decimal(plate)) for plate in plates),
                "subsets": str(len(space)),
                "distinct_weights": str(len(achievable)),
            },
        )
