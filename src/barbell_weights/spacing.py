"""Thin out a sorted weight list until neighbours are at least ``min_step`` apart.

Each pass recomputes, for every configuration still included, the distance to
its nearest included neighbour on either side. If some pair is closer than
``min_step`` the most crowded configuration (smallest ``before + after``) is
excluded, preferring the one with more plates when crowding is tied. Passes
repeat until no pair violates the step.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, List, Optional, Sequence, Union

from .configuration import Configuration
from .precision import Number

log = logging.getLogger(__name__)

Distance = Union[int, float]


@dataclass
class Spacing:
    """Working record for one configuration during selection."""

    index: int
    configuration: Configuration
    before: Distance = 0
    after: Distance = 0
    included: bool = True
    changed: bool = False

    @property
    def gap(self) -> Distance:
        return self.before + self.after


@dataclass(frozen=True)
class SpacingPass:
    """Summary of one selection pass. ``removed`` is ``None`` on the final pass."""

    index: int
    included_count: int
    removed: Optional[Configuration]
    changed_count: int


class SpacingSelector:
    def __init__(self, min_step: Number) -> None:
        self.min_step = min_step

    def select(self, configurations: Sequence[Configuration]) -> List[Configuration]:
        """Return the retained configurations, in input order."""
        spacings = _build_spacings(configurations)
        for _ in self._run(spacings):
            pass
        return [spacing.configuration for spacing in spacings if spacing.included]

    def passes(self, configurations: Sequence[Configuration]) -> Iterator[SpacingPass]:
        """Run the selection loop, yielding a report after every pass."""
        return self._run(_build_spacings(configurations))

    def _run(self, spacings: List[Spacing]) -> Iterator[SpacingPass]:
        if not spacings:
            yield SpacingPass(index=0, included_count=0, removed=None, changed_count=0)
            return

        precision = spacings[0].configuration.precision
        threshold: Decimal = precision.threshold(self.min_step)
        pass_index = 0
        while True:
            for spacing in spacings:
                spacing.changed = False
            included = _recompute_distances(spacings)

            if not any(spacing.before < threshold for spacing in included):
                yield SpacingPass(
                    index=pass_index,
                    included_count=len(included),
                    removed=None,
                    changed_count=_count_changed(spacings),
                )
                return

            victim = min(included, key=lambda s: (s.gap, -s.configuration.plate_count, s.index))
            victim.included = False
            victim.changed = True
            log.debug(
                "pass %d: removed %s (gap %s units)", pass_index, victim.configuration, victim.gap
            )
            yield SpacingPass(
                index=pass_index,
                included_count=len(included) - 1,
                removed=victim.configuration,
                changed_count=_count_changed(spacings),
            )
            pass_index += 1


def _build_spacings(configurations: Sequence[Configuration]) -> List[Spacing]:
    return [Spacing(index=idx, configuration=config) for idx, config in enumerate(configurations)]


def _recompute_distances(spacings: Sequence[Spacing]) -> List[Spacing]:
    included = [spacing for spacing in spacings if spacing.included]
    for pos, spacing in enumerate(included):
        weight = spacing.configuration.weight
        before: Distance = math.inf
        after: Distance = math.inf
        if pos > 0:
            before = weight - included[pos - 1].configuration.weight
        if pos + 1 < len(included):
            after = included[pos + 1].configuration.weight - weight
        if before != spacing.before or after != spacing.after:
            spacing.changed = True
        spacing.before = before
        spacing.after = after
    return included


def _count_changed(spacings: Sequence[Spacing]) -> int:
    return sum(1 for spacing in spacings if spacing.changed)
