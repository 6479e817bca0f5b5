"""Collapse configurations to one representative per achievable weight."""

from __future__ import annotations

from typing import Dict, Iterable, List

from .configuration import Configuration, ordering_key


def deduplicate(configurations: Iterable[Configuration]) -> List[Configuration]:
    """Return one configuration per distinct weight, sorted ascending.

    Configurations are grouped on their integer weight. Each group keeps its
    minimum under :func:`ordering_key`, i.e. the loading with the fewest
    plates; among equally short loadings the first one seen wins.
    """
    best: Dict[int, Configuration] = {}
    for configuration in configurations:
        current = best.get(configuration.weight)
        if current is None or ordering_key(configuration) < ordering_key(current):
            best[configuration.weight] = configuration
    return sorted(best.values(), key=ordering_key)
