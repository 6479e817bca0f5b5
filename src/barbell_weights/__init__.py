"""Barbell weights package.

Computes every total a set of plates can put on a bar and trims that list so
consecutive weights are at least a minimum step apart.
"""

from .calculator import WeightCalculator, WeightCalculatorConfig
from .cli import main
from .configuration import Configuration, ConfigurationSpace, ordering_key
from .dedup import deduplicate
from .spacing import SpacingSelector
from .table import WeightOption, WeightTable

__all__ = [
    "main",
    "Configuration",
    "ConfigurationSpace",
    "ordering_key",
    "deduplicate",
    "SpacingSelector",
    "WeightCalculator",
    "WeightCalculatorConfig",
    "WeightOption",
    "WeightTable",
]
