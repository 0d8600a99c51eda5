"""Package initialization for weighted-random.

A registry of values with integer weights, drawing random samples where
the chance of each value grows with its weight.
"""

from weighted_random.errors import (
    EmptyRegistryError,
    InvalidSampleCountError,
    InvalidWeightError,
    InvariantViolationError,
    NotRegisteredError,
    SampleCountExceedsPopulationError,
    WeightedRandomError,
)
from weighted_random.generator import (
    RandomSource,
    WeightedRandomGenerator,
    WeightedValuesView,
)
from weighted_random.value import WeightedValue

__version__ = "0.1.0"
__all__ = [
    "EmptyRegistryError",
    "InvalidSampleCountError",
    "InvalidWeightError",
    "InvariantViolationError",
    "NotRegisteredError",
    "RandomSource",
    "SampleCountExceedsPopulationError",
    "WeightedRandomError",
    "WeightedRandomGenerator",
    "WeightedValue",
    "WeightedValuesView",
]
