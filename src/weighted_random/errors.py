"""Exceptions raised by the weighted random generator.

Every exception derives from :class:`WeightedRandomError` as well as from
the builtin exception a caller would reach for first, so both
``except WeightedRandomError`` and ``except ValueError`` work.
"""


class WeightedRandomError(Exception):
    """Base class for all weighted random errors."""


class InvalidWeightError(WeightedRandomError, ValueError):
    """A weight is not a whole number of at least 1."""


class NotRegisteredError(WeightedRandomError, LookupError):
    """The value has not been registered with the generator."""


class EmptyRegistryError(WeightedRandomError, LookupError):
    """Sampling was requested while no values are registered."""


class InvalidSampleCountError(WeightedRandomError, ValueError):
    """A sample count is not a whole number of at least 1."""


class SampleCountExceedsPopulationError(InvalidSampleCountError):
    """More distinct samples were requested than there are values."""


class InvariantViolationError(WeightedRandomError, RuntimeError):
    """Sampling fell through without selecting a value.

    Only happens when the random source returns a number outside the
    range it was asked for.
    """
