"""Weighted random selection over a registry of values.

Values of any type are registered with a whole-number weight. Sampling
returns a registered value, where values with a larger weight come up
proportionally more often. Registration order is kept and drives both
iteration and the sampling walk.

Values are matched by identity, or by equality when both values have
exactly the same type. This works for unhashable values such as lists and
dicts, keeps ``1``, ``1.0`` and ``True`` apart, and falls back to identity
for objects that do not define ``__eq__``.

The generator is not thread-safe. Callers sharing one instance between
threads must serialise access themselves.
"""

import logging
import numbers
import random
from collections.abc import Callable, Collection, Iterable, Iterator, Mapping
from typing import Any

from weighted_random.errors import (
    EmptyRegistryError,
    InvalidSampleCountError,
    InvalidWeightError,
    InvariantViolationError,
    NotRegisteredError,
    SampleCountExceedsPopulationError,
)
from weighted_random.value import WeightedValue

logger = logging.getLogger(__name__)

RandomSource = Callable[[int, int], int]
"""Callable taking an inclusive ``(min, max)`` range, returning an int in it."""

WeightedPairs = Mapping[Any, int] | Iterable[tuple[Any, int] | WeightedValue]


def _same_value(a: Any, b: Any) -> bool:
    return a is b or (type(a) is type(b) and bool(a == b))


def _is_whole_number(number: Any) -> bool:
    return isinstance(number, numbers.Integral) and not isinstance(number, bool)


class WeightedValuesView(Collection[WeightedValue]):
    """Live, re-iterable view of a generator's registered values.

    Every iteration starts from the current state of the generator.
    """

    def __init__(self, generator: "WeightedRandomGenerator") -> None:
        self._generator = generator

    def __iter__(self) -> Iterator[WeightedValue]:
        gen = self._generator
        for value, weight in zip(gen._values, gen._weights):
            yield WeightedValue(value, weight)

    def __len__(self) -> int:
        return len(self._generator)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, WeightedValue):
            return False
        index = self._generator._find(item.value)
        return index is not None and self._generator._weights[index] == item.weight

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class WeightedRandomGenerator:
    """Draw registered values at random, weighted by their integer weight.

    Example::

        gen = WeightedRandomGenerator({"small_chance": 1, "large_chance": 100})
        gen.sample()  # almost always "large_chance"
    """

    def __init__(
        self,
        values: WeightedPairs | None = None,
        *,
        random_source: RandomSource | None = None,
    ) -> None:
        self._values: list[Any] = []
        self._weights: list[int] = []
        self._total_weight: int | None = None
        self._random_source: RandomSource = random.randint
        if random_source is not None:
            self.set_random_source(random_source)
        if values is not None:
            self.register_batch(values)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, value: Any, weight: int = 1) -> None:
        """Add a value, or update the weight of an already registered one.

        Raises InvalidWeightError, leaving the generator untouched, when
        ``weight`` is not a whole number of at least 1.
        """
        if not _is_whole_number(weight):
            msg = f"Weight should be a whole number, got {weight!r} for {value!r}."
            raise InvalidWeightError(msg)
        if weight < 1:
            msg = f"Weight should be at least 1, got {weight} for {value!r}."
            raise InvalidWeightError(msg)

        weight = int(weight)
        index = self._find(value)
        if index is None:
            self._values.append(value)
            self._weights.append(weight)
            logger.debug("Registered %r with weight %d", value, weight)
        else:
            old_weight = self._weights[index]
            self._weights[index] = weight
            logger.debug("Updated %r weight: %d -> %d", value, old_weight, weight)
        self._total_weight = None

    def register_batch(self, pairs: WeightedPairs) -> None:
        """Register several values at once.

        ``pairs`` is either a mapping of value to weight, or an iterable of
        ``(value, weight)`` tuples and WeightedValue objects. Pairs are
        registered in order, and items of any other shape raise TypeError.
        The batch is not atomic: when a pair is rejected, the pairs before it
        stay registered.
        """
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for item in items:
            if isinstance(item, WeightedValue):
                self.register_weighted_value(item)
            else:
                try:
                    value, weight = item
                except (TypeError, ValueError) as e:
                    raise TypeError(
                        f"Batch item {item!r} is not a (value, weight) pair."
                    ) from e
                self.register(value, weight)

    def register_weighted_value(self, weighted_value: WeightedValue) -> None:
        self.register(weighted_value.value, weighted_value.weight)

    def remove(self, value: Any) -> None:
        """Remove a value so it is no longer returned by sampling."""
        index = self._index(value)
        del self._values[index]
        weight = self._weights.pop(index)
        self._total_weight = None
        logger.debug("Removed %r (weight %d)", value, weight)

    def remove_weighted_value(self, weighted_value: WeightedValue) -> None:
        """Remove the value of ``weighted_value``, whatever its weight."""
        self.remove(weighted_value.value)

    def set_random_source(self, source: RandomSource) -> None:
        """Replace the random number source used for sampling.

        ``source(min, max)`` must return a uniformly distributed int in the
        inclusive range. Meant for deterministic tests; the default is
        :func:`random.randint`.
        """
        if not callable(source):
            raise TypeError(f"Random source must be callable, got {source!r}.")
        self._random_source = source
        logger.debug("Random source set to %r", source)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def lookup(self, value: Any) -> WeightedValue:
        """Return the registered value and its weight."""
        index = self._index(value)
        return WeightedValue(self._values[index], self._weights[index])

    def entries(self) -> WeightedValuesView:
        """Return a view over all registered values, in registration order."""
        return WeightedValuesView(self)

    @property
    def total_weight(self) -> int:
        """Sum of all weights, recomputed after the generator changes."""
        if self._total_weight is None:
            self._total_weight = sum(self._weights)
        return self._total_weight

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def sample(self) -> Any:
        """Draw one registered value at random.

        A number is drawn from ``[0, total_weight]`` inclusive. Values are
        then walked in registration order: the first value whose weight is
        at least the remaining number is returned, otherwise its weight is
        subtracted and the walk continues.
        """
        if not self._values:
            raise EmptyRegistryError("At least one value should be registered.")

        total = self.total_weight
        draw = self._random_source(0, total)
        remaining = draw
        for value, weight in zip(self._values, self._weights):
            if weight >= remaining:
                return value
            remaining -= weight

        logger.error("Random source returned %r outside of [0, %d]", draw, total)
        raise InvariantViolationError(
            f"No value selected for draw {draw!r} with total weight {total}."
        )

    def sample_many(self, count: int) -> Iterator[Any]:
        """Lazily draw ``count`` values. The same value may come up repeatedly.

        Arguments are checked straight away, each value is drawn when the
        iterator reaches it.
        """
        self._check_sample_count(count)
        if not self._values:
            raise EmptyRegistryError("At least one value should be registered.")
        return self._draw(count)

    def sample_many_distinct(self, count: int) -> Iterator[Any]:
        """Lazily draw ``count`` different values.

        Values already returned by this call are redrawn, so no value is
        returned twice. Separate calls may return the same values.
        Like sample_many, raises EmptyRegistryError when nothing is
        registered, before checking the count against the population.
        """
        self._check_sample_count(count)
        if not self._values:
            raise EmptyRegistryError("At least one value should be registered.")
        if count > len(self._values):
            raise SampleCountExceedsPopulationError(
                f"Sample count {count} exceeds the {len(self._values)} "
                "registered values."
            )
        return self._draw_distinct(count)

    def _draw(self, count: int) -> Iterator[Any]:
        for _ in range(count):
            yield self.sample()

    def _draw_distinct(self, count: int) -> Iterator[Any]:
        returned: list[Any] = []
        while len(returned) < count:
            sample = self.sample()
            if any(_same_value(sample, seen) for seen in returned):
                continue
            returned.append(sample)
            yield sample

    @staticmethod
    def _check_sample_count(count: Any) -> None:
        if not _is_whole_number(count) or count < 1:
            raise InvalidSampleCountError(
                f"Sample count should be a whole number of at least 1, got {count!r}."
            )

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, value: Any) -> bool:
        return self._find(value) is not None

    def __iter__(self) -> Iterator[WeightedValue]:
        return iter(self.entries())

    def __getitem__(self, value: Any) -> int:
        return self._weights[self._index(value)]

    def __setitem__(self, value: Any, weight: int) -> None:
        self.register(value, weight)

    def __delitem__(self, value: Any) -> None:
        self.remove(value)

    def __repr__(self) -> str:
        pairs = list(zip(self._values, self._weights))
        return f"{type(self).__name__}({pairs!r})"

    def _find(self, value: Any) -> int | None:
        for index, registered in enumerate(self._values):
            if _same_value(registered, value):
                return index
        return None

    def _index(self, value: Any) -> int:
        index = self._find(value)
        if index is None:
            raise NotRegisteredError(f"Value {value!r} is not registered.")
        return index
