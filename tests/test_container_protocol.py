"""Tests for Python container operations on WeightedRandomGenerator."""

import pytest

from weighted_random import (
    InvalidWeightError,
    NotRegisteredError,
    WeightedRandomGenerator,
    WeightedValue,
)

# =============================================================================
# Item Access Tests (__getitem__, __setitem__, __delitem__)
# =============================================================================


def test_getitem_returns_weight() -> None:
    """Test getting the weight of a registered value."""
    gen = WeightedRandomGenerator({"a": 1, "b": 2, "c": 3})
    assert gen["a"] == 1
    assert gen["b"] == 2
    assert gen["c"] == 3


def test_getitem_unregistered() -> None:
    """Test getting the weight of an unregistered value."""
    gen = WeightedRandomGenerator({"a": 1})
    with pytest.raises(NotRegisteredError):
        _ = gen["missing"]
    with pytest.raises(LookupError):
        _ = gen["missing"]


def test_setitem_adds_value() -> None:
    """Test setting the weight of a new value registers it."""
    gen = WeightedRandomGenerator({"a": 1})
    gen["b"] = 5
    assert gen["b"] == 5
    assert len(gen) == 2


def test_setitem_updates_weight() -> None:
    """Test setting the weight of an existing value updates it in place."""
    gen = WeightedRandomGenerator({"a": 1, "b": 2})
    gen["a"] = 5
    assert gen["a"] == 5
    assert [wv.value for wv in gen] == ["a", "b"]


def test_setitem_invalid_weight() -> None:
    """Test setting invalid weights raises error."""
    gen = WeightedRandomGenerator({"a": 1})
    with pytest.raises(InvalidWeightError):
        gen["a"] = 0
    with pytest.raises(InvalidWeightError):
        gen["a"] = -1
    with pytest.raises(InvalidWeightError):
        gen["a"] = 1.5  # type: ignore[assignment]
    assert gen["a"] == 1


def test_delitem_removes_value() -> None:
    """Test deleting a registered value."""
    gen = WeightedRandomGenerator({"a": 1, "b": 2})
    del gen["a"]
    assert "a" not in gen
    assert len(gen) == 1


def test_delitem_unregistered() -> None:
    """Test deleting an unregistered value."""
    gen = WeightedRandomGenerator({"a": 1})
    with pytest.raises(NotRegisteredError):
        del gen["missing"]


# =============================================================================
# Contains Tests (__contains__)
# =============================================================================


def test_contains_registered_value() -> None:
    """Test checking for registered values."""
    gen = WeightedRandomGenerator({"a": 1, "b": 2})
    assert "a" in gen
    assert "b" in gen


def test_contains_unregistered_value() -> None:
    """Test checking for a value that was never registered."""
    gen = WeightedRandomGenerator({"a": 1})
    assert "z" not in gen


def test_contains_removed_value() -> None:
    """Test checking for a removed value."""
    gen = WeightedRandomGenerator({"a": 1, "b": 2})
    gen.remove("a")
    assert "a" not in gen


def test_contains_unhashable_value() -> None:
    """Test checking for unhashable values."""
    gen = WeightedRandomGenerator()
    gen.register({"key": [1, 2]})
    assert {"key": [1, 2]} in gen
    assert {"key": [2, 1]} not in gen


# =============================================================================
# Iteration and Length Tests (__iter__, __len__)
# =============================================================================


def test_iter_returns_all_weighted_values() -> None:
    """Test iteration returns every value with its weight, in order."""
    gen = WeightedRandomGenerator({"a": 1, "b": 2, "c": 3})
    assert list(gen) == [
        WeightedValue("a", 1),
        WeightedValue("b", 2),
        WeightedValue("c", 3),
    ]


def test_iter_same_as_entries() -> None:
    """Test iter() yields the same as entries()."""
    gen = WeightedRandomGenerator({"a": 1, "b": 2})
    assert list(gen) == list(gen.entries())


def test_iter_appends_new_values_last() -> None:
    """Test new values are appended after existing ones."""
    gen = WeightedRandomGenerator({"b": 2})
    gen["a"] = 1
    assert [wv.value for wv in gen] == ["b", "a"]


def test_len_empty() -> None:
    """Test a new generator is empty."""
    gen = WeightedRandomGenerator()
    assert len(gen) == 0
    assert not gen


def test_len_counts_distinct_values() -> None:
    """Test length counts each value once."""
    gen = WeightedRandomGenerator()
    gen["a"] = 1
    gen["a"] = 2
    gen["b"] = 1
    assert len(gen) == 2
    assert gen


# =============================================================================
# Repr Tests
# =============================================================================


def test_repr_lists_pairs() -> None:
    """Test repr shows values and weights in registration order."""
    gen = WeightedRandomGenerator({"a": 1, "b": 2})
    assert repr(gen) == "WeightedRandomGenerator([('a', 1), ('b', 2)])"


def test_entries_repr() -> None:
    """Test the entries view repr."""
    gen = WeightedRandomGenerator({"a": 1})
    assert repr(gen.entries()) == (
        "WeightedValuesView([WeightedValue(value='a', weight=1)])"
    )
