"""Shared test configuration and helpers."""

import os
from collections.abc import Callable, Iterable

import pytest
from hypothesis import settings

settings.register_profile("ci", max_examples=500, deadline=None)
settings.register_profile("dev", max_examples=20)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


RandomSourceFactory = Callable[[Iterable[int]], Callable[[int, int], int]]


def make_scripted_source(draws: Iterable[int]) -> Callable[[int, int], int]:
    """Random source returning ``draws`` in order, ignoring the range."""
    it = iter(draws)

    def source(low: int, high: int) -> int:
        return next(it)

    return source


@pytest.fixture
def scripted_source() -> RandomSourceFactory:
    return make_scripted_source
