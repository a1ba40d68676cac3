"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from proptree import IntBox, ListBox, PropertyRegistryBuilder


class FixtureCounter:
    """Bean with a field, getter, and setter for `count`."""

    _count: int

    def __init__(self, count: int = 0):
        self._count = count

    def get_count(self) -> int:
        return self._count

    def set_count(self, value: int) -> None:
        self._count = value


class FixtureTagged:
    """Accessor-only properties backed by boxes."""

    def __init__(self):
        self._tags: ListBox[str] = ListBox()
        self._size = IntBox(3)

    def tags_property(self) -> ListBox[str]:
        return self._tags

    def size_property(self) -> IntBox:
        return self._size


@pytest.fixture
def builder():
    """Builder with default conventions."""
    return PropertyRegistryBuilder()


@pytest.fixture
def counter_cls():
    return FixtureCounter


@pytest.fixture
def tagged_cls():
    return FixtureTagged
