"""Observable boxes used by the accessor-method convention."""

from proptree.boxes.models import (
    Box,
    FloatBox,
    IntBox,
    ListBox,
    LongBox,
    MapBox,
    ReadOnlyBox,
    ReadOnlyFloatBox,
    ReadOnlyIntBox,
    ReadOnlyListBox,
    ReadOnlyLongBox,
    ReadOnlyMapBox,
    ReadOnlySetBox,
    SetBox,
    SimpleBox,
)

__all__ = [
    "ReadOnlyBox",
    "Box",
    "SimpleBox",
    # Primitives
    "ReadOnlyIntBox",
    "ReadOnlyLongBox",
    "ReadOnlyFloatBox",
    "IntBox",
    "LongBox",
    "FloatBox",
    # Collections
    "ReadOnlyListBox",
    "ReadOnlySetBox",
    "ReadOnlyMapBox",
    "ListBox",
    "SetBox",
    "MapBox",
]
