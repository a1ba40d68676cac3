"""proptree: property registries resolved over Python class hierarchies.

A property is a name inferred by convention from a field and a getter, setter,
or box accessor method. Building a type walks all of its supertypes once and
returns an immutable registry of typed descriptors.

Usage:
    from proptree import IntBox, build

    class Counter:
        _count: int

        def __init__(self):
            self._count = 0

        def get_count(self) -> int:
            return self._count

        def set_count(self, value: int) -> None:
            self._count = value

    registry = build(Counter)
    count = registry.get_int_property("count")
    counter = Counter()
    count.set_value(counter, 5)
    assert count.get_value(counter) == 5

Logging goes through loguru and is disabled by default; call
`logger.enable("proptree")` to see the walk.
"""

from loguru import logger

__version__ = "0.1.0"

# Core primitives (before boxes, which depend on core.types)
from proptree.core import (
    IGNORE,
    AbstractPropertyVisitor,
    FloatPropertyInfo,
    IgnoreProperty,
    IntPropertyInfo,
    ListPropertyInfo,
    Long,
    LongPropertyInfo,
    MapPropertyInfo,
    Mutability,
    ObjectPropertyInfo,
    PropertyInfo,
    PropertyKind,
    PropertyVisitor,
    SetPropertyInfo,
    ignore_property,
    visit_property,
)

# Boxes
from proptree.boxes import (
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

# Configuration
from proptree.config import BuilderSettings

# Errors
from proptree.errors import (
    AccessorNotFound,
    ConventionViolation,
    DuplicateMember,
    InvocationFailure,
    PropertyBuildError,
    PropertyError,
    PropertyNotFound,
    ReadOnlyViolation,
    TypeMismatch,
    WriteOnlyViolation,
)

# Registries
from proptree.registry import (
    PropertyRegistry,
    PropertyRegistryBuilder,
    RegistryCache,
    build,
    build_all,
)

logger.disable("proptree")

__all__ = [
    "__version__",
    # Boxes
    "ReadOnlyBox",
    "Box",
    "SimpleBox",
    "ReadOnlyIntBox",
    "ReadOnlyLongBox",
    "ReadOnlyFloatBox",
    "IntBox",
    "LongBox",
    "FloatBox",
    "ReadOnlyListBox",
    "ReadOnlySetBox",
    "ReadOnlyMapBox",
    "ListBox",
    "SetBox",
    "MapBox",
    # Configuration
    "BuilderSettings",
    # Core
    "Long",
    "IGNORE",
    "IgnoreProperty",
    "ignore_property",
    "Mutability",
    "PropertyKind",
    "PropertyInfo",
    "ObjectPropertyInfo",
    "IntPropertyInfo",
    "LongPropertyInfo",
    "FloatPropertyInfo",
    "ListPropertyInfo",
    "SetPropertyInfo",
    "MapPropertyInfo",
    "PropertyVisitor",
    "AbstractPropertyVisitor",
    "visit_property",
    # Errors
    "PropertyError",
    "ConventionViolation",
    "DuplicateMember",
    "PropertyBuildError",
    "PropertyNotFound",
    "AccessorNotFound",
    "TypeMismatch",
    "ReadOnlyViolation",
    "WriteOnlyViolation",
    "InvocationFailure",
    # Registries
    "PropertyRegistry",
    "PropertyRegistryBuilder",
    "RegistryCache",
    "build",
    "build_all",
]
