"""Core functionalities: naming conventions, reflection, and property descriptors.

Architecture Note:
    core/ holds stateless building blocks. Nothing here walks a hierarchy or
    keeps a cache; see registry/ for the stateful build.
"""

from proptree.core.naming import (
    matches_prefix,
    matches_suffix,
    prefixed_property_name,
    remove_prefix,
    remove_suffix,
    suffixed_property_name,
)
from proptree.core.property import (
    READ_ONLY,
    READ_WRITE,
    WRITE_ONLY,
    AbstractPropertyVisitor,
    AccessSource,
    ContainerPropertyInfo,
    FloatPropertyInfo,
    IntPropertyInfo,
    ListPropertyInfo,
    LongPropertyInfo,
    MapPropertyInfo,
    Mutability,
    ObjectPropertyInfo,
    PrimitivePropertyInfo,
    PropertyInfo,
    PropertyKind,
    PropertyVisitor,
    SetPropertyInfo,
    TypeVisitor,
    classify_type,
    create_property_info,
    visit_property,
    visit_type,
)
from proptree.core.reflection import (
    IGNORE,
    FieldRef,
    IgnoreProperty,
    MemberKind,
    MethodRef,
    Supertypes,
    ignore_property,
)
from proptree.core.types import Long, ValueType

__all__ = [
    # Types
    "Long",
    "ValueType",
    # Naming
    "matches_prefix",
    "matches_suffix",
    "remove_prefix",
    "remove_suffix",
    "prefixed_property_name",
    "suffixed_property_name",
    # Reflection
    "IGNORE",
    "IgnoreProperty",
    "ignore_property",
    "MemberKind",
    "FieldRef",
    "MethodRef",
    "Supertypes",
    # Property
    "Mutability",
    "READ_ONLY",
    "WRITE_ONLY",
    "READ_WRITE",
    "PropertyKind",
    "AccessSource",
    "PropertyInfo",
    "ObjectPropertyInfo",
    "PrimitivePropertyInfo",
    "IntPropertyInfo",
    "LongPropertyInfo",
    "FloatPropertyInfo",
    "ContainerPropertyInfo",
    "ListPropertyInfo",
    "SetPropertyInfo",
    "MapPropertyInfo",
    "create_property_info",
    "TypeVisitor",
    "PropertyVisitor",
    "AbstractPropertyVisitor",
    "classify_type",
    "visit_type",
    "visit_property",
]
