"""Property descriptors: variants, access strategies, factory, and visitors."""

from proptree.core.property.core import (
    ContainerPropertyInfo,
    FloatPropertyInfo,
    IntPropertyInfo,
    ListPropertyInfo,
    LongPropertyInfo,
    MapPropertyInfo,
    ObjectPropertyInfo,
    PrimitivePropertyInfo,
    PropertyInfo,
    SetPropertyInfo,
)
from proptree.core.property.factory import create_property_info
from proptree.core.property.models import (
    READ_ONLY,
    READ_WRITE,
    WRITE_ONLY,
    AccessSource,
    Mutability,
    PropertyKind,
)
from proptree.core.property.visitor import (
    AbstractPropertyVisitor,
    PropertyVisitor,
    TypeVisitor,
    classify_type,
    visit_property,
    visit_type,
)

__all__ = [
    # Models
    "Mutability",
    "READ_ONLY",
    "WRITE_ONLY",
    "READ_WRITE",
    "PropertyKind",
    "AccessSource",
    # Descriptors
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
    # Factory
    "create_property_info",
    # Visitors
    "TypeVisitor",
    "PropertyVisitor",
    "AbstractPropertyVisitor",
    "classify_type",
    "visit_type",
    "visit_property",
]
