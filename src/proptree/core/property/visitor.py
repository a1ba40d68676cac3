"""Visitors over value-type tokens and over property descriptors.

`visit_type` classifies a type token into the closed set of variants the
descriptors use; `visit_property` dispatches on an already-built descriptor.

Usage:
    class Describe(AbstractPropertyVisitor):
        def visit_list(self, info):
            print(info.name, "holds", info.element_type)

    registry.visit("tags", Describe())
"""

from __future__ import annotations

from collections.abc import Mapping, MutableSequence
from collections.abc import Set as AbstractSet
from typing import TYPE_CHECKING, Any, Protocol, get_origin

from proptree.core.property.models import PropertyKind
from proptree.core.reflection.operations import strip_annotated, type_arguments
from proptree.core.types import Long

if TYPE_CHECKING:
    from proptree.core.property.core import (
        FloatPropertyInfo,
        IntPropertyInfo,
        ListPropertyInfo,
        LongPropertyInfo,
        MapPropertyInfo,
        ObjectPropertyInfo,
        PropertyInfo,
        SetPropertyInfo,
    )


class TypeVisitor[R](Protocol):
    """Callbacks for each value-type variant."""

    def visit_int(self) -> R: ...

    def visit_long(self) -> R: ...

    def visit_float(self) -> R: ...

    def visit_object(self, tp: Any) -> R: ...

    def visit_list(self, element_type: Any) -> R: ...

    def visit_set(self, element_type: Any) -> R: ...

    def visit_map(self, key_type: Any, value_type: Any) -> R: ...


def classify_type(tp: Any) -> PropertyKind:
    """Pick the descriptor variant for a value-type token.

    `bool` is deliberately an object property even though it subclasses int.
    """
    tp = strip_annotated(tp)
    if tp is Long:
        return PropertyKind.LONG
    if tp is int:
        return PropertyKind.INT
    if tp is float:
        return PropertyKind.FLOAT
    origin = get_origin(tp) or tp
    if not isinstance(origin, type):
        return PropertyKind.OBJECT
    if issubclass(origin, MutableSequence):
        return PropertyKind.LIST
    if issubclass(origin, AbstractSet):
        return PropertyKind.SET
    if issubclass(origin, Mapping):
        return PropertyKind.MAP
    return PropertyKind.OBJECT


def visit_type[R](tp: Any, visitor: TypeVisitor[R]) -> R:
    """Dispatch a value-type token to the matching visitor callback."""
    match classify_type(tp):
        case PropertyKind.INT:
            return visitor.visit_int()
        case PropertyKind.LONG:
            return visitor.visit_long()
        case PropertyKind.FLOAT:
            return visitor.visit_float()
        case PropertyKind.LIST:
            return visitor.visit_list(*type_arguments(tp, 1))
        case PropertyKind.SET:
            return visitor.visit_set(*type_arguments(tp, 1))
        case PropertyKind.MAP:
            return visitor.visit_map(*type_arguments(tp, 2))
        case _:
            return visitor.visit_object(tp)


class PropertyVisitor(Protocol):
    """Callbacks for each descriptor variant."""

    def visit_int(self, info: IntPropertyInfo) -> None: ...

    def visit_long(self, info: LongPropertyInfo) -> None: ...

    def visit_float(self, info: FloatPropertyInfo) -> None: ...

    def visit_object(self, info: ObjectPropertyInfo[Any]) -> None: ...

    def visit_list(self, info: ListPropertyInfo[Any]) -> None: ...

    def visit_set(self, info: SetPropertyInfo[Any]) -> None: ...

    def visit_map(self, info: MapPropertyInfo[Any, Any]) -> None: ...


class AbstractPropertyVisitor:
    """Property visitor whose callbacks all do nothing. Override what you need."""

    def visit_int(self, info: IntPropertyInfo) -> None:
        pass

    def visit_long(self, info: LongPropertyInfo) -> None:
        pass

    def visit_float(self, info: FloatPropertyInfo) -> None:
        pass

    def visit_object(self, info: ObjectPropertyInfo[Any]) -> None:
        pass

    def visit_list(self, info: ListPropertyInfo[Any]) -> None:
        pass

    def visit_set(self, info: SetPropertyInfo[Any]) -> None:
        pass

    def visit_map(self, info: MapPropertyInfo[Any, Any]) -> None:
        pass


def visit_property(info: PropertyInfo[Any], visitor: PropertyVisitor) -> None:
    """Dispatch a descriptor to the visitor callback for its variant."""
    match info.kind:
        case PropertyKind.INT:
            visitor.visit_int(info)  # type: ignore[arg-type]
        case PropertyKind.LONG:
            visitor.visit_long(info)  # type: ignore[arg-type]
        case PropertyKind.FLOAT:
            visitor.visit_float(info)  # type: ignore[arg-type]
        case PropertyKind.LIST:
            visitor.visit_list(info)  # type: ignore[arg-type]
        case PropertyKind.SET:
            visitor.visit_set(info)  # type: ignore[arg-type]
        case PropertyKind.MAP:
            visitor.visit_map(info)  # type: ignore[arg-type]
        case _:
            visitor.visit_object(info)  # type: ignore[arg-type]
