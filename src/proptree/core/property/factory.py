"""Descriptor factory: picks the descriptor variant for a value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

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
from proptree.core.property.visitor import visit_type
from proptree.core.reflection.models import FieldRef, MethodRef
from proptree.core.types import Long


@dataclass(frozen=True, slots=True)
class _PropertyInfoFactory:
    """Type visitor building the descriptor for one property."""

    base_type: type
    name: str
    value_type: Any
    field_ref: FieldRef | None
    getter_ref: MethodRef | None
    setter_ref: MethodRef | None
    accessor_ref: MethodRef | None

    def _members(self) -> dict[str, Any]:
        return {
            "base_type": self.base_type,
            "name": self.name,
            "field_ref": self.field_ref,
            "getter_ref": self.getter_ref,
            "setter_ref": self.setter_ref,
            "accessor_ref": self.accessor_ref,
        }

    def visit_int(self) -> PropertyInfo[Any]:
        return IntPropertyInfo(value_type=int, **self._members())

    def visit_long(self) -> PropertyInfo[Any]:
        return LongPropertyInfo(value_type=Long, **self._members())

    def visit_float(self) -> PropertyInfo[Any]:
        return FloatPropertyInfo(value_type=float, **self._members())

    def visit_object(self, tp: Any) -> PropertyInfo[Any]:
        return ObjectPropertyInfo(value_type=tp, **self._members())

    def visit_list(self, element_type: Any) -> PropertyInfo[Any]:
        return ListPropertyInfo(
            value_type=self.value_type, element_type=element_type, **self._members()
        )

    def visit_set(self, element_type: Any) -> PropertyInfo[Any]:
        return SetPropertyInfo(
            value_type=self.value_type, element_type=element_type, **self._members()
        )

    def visit_map(self, key_type: Any, value_type: Any) -> PropertyInfo[Any]:
        return MapPropertyInfo(
            value_type=self.value_type,
            key_type=key_type,
            element_type=value_type,
            **self._members(),
        )


def create_property_info(
    base_type: type,
    name: str,
    value_type: Any,
    *,
    field_ref: FieldRef | None = None,
    getter_ref: MethodRef | None = None,
    setter_ref: MethodRef | None = None,
    accessor_ref: MethodRef | None = None,
) -> PropertyInfo[Any]:
    """Build the descriptor variant matching a value type.

    Args:
        base_type: Type the property is discovered on.
        name: Property name.
        value_type: Resolved value type; decides the variant.
        field_ref: Backing field, if any.
        getter_ref: Bean getter, if any.
        setter_ref: Bean setter, if any.
        accessor_ref: Box accessor, if any.

    Returns:
        An int, long, float, list, set, map, or object descriptor.

    Raises:
        ValueError: If a member does not belong to `base_type` or its ancestors.
    """
    factory = _PropertyInfoFactory(
        base_type=base_type,
        name=name,
        value_type=value_type,
        field_ref=field_ref,
        getter_ref=getter_ref,
        setter_ref=setter_ref,
        accessor_ref=accessor_ref,
    )
    return visit_type(value_type, factory)
