"""Property registry: the immutable, inheritance-resolved properties of one type.

Usage:
    registry = build(Counter)
    registry.all_names                      # ("count", "label")
    count = registry.get_int_property("count")
    tags = registry.get_list_property("tags", str)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, cast

from loguru import logger

from proptree.core.property import (
    FloatPropertyInfo,
    IntPropertyInfo,
    ListPropertyInfo,
    LongPropertyInfo,
    MapPropertyInfo,
    PropertyInfo,
    PropertyKind,
    PropertyVisitor,
    SetPropertyInfo,
    visit_property,
)
from proptree.core.reflection import is_assignable, type_name
from proptree.errors import PropertyNotFound, TypeMismatch


class PropertyRegistry:
    """All properties visible on one type: its own plus inherited, minus ignored.

    Registries are built by `PropertyRegistryBuilder` and never change after
    construction.

    Args:
        base_type: The type described.
        supers: Registries of the direct supertypes that were walked.
        local_properties: Properties found on this type itself.
        properties: Every visible property, local and inherited.
        ignored_names: Names ignored here or on any supertype.
    """

    def __init__(
        self,
        base_type: type,
        supers: tuple[PropertyRegistry, ...],
        local_properties: Mapping[str, PropertyInfo[Any]],
        properties: Mapping[str, PropertyInfo[Any]],
        ignored_names: frozenset[str],
    ):
        self._base_type = base_type
        self._supers = supers
        self._local = MappingProxyType({k: local_properties[k] for k in sorted(local_properties)})
        self._properties = MappingProxyType({k: properties[k] for k in sorted(properties)})
        self._ignored = tuple(sorted(ignored_names))
        logger.debug(
            "Built registry for {}: {} properties ({} local), ignored {}",
            base_type.__qualname__,
            len(self._properties),
            len(self._local),
            self._ignored,
        )

    @property
    def base_type(self) -> type:
        return self._base_type

    @property
    def supers(self) -> tuple[PropertyRegistry, ...]:
        return self._supers

    @property
    def properties(self) -> Mapping[str, PropertyInfo[Any]]:
        """Every visible property, sorted by name."""
        return self._properties

    @property
    def local_properties(self) -> Mapping[str, PropertyInfo[Any]]:
        """Properties found on this type itself, sorted by name."""
        return self._local

    @property
    def all_names(self) -> tuple[str, ...]:
        return tuple(self._properties)

    @property
    def local_names(self) -> tuple[str, ...]:
        return tuple(self._local)

    @property
    def ignored_names(self) -> tuple[str, ...]:
        return self._ignored

    def _lookup(self, name: str) -> PropertyInfo[Any]:
        info = self._properties.get(name)
        if info is None:
            raise PropertyNotFound(
                f"Property {name} does not exist on type {self._base_type.__qualname__}"
            )
        return info

    def _lookup_kind(self, name: str, kind: PropertyKind) -> PropertyInfo[Any]:
        info = self._lookup(name)
        if info.kind is not kind:
            raise TypeMismatch(
                f"Property {name} is not a {kind.name.lower()} property, "
                f"it is {type_name(info.value_type)}"
            )
        return info

    def _check_type_argument(self, name: str, label: str, actual: Any, expected: Any) -> None:
        if not is_assignable(actual, expected):
            raise TypeMismatch(
                f"Invalid {label} type for property {name}: "
                f"{type_name(actual)} is not assignable to {type_name(expected)}"
            )

    def get_property(self, name: str, expected: Any = object) -> PropertyInfo[Any]:
        """Look up a property, checking its value type against `expected`.

        Args:
            name: Property name.
            expected: Type the caller wants to treat values as; must be a
                supertype of the property's value type.

        Raises:
            PropertyNotFound: If no property has that name.
            TypeMismatch: If the value type is not assignable to `expected`.
        """
        info = self._lookup(name)
        if not is_assignable(info.value_type, expected):
            raise TypeMismatch(
                f"Expected type {type_name(expected)} is not assignable from property "
                f"{name}, which is {type_name(info.value_type)}"
            )
        return info

    def get_int_property(self, name: str) -> IntPropertyInfo:
        """Look up an int property.

        Raises:
            PropertyNotFound: If no property has that name.
            TypeMismatch: If the property is not an int property.
        """
        return cast("IntPropertyInfo", self._lookup_kind(name, PropertyKind.INT))

    def get_long_property(self, name: str) -> LongPropertyInfo:
        return cast("LongPropertyInfo", self._lookup_kind(name, PropertyKind.LONG))

    def get_float_property(self, name: str) -> FloatPropertyInfo:
        return cast("FloatPropertyInfo", self._lookup_kind(name, PropertyKind.FLOAT))

    def get_list_property(self, name: str, element_type: Any = object) -> ListPropertyInfo[Any]:
        """Look up a list property whose elements are assignable to `element_type`.

        Raises:
            PropertyNotFound: If no property has that name.
            TypeMismatch: If the property is not a list, or holds other elements.
        """
        info = cast("ListPropertyInfo[Any]", self._lookup_kind(name, PropertyKind.LIST))
        self._check_type_argument(name, "element", info.element_type, element_type)
        return info

    def get_set_property(self, name: str, element_type: Any = object) -> SetPropertyInfo[Any]:
        """Look up a set property whose elements are assignable to `element_type`.

        Raises:
            PropertyNotFound: If no property has that name.
            TypeMismatch: If the property is not a set, or holds other elements.
        """
        info = cast("SetPropertyInfo[Any]", self._lookup_kind(name, PropertyKind.SET))
        self._check_type_argument(name, "element", info.element_type, element_type)
        return info

    def get_map_property(
        self, name: str, key_type: Any = object, value_type: Any = object
    ) -> MapPropertyInfo[Any, Any]:
        """Look up a dict property with keys and values assignable to the given types.

        Raises:
            PropertyNotFound: If no property has that name.
            TypeMismatch: If the property is not a dict, or holds other keys or values.
        """
        info = cast("MapPropertyInfo[Any, Any]", self._lookup_kind(name, PropertyKind.MAP))
        self._check_type_argument(name, "key", info.key_type, key_type)
        self._check_type_argument(name, "value", info.element_type, value_type)
        return info

    def visit(self, name: str, visitor: PropertyVisitor) -> PropertyInfo[Any]:
        """Look up a property and dispatch it to the visitor callback for its variant.

        Raises:
            PropertyNotFound: If no property has that name.
        """
        info = self._lookup(name)
        visit_property(info, visitor)
        return info

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyRegistry):
            return NotImplemented
        return self._base_type is other._base_type

    def __hash__(self) -> int:
        return hash(self._base_type)

    def __repr__(self) -> str:
        return f"PropertyRegistry({self._base_type.__qualname__}, names={list(self._properties)})"
