"""Property descriptors: typed, immutable get/set strategies for one property.

Each descriptor picks its read and write strategy once, at construction:

    read:  bean getter, else the accessor's box (when readable), else none
    write: bean setter, else the accessor's box (when writable), else none

A property with neither getter nor accessor is write-only; one with neither
setter nor writable accessor is read-only.

Usage:
    info = registry.get_int_property("count")
    info.set_value(counter, 5)
    assert info.get(counter) == 5
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar

from proptree.boxes.models import Box, ReadOnlyBox, SimpleBox
from proptree.core.property.models import AccessSource, Mutability, PropertyKind
from proptree.core.reflection.models import FieldRef, MethodRef
from proptree.core.reflection.operations import is_writable_box_type, runtime_class, type_name
from proptree.core.types import Long
from proptree.errors import (
    AccessorNotFound,
    InvocationFailure,
    ReadOnlyViolation,
    TypeMismatch,
    WriteOnlyViolation,
)

type Reader = Callable[[object], Any]
type Writer = Callable[[object, Any], None]


def _box_reader(accessor: MethodRef) -> Reader:
    def read(instance: object) -> Any:
        box = accessor.invoke(instance)
        try:
            return box.get_value()
        except Exception as e:
            raise InvocationFailure(f"Reading the box returned by {accessor} failed") from e

    return read


def _box_writer(accessor: MethodRef) -> Writer:
    def write(instance: object, value: Any) -> None:
        box = accessor.invoke(instance)
        try:
            box.set_value(value)
        except Exception as e:
            raise InvocationFailure(f"Writing the box returned by {accessor} failed") from e

    return write


def _setter_writer(setter: MethodRef) -> Writer:
    def write(instance: object, value: Any) -> None:
        setter.invoke(instance, value)

    return write


@dataclass(frozen=True, eq=False, kw_only=True)
class PropertyInfo[V]:
    """Descriptor shared by every variant.

    Attributes:
        base_type: Type the property was discovered on.
        name: Property name.
        value_type: Resolved value-type token.
        field_ref: Backing field, if one was found.
        getter_ref: Bean getter, if found and not ignored.
        setter_ref: Bean setter, if found and not ignored.
        accessor_ref: Box accessor, if found and not ignored.
        mutability: Directions the property supports.
    """

    kind: ClassVar[PropertyKind] = PropertyKind.OBJECT

    base_type: type
    name: str
    value_type: Any
    field_ref: FieldRef | None = None
    getter_ref: MethodRef | None = None
    setter_ref: MethodRef | None = None
    accessor_ref: MethodRef | None = None
    mutability: frozenset[Mutability] = field(init=False)
    _reader: Reader | None = field(init=False, repr=False)
    _writer: Writer | None = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._check_members()
        object.__setattr__(self, "mutability", self._compute_mutability())
        object.__setattr__(self, "_reader", self._make_reader(self.read_source))
        object.__setattr__(self, "_writer", self._make_writer(self.write_source))

    def _check_members(self) -> None:
        for ref in (self.field_ref, self.getter_ref, self.setter_ref, self.accessor_ref):
            if ref is not None and ref.owner not in self.base_type.__mro__:
                raise ValueError(f"Invalid member passed ({ref}) for base ({self.base_type})")

    def _compute_mutability(self) -> frozenset[Mutability]:
        mutability: set[Mutability] = set()
        if self.accessor_ref is not None:
            mutability.add(Mutability.READ)
            if is_writable_box_type(self.accessor_ref.return_type):
                mutability.add(Mutability.WRITE)
        if self.getter_ref is not None:
            mutability.add(Mutability.READ)
        if self.setter_ref is not None:
            mutability.add(Mutability.WRITE)
        return frozenset(mutability)

    @property
    def read_source(self) -> AccessSource:
        """Member used by `get_value`."""
        if Mutability.READ in self.mutability:
            if self.getter_ref is not None:
                return AccessSource.GETTER
            if self.accessor_ref is not None:
                return AccessSource.ACCESSOR
        return AccessSource.NONE

    @property
    def write_source(self) -> AccessSource:
        """Member used by `set_value`."""
        if Mutability.WRITE in self.mutability:
            if self.setter_ref is not None:
                return AccessSource.SETTER
            if self.accessor_ref is not None:
                return AccessSource.ACCESSOR
        return AccessSource.NONE

    def _make_reader(self, source: AccessSource) -> Reader | None:
        if source is AccessSource.GETTER and self.getter_ref is not None:
            return self.getter_ref.invoke
        if source is AccessSource.ACCESSOR and self.accessor_ref is not None:
            return _box_reader(self.accessor_ref)
        return None

    def _make_writer(self, source: AccessSource) -> Writer | None:
        if source is AccessSource.SETTER and self.setter_ref is not None:
            return _setter_writer(self.setter_ref)
        if source is AccessSource.ACCESSOR and self.accessor_ref is not None:
            return _box_writer(self.accessor_ref)
        return None

    @property
    def is_readable(self) -> bool:
        return self._reader is not None

    @property
    def is_writable(self) -> bool:
        return self._writer is not None

    @property
    def value_class(self) -> type | None:
        """Runtime class values are checked against, if the value type has one."""
        return runtime_class(self.value_type)

    def _check_instance(self, instance: object) -> None:
        if instance is None:
            raise TypeMismatch(f"Can not access property {self.name} on None")

    def _require_reader(self, instance: object) -> Reader:
        self._check_instance(instance)
        if self._reader is None:
            raise WriteOnlyViolation(
                f"Property {self.name} for {self.base_type.__qualname__} is write-only, "
                "no getter available. Check that a getter or accessor is public."
            )
        return self._reader

    def _require_writer(self, instance: object) -> Writer:
        self._check_instance(instance)
        if self._writer is None:
            raise ReadOnlyViolation(
                f"Property {self.name} for {self.base_type.__qualname__} is read-only, "
                "no setter available. Check that a setter or writable accessor is public."
            )
        return self._writer

    def _check_value(self, value: object) -> None:
        expected = self.value_class
        if value is not None and expected is not None and not isinstance(value, expected):
            raise TypeMismatch(
                f"Can not assign property value {value!r} to {type_name(self.value_type)}"
            )

    def get_value_raw(self, instance: object) -> Any:
        """Read whatever the getter or box returns, without conversion."""
        return self._require_reader(instance)(instance)

    def get_value(self, instance: object) -> V | None:
        """Read the property from an instance.

        Raises:
            WriteOnlyViolation: If the property has no read strategy.
            InvocationFailure: If the underlying member raises.
        """
        return self.get_value_raw(instance)

    def set_value(self, instance: object, value: V | None) -> None:
        """Write the property on an instance.

        Raises:
            TypeMismatch: If the value does not fit the value type.
            ReadOnlyViolation: If the property has no write strategy.
            InvocationFailure: If the underlying member raises.
        """
        self._check_value(value)
        self._require_writer(instance)(instance, value)

    def get_read_only_box(self, instance: object) -> ReadOnlyBox[V]:
        """Box for the property: the accessor's own box, else a snapshot of the current value."""
        if self.accessor_ref is not None:
            self._check_instance(instance)
            box: ReadOnlyBox[V] = self.accessor_ref.invoke(instance)
            return box
        return SimpleBox(self.get_value(instance), owner=instance, name=self.name)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PropertyInfo):
            return NotImplemented
        return (self.base_type, self.name, self.mutability) == (
            other.base_type,
            other.name,
            other.mutability,
        )

    def __hash__(self) -> int:
        return hash((self.base_type, self.name, self.mutability))

    def __str__(self) -> str:
        access = ", ".join(sorted(m.name for m in self.mutability))
        return (
            f"Property@{self.base_type.__qualname__}"
            f"{{{self.name}: {type_name(self.value_type)}, [{access}]}}"
        )


@dataclass(frozen=True, eq=False, kw_only=True)
class ObjectPropertyInfo[V](PropertyInfo[V]):
    """Property holding an arbitrary object."""

    kind: ClassVar[PropertyKind] = PropertyKind.OBJECT


@dataclass(frozen=True, eq=False, kw_only=True)
class PrimitivePropertyInfo[V](PropertyInfo[V]):
    """Numeric property with unboxed `get`/`set` fast paths.

    `get_value` still returns the number (never None) so all variants share
    one contract. Both write paths reject None, bools, and non-numbers, and
    reads raise `TypeMismatch` rather than coerce a value of the wrong kind.
    """

    _primitive: ClassVar[type] = int
    _accepted: ClassVar[tuple[type, ...]] = (int,)

    def _convert(self, value: Any) -> V:
        if isinstance(value, bool) or not isinstance(value, self._accepted):
            raise TypeMismatch(
                f"Property {self.name} is {self._primitive.__name__}, got {value!r}"
            )
        return self._primitive(value)  # type: ignore[no-any-return]

    def _check_value(self, value: object) -> None:
        if isinstance(value, bool) or not isinstance(value, self._accepted):
            raise TypeMismatch(
                f"Can not assign property value {value!r} to {type_name(self.value_type)}"
            )

    def get(self, instance: object) -> V:
        """Read the property as a plain number."""
        return self._convert(self.get_value_raw(instance))

    def set(self, instance: object, value: V) -> None:
        """Write a plain number."""
        self._check_value(value)
        self._require_writer(instance)(instance, self._primitive(value))

    def get_value(self, instance: object) -> V | None:
        return self.get(instance)

    def set_value(self, instance: object, value: V | None) -> None:
        self._check_value(value)
        self._require_writer(instance)(instance, self._primitive(value))


@dataclass(frozen=True, eq=False, kw_only=True)
class IntPropertyInfo(PrimitivePropertyInfo[int]):
    """Property holding an int."""

    kind: ClassVar[PropertyKind] = PropertyKind.INT
    value_type: Any = int


@dataclass(frozen=True, eq=False, kw_only=True)
class LongPropertyInfo(PrimitivePropertyInfo[Long]):
    """Property holding a `Long`."""

    kind: ClassVar[PropertyKind] = PropertyKind.LONG
    value_type: Any = Long


@dataclass(frozen=True, eq=False, kw_only=True)
class FloatPropertyInfo(PrimitivePropertyInfo[float]):
    """Property holding a float. Ints are accepted and converted."""

    kind: ClassVar[PropertyKind] = PropertyKind.FLOAT
    _primitive: ClassVar[type] = float
    _accepted: ClassVar[tuple[type, ...]] = (int, float)
    value_type: Any = float


@dataclass(frozen=True, eq=False, kw_only=True)
class ContainerPropertyInfo[V](ObjectPropertyInfo[V]):
    """Property holding a list, set, or dict, with direct access to its box.

    Attributes:
        element_type: Element type (value type for dicts).
    """

    element_type: Any = object

    def _require_accessor(self, instance: object) -> MethodRef:
        self._check_instance(instance)
        if self.accessor_ref is None:
            raise AccessorNotFound(
                f"Can not get box for property {self.name} on "
                f"{self.base_type.__qualname__}: no accessor method is present"
            )
        return self.accessor_ref

    def get_box(self, instance: object) -> Box[V]:
        """Return the writable box the accessor exposes.

        Raises:
            AccessorNotFound: If the property has no accessor.
            ReadOnlyViolation: If the accessor is declared to return a read-only box.
        """
        accessor = self._require_accessor(instance)
        if not is_writable_box_type(accessor.return_type):
            raise ReadOnlyViolation(
                f"Property {self.name} on {self.base_type.__qualname__} is read-only, "
                f"its accessor returns {type_name(accessor.return_type)}"
            )
        box: Box[V] = accessor.invoke(instance)
        return box

    def get_read_only_box(self, instance: object) -> ReadOnlyBox[V]:
        """Return the box the accessor exposes.

        Raises:
            AccessorNotFound: If the property has no accessor.
        """
        box: ReadOnlyBox[V] = self._require_accessor(instance).invoke(instance)
        return box


@dataclass(frozen=True, eq=False, kw_only=True)
class ListPropertyInfo[E](ContainerPropertyInfo[list[E]]):
    """Property holding a list."""

    kind: ClassVar[PropertyKind] = PropertyKind.LIST


@dataclass(frozen=True, eq=False, kw_only=True)
class SetPropertyInfo[E](ContainerPropertyInfo[set[E]]):
    """Property holding a set."""

    kind: ClassVar[PropertyKind] = PropertyKind.SET


@dataclass(frozen=True, eq=False, kw_only=True)
class MapPropertyInfo[K, E](ContainerPropertyInfo[dict[K, E]]):
    """Property holding a dict.

    Attributes:
        key_type: Key type.
        element_type: Value type.
    """

    kind: ClassVar[PropertyKind] = PropertyKind.MAP
    key_type: Any = object
