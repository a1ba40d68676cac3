"""Registry models: frozen per-type collection results handed to the assembler."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from proptree.core.reflection.models import FieldRef, MethodRef, Supertypes


@dataclass(frozen=True, slots=True)
class CollectedProperty:
    """Members found for one property name on one type.

    Attributes:
        name: Property name.
        value_type: Value type inferred from the members (field > getter > setter > accessor).
        field_ref: Backing field, if any.
        getter_ref: Getter, if any.
        setter_ref: Setter, if any.
        accessor_ref: Accessor, if any.
    """

    name: str
    value_type: Any
    field_ref: FieldRef | None = None
    getter_ref: MethodRef | None = None
    setter_ref: MethodRef | None = None
    accessor_ref: MethodRef | None = None


@dataclass(frozen=True, slots=True)
class CollectedType:
    """Everything the collector found on one type, ready for assembly.

    Attributes:
        base: The collected type.
        supers: Its direct supertypes.
        properties: Names with at least one getter, setter, or accessor.
        fields: Every non-ignored field by property name, exposed or not.
        ignored: Names ignored by a field marker on this type.
    """

    base: type
    supers: Supertypes
    properties: Mapping[str, CollectedProperty]
    fields: Mapping[str, FieldRef]
    ignored: frozenset[str]
