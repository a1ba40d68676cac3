"""Reflection over Python classes: members, markers, and type tokens."""

from proptree.core.reflection.markers import (
    IGNORE,
    IgnoreProperty,
    ignore_property,
    is_ignored_annotation,
    is_ignored_member,
)
from proptree.core.reflection.members import (
    declared_fields,
    direct_supertypes,
    is_excluded_type,
    is_protocol,
    public_methods,
)
from proptree.core.reflection.models import FieldRef, MemberKind, MethodRef, Supertypes
from proptree.core.reflection.operations import (
    box_value_type,
    is_assignable,
    is_box_type,
    is_optional,
    is_writable_box_type,
    resolve_type_parameter,
    runtime_class,
    type_arguments,
    type_name,
    typevar_bindings,
    unwrap_value_type,
)

__all__ = [
    # Markers
    "IGNORE",
    "IgnoreProperty",
    "ignore_property",
    "is_ignored_annotation",
    "is_ignored_member",
    # Models
    "MemberKind",
    "FieldRef",
    "MethodRef",
    "Supertypes",
    # Members
    "declared_fields",
    "direct_supertypes",
    "is_excluded_type",
    "is_protocol",
    "public_methods",
    # Type tokens
    "box_value_type",
    "is_assignable",
    "is_box_type",
    "is_optional",
    "is_writable_box_type",
    "resolve_type_parameter",
    "runtime_class",
    "type_arguments",
    "type_name",
    "typevar_bindings",
    "unwrap_value_type",
]
