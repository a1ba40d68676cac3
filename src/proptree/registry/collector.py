"""Per-type member collector.

Scans one class for property members and turns them into a frozen
`CollectedType`. Problems are reported to the shared aggregator instead of
being raised, so one build sees every problem in the hierarchy.

Classification of a public method, first match wins:

    accessor: name has an accessor suffix and the return type is a box
    getter:   name has a getter prefix, no parameters, returns something
    setter:   name has a setter prefix, exactly one parameter
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from loguru import logger

from proptree.config.settings import BuilderSettings
from proptree.core.naming import prefixed_property_name, suffixed_property_name
from proptree.core.reflection import (
    FieldRef,
    MemberKind,
    MethodRef,
    declared_fields,
    direct_supertypes,
    is_box_type,
    public_methods,
    unwrap_value_type,
)
from proptree.core.reflection.operations import TypeEnv
from proptree.errors import ConventionViolation, DuplicateMember
from proptree.registry.aggregator import PropertyErrorAggregator
from proptree.registry.models import CollectedProperty, CollectedType

_NONE_TYPE = type(None)

_KIND_LABELS = {
    MemberKind.FIELD: "fields",
    MemberKind.GETTER: "getters",
    MemberKind.SETTER: "setters",
    MemberKind.ACCESSOR: "accessors",
}


class TypePropertiesCollector:
    """Collects the fields and property methods visible on one type.

    Args:
        base: Class to scan.
        settings: Naming conventions.
        env_for: TypeVar bindings per declaring class.
        errors: Shared aggregator for the current build.
    """

    def __init__(
        self,
        base: type,
        settings: BuilderSettings,
        env_for: Callable[[type], TypeEnv],
        errors: PropertyErrorAggregator,
    ):
        self._base = base
        self._settings = settings
        self._env_for = env_for
        self._errors = errors
        self._fields: dict[str, FieldRef] = {}
        self._methods: dict[str, dict[MemberKind, MethodRef]] = {}
        self._ignored: set[str] = set()

    def collect(self) -> CollectedType:
        """Scan the type and freeze the result."""
        logger.trace("Collecting properties of {}", self._base.__qualname__)
        self._collect_fields()
        self._collect_methods()
        return self._freeze()

    def _property_name(
        self,
        member_name: str,
        convert: Callable[[str, Iterable[str]], str | None],
        affixes: Iterable[str],
    ) -> str | None:
        try:
            return convert(member_name, affixes)
        except ConventionViolation as e:
            self._errors.add(member_name, e)
            return None

    def _collect_fields(self) -> None:
        for ref in declared_fields(self._base, self._env_for(self._base)):
            name = self._property_name(
                ref.name, prefixed_property_name, self._settings.field_prefixes
            )
            if name is None:
                continue
            if ref.ignored:
                logger.debug("Property {} ignored by field {}", name, ref)
                self._ignored.add(name)
                continue
            existing = self._fields.get(name)
            if existing is not None:
                self._errors.add(
                    name, DuplicateMember(name, _KIND_LABELS[MemberKind.FIELD], existing, ref)
                )
                continue
            logger.debug("Found field {} for property {}", ref, name)
            self._fields[name] = ref

    def _collect_methods(self) -> None:
        methods = public_methods(self._base, self._env_for, self._settings.excluded_packages)
        for ref in methods:
            classified = self._classify(ref)
            if classified is None:
                continue
            kind, name = classified
            if ref.ignored:
                logger.debug("Skipping ignored {} {}", kind.name.lower(), ref)
                continue
            self._handle_method(kind, name, ref)

    def _classify(self, ref: MethodRef) -> tuple[MemberKind, str] | None:
        settings = self._settings
        if is_box_type(ref.return_type):
            name = self._property_name(ref.name, suffixed_property_name, settings.accessor_suffixes)
            if name is not None:
                return MemberKind.ACCESSOR, name
        if ref.arity == 0 and ref.return_type is not _NONE_TYPE:
            name = self._property_name(ref.name, prefixed_property_name, settings.getter_prefixes)
            if name is not None:
                return MemberKind.GETTER, name
        if ref.arity == 1:
            name = self._property_name(ref.name, prefixed_property_name, settings.setter_prefixes)
            if name is not None:
                return MemberKind.SETTER, name
        return None

    def _handle_method(self, kind: MemberKind, name: str, ref: MethodRef) -> None:
        slots = self._methods.setdefault(name, {})
        existing = slots.get(kind)
        if existing is None:
            logger.debug("Found {} {} for property {}", kind.name.lower(), ref, name)
            slots[kind] = ref
            return
        if existing.is_same_method(ref):
            return
        if existing.is_abstract and not ref.is_abstract:
            logger.trace("Replacing abstract {} with {}", existing, ref)
            slots[kind] = ref
            return
        if ref.is_abstract:
            return
        self._errors.add(name, DuplicateMember(name, _KIND_LABELS[kind], existing, ref))

    def _freeze(self) -> CollectedType:
        properties: dict[str, CollectedProperty] = {}
        for name, slots in self._methods.items():
            if name in self._ignored:
                continue
            field_ref = self._fields.get(name)
            getter = slots.get(MemberKind.GETTER)
            setter = slots.get(MemberKind.SETTER)
            accessor = slots.get(MemberKind.ACCESSOR)
            properties[name] = CollectedProperty(
                name=name,
                value_type=_infer_value_type(field_ref, getter, setter, accessor),
                field_ref=field_ref,
                getter_ref=getter,
                setter_ref=setter,
                accessor_ref=accessor,
            )
        return CollectedType(
            base=self._base,
            supers=direct_supertypes(self._base),
            properties=properties,
            fields={k: v for k, v in self._fields.items() if k not in self._ignored},
            ignored=frozenset(self._ignored),
        )


def _infer_value_type(
    field_ref: FieldRef | None,
    getter: MethodRef | None,
    setter: MethodRef | None,
    accessor: MethodRef | None,
) -> Any:
    """Pick the value type with priority field > getter > setter > accessor.

    Members typed as plain `object` (unannotated) carry no information and are
    passed over.
    """
    candidates = (
        field_ref.annotation if field_ref is not None else None,
        getter.return_type if getter is not None else None,
        setter.parameters[0] if setter is not None else None,
        accessor.return_type if accessor is not None else None,
    )
    for candidate in candidates:
        if candidate is None:
            continue
        value_type = unwrap_value_type(candidate)
        if value_type is not object:
            return value_type
    return object
