"""Descriptor assembly: one collected type plus its supertypes' registries."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from proptree.core.property import PropertyInfo, create_property_info
from proptree.registry.models import CollectedType
from proptree.registry.registry import PropertyRegistry


def assemble_registry(
    collected: CollectedType, supers: Sequence[PropertyRegistry]
) -> PropertyRegistry:
    """Build the registry of a collected type.

    Local properties become descriptors. A supertype's property is merged in
    only if the name is not local and not ignored; the ignored set is the
    union of this type's and every supertype's, so an ignore anywhere above
    also hides a local property. Earlier supertypes win on name clashes.

    Args:
        collected: Collection result for the type.
        supers: Registries of its direct supertypes, superclass first.

    Returns:
        The type's registry.
    """
    ignored = set(collected.ignored)
    for registry in supers:
        ignored.update(registry.ignored_names)

    local: dict[str, PropertyInfo[Any]] = {
        name: create_property_info(
            collected.base,
            name,
            prop.value_type,
            field_ref=prop.field_ref,
            getter_ref=prop.getter_ref,
            setter_ref=prop.setter_ref,
            accessor_ref=prop.accessor_ref,
        )
        for name, prop in collected.properties.items()
        if name not in ignored
    }

    properties = dict(local)
    for registry in supers:
        for name, info in registry.properties.items():
            if name not in properties and name not in ignored:
                properties[name] = info

    return PropertyRegistry(
        base_type=collected.base,
        supers=tuple(supers),
        local_properties=local,
        properties=properties,
        ignored_names=frozenset(ignored),
    )
