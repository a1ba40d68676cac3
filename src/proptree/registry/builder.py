"""Registry builder: walks a type hierarchy and assembles every registry in it.

A build runs in two phases. The walk visits the root and each non-excluded
supertype once, breadth first, collecting members into throwaway collectors.
If any problem was found the build fails there with one `PropertyBuildError`.
Otherwise assembly runs depth first, so every supertype's registry exists
before the registries that merge it.

Usage:
    registry = build(Counter)

    builder = PropertyRegistryBuilder().with_setter_prefixes("set_", "put_")
    cache = builder.build_all(Counter)
    cache = builder.with_cache_entries(cache).build_all(SpecialCounter)
"""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, get_args, get_origin

from loguru import logger

from proptree.config.settings import BuilderSettings
from proptree.core.reflection import direct_supertypes, is_excluded_type, typevar_bindings
from proptree.core.reflection.operations import TypeEnv
from proptree.registry.aggregator import PropertyErrorAggregator
from proptree.registry.assembler import assemble_registry
from proptree.registry.collector import TypePropertiesCollector
from proptree.registry.models import CollectedType
from proptree.registry.registry import PropertyRegistry

type RegistryCache = Mapping[type, PropertyRegistry]

_EMPTY_ENV: TypeEnv = MappingProxyType({})


class _HierarchyBuild:
    """State of one `build_all` call. Discarded when the call returns."""

    def __init__(self, root: Any, settings: BuilderSettings, cache: RegistryCache):
        origin = get_origin(root) or root
        if is_excluded_type(origin, settings.excluded_packages):
            raise TypeError(f"Can not build properties for {root!r}: not a user-defined class")
        params = getattr(origin, "__parameters__", ())
        args = get_args(root)
        initial = dict(zip(params, args, strict=True)) if len(params) == len(args) else {}

        self._root: type = origin
        self._settings = settings
        self._cache = cache
        self._bindings = typevar_bindings(origin, initial)
        self._errors = PropertyErrorAggregator()
        self._collected: dict[type, CollectedType] = {}
        self._built: dict[type, PropertyRegistry] = {}

    def run(self) -> RegistryCache:
        if self._root in self._cache:
            logger.trace("{} already cached", self._root.__qualname__)
            return MappingProxyType(dict(self._cache))
        self._walk()
        self._errors.raise_if_errors(self._root)
        self._assemble(self._root)
        return MappingProxyType({**self._cache, **self._built})

    def _env_for(self, klass: type) -> TypeEnv:
        return self._bindings.get(klass, _EMPTY_ENV)

    def _enqueue(self, klass: type, queue: deque[type], visited: set[type]) -> None:
        if klass in visited or is_excluded_type(klass, self._settings.excluded_packages):
            return
        visited.add(klass)
        queue.append(klass)

    def _walk(self) -> None:
        visited: set[type] = {object, *self._cache, self._root}
        queue: deque[type] = deque([self._root])
        while queue:
            current = queue.popleft()
            logger.trace("Visiting {}", current.__qualname__)
            supers = direct_supertypes(current)
            for interface in supers.interfaces:
                self._enqueue(interface, queue, visited)
            collector = TypePropertiesCollector(
                current, self._settings, self._env_for, self._errors
            )
            self._collected[current] = collector.collect()
            if supers.superclass is not None:
                self._enqueue(supers.superclass, queue, visited)

    def _assemble(self, klass: type) -> PropertyRegistry | None:
        if klass in self._built:
            return self._built[klass]
        if klass in self._cache:
            return self._cache[klass]
        collected = self._collected.get(klass)
        if collected is None:
            return None

        supers = []
        for supertype in collected.supers.all():
            registry = self._assemble(supertype)
            if registry is not None:
                supers.append(registry)
        registry = assemble_registry(collected, supers)
        self._built[klass] = registry
        return registry


@dataclass(frozen=True, eq=False)
class PropertyRegistryBuilder:
    """Immutable builder configuration. Every `with_*` returns a new builder.

    Attributes:
        settings: Naming conventions and excluded packages.
        cache: Registries reused instead of being rebuilt.
    """

    settings: BuilderSettings = field(default_factory=BuilderSettings)
    cache: RegistryCache = field(default_factory=lambda: MappingProxyType({}))

    def _with_settings(self, **changes: Any) -> PropertyRegistryBuilder:
        settings = type(self.settings)(**{**self.settings.model_dump(), **changes})
        return replace(self, settings=settings)

    def with_field_prefixes(self, *prefixes: str) -> PropertyRegistryBuilder:
        """Replace the field prefixes. No prefixes restores the default."""
        return self._with_settings(field_prefixes=prefixes)

    def with_accessor_suffixes(self, *suffixes: str) -> PropertyRegistryBuilder:
        """Replace the accessor suffixes. No suffixes restores the default."""
        return self._with_settings(accessor_suffixes=suffixes)

    def with_getter_prefixes(self, *prefixes: str) -> PropertyRegistryBuilder:
        """Replace the getter prefixes. No prefixes restores the default."""
        return self._with_settings(getter_prefixes=prefixes)

    def with_setter_prefixes(self, *prefixes: str) -> PropertyRegistryBuilder:
        """Replace the setter prefixes. No prefixes restores the default."""
        return self._with_settings(setter_prefixes=prefixes)

    def with_excluded_packages(self, *packages: str) -> PropertyRegistryBuilder:
        """Replace the excluded packages. No packages restores the default."""
        return self._with_settings(excluded_packages=packages)

    def with_cache_entries(self, entries: RegistryCache) -> PropertyRegistryBuilder:
        """Add already-built registries to the seed cache."""
        return replace(self, cache=MappingProxyType({**self.cache, **entries}))

    def build_all(self, root: Any, cache: RegistryCache | None = None) -> RegistryCache:
        """Build the registries of a type and all of its supertypes.

        Args:
            root: Class to build, or a parameterized generic such as `Holder[int]`.
            cache: Extra registries to reuse, on top of the builder's cache.

        Returns:
            Read-only mapping of the seed cache plus every newly built registry.

        Raises:
            PropertyBuildError: If any naming or duplicate-member problem was found.
            TypeError: If `root` is not a user-defined class.
        """
        seed = {**self.cache, **(cache or {})}
        logger.trace("Building {} with {} cached entries", root, len(seed))
        return _HierarchyBuild(root, self.settings, seed).run()

    def build(self, root: Any) -> PropertyRegistry:
        """Build and return the registry of one type.

        Raises:
            PropertyBuildError: If any naming or duplicate-member problem was found.
            TypeError: If `root` is not a user-defined class.
        """
        origin = get_origin(root) or root
        return self.build_all(root)[origin]


def build_all(root: Any, cache: RegistryCache | None = None) -> RegistryCache:
    """Build all registries for a type with the default conventions."""
    return PropertyRegistryBuilder().build_all(root, cache)


def build(root: Any) -> PropertyRegistry:
    """Build the registry of a type with the default conventions."""
    return PropertyRegistryBuilder().build(root)
