"""Registries: hierarchy walk, per-type collection, assembly, and lookups.

Usage:
    from proptree.registry import PropertyRegistryBuilder, build

    registry = build(Counter)
    registry.get_int_property("count").set_value(counter, 5)
"""

from proptree.registry.aggregator import PropertyErrorAggregator
from proptree.registry.assembler import assemble_registry
from proptree.registry.builder import PropertyRegistryBuilder, RegistryCache, build, build_all
from proptree.registry.collector import TypePropertiesCollector
from proptree.registry.models import CollectedProperty, CollectedType
from proptree.registry.registry import PropertyRegistry

__all__ = [
    "PropertyRegistry",
    "PropertyRegistryBuilder",
    "RegistryCache",
    "build",
    "build_all",
    # Build internals
    "CollectedProperty",
    "CollectedType",
    "PropertyErrorAggregator",
    "TypePropertiesCollector",
    "assemble_registry",
]
