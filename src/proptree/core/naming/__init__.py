"""Naming conventions: prefix/suffix matching and removal."""

from proptree.core.naming.operations import (
    matches_prefix,
    matches_suffix,
    prefixed_property_name,
    remove_prefix,
    remove_suffix,
    suffixed_property_name,
)

__all__ = [
    "matches_prefix",
    "matches_suffix",
    "remove_prefix",
    "remove_suffix",
    "prefixed_property_name",
    "suffixed_property_name",
]
