"""Pure functions matching member names against naming conventions.

A convention is an ordered set of affixes. Matching returns the first affix the
name strictly extends; removal strips it and, for prefixes, lower-cases the
first remaining character so `getCount` and `get_count` both map to `count`.
An empty affix matches any non-empty name and removes nothing.
"""

from __future__ import annotations

from collections.abc import Iterable

from proptree.errors import ConventionViolation


def matches_prefix(value: str, prefixes: Iterable[str]) -> str | None:
    """Find the first prefix the value starts with and is strictly longer than.

    Args:
        value: Raw member name.
        prefixes: Ordered candidate prefixes.

    Returns:
        The matching prefix, or None if no prefix matches.
    """
    for prefix in prefixes:
        if len(value) > len(prefix) and value.startswith(prefix):
            return prefix
    return None


def matches_suffix(value: str, suffixes: Iterable[str]) -> str | None:
    """Find the first suffix the value ends with and is strictly longer than.

    Args:
        value: Raw member name.
        suffixes: Ordered candidate suffixes.

    Returns:
        The matching suffix, or None if no suffix matches.
    """
    for suffix in suffixes:
        if len(value) > len(suffix) and value.endswith(suffix):
            return suffix
    return None


def remove_prefix(value: str, prefix: str) -> str:
    """Strip a prefix bean-style, lower-casing the first remaining character.

    Returns the value unchanged when the prefix is empty, absent, or the whole value.
    """
    if prefix and value.startswith(prefix) and len(prefix) != len(value):
        rest = value[len(prefix) :]
        return rest[0].lower() + rest[1:]
    return value


def remove_suffix(value: str, suffix: str) -> str:
    """Strip a suffix by truncation.

    Returns the value unchanged when the suffix is empty, absent, or the whole value.
    """
    if suffix and value.endswith(suffix) and len(suffix) != len(value):
        return value[: -len(suffix)]
    return value


def prefixed_property_name(value: str, prefixes: Iterable[str]) -> str | None:
    """Derive a property name from a prefixed member name.

    Args:
        value: Raw member name, e.g. `get_count`.
        prefixes: Ordered candidate prefixes.

    Returns:
        The property name, or None if no prefix matches.

    Raises:
        ConventionViolation: If removing the prefix leaves an empty name
            (underscores alone count as empty).
    """
    prefix = matches_prefix(value, prefixes)
    if prefix is None:
        return None
    name = remove_prefix(value, prefix)
    if not name.strip("_"):
        raise ConventionViolation(value, prefix)
    return name


def suffixed_property_name(value: str, suffixes: Iterable[str]) -> str | None:
    """Derive a property name from a suffixed member name.

    Args:
        value: Raw member name, e.g. `count_property`.
        suffixes: Ordered candidate suffixes.

    Returns:
        The property name, or None if no suffix matches.

    Raises:
        ConventionViolation: If removing the suffix leaves an empty name
            (underscores alone count as empty).
    """
    suffix = matches_suffix(value, suffixes)
    if suffix is None:
        return None
    name = remove_suffix(value, suffix)
    if not name.strip("_"):
        raise ConventionViolation(value, suffix)
    return name
