"""Configuration module using Pydantic Settings.

Usage:
    from proptree.config import BuilderSettings

    settings = BuilderSettings(setter_prefixes=("set_", "put_"))
"""

from proptree.config.settings import (
    DEFAULT_ACCESSOR_SUFFIXES,
    DEFAULT_EXCLUDED_PACKAGES,
    DEFAULT_FIELD_PREFIXES,
    DEFAULT_GETTER_PREFIXES,
    DEFAULT_SETTER_PREFIXES,
    BuilderSettings,
)

__all__ = [
    "BuilderSettings",
    "DEFAULT_FIELD_PREFIXES",
    "DEFAULT_ACCESSOR_SUFFIXES",
    "DEFAULT_GETTER_PREFIXES",
    "DEFAULT_SETTER_PREFIXES",
    "DEFAULT_EXCLUDED_PACKAGES",
]
