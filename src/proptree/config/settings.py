"""Configuration settings using Pydantic Settings.

Naming conventions and framework exclusions for the registry builder, with
environment variable support. Lists are read from the environment as JSON.

Usage:
    from proptree.config import BuilderSettings

    # Load from environment variables (PROPTREE_*)
    settings = BuilderSettings()

    # Or override with explicit values
    settings = BuilderSettings(getter_prefixes=("get_", "is_", "has_"))
"""

from __future__ import annotations

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FIELD_PREFIXES: tuple[str, ...] = ("_", "")
DEFAULT_ACCESSOR_SUFFIXES: tuple[str, ...] = ("_property",)
DEFAULT_GETTER_PREFIXES: tuple[str, ...] = ("get_", "is_")
DEFAULT_SETTER_PREFIXES: tuple[str, ...] = ("set_",)
DEFAULT_EXCLUDED_PACKAGES: tuple[str, ...] = (
    "pydantic",
    "pydantic_core",
    "pydantic_settings",
    "loguru",
    "typing_extensions",
)

_DEFAULTS: dict[str, tuple[str, ...]] = {
    "field_prefixes": DEFAULT_FIELD_PREFIXES,
    "accessor_suffixes": DEFAULT_ACCESSOR_SUFFIXES,
    "getter_prefixes": DEFAULT_GETTER_PREFIXES,
    "setter_prefixes": DEFAULT_SETTER_PREFIXES,
    "excluded_packages": DEFAULT_EXCLUDED_PACKAGES,
}


class BuilderSettings(BaseSettings):  # type: ignore[misc]
    """Naming conventions used when collecting properties.

    Affixes are tried in order, first match wins. An empty list falls back to
    the default, so a convention can never be switched off entirely.

    Attributes:
        field_prefixes: Prefixes stripped from field names.
        accessor_suffixes: Suffixes marking box accessor methods.
        getter_prefixes: Prefixes marking bean getters.
        setter_prefixes: Prefixes marking bean setters.
        excluded_packages: Top-level packages whose classes are never walked,
            on top of the standard library. A user package named like a
            standard-library module is skipped too.

    Environment Variables:
        PROPTREE_FIELD_PREFIXES
        PROPTREE_ACCESSOR_SUFFIXES
        PROPTREE_GETTER_PREFIXES
        PROPTREE_SETTER_PREFIXES
        PROPTREE_EXCLUDED_PACKAGES
    """

    model_config = SettingsConfigDict(
        env_prefix="PROPTREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    field_prefixes: tuple[str, ...] = DEFAULT_FIELD_PREFIXES
    accessor_suffixes: tuple[str, ...] = DEFAULT_ACCESSOR_SUFFIXES
    getter_prefixes: tuple[str, ...] = DEFAULT_GETTER_PREFIXES
    setter_prefixes: tuple[str, ...] = DEFAULT_SETTER_PREFIXES
    excluded_packages: tuple[str, ...] = DEFAULT_EXCLUDED_PACKAGES

    @field_validator(
        "field_prefixes",
        "accessor_suffixes",
        "getter_prefixes",
        "setter_prefixes",
        "excluded_packages",
        mode="after",
    )
    @classmethod
    def _default_if_empty(cls, value: tuple[str, ...], info: ValidationInfo) -> tuple[str, ...]:
        if not value:
            return _DEFAULTS[info.field_name]
        return tuple(dict.fromkeys(value))
