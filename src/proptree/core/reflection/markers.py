"""Exclusion markers.

Usage:
    class Account:
        # Field marker: the whole `secret` property disappears from every
        # registry at or below this type, whatever methods exist for it.
        _secret: Annotated[str, IGNORE]

        # Method marker: only this getter is dropped, a setter still counts.
        @ignore_property
        def get_balance(self) -> int: ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, get_origin

_IGNORE_ATTR = "__ignore_property__"


class IgnoreProperty:
    """Metadata marker for `Annotated` field annotations."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "IGNORE"


IGNORE = IgnoreProperty()


def ignore_property[F: Callable[..., Any]](func: F) -> F:
    """Exclude a single method from property discovery.

    Args:
        func: Getter, setter, or accessor method.

    Returns:
        The same function, marked.
    """
    setattr(func, _IGNORE_ATTR, True)
    return func


def is_ignored_member(func: object) -> bool:
    """Check if a method carries the ignore marker."""
    return bool(getattr(func, _IGNORE_ATTR, False))


def is_ignored_annotation(annotation: Any) -> bool:
    """Check if a field annotation is `Annotated` with the ignore marker."""
    if get_origin(annotation) is not Annotated:
        return False
    return any(
        isinstance(meta, IgnoreProperty) or meta is IgnoreProperty
        for meta in annotation.__metadata__
    )
