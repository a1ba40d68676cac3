"""Error taxonomy for property resolution and property access.

Build-time problems (`ConventionViolation`, `DuplicateMember`) are never raised
on their own: the builder collects every one of them over the whole hierarchy
and raises a single `PropertyBuildError`. Every other error is raised directly
by the lookup or access call that hit it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType


class PropertyError(Exception):
    """Base class for every error raised by proptree."""

    pass


class ConventionViolation(PropertyError, ValueError):
    """Raised when removing a naming affix leaves an empty property name."""

    def __init__(self, member_name: str, affix: str) -> None:
        super().__init__(f"Removing affix {affix!r} from {member_name!r} leaves an empty name")
        self.member_name = member_name
        self.affix = affix


class DuplicateMember(PropertyError, ValueError):
    """Raised when two distinct concrete members claim the same kind and name on one type."""

    def __init__(self, property_name: str, kind: str, first: object, second: object) -> None:
        super().__init__(f"Multiple {kind} found for {property_name!r}: {first} and {second}")
        self.property_name = property_name
        self.kind = kind
        self.first = first
        self.second = second


class PropertyBuildError(PropertyError, ValueError):
    """Aggregate failure for a whole build call.

    Attributes:
        base_type: Root type the build was started from.
        errors: Problems grouped by property name, sorted by name.
    """

    def __init__(self, base_type: type, errors: Mapping[str, Sequence[PropertyError]]) -> None:
        self.base_type = base_type
        self.errors: Mapping[str, tuple[PropertyError, ...]] = MappingProxyType(
            {name: tuple(errors[name]) for name in sorted(errors)}
        )
        super().__init__(self._format())

    def _format(self) -> str:
        lines = [f"Found property errors with class: {self.base_type.__qualname__}"]
        for index, (name, problems) in enumerate(self.errors.items(), start=1):
            messages = sorted(str(p) for p in problems)
            lines.append(f"\t{index})\t{name} -> {messages[0]}")
            lines.extend(f"\t\t{message}" for message in messages[1:])
        return "\n".join(lines)


class PropertyNotFound(PropertyError, LookupError):
    """Raised when a registry has no property with the requested name."""

    pass


class AccessorNotFound(PropertyError, LookupError):
    """Raised when a box is requested from a property that has no accessor method."""

    pass


class TypeMismatch(PropertyError, TypeError):
    """Raised when a requested or supplied type is incompatible with a property."""

    pass


class ReadOnlyViolation(PropertyError, AttributeError):
    """Raised when writing to a property that has no setter or writable accessor."""

    pass


class WriteOnlyViolation(PropertyError, AttributeError):
    """Raised when reading a property that has no getter or accessor."""

    pass


class InvocationFailure(PropertyError, RuntimeError):
    """Raised when an invoked member fails. The original exception is the `__cause__`."""

    pass
