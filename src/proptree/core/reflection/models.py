"""Reflection models: member kinds and handles onto fields and methods."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from proptree.errors import InvocationFailure


class MemberKind(Enum):
    """Role a discovered member plays for its property."""

    FIELD = auto()
    GETTER = auto()
    SETTER = auto()
    ACCESSOR = auto()  # Method returning a box


@dataclass(frozen=True, slots=True)
class FieldRef:
    """Handle onto an annotated (or slotted) instance attribute."""

    name: str
    owner: type
    annotation: Any
    ignored: bool = False

    def get(self, instance: object) -> Any:
        """Read the attribute from an instance.

        Raises:
            InvocationFailure: If the attribute cannot be read.
        """
        try:
            return getattr(instance, self.name)
        except AttributeError as e:
            raise InvocationFailure(f"Could not read field {self}") from e

    def set(self, instance: object, value: Any) -> None:
        """Write the attribute on an instance.

        Raises:
            InvocationFailure: If the attribute cannot be written.
        """
        try:
            setattr(instance, self.name, value)
        except (AttributeError, TypeError) as e:
            raise InvocationFailure(f"Could not write field {self}") from e

    def __str__(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}"


@dataclass(frozen=True, slots=True)
class MethodRef:
    """Handle onto a public method, with its resolved signature.

    Invocation is virtual: the method is looked up on the instance by name, so a
    handle taken from a base type dispatches to a subclass override.

    Attributes:
        name: Method name.
        owner: Class that declares the method.
        function: The declared function object.
        parameters: Resolved types of the positional parameters after `self`.
        return_type: Resolved return type, `NoneType` for `-> None`.
        is_abstract: True for abstract methods and protocol members.
        ignored: True if marked with `ignore_property`.
    """

    name: str
    owner: type
    function: Callable[..., Any]
    parameters: tuple[Any, ...]
    return_type: Any
    is_abstract: bool = False
    ignored: bool = False

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def invoke(self, instance: object, *args: Any) -> Any:
        """Call the method on an instance.

        Raises:
            InvocationFailure: If lookup or the call itself raises.
        """
        try:
            return getattr(instance, self.name)(*args)
        except Exception as e:
            raise InvocationFailure(f"Invoking {self} on {type(instance).__qualname__} failed") from e

    def is_same_method(self, other: MethodRef) -> bool:
        """Check if both handles refer to the same underlying function."""
        return self.function is other.function

    def __str__(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}()"


@dataclass(frozen=True, slots=True)
class Supertypes:
    """Direct supertypes of a class, split the way the hierarchy walk needs them.

    `superclass` is the first base that is not a protocol; every other base is
    treated as an interface, in declaration order.
    """

    superclass: type | None
    interfaces: tuple[type, ...]

    def all(self) -> tuple[type, ...]:
        """Superclass first, then interfaces."""
        if self.superclass is None:
            return self.interfaces
        return (self.superclass, *self.interfaces)
