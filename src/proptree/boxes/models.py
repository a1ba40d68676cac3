"""Observable boxes: value holders exposed by accessor methods.

A class opts into the accessor convention by returning a box from a method
named with an accessor suffix:

    class Counter:
        def __init__(self):
            self._count = IntBox(0)

        def count_property(self) -> IntBox:
            return self._count

The declared return type decides mutability: a `Box` subclass is writable, a
`ReadOnlyBox`-only type is read-only even if the runtime object could be set.
Boxes hold a value and nothing more; they do not notify listeners.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from proptree.core.types import Long


class ReadOnlyBox[V](ABC):
    """Read-only view of a single boxed value."""

    @abstractmethod
    def get_value(self) -> V | None: ...


class Box[V](ReadOnlyBox[V]):
    """Readable and writable boxed value."""

    @abstractmethod
    def set_value(self, value: V | None) -> None: ...


class SimpleBox[V](Box[V]):
    """Plain in-memory box.

    Args:
        value: Initial value.
        owner: Object the box belongs to, if any.
        name: Property name the box represents, if any.
    """

    def __init__(self, value: V | None = None, *, owner: object = None, name: str = "") -> None:
        self._value = value
        self.owner = owner
        self.name = name

    def get_value(self) -> V | None:
        return self._value

    def set_value(self, value: V | None) -> None:
        self._value = value

    def __repr__(self) -> str:
        label = f" {self.name}" if self.name else ""
        return f"{type(self).__name__}{label}({self._value!r})"


class ReadOnlyIntBox(ReadOnlyBox[int]):
    """Read-only box holding an int."""


class ReadOnlyLongBox(ReadOnlyBox[Long]):
    """Read-only box holding a long."""


class ReadOnlyFloatBox(ReadOnlyBox[float]):
    """Read-only box holding a float."""


class IntBox(SimpleBox[int], ReadOnlyIntBox):
    """Writable box holding an int, defaulting to 0."""

    def __init__(self, value: int = 0, *, owner: object = None, name: str = "") -> None:
        super().__init__(value, owner=owner, name=name)


class LongBox(SimpleBox[Long], ReadOnlyLongBox):
    """Writable box holding a long, defaulting to 0."""

    def __init__(self, value: int = 0, *, owner: object = None, name: str = "") -> None:
        super().__init__(Long(value), owner=owner, name=name)


class FloatBox(SimpleBox[float], ReadOnlyFloatBox):
    """Writable box holding a float, defaulting to 0.0."""

    def __init__(self, value: float = 0.0, *, owner: object = None, name: str = "") -> None:
        super().__init__(value, owner=owner, name=name)


class ReadOnlyListBox[E](ReadOnlyBox[list[E]]):
    """Read-only box holding a list."""


class ReadOnlySetBox[E](ReadOnlyBox[set[E]]):
    """Read-only box holding a set."""


class ReadOnlyMapBox[K, V](ReadOnlyBox[dict[K, V]]):
    """Read-only box holding a dict."""


class ListBox[E](SimpleBox[list[E]], ReadOnlyListBox[E]):
    """Writable box holding a list, defaulting to a new empty list."""

    def __init__(self, value: list[E] | None = None, *, owner: object = None, name: str = "") -> None:
        super().__init__([] if value is None else value, owner=owner, name=name)


class SetBox[E](SimpleBox[set[E]], ReadOnlySetBox[E]):
    """Writable box holding a set, defaulting to a new empty set."""

    def __init__(self, value: set[E] | None = None, *, owner: object = None, name: str = "") -> None:
        super().__init__(set() if value is None else value, owner=owner, name=name)


class MapBox[K, V](SimpleBox[dict[K, V]], ReadOnlyMapBox[K, V]):
    """Writable box holding a dict, defaulting to a new empty dict."""

    def __init__(
        self, value: Mapping[K, V] | None = None, *, owner: object = None, name: str = ""
    ) -> None:
        super().__init__({} if value is None else dict(value), owner=owner, name=name)
