"""Property models: access directions and value-type variants."""

from __future__ import annotations

from enum import Enum, auto


class Mutability(Enum):
    """Direction a property can be accessed in."""

    READ = auto()
    WRITE = auto()


READ_ONLY: frozenset[Mutability] = frozenset({Mutability.READ})
WRITE_ONLY: frozenset[Mutability] = frozenset({Mutability.WRITE})
READ_WRITE: frozenset[Mutability] = frozenset({Mutability.READ, Mutability.WRITE})


class PropertyKind(Enum):
    """Closed set of descriptor variants, chosen once from the value type."""

    INT = auto()
    LONG = auto()
    FLOAT = auto()
    OBJECT = auto()
    LIST = auto()
    SET = auto()
    MAP = auto()

    @property
    def is_primitive(self) -> bool:
        return self in (PropertyKind.INT, PropertyKind.LONG, PropertyKind.FLOAT)


class AccessSource(Enum):
    """Member a descriptor reads or writes through."""

    GETTER = auto()
    SETTER = auto()
    ACCESSOR = auto()
    NONE = auto()
