"""Core type definitions for proptree."""

from typing import Any, NewType

Long = NewType("Long", int)
"""Value token selecting the long-integer property variant.

Python has a single integer type, so `int` annotations resolve to the int
variant. Annotate with `Long` (or return a `LongBox`) to get the long variant.
"""

type ValueType = Any
"""A resolved value-type token: a class, a parameterized alias, or a NewType."""
