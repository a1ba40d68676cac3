"""Pure type-token operations: generic resolution, unwrapping, compatibility.

Type tokens are whatever appears in annotations: plain classes, parameterized
aliases such as `list[str]`, unions, `Annotated`, TypeVars, and NewTypes.
"""

from __future__ import annotations

import types
from collections.abc import Mapping
from typing import Annotated, Any, NewType, TypeVar, Union, get_args, get_origin

from proptree.boxes.models import Box, ReadOnlyBox

type TypeEnv = Mapping[Any, Any]
"""TypeVar -> substituted type, for one declaring class."""

_NONE_TYPE = type(None)


def strip_annotated(tp: Any) -> Any:
    """Drop `Annotated` metadata, keeping the underlying type."""
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def substitute(tp: Any, env: TypeEnv) -> Any:
    """Replace TypeVars in a type token using a binding environment.

    Args:
        tp: Type token possibly containing TypeVars.
        env: TypeVar bindings.

    Returns:
        The token with every bound TypeVar replaced. Unbound TypeVars are kept.
    """
    if isinstance(tp, TypeVar):
        return env.get(tp, tp)
    if isinstance(tp, type):
        return tp
    params = getattr(tp, "__parameters__", ())
    if not params:
        return tp
    try:
        return tp[tuple(env.get(p, p) for p in params)]
    except TypeError:
        return tp


def erase(tp: Any) -> Any:
    """Replace an unresolved TypeVar by its bound, or `object`."""
    if isinstance(tp, TypeVar):
        return tp.__bound__ if tp.__bound__ is not None else object
    return tp


def typevar_bindings(root: type, initial: TypeEnv | None = None) -> dict[type, dict[Any, Any]]:
    """Resolve the TypeVars of every generic ancestor of a class.

    Each class's own `__orig_bases__` binds its parents' parameters, so walking
    the MRO from the root outward sees every child before its parents.

    Args:
        root: Class whose ancestors are resolved.
        initial: Bindings for the root's own parameters, e.g. from `Root[int]`.

    Returns:
        Mapping of class -> {TypeVar: resolved type}.
    """
    bindings: dict[type, dict[Any, Any]] = {root: dict(initial or {})}
    for klass in getattr(root, "__mro__", (root,)):
        env = bindings.setdefault(klass, {})
        for base in klass.__dict__.get("__orig_bases__", ()):
            origin = get_origin(base)
            if not isinstance(origin, type):
                continue
            params = getattr(origin, "__parameters__", ())
            args = get_args(base)
            if not params or len(params) != len(args):
                continue
            target = bindings.setdefault(origin, {})
            for param, arg in zip(params, args, strict=True):
                target.setdefault(param, substitute(arg, env))
    return bindings


def resolve_type_parameter(tp: Any, generic_base: type, index: int = 0) -> Any:
    """Resolve one type parameter of a generic base as seen from a type token.

    >>> resolve_type_parameter(ListBox[str], ReadOnlyBox)
    list[str]

    Args:
        tp: Class or parameterized alias.
        generic_base: Generic ancestor declaring the parameter.
        index: Position of the parameter in `generic_base.__parameters__`.

    Returns:
        The resolved type, or the parameter's bound/`object` if unresolved.
    """
    origin = get_origin(tp) or tp
    if not isinstance(origin, type):
        return object
    params = getattr(origin, "__parameters__", ())
    args = get_args(tp)
    initial = dict(zip(params, args, strict=True)) if len(params) == len(args) else {}
    bindings = typevar_bindings(origin, initial)
    base_params = getattr(generic_base, "__parameters__", ())
    if index >= len(base_params):
        return object
    return erase(bindings.get(generic_base, {}).get(base_params[index], base_params[index]))


def _is_union(tp: Any) -> bool:
    return get_origin(tp) in (Union, types.UnionType)


def _is_subclass(klass: type, base: type) -> bool:
    # Non-runtime protocols refuse issubclass, fall back to nominal lookup.
    try:
        return issubclass(klass, base)
    except TypeError:
        return base in klass.__mro__


def is_box_type(tp: Any) -> bool:
    """Check if a type token is a (read-only or writable) box."""
    origin = get_origin(tp) or tp
    return isinstance(origin, type) and issubclass(origin, ReadOnlyBox)


def is_writable_box_type(tp: Any) -> bool:
    """Check if a type token is a writable box."""
    origin = get_origin(tp) or tp
    return isinstance(origin, type) and issubclass(origin, Box)


def is_optional(tp: Any) -> bool:
    """Check if a type token is `Optional[T]` / `T | None`."""
    return _is_union(tp) and _NONE_TYPE in get_args(tp)


def box_value_type(tp: Any) -> Any:
    """Extract the type held by a box type."""
    return resolve_type_parameter(tp, ReadOnlyBox)


def optional_value_type(tp: Any) -> Any:
    """Extract `T` from `T | None`. Several members give back their union."""
    members = tuple(a for a in get_args(tp) if a is not _NONE_TYPE)
    if len(members) == 1:
        return members[0]
    return Union[members]  # noqa: UP007


def unwrap_value_type(tp: Any) -> Any:
    """Reduce a declared member type to the property's value type.

    Boxes unwrap to their held type, optionals to their non-None member;
    anything else is returned as is (minus `Annotated` metadata).
    """
    tp = erase(strip_annotated(tp))
    if is_box_type(tp):
        return box_value_type(tp)
    if is_optional(tp):
        return optional_value_type(tp)
    return tp


def type_arguments(tp: Any, count: int) -> tuple[Any, ...]:
    """Type arguments of a parameterized token, padded with `object`."""
    args = tuple(erase(a) for a in get_args(strip_annotated(tp)))
    if len(args) >= count:
        return args[:count]
    return args + (object,) * (count - len(args))


def runtime_class(tp: Any) -> type | None:
    """Class usable with `isinstance` for a type token, or None if there is none.

    NewTypes resolve to their supertype. Unions, TypeVars, `Any`, and protocols
    that are not runtime-checkable yield None.
    """
    tp = strip_annotated(tp)
    while isinstance(tp, NewType):
        tp = tp.__supertype__
    origin = get_origin(tp) or tp
    if not isinstance(origin, type) or origin is object:
        return None
    if getattr(origin, "_is_protocol", False) and not getattr(origin, "_is_runtime_protocol", False):
        return None
    return origin


def is_assignable(actual: Any, expected: Any) -> bool:
    """Check if values of type `actual` can be used where `expected` is wanted.

    Classes follow `issubclass`; type arguments must be pairwise assignable;
    a NewType is assignable to its supertype but not the other way around.

    Args:
        actual: Type token of the property.
        expected: Type token requested by the caller.

    Returns:
        True if compatible.
    """
    actual = strip_annotated(actual)
    expected = strip_annotated(expected)
    if expected is object or expected is Any or actual == expected:
        return True
    if isinstance(expected, TypeVar) or actual is Any:
        return True
    if _is_union(expected):
        return any(is_assignable(actual, member) for member in get_args(expected))
    if isinstance(actual, NewType):
        return is_assignable(actual.__supertype__, expected)
    if isinstance(expected, NewType):
        return False
    actual_origin = get_origin(actual) or actual
    expected_origin = get_origin(expected) or expected
    if not (isinstance(actual_origin, type) and isinstance(expected_origin, type)):
        return False
    if not _is_subclass(actual_origin, expected_origin):
        return False
    expected_args = get_args(expected)
    if not expected_args:
        return True
    actual_args = get_args(actual)
    if len(actual_args) != len(expected_args):
        return False
    return all(is_assignable(a, e) for a, e in zip(actual_args, expected_args, strict=True))


def type_name(tp: Any) -> str:
    """Readable name of a type token for messages."""
    if isinstance(tp, type):
        return tp.__qualname__
    if isinstance(tp, NewType):
        return tp.__name__
    return repr(tp)
