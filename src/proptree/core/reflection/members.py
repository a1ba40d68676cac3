"""Member enumeration: the host object model as seen by the property scanner.

These functions answer three questions about one class: what are its direct
supertypes, which instance fields does it declare, and which public methods can
be called on it. Types are resolved against a TypeVar environment so members
declared on generic bases come back with concrete types.
"""

from __future__ import annotations

import ast
import inspect
import sys
import typing
from collections.abc import Callable, Iterable
from typing import Annotated, Any, ClassVar, get_origin

from loguru import logger

from proptree.core.reflection.markers import is_ignored_annotation, is_ignored_member
from proptree.core.reflection.models import FieldRef, MethodRef, Supertypes
from proptree.core.reflection.operations import TypeEnv, strip_annotated, substitute

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def is_protocol(cls: type) -> bool:
    """Check if a class is a `typing.Protocol` definition (not an implementation)."""
    return bool(getattr(cls, "_is_protocol", False))


def is_excluded_type(cls: object, excluded_packages: Iterable[str] = ()) -> bool:
    """Check if a class belongs to the host framework rather than user code.

    Args:
        cls: Candidate class.
        excluded_packages: Extra top-level package names to treat as framework.

    Returns:
        True for `object`, non-classes, standard-library classes, and classes
        from an excluded package.

    Note:
        Only the top-level module name is compared, so a user package that
        shares a name with a standard-library module (`calendar`, `email`,
        `queue`, `token`, ...) is treated as framework code. Rename such a
        package to have its classes scanned.
    """
    if not isinstance(cls, type) or cls is object:
        return True
    top_level = (cls.__module__ or "").partition(".")[0]
    return top_level in sys.stdlib_module_names or top_level in excluded_packages


def direct_supertypes(cls: type) -> Supertypes:
    """Split a class's bases into its superclass and interfaces.

    Args:
        cls: Class to inspect.

    Returns:
        Supertypes with the first non-protocol base as superclass.
    """
    superclass: type | None = None
    interfaces: list[type] = []
    for base in cls.__bases__:
        if base is object:
            continue
        if superclass is None and not is_protocol(base):
            superclass = base
        else:
            interfaces.append(base)
    return Supertypes(superclass=superclass, interfaces=tuple(interfaces))


_NONE_TYPE = type(None)
_UNRESOLVED = object()


def _eval_node(node: ast.expr, globalns: dict[str, Any], localns: dict[str, Any]) -> Any:
    try:
        return eval(compile(ast.Expression(node), "<annotation>", "eval"), globalns, localns)
    except NameError:
        return _UNRESOLVED


def _partial_annotation(node: ast.expr, globalns: dict[str, Any], localns: dict[str, Any]) -> Any:
    # Keeps the ClassVar and Annotated[..., IGNORE] wrappers of an annotation
    # whose inner type names something missing at runtime.
    value = _eval_node(node, globalns, localns)
    if value is not _UNRESOLVED:
        return value
    if not isinstance(node, ast.Subscript):
        return object
    head = _eval_node(node.value, globalns, localns)
    if head is ClassVar:
        return ClassVar
    if head is not Annotated or not isinstance(node.slice, ast.Tuple) or not node.slice.elts:
        return object
    inner, *extras = node.slice.elts
    metadata = [
        m for m in (_eval_node(e, globalns, localns) for e in extras) if m is not _UNRESOLVED
    ]
    resolved = _partial_annotation(inner, globalns, localns)
    return Annotated[(resolved, *metadata)] if metadata else resolved


def _resolve_each(
    annotations: dict[str, Any], globalns: dict[str, Any], localns: dict[str, Any]
) -> dict[str, Any]:
    resolved: dict[str, Any] = {}
    for name, annotation in annotations.items():
        if isinstance(annotation, str):
            annotation = _partial_annotation(
                ast.parse(annotation, mode="eval").body, globalns, localns
            )
        resolved[name] = _NONE_TYPE if annotation is None else annotation
    return resolved


def _own_annotations(cls: type) -> dict[str, Any]:
    try:
        return dict(inspect.get_annotations(cls, eval_str=True))
    except NameError as e:
        logger.debug("Unresolvable annotation on {}, resolving one by one: {}", cls.__qualname__, e)
    module = sys.modules.get(cls.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = {p.__name__: p for p in getattr(cls, "__type_params__", ())} | dict(vars(cls))
    return _resolve_each(dict(inspect.get_annotations(cls)), globalns, localns)


def _type_hints(func: Callable[..., Any], owner: type) -> dict[str, Any]:
    localns = {p.__name__: p for p in getattr(owner, "__type_params__", ())}
    try:
        return typing.get_type_hints(func, localns=localns, include_extras=True)
    except NameError as e:
        logger.debug(
            "Unresolvable annotation on {}, resolving one by one: {}", func.__qualname__, e
        )
    localns |= {p.__name__: p for p in getattr(func, "__type_params__", ())}
    globalns = getattr(func, "__globals__", {})
    return _resolve_each(dict(inspect.get_annotations(func)), globalns, localns)


def _is_class_var(annotation: Any) -> bool:
    annotation = strip_annotated(annotation)
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def declared_fields(cls: type, env: TypeEnv) -> list[FieldRef]:
    """List the instance fields declared directly on a class.

    Own annotations (minus `ClassVar`) are fields, as are own `__slots__`
    entries without an annotation. Protocol classes declare no fields.

    Args:
        cls: Class to inspect.
        env: TypeVar bindings for this class.

    Returns:
        Field handles in declaration order.
    """
    if is_protocol(cls):
        return []

    annotations = _own_annotations(cls)
    refs = [
        FieldRef(
            name=name,
            owner=cls,
            annotation=substitute(strip_annotated(annotation), env),
            ignored=is_ignored_annotation(annotation),
        )
        for name, annotation in annotations.items()
        if not _is_class_var(annotation)
    ]

    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    refs.extend(
        FieldRef(name=name, owner=cls, annotation=object)
        for name in slots
        if name not in annotations and not name.startswith("__")
    )
    return refs


def _method_ref(name: str, owner: type, func: Callable[..., Any], env: TypeEnv) -> MethodRef:
    hints = _type_hints(func, owner)
    signature = inspect.signature(func)
    positional = [p for p in signature.parameters.values() if p.kind in _POSITIONAL][1:]
    return MethodRef(
        name=name,
        owner=owner,
        function=func,
        parameters=tuple(
            substitute(strip_annotated(hints.get(p.name, object)), env) for p in positional
        ),
        return_type=substitute(strip_annotated(hints.get("return", object)), env),
        is_abstract=bool(getattr(func, "__isabstractmethod__", False)) or is_protocol(owner),
        ignored=is_ignored_member(func),
    )


def public_methods(
    cls: type,
    env_for: Callable[[type], TypeEnv],
    excluded_packages: Iterable[str] = (),
) -> list[MethodRef]:
    """List the public instance methods callable on a class, inherited ones included.

    Follows the MRO so each name resolves the way attribute lookup does. Names
    starting with `_`, static and class methods, properties, and anything
    declared on a framework class are skipped.

    Args:
        cls: Class to inspect.
        env_for: Returns the TypeVar bindings for a declaring class.
        excluded_packages: Extra top-level package names to treat as framework.

    Returns:
        Method handles, most-derived declarations first.
    """
    excluded = tuple(excluded_packages)
    seen: set[str] = set()
    refs: list[MethodRef] = []
    for klass in cls.__mro__:
        framework = is_excluded_type(klass, excluded)
        for name, attr in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if framework or name.startswith("_") or not inspect.isfunction(attr):
                continue
            refs.append(_method_ref(name, klass, attr, env_for(klass)))
    return refs
