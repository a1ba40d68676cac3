"""Tests for classes whose annotations name types missing at runtime."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, ClassVar

from proptree import IGNORE, ObjectPropertyInfo, build
from proptree.core.reflection import declared_fields, public_methods

if TYPE_CHECKING:
    from decimal import Decimal


class Vault:
    _secret: Annotated[str, IGNORE]
    _cost: Annotated[Decimal, IGNORE]
    _price: Decimal
    _label: str
    _limit: int
    limit: ClassVar[int] = 3

    def get_secret(self) -> str:
        return self._secret

    def set_secret(self, value: str) -> None:
        self._secret = value

    def get_cost(self) -> Decimal:
        return self._cost

    def get_price(self) -> Decimal:
        return self._price

    def set_price(self, value: Decimal) -> None:
        self._price = value

    def get_label(self) -> str:
        return self._label

    def get_limit(self) -> int:
        return self._limit


def _vault() -> Vault:
    vault = Vault()
    vault._limit = 3
    return vault


def test_ignore_marker_survives_unresolvable_sibling():
    """An unresolvable annotation elsewhere on the class keeps the field marker."""
    registry = build(Vault)

    assert "secret" not in registry
    assert "secret" in registry.ignored_names


def test_ignore_marker_survives_unresolvable_inner_type():
    registry = build(Vault)

    assert "cost" not in registry
    assert "cost" in registry.ignored_names


def test_class_var_stays_out_of_fields():
    """A ClassVar next to its prefixed field is not a second field."""
    fields = {ref.name: ref for ref in declared_fields(Vault, {})}

    assert "limit" not in fields
    assert set(fields) == {"_secret", "_cost", "_price", "_label", "_limit"}
    assert build(Vault).get_int_property("limit").get_value_raw(_vault()) == 3


def test_resolvable_fields_keep_their_types():
    fields = {ref.name: ref for ref in declared_fields(Vault, {})}

    assert fields["_label"].annotation is str
    assert fields["_limit"].annotation is int
    assert fields["_price"].annotation is object
    assert fields["_secret"].ignored
    assert not fields["_label"].ignored


def test_unresolvable_type_falls_back_to_object():
    price = build(Vault).properties["price"]

    assert isinstance(price, ObjectPropertyInfo)
    assert price.value_type is object


def test_method_hints_resolve_one_by_one():
    methods = {ref.name: ref for ref in public_methods(Vault, lambda k: {})}

    assert methods["set_price"].parameters == (object,)
    assert methods["set_price"].return_type is type(None)
    assert methods["get_price"].return_type is object
    assert methods["get_label"].return_type is str
