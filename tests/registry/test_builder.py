"""Tests for the hierarchy walk and registry assembly."""

from abc import ABC, abstractmethod
from typing import Annotated, Protocol

import pytest
from pydantic import BaseModel

from proptree import (
    IGNORE,
    DuplicateMember,
    PropertyBuildError,
    PropertyRegistryBuilder,
    SimpleBox,
    build,
    build_all,
)
from proptree.core.property import READ_ONLY, READ_WRITE
from proptree.registry import collector as collector_module


class HasName(Protocol):
    def get_name(self) -> str: ...


class Labeled(HasName, Protocol):
    def get_label(self) -> str: ...


class Titled(HasName, Protocol):
    def get_title(self) -> str: ...


class Document(Labeled, Titled):
    def get_name(self) -> str:
        return "doc"

    def get_label(self) -> str:
        return "label"

    def get_title(self) -> str:
        return "title"


class Entity:
    _id: int

    def get_id(self) -> int:
        return self._id

    def set_id(self, value: int) -> None:
        self._id = value


class Left(Entity):
    def get_left(self) -> str:
        return "left"


class Right(Entity):
    def get_right(self) -> str:
        return "right"


class Both(Left, Right):
    pass


class Secretive:
    _token: Annotated[str, IGNORE]

    def get_token(self) -> str:
        return ""

    def set_token(self, value: str) -> None:
        pass

    def token_property(self) -> SimpleBox[str]:
        return SimpleBox("")


class HidesPin:
    _pin: Annotated[int, IGNORE]


class Card(HidesPin):
    def get_pin(self) -> int:
        return 1234

    def set_pin(self, value: int) -> None:
        pass

    def get_holder(self) -> str:
        return "holder"


class Terminal(Entity, HidesPin):
    def get_pin(self) -> int:
        return 0


class Animal(ABC):
    @abstractmethod
    def get_sound(self) -> str: ...

    def get_legs(self) -> int:
        return 4


class Dog(Animal):
    def get_sound(self) -> str:
        return "woof"


class Puppy(Dog):
    def get_sound(self) -> str:
        return "yip"


class Ambiguous:
    def set_level(self, value: int) -> None:
        pass

    def put_level(self, value: int) -> None:
        pass


class AmbiguousChild(Ambiguous):
    def set_depth(self, value: int) -> None:
        pass

    def put_depth(self, value: int) -> None:
        pass


class Repository[T]:
    _items: list[T]

    def get_items(self) -> list[T]:
        return self._items

    def set_items(self, items: list[T]) -> None:
        self._items = items

    def get_latest(self) -> T:
        return self._items[-1]


class UserRepository(Repository[str]):
    pass


class Profile(BaseModel):
    nickname: str = "anon"

    def get_nickname(self) -> str:
        return self.nickname


class Hungarian:
    m_count: int
    _count: int

    def get_count(self) -> int:
        return self.m_count


# Concrete scenario


def test_counter_scenario(counter_cls):
    """Field, getter and setter for `count` become one read-write property."""
    registry = build(counter_cls)
    counter = counter_cls(2)

    assert registry.all_names == ("count",)
    assert registry.local_names == ("count",)
    info = registry.get_int_property("count")
    assert info.field_ref.name == "_count"
    assert info.getter_ref.name == "get_count"
    assert info.setter_ref.name == "set_count"
    assert info.accessor_ref is None
    assert info.mutability == READ_WRITE
    assert info.get_value(counter) == 2

    info.set_value(counter, 5)

    assert info.get_value(counter) == 5
    assert counter.get_count() == 5


# Walk


def test_build_all_covers_every_supertype():
    cache = build_all(Both)

    assert set(cache) == {Both, Left, Right, Entity}


def test_each_type_is_collected_once(monkeypatch):
    """Diamonds reach Entity and HasName twice, but collect them once."""
    seen = []
    original = collector_module.TypePropertiesCollector.collect

    def counting(self):
        seen.append(self._base)
        return original(self)

    monkeypatch.setattr(collector_module.TypePropertiesCollector, "collect", counting)

    build_all(Both)
    build_all(Document)

    assert seen.count(Entity) == 1
    assert seen.count(HasName) == 1
    assert len(seen) == len(set(seen))


def test_interfaces_are_walked_before_superclass(monkeypatch):
    seen = []
    original = collector_module.TypePropertiesCollector.collect

    def recording(self):
        seen.append(self._base)
        return original(self)

    monkeypatch.setattr(collector_module.TypePropertiesCollector, "collect", recording)

    build_all(Both)

    assert seen == [Both, Right, Left, Entity]


def test_diamond_interfaces_yield_one_property():
    cache = build_all(Document)
    registry = cache[Document]

    assert set(cache) == {Document, Labeled, Titled, HasName}
    assert registry.all_names == ("label", "name", "title")
    assert registry.properties["name"].base_type is Document
    assert registry.get_property("name", str).get_value(Document()) == "doc"
    assert cache[HasName].properties["name"].getter_ref.is_abstract


def test_supertype_registries_are_linked():
    cache = build_all(Both)

    assert cache[Both].supers == (cache[Left], cache[Right])
    assert cache[Left].supers == (cache[Entity],)
    assert cache[Entity].supers == ()


def test_framework_bases_are_not_walked():
    cache = build_all(Profile)

    assert set(cache) == {Profile}
    assert cache[Profile].all_names == ("nickname",)
    assert cache[Profile].get_property("nickname").get_value(Profile()) == "anon"


def test_excluded_root_is_rejected():
    with pytest.raises(TypeError):
        build(dict)
    with pytest.raises(TypeError):
        build(42)


# Ignoring


def test_ignored_field_hides_methods():
    registry = build(Secretive)

    assert "token" not in registry
    assert registry.ignored_names == ("token",)
    assert len(registry) == 0


def test_ignore_from_superclass_is_sticky():
    registry = build(Card)

    assert registry.all_names == ("holder",)
    assert "pin" in registry.ignored_names
    assert "pin" not in registry.local_properties


def test_ignore_from_second_base_is_sticky():
    registry = build(Terminal)

    assert "pin" not in registry
    assert "id" in registry


# Override precedence


def test_concrete_override_replaces_abstract():
    cache = build_all(Dog)
    dog = cache[Dog].properties["sound"]

    assert dog.getter_ref.owner is Dog
    assert not dog.getter_ref.is_abstract
    assert cache[Animal].properties["sound"].getter_ref.is_abstract
    assert dog.mutability == READ_ONLY


def test_invocation_dispatches_to_override():
    animal = build(Animal).get_property("sound", str)

    assert animal.get_value(Dog()) == "woof"
    assert animal.get_value(Puppy()) == "yip"


def test_inherited_concrete_members_are_local():
    registry = build(Dog)

    assert registry.local_names == ("legs", "sound")
    assert registry.properties["legs"].getter_ref.owner is Animal


# Conflicts


def test_distinct_setters_conflict():
    builder = PropertyRegistryBuilder().with_setter_prefixes("set_", "put_")

    with pytest.raises(PropertyBuildError) as exc_info:
        builder.build(Ambiguous)

    assert set(exc_info.value.errors) == {"level"}
    (error,) = exc_info.value.errors["level"]
    assert isinstance(error, DuplicateMember)
    assert error.property_name == "level"


def test_default_setter_prefix_has_no_conflict():
    registry = build(Ambiguous)

    assert registry.all_names == ("level",)
    assert registry.properties["level"].setter_ref.name == "set_level"


def test_every_conflict_in_the_hierarchy_is_reported():
    builder = PropertyRegistryBuilder().with_setter_prefixes("set_", "put_")

    with pytest.raises(PropertyBuildError) as exc_info:
        builder.build_all(AmbiguousChild)

    error = exc_info.value
    assert error.base_type is AmbiguousChild
    assert list(error.errors) == ["depth", "level"]
    assert str(error).startswith("Found property errors with class: AmbiguousChild")
    assert "\t1)\tdepth -> " in str(error)
    assert "\t2)\tlevel -> " in str(error)


def test_failed_build_returns_nothing():
    builder = PropertyRegistryBuilder().with_setter_prefixes("set_", "put_")
    cache = {}

    with pytest.raises(PropertyBuildError):
        cache = builder.build_all(AmbiguousChild)

    assert cache == {}


# Cache


def test_build_is_idempotent():
    first = build_all(Dog)
    second = build_all(Dog)

    assert set(first) == set(second)
    for klass in first:
        assert first[klass].all_names == second[klass].all_names
        for name in first[klass].all_names:
            a, b = first[klass].properties[name], second[klass].properties[name]
            assert a == b
            assert a.value_type == b.value_type
            assert a.kind is b.kind


def test_build_with_seed_cache_matches_fresh_build():
    fresh = build_all(Puppy)
    seed = build_all(Animal)

    seeded = build_all(Puppy, seed)

    assert seeded[Animal] is seed[Animal]
    assert set(seeded) == set(fresh)
    assert seeded[Puppy].all_names == fresh[Puppy].all_names
    for name in fresh[Puppy].all_names:
        assert seeded[Puppy].properties[name] == fresh[Puppy].properties[name]


def test_seed_cache_is_not_mutated():
    seed = dict(build_all(Animal))

    result = build_all(Dog, seed)

    assert set(seed) == {Animal}
    assert set(result) == {Animal, Dog}


def test_cached_root_is_returned_as_is():
    seed = build_all(Dog)

    again = PropertyRegistryBuilder().with_cache_entries(seed).build(Dog)

    assert again is seed[Dog]


def test_result_is_read_only():
    cache = build_all(Dog)

    with pytest.raises(TypeError):
        cache[Puppy] = cache[Dog]


# Generics


def test_generic_base_resolves_against_subclass():
    registry = build(UserRepository)

    items = registry.get_list_property("items", str)
    assert items.element_type is str
    assert registry.get_property("latest", str).value_type is str


def test_parameterized_root():
    registry = build(Repository[int])

    assert registry.base_type is Repository
    assert registry.get_list_property("items", int).element_type is int


# Builder configuration


def test_with_methods_return_new_builders():
    builder = PropertyRegistryBuilder()
    custom = builder.with_getter_prefixes("fetch_")

    assert custom is not builder
    assert custom.settings.getter_prefixes == ("fetch_",)
    assert builder.settings.getter_prefixes == ("get_", "is_")


def test_empty_configuration_restores_defaults():
    builder = PropertyRegistryBuilder().with_getter_prefixes("fetch_").with_getter_prefixes()

    assert builder.settings.getter_prefixes == ("get_", "is_")


def test_field_prefixes_are_configurable():
    default = build(Hungarian)
    hungarian = PropertyRegistryBuilder().with_field_prefixes("m_").build(Hungarian)

    assert default.properties["count"].field_ref.name == "_count"
    assert hungarian.properties["count"].field_ref.name == "m_count"


def test_excluded_packages_are_configurable():
    package = Left.__module__.partition(".")[0]
    builder = PropertyRegistryBuilder().with_excluded_packages(package)

    assert builder.settings.excluded_packages == (package,)
    with pytest.raises(TypeError):
        builder.build(Left)
