"""End-to-end workflows over a small bean hierarchy."""

from abc import ABC, abstractmethod
from typing import Annotated

import pytest
from loguru import logger

from proptree import (
    IGNORE,
    AbstractPropertyVisitor,
    IntBox,
    ListBox,
    PropertyBuildError,
    PropertyRegistryBuilder,
    ignore_property,
)


class Identified(ABC):
    _id: int

    def get_id(self) -> int:
        return self._id

    def set_id(self, value: int) -> None:
        self._id = value

    @abstractmethod
    def get_display_name(self) -> str: ...


class Person(Identified):
    _name: str
    _password: Annotated[str, IGNORE]

    def __init__(self, name: str = "", age: int = 0):
        self._id = 0
        self._name = name
        self._password = "secret"
        self._age = IntBox(age)
        self._nicknames: ListBox[str] = ListBox()

    def get_name(self) -> str:
        return self._name

    def set_name(self, value: str) -> None:
        self._name = value

    def get_display_name(self) -> str:
        return self._name.title()

    def age_property(self) -> IntBox:
        return self._age

    def nicknames_property(self) -> ListBox[str]:
        return self._nicknames

    def get_password(self) -> str:
        return self._password

    def set_password(self, value: str) -> None:
        self._password = value

    @ignore_property
    def get_internal(self) -> str:
        return "internal"


class Employee(Person):
    def __init__(self, name: str = "", age: int = 0, salary: int = 0):
        super().__init__(name, age)
        self._salary = salary

    def get_salary(self) -> int:
        return self._salary

    def set_salary(self, value: int) -> None:
        self._salary = value


class Broken:
    def set_value(self, value: int) -> None:
        pass

    def put_value(self, value: int) -> None:
        pass


class ToDict(AbstractPropertyVisitor):
    """Snapshot every readable property of an instance."""

    def __init__(self, instance):
        self.instance = instance
        self.result = {}

    def _read(self, info):
        if info.is_readable:
            self.result[info.name] = info.get_value(self.instance)

    visit_int = visit_long = visit_float = visit_object = _read
    visit_list = visit_set = visit_map = _read


@pytest.fixture
def log_messages():
    messages = []
    logger.enable("proptree")
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("proptree")


def test_hierarchy_build_and_copy():
    cache = PropertyRegistryBuilder().build_all(Employee)
    registry = cache[Employee]

    assert set(cache) == {Employee, Person, Identified}
    assert registry.all_names == (
        "age",
        "display_name",
        "id",
        "name",
        "nicknames",
        "salary",
    )
    assert "password" in registry.ignored_names

    source = Employee("ada lovelace", 36, salary=100)
    source.set_id(7)
    source.nicknames_property().set_value(["countess"])
    target = Employee()

    for name in registry:
        info = registry.properties[name]
        if info.is_readable and info.is_writable:
            info.set_value(target, info.get_value(source))

    assert target.get_id() == 7
    assert target.get_name() == "ada lovelace"
    assert target.age_property().get_value() == 36
    assert target.get_salary() == 100
    assert target.nicknames_property().get_value() == ["countess"]
    assert target.get_password() == "secret"


def test_visitor_snapshot():
    registry = PropertyRegistryBuilder().build(Employee)
    employee = Employee("grace hopper", 85, salary=1)
    visitor = ToDict(employee)

    for name in registry:
        registry.visit(name, visitor)

    assert visitor.result == {
        "age": 85,
        "display_name": "Grace Hopper",
        "id": 0,
        "name": "grace hopper",
        "nicknames": [],
        "salary": 1,
    }


def test_person_registry_from_shared_cache():
    builder = PropertyRegistryBuilder()
    cache = builder.build_all(Employee)

    person = builder.with_cache_entries(cache).build(Person)

    assert person is cache[Person]
    assert "salary" not in person
    assert person.get_int_property("age").get(Person(age=3)) == 3


def test_build_errors_are_logged(log_messages):
    builder = PropertyRegistryBuilder().with_setter_prefixes("set_", "put_")

    with pytest.raises(PropertyBuildError):
        builder.build(Broken)

    assert any(m.startswith("ERROR [P: value]") for m in log_messages)


def test_discovery_is_logged(log_messages):
    PropertyRegistryBuilder().build(Employee)

    assert any("Built registry for Employee" in m for m in log_messages)
