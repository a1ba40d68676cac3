from typing import Annotated, Protocol

from loguru import logger

from proptree import IGNORE, IntBox, ListBox, PropertyRegistryBuilder, build


class Named(Protocol):
    def get_name(self) -> str: ...


class Account:
    _name: str
    _pin: Annotated[int, IGNORE]

    def __init__(self, name: str):
        self._name = name
        self._pin = 0
        self._balance = IntBox()
        self._history: ListBox[int] = ListBox()

    def get_name(self) -> str:
        return self._name

    def set_name(self, value: str) -> None:
        self._name = value

    def balance_property(self) -> IntBox:
        return self._balance

    def history_property(self) -> ListBox[int]:
        return self._history

    def get_pin(self) -> int:
        return self._pin


class SavingsAccount(Account, Named):
    def __init__(self, name: str, rate: float = 0.02):
        super().__init__(name)
        self._rate = rate

    def get_rate(self) -> float:
        return self._rate

    def set_rate(self, value: float) -> None:
        self._rate = value


def main() -> None:
    logger.enable("proptree")

    registry = build(SavingsAccount)
    print(f"Properties: {registry.all_names}")
    print(f"Ignored: {registry.ignored_names}")

    account = SavingsAccount("alice")
    registry.get_int_property("balance").set_value(account, 120)
    registry.get_float_property("rate").set_value(account, 0.05)
    registry.get_list_property("history", int).get_box(account).set_value([100, 20])

    for name in registry:
        info = registry.properties[name]
        access = sorted(m.name for m in info.mutability)
        print(f"  {name}: {info.get_value(account)!r} {access}")

    # Reuse the registries of the supertypes for the next build
    builder = PropertyRegistryBuilder()
    cache = builder.build_all(SavingsAccount)
    account_registry = builder.with_cache_entries(cache).build(Account)
    print(f"Account properties: {account_registry.all_names}")


if __name__ == "__main__":
    main()
