"""Hot drinks and the factories that make them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class HotDrink(ABC):
    """A drink that has to be prepared with a given volume."""

    @abstractmethod
    def prepare(self, volume: int) -> None:
        """Prepare the drink with the given volume in millilitres."""


class Tea(HotDrink):
    def prepare(self, volume: int) -> None:
        print(f"Take tea bag, boil water, pour {volume}ml, add some lemon")


class Coffee(HotDrink):
    def prepare(self, volume: int) -> None:
        print(f"Grind some beans, boil water, pour {volume}ml, add cream, enjoy!")


class HotDrinkFactory(ABC):
    """Makes one kind of hot drink."""

    @abstractmethod
    def make(self) -> HotDrink:
        """Return a new, unprepared drink."""


class CoffeeFactory(HotDrinkFactory):
    def make(self) -> HotDrink:
        return Coffee()


def _make_tea() -> HotDrink:
    tea = Tea()
    tea.prepare(200)
    return tea


class DrinkWithVolumeFactory:
    """Makes ready-prepared drinks by name."""

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], HotDrink]] = {"tea": _make_tea}

    def make_drink(self, name: str) -> HotDrink:
        """Return a prepared drink of the named kind."""
        try:
            factory = self._factories[name]
        except KeyError:
            raise KeyError(f"no factory for drink {name!r}") from None
        return factory()