from collections.abc import Iterable
from typing import Self

from .models import Pizza


class PizzaBuilder:
    """Fluent accumulator for pizza customizations.

    ``build()`` returns a snapshot: toppings added afterwards never reach an
    already-built pizza. The builder does not validate; use one builder per
    pizza.
    """

    def __init__(self) -> None:
        self._crust = ""
        self._sauce = ""
        self._toppings: list[str] = []
        self._cheese = ""
        self._seasonal_special = False

    def crust(self, crust: str) -> Self:
        self._crust = crust
        return self

    def sauce(self, sauce: str) -> Self:
        self._sauce = sauce
        return self

    def add_topping(self, topping: str) -> Self:
        self._toppings.append(topping)
        return self

    def add_toppings(self, toppings: Iterable[str]) -> Self:
        for topping in toppings:
            self.add_topping(topping)
        return self

    def cheese(self, cheese: str) -> Self:
        self._cheese = cheese
        return self

    def seasonal_special(self, special: bool = True) -> Self:
        self._seasonal_special = special
        return self

    def build(self) -> Pizza:
        return Pizza(
            crust=self._crust,
            sauce=self._sauce,
            toppings=tuple(self._toppings),
            cheese=self._cheese,
            seasonal_special=self._seasonal_special,
        )
