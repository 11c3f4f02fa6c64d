"""Composite: pizza toppings and named groups of toppings priced alike."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator


def _money(value: float) -> str:
    return f"{value:g}"


class PizzaComponent(ABC):
    """A topping or a group of toppings, with a name and a price."""

    def __init__(self, name: str, price: float = 0.0) -> None:
        self.name = name
        self._price = price

    @abstractmethod
    def price(self) -> float:
        """Return the price in dollars."""

    @abstractmethod
    def display(self) -> None:
        """Print this component's menu entry."""

    def add(self, component: PizzaComponent) -> None:
        """Add a child; single toppings only say they cannot."""
        print("Cannot add to individual topping")

    def remove(self, component: PizzaComponent) -> None:
        """Remove a child; single toppings only say they cannot."""
        print("Cannot remove from individual topping")


class Topping(PizzaComponent):
    """A single topping."""

    def price(self) -> float:
        return self._price

    def display(self) -> None:
        print(f"  {self.name}: ${_money(self._price)}")


class ToppingGroup(PizzaComponent):
    """A named combination of toppings, priced at their total."""

    def __init__(self, name: str) -> None:
        super().__init__(name, 0.0)
        self.toppings: list[PizzaComponent] = []

    def __len__(self) -> int:
        return len(self.toppings)

    def __iter__(self) -> Iterator[PizzaComponent]:
        return iter(self.toppings)

    def add(self, component: PizzaComponent) -> None:
        self.toppings.append(component)

    def remove(self, component: PizzaComponent) -> None:
        """Remove this very component, if it is in the group."""
        for position, topping in enumerate(self.toppings):
            if topping is component:
                del self.toppings[position]
                return

    def price(self) -> float:
        return sum((topping.price() for topping in self.toppings), 0.0)

    def display(self) -> None:
        print(f"{self.name} (Total: ${_money(self.price())})")
        for topping in self.toppings:
            topping.display()


def main(argv=None) -> int:
    """Print the pizza menu with single toppings and combinations."""
    print("=== Romeo's Pizza Menu ===\n")

    pepperoni = Topping("Pepperoni", 2.50)
    cheese = Topping("Extra Cheese", 1.75)

    vegetarian = ToppingGroup("Vegetarian Special")
    vegetarian.add(Topping("Mushrooms", 1.50))
    vegetarian.add(Topping("Green Peppers", 1.25))
    vegetarian.add(Topping("Onions", 1.00))

    meat_lovers = ToppingGroup("Meat Lovers Special")
    meat_lovers.add(pepperoni)
    meat_lovers.add(Topping("Beef Sausage", 3.00))
    meat_lovers.add(Topping("Salami", 2.75))

    deluxe = ToppingGroup("Vegetarian Deluxe")
    deluxe.add(Topping("Mushrooms", 1.50))
    deluxe.add(Topping("Green Peppers", 1.25))
    deluxe.add(Topping("Onions", 1.00))
    deluxe.add(Topping("Feta Cheese", 2.25))
    deluxe.add(Topping("Olives", 1.50))

    print("Individual Toppings:")
    pepperoni.display()
    cheese.display()
    print()

    print("Topping Combinations:")
    for group in (vegetarian, meat_lovers, deluxe):
        group.display()
        print()

    print("Price Comparison:")
    print(f"Single Pepperoni: ${_money(pepperoni.price())}")
    print(f"Vegetarian Special: ${_money(vegetarian.price())}")
    print(f"Meat Lovers Special: ${_money(meat_lovers.price())}")
    print(f"Vegetarian Deluxe: ${_money(deluxe.price())}")
    return 0


if __name__ == "__main__":
    sys.exit(main())