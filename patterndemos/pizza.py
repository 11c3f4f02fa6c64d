"""Decorator: pizzas whose price and name grow with each extra."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


def _money(value: float) -> str:
    return f"{value:g}"


class Pizza(ABC):
    """A pizza with a price and a name."""

    @abstractmethod
    def price(self) -> float:
        """Return the price in dollars."""

    @abstractmethod
    def name(self) -> str:
        """Return the display name."""

    @abstractmethod
    def print_pizza(self) -> None:
        """Print the pizza's line on the menu."""


class BasePizza(Pizza):
    """A plain pizza with its toppings."""

    BASE_PRICE = 8.99

    def __init__(self, toppings: str) -> None:
        self.toppings = toppings

    def price(self) -> float:
        return self.BASE_PRICE

    def name(self) -> str:
        return f"{self.toppings} Pizza"

    def print_pizza(self) -> None:
        print(f"{self.name()} - ${_money(self.price())}")


class PizzaDecorator(Pizza):
    """Wraps a pizza, adding a surcharge and a name suffix."""

    surcharge = 0.0
    suffix = ""

    def __init__(self, pizza: Pizza) -> None:
        self.pizza = pizza

    def price(self) -> float:
        return self.pizza.price() + self.surcharge

    def name(self) -> str:
        return self.pizza.name() + self.suffix

    def print_pizza(self) -> None:
        """Print the wrapped pizza's line."""
        self.pizza.print_pizza()


class ExtraCheese(PizzaDecorator):
    """Extra cheese for $1.50."""

    surcharge = 1.50
    suffix = " with Extra Cheese"


class StuffedCrust(PizzaDecorator):
    """A stuffed crust for $2.25."""

    surcharge = 2.25
    suffix = " with Stuffed Crust"


def main(argv=None) -> int:
    """Print a few decorated pizzas and their prices."""
    print("=== Pizza Decorator Pattern Demo ===\n")

    print("1. Basic Pizza:")
    margherita = BasePizza("Margherita")
    margherita.print_pizza()
    print()

    print("2. Pizza with Extra Cheese:")
    cheesy_margherita = ExtraCheese(BasePizza("Margherita"))
    cheesy_margherita.print_pizza()
    print()

    print("3. Pizza with Stuffed Crust:")
    stuffed_pepperoni = StuffedCrust(BasePizza("Pepperoni"))
    stuffed_pepperoni.print_pizza()
    print()

    print("4. Pizza with Multiple Decorations:")
    deluxe = ExtraCheese(StuffedCrust(BasePizza("Supreme")))
    deluxe.print_pizza()
    print()

    print("5. Different Order of Decorations:")
    another_deluxe = StuffedCrust(ExtraCheese(BasePizza("Hawaiian")))
    another_deluxe.print_pizza()
    print()

    print("6. Extra Extra Extra cheese pizza:")
    triple_cheese = ExtraCheese(ExtraCheese(ExtraCheese(BasePizza("plain"))))
    triple_cheese.print_pizza()
    print()

    print("=== Demonstration of Dynamic Behavior ===")
    print(f"Base Margherita: ${_money(margherita.price())}")
    print(f"With Extra Cheese: ${_money(cheesy_margherita.price())}")
    print(f"With Stuffed Crust: ${_money(stuffed_pepperoni.price())}")
    print(f"With Both Decorations: ${_money(deluxe.price())}")
    print(f"pizza with extra extra extra cheese: ${_money(triple_cheese.price())}")
    return 0


if __name__ == "__main__":
    sys.exit(main())