"""Decorator: coffee orders dressed up with milk and sugar."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Component(ABC):
    """A drink with a cost and a description."""

    @abstractmethod
    def operation(self) -> None:
        """Print the drink being prepared, without ending the line."""

    @abstractmethod
    def cost(self) -> float:
        """Return the price in dollars."""

    @abstractmethod
    def description(self) -> str:
        """Return what is in the drink."""


class ConcreteComponent(Component):
    """A plain black coffee."""

    def operation(self) -> None:
        print("Basic Black Coffee", end="")

    def cost(self) -> float:
        return 2.50

    def description(self) -> str:
        return "Basic Black Coffee"


class Decorator(Component):
    """Wraps a drink; with no drink inside it costs nothing and says nothing."""

    def __init__(self, component: Component | None) -> None:
        self.component = component

    def operation(self) -> None:
        if self.component is not None:
            self.component.operation()

    def cost(self) -> float:
        return self.component.cost() if self.component is not None else 0.0

    def description(self) -> str:
        return self.component.description() if self.component is not None else ""

    @abstractmethod
    def added_behaviour(self) -> str:
        """Print the extra flourish this decorator adds and return it."""


class ConcreteDecoratorA(Decorator):
    """Adds milk for $0.60."""

    def operation(self) -> None:
        super().operation()
        print(" + Milk", end="")
        self.added_behaviour()

    def cost(self) -> float:
        return super().cost() + 0.60

    def description(self) -> str:
        return super().description() + " + Milk"

    def added_behaviour(self) -> str:
        flourish = " (Steamed to perfection)"
        print(flourish, end="")
        return flourish


class ConcreteDecoratorB(Decorator):
    """Adds sugar for $0.25."""

    def operation(self) -> None:
        super().operation()
        print(" + Sugar", end="")
        self.added_behaviour()

    def cost(self) -> float:
        return super().cost() + 0.25

    def description(self) -> str:
        return super().description() + " + Sugar"

    def added_behaviour(self) -> str:
        flourish = " (Extra sweetness added)"
        print(flourish, end="")
        return flourish


def _serve(label: str, coffee: Component) -> None:
    print(f"{label}: ", end="")
    coffee.operation()
    print(f"\nCost: ${coffee.cost():.2f}\n")


def main(argv=None) -> int:
    """Prepare a series of coffee orders and print their costs."""
    print("=== Coffee Shop Decorator Pattern Demo ===\n")
    _serve("Order 1", ConcreteComponent())
    _serve("Order 2", ConcreteDecoratorA(ConcreteComponent()))
    _serve("Order 3", ConcreteDecoratorB(ConcreteComponent()))
    _serve("Order 4", ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent())))
    _serve(
        "Order 5 (Fancy)",
        ConcreteDecoratorA(ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent()))),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())