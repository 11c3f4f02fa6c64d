"""Composite: a building made of floors, rooms and the parts inside them."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass


def _num(value: float) -> str:
    return f"{value:g}"


def _indent(level: int) -> str:
    return " " * (level * 2)


class BuildingComponent(ABC):
    """Anything that can be part of a building: it has a cost and a weight."""

    prefix = "- "

    @abstractmethod
    def cost(self) -> float:
        """Return the cost in dollars."""

    @abstractmethod
    def weight(self) -> float:
        """Return the weight in kilograms."""

    @abstractmethod
    def description(self) -> str:
        """Return a one-line description."""

    def structure_lines(self, indent_level: int = 0) -> list[str]:
        """Return the indented outline of this component and everything below it."""
        return [f"{_indent(indent_level)}{self.prefix}{self.description()}"]

    def show_structure(self, indent_level: int = 0) -> None:
        """Print the outline of this component."""
        for line in self.structure_lines(indent_level):
            print(line)

    def add_component(self, component: BuildingComponent) -> None:
        """Add a child; parts that hold nothing ignore this."""

    def remove_component(self, component: BuildingComponent) -> None:
        """Remove a child; parts that hold nothing ignore this."""


@dataclass(eq=False)
class Window(BuildingComponent):
    type: str
    price: float
    mass: float

    def cost(self) -> float:
        return self.price

    def weight(self) -> float:
        return self.mass

    def description(self) -> str:
        return f"{self.type} Window (${_num(self.price)}, {_num(self.mass)}kg)"


@dataclass(eq=False)
class Door(BuildingComponent):
    material: str
    price: float
    mass: float

    def cost(self) -> float:
        return self.price

    def weight(self) -> float:
        return self.mass

    def description(self) -> str:
        return f"{self.material} Door (${_num(self.price)}, {_num(self.mass)}kg)"


@dataclass(eq=False)
class Wall(BuildingComponent):
    """A wall priced and weighed by its area."""

    material: str
    length: float
    height: float
    cost_per_square_meter: float
    weight_per_square_meter: float

    @property
    def area(self) -> float:
        return self.length * self.height

    def cost(self) -> float:
        return self.area * self.cost_per_square_meter

    def weight(self) -> float:
        return self.area * self.weight_per_square_meter

    def description(self) -> str:
        return (
            f"{self.material} Wall {_num(self.length)}m x {_num(self.height)}m "
            f"(${_num(self.cost())}, {_num(self.weight())}kg)"
        )


@dataclass(eq=False)
class Furniture(BuildingComponent):
    type: str
    price: float
    mass: float

    def cost(self) -> float:
        return self.price

    def weight(self) -> float:
        return self.mass

    def description(self) -> str:
        return f"{self.type} (${_num(self.price)}, {_num(self.mass)}kg)"


class _Composite(BuildingComponent):
    """A component whose cost and weight are the totals of its children."""

    def __init__(self) -> None:
        self.children: list[BuildingComponent] = []

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def cost(self) -> float:
        return sum((child.cost() for child in self.children), 0.0)

    def weight(self) -> float:
        return sum((child.weight() for child in self.children), 0.0)

    def structure_lines(self, indent_level: int = 0) -> list[str]:
        lines = super().structure_lines(indent_level)
        for child in self.children:
            lines.extend(child.structure_lines(indent_level + 1))
        return lines

    def add_component(self, component: BuildingComponent) -> None:
        self.children.append(component)

    def remove_component(self, component: BuildingComponent) -> None:
        """Remove this very component, if it is a child."""
        for position, child in enumerate(self.children):
            if child is component:
                del self.children[position]
                return


class Room(_Composite):
    """A room holding walls, doors, windows and furniture."""

    prefix = "+ "

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name

    def description(self) -> str:
        return f"{self.name} (Cost: ${_num(self.cost())}, Weight: {_num(self.weight())}kg)"


class Floor(_Composite):
    """A numbered floor holding rooms."""

    prefix = "++ "

    def __init__(self, number: int) -> None:
        super().__init__()
        self.number = number

    def description(self) -> str:
        return (
            f"Floor {self.number} (Cost: ${_num(self.cost())}, "
            f"Weight: {_num(self.weight())}kg, Rooms: {len(self.children)})"
        )


class Building(_Composite):
    """A named building at an address, holding floors."""

    prefix = "+++ "

    def __init__(self, name: str, address: str) -> None:
        super().__init__()
        self.name = name
        self.address = address

    def description(self) -> str:
        return (
            f"{self.name} ({self.address}) - Total Cost: ${_num(self.cost())}, "
            f"Total Weight: {_num(self.weight())}kg, Floors: {len(self.children)}"
        )


def main(argv=None) -> int:
    """Build a small school and print its structure."""
    school = Building("high school", "123 street")
    first_floor = Floor(1)
    maths = Room("maths class")
    for _ in range(4):
        maths.add_component(Wall("dry wall", 20, 2, 10, 10))
    maths.add_component(Furniture("Chair", 100, 10))

    first_floor.add_component(maths)
    school.add_component(first_floor)
    school.show_structure()
    return 0


if __name__ == "__main__":
    sys.exit(main())