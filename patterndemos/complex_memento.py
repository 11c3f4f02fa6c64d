"""Memento: saving and restoring the state of a complex number."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class Memento:
    """A saved complex number state."""

    real: float = 0.0
    imaginary: float = 0.0


@dataclass
class ComplexNumber:
    """The originator: a mutable complex number."""

    real: float = 0.0
    imaginary: float = 0.0

    def add(self, other: ComplexNumber) -> None:
        """Add another complex number to this one in place."""
        self.real += other.real
        self.imaginary += other.imaginary

    def multiply(self, other: ComplexNumber) -> None:
        """Multiply in place; the imaginary part is taken from the updated real part."""
        self.real = self.real * other.real - self.imaginary * other.imaginary
        self.imaginary = self.real * other.imaginary + self.imaginary * other.real

    def create_memento(self) -> Memento:
        return Memento(self.real, self.imaginary)

    def reinstate_memento(self, memento: Memento) -> None:
        self.real = memento.real
        self.imaginary = memento.imaginary

    def __str__(self) -> str:
        return f"{_fmt(self.real)} + {_fmt(self.imaginary)}i"

    def display(self) -> None:
        print(self)


@dataclass
class Store:
    """The caretaker: keeps a single memento."""

    _memento: Memento = field(default_factory=Memento)

    def store_memento(self, memento: Memento) -> None:
        self._memento = memento

    def retrieve_memento(self) -> Memento:
        return self._memento


def main(argv=None) -> int:
    """Save one number, restore it into another and add them."""
    store = Store()
    one = ComplexNumber(1.0, 2.0)
    store.store_memento(one.create_memento())

    one = ComplexNumber(3.0, 4.0)
    two = ComplexNumber()
    two.reinstate_memento(store.retrieve_memento())

    one.display()
    two.display()

    one.add(two)

    one.display()
    two.display()
    return 0


if __name__ == "__main__":
    sys.exit(main())