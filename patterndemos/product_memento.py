"""Memento: backing up and restoring a product's details."""

from __future__ import annotations

from dataclasses import dataclass, field


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class State:
    """Which of a product's fields have been changed."""

    name_changed: bool = False
    description_changed: bool = False
    cost_changed: bool = False

    def set_name_changed(self) -> None:
        self.name_changed = True

    def set_description_changed(self) -> None:
        self.description_changed = True

    def set_cost_changed(self) -> None:
        self.cost_changed = True

    def describe(self) -> str:
        """Return the change report as text."""
        changed = [
            label
            for label, flag in (
                ("name", self.name_changed),
                ("description", self.description_changed),
                ("cost", self.cost_changed),
            )
            if flag
        ]
        if not changed:
            return "Nothing has changed"
        return "The following has changed: " + "".join(f"{c} " for c in changed)

    def show_state(self) -> str:
        """Print the change report and return it."""
        report = self.describe()
        print(report)
        return report


@dataclass(frozen=True)
class ProductBackup:
    """A saved copy of a product's fields, sharing its change state."""

    name: str
    description: str
    cost: float
    state: State


@dataclass
class ProductStateMemory:
    """The caretaker: holds one backup."""

    memento: ProductBackup | None = None


@dataclass
class Product:
    """The originator: a product whose description and cost changes are tracked."""

    name: str
    _description: str
    _cost: float
    state: State = field(default_factory=State)

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = value
        self.state.set_description_changed()

    @property
    def cost(self) -> float:
        return self._cost

    @cost.setter
    def cost(self, value: float) -> None:
        self._cost = value
        self.state.set_cost_changed()

    def display(self) -> None:
        print(f"\n{self.name}: {self._description}  R{_fmt(self._cost)}")
        self.state.show_state()

    def make_backup(self) -> ProductBackup:
        return ProductBackup(self.name, self._description, self._cost, self.state)

    def restore(self, backup: ProductBackup) -> None:
        self.name = backup.name
        self._description = backup.description
        self._cost = backup.cost
        self.state = backup.state