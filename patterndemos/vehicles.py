"""Factory method: factories that hand out cars, motorcycles and trucks."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Vehicle(ABC):
    """A vehicle that can start, stop and describe itself.

    Each action prints its message and returns the printed text.
    """

    def __init__(self) -> None:
        self.num_tires = 0

    @abstractmethod
    def start(self) -> str:
        """Start the engine."""

    @abstractmethod
    def stop(self) -> str:
        """Stop the engine."""

    @abstractmethod
    def display_info(self) -> str:
        """Print a short description."""


class Car(Vehicle):
    """A car of a given colour and brand."""

    def __init__(self, color: str, brand: str) -> None:
        super().__init__()
        self.color = color
        self.brand = brand
        print(f"Car constructor: Creating a {color} {brand}")

    def start(self) -> str:
        message = (
            f"Car: Turning key in {self.color} {self.brand}, "
            "engine purring to life..."
        )
        print(message)
        return message

    def stop(self) -> str:
        message = f"Car: {self.brand} engine stopping, pressing brake..."
        print(message)
        return message

    def display_info(self) -> str:
        message = (
            f"This is a {self.color} {self.brand} Car - 4 wheels, "
            "comfortable seating, good for families"
        )
        print(message)
        return message


class Motorcycle(Vehicle):
    """A two-wheeled motorcycle."""

    def start(self) -> str:
        message = "Motorcycle: Kick starting, engine roaring loudly!"
        print(message)
        return message

    def stop(self) -> str:
        message = "Motorcycle: Pulling brake lever, engine winding down..."
        print(message)
        return message

    def display_info(self) -> str:
        message = (
            "This is a Motorcycle - 2 wheels, fast and agile, great for solo "
            f"rides and has: {self.num_tires} number of tires "
        )
        print(message)
        return message


class Truck(Vehicle):
    """A heavy goods truck."""

    def start(self) -> str:
        message = "Truck: Diesel engine starting with a deep rumble..."
        print(message)
        return message

    def stop(self) -> str:
        message = "Truck: Air brakes hissing, heavy engine shutting down..."
        print(message)
        return message

    def display_info(self) -> str:
        message = (
            "This is a Truck - Large wheels, heavy duty, built for cargo transport"
        )
        print(message)
        return message

    def foo(self) -> str:
        """A truck-only operation."""
        message = "this is the foo"
        print(message)
        return message


class VehicleFactory(ABC):
    """Creates vehicles of one kind."""

    @abstractmethod
    def create_vehicle(self) -> Vehicle:
        """Return a new vehicle."""


class CarFactory(VehicleFactory):
    """Creates cars, by default in a configurable colour and brand."""

    def __init__(self, color: str = "Red", brand: str = "Toyota") -> None:
        self._default_color = color
        self._default_brand = brand
        print(f"CarFactory: Initialized with defaults - {color} {brand}")

    @property
    def default_color(self) -> str:
        return self._default_color

    @default_color.setter
    def default_color(self, color: str) -> None:
        self._default_color = color
        print(f"CarFactory: Default color changed to {color}")

    @property
    def default_brand(self) -> str:
        return self._default_brand

    @default_brand.setter
    def default_brand(self, brand: str) -> None:
        self._default_brand = brand
        print(f"CarFactory: Default brand changed to {brand}")

    def create_vehicle(self, color: str | None = None, brand: str | None = None) -> Car:
        """Create a car; colour and brand fall back to the factory defaults."""
        if color is None and brand is None:
            print("CarFactory: Creating car with default settings...")
            return Car(self._default_color, self._default_brand)
        print("CarFactory: Creating custom car...")
        return Car(
            self._default_color if color is None else color,
            self._default_brand if brand is None else brand,
        )


class MotorcycleFactory(VehicleFactory):
    """Creates motorcycles."""

    def create_vehicle(self) -> Motorcycle:
        print("MotorcycleFactory: Creating a new Motorcycle...")
        return Motorcycle()

    def create_motorcycle(self) -> Motorcycle:
        """Create a motorcycle without announcing it."""
        return Motorcycle()


class TruckFactory(VehicleFactory):
    """Creates trucks."""

    def create_vehicle(self) -> Truck:
        print("TruckFactory: Creating a new Truck...")
        return Truck()

    def create_truck(self) -> Truck:
        """Create a truck without announcing it."""
        return Truck()


def main(argv=None) -> int:
    """Create a motorcycle and a truck and put them through their paces."""
    motorcycle_factory = MotorcycleFactory()
    motorcycle = motorcycle_factory.create_vehicle()
    motorcycle.num_tires = 2
    motorcycle.display_info()

    bike = motorcycle_factory.create_motorcycle()
    bike.display_info()

    truck = TruckFactory().create_truck()
    truck.start()
    truck.foo()
    return 0


if __name__ == "__main__":
    sys.exit(main())