"""Builder: computers assembled part by part by a technician."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass

_LABELS = (
    ("CPU", "cpu"),
    ("GPU", "gpu"),
    ("RAM", "ram"),
    ("Storage", "storage"),
    ("Motherboard", "motherboard"),
    ("Power Supply", "power_supply"),
    ("Case Type", "case_type"),
)


@dataclass
class Computer:
    """The product: a computer described by its parts."""

    cpu: str = ""
    gpu: str = ""
    ram: str = ""
    storage: str = ""
    motherboard: str = ""
    power_supply: str = ""
    case_type: str = ""

    def specification(self) -> str:
        """Return the specification sheet as text."""
        lines = ["=== Computer Specifications ==="]
        lines.extend(f"{label}: {getattr(self, attr)}" for label, attr in _LABELS)
        lines.append("================================")
        return "\n".join(lines)

    def display(self) -> str:
        """Print the specification sheet and return the printed text."""
        text = "\n" + self.specification() + "\n"
        print(text)
        return text


class ComputerBuilder(ABC):
    """Builds a computer one part at a time from a table of parts."""

    def __init__(self) -> None:
        self.computer = Computer()

    @property
    @abstractmethod
    def parts(self) -> Mapping[str, str]:
        """Part descriptions keyed by the computer field they fill."""

    def _install(self, field_name: str) -> None:
        setattr(self.computer, field_name, self.parts[field_name])

    def build_cpu(self) -> None:
        self._install("cpu")

    def build_gpu(self) -> None:
        self._install("gpu")

    def build_ram(self) -> None:
        self._install("ram")

    def build_storage(self) -> None:
        self._install("storage")

    def build_motherboard(self) -> None:
        self._install("motherboard")

    def build_power_supply(self) -> None:
        self._install("power_supply")

    def build_case(self) -> None:
        self._install("case_type")


class GamingPCBuilder(ComputerBuilder):
    """Builds a high-end gaming machine."""

    parts = {
        "cpu": "Intel Core i9-13900K (24 cores, 5.8GHz)",
        "gpu": "NVIDIA RTX 4090 24GB",
        "ram": "64GB DDR5 6000MHz",
        "storage": "2TB NVMe SSD + 4TB HDD",
        "motherboard": "ASUS ROG Maximus Z790",
        "power_supply": "1000W 80+ Platinum Modular",
        "case_type": "Lian Li O11 Dynamic RGB",
    }


class OfficePCBuilder(ComputerBuilder):
    """Builds a modest office workstation."""

    parts = {
        "cpu": "Intel Core i5-12400 (6 cores, 4.4GHz)",
        "gpu": "Integrated Intel UHD Graphics 730",
        "ram": "16GB DDR4 3200MHz",
        "storage": "512GB NVMe SSD",
        "motherboard": "MSI B660M Pro",
        "power_supply": "450W 80+ Bronze",
        "case_type": "Fractal Design Define Mini",
    }


class ServerBuilder(ComputerBuilder):
    """Builds a rack-mounted server."""

    parts = {
        "cpu": "AMD EPYC 7763 (64 cores, 3.5GHz)",
        "gpu": "None (Server grade)",
        "ram": "256GB ECC DDR4 3200MHz",
        "storage": "8x 4TB SSD in RAID 10",
        "motherboard": "Supermicro H12SSL-i",
        "power_supply": "Dual 1600W Redundant PSU",
        "case_type": "4U Rackmount Server Chassis",
    }


@dataclass
class TechnicianAssembler:
    """Director: runs the building steps in a fixed order."""

    builder: ComputerBuilder

    def construct_computer(self) -> Computer:
        """Build every part with the current builder and return its computer."""
        print("Starting computer assembly...")
        self.builder.build_motherboard()
        self.builder.build_cpu()
        self.builder.build_ram()
        self.builder.build_gpu()
        self.builder.build_storage()
        self.builder.build_power_supply()
        self.builder.build_case()
        print("Computer assembly complete!")
        return self.builder.computer


def main(argv=None) -> int:
    """Build a few computers and print their specifications."""
    print("=== Computer Builder Pattern Demo ===\n")

    print("Building a Gaming PC...")
    technician_gaming = TechnicianAssembler(GamingPCBuilder())
    technician_gaming.construct_computer().display()

    print("\nBuilding an Office PC...")
    TechnicianAssembler(OfficePCBuilder()).construct_computer().display()

    print("\nBuilding a Server...")
    TechnicianAssembler(ServerBuilder()).construct_computer().display()

    print("\n=== Demonstrating Director Reuse ===")
    print("Using same technician to build another Gaming PC...")
    technician_gaming.builder = GamingPCBuilder()
    technician_gaming.construct_computer().display()
    return 0


if __name__ == "__main__":
    sys.exit(main())