"""Buses, trains and vans, and their one-line text form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar

from travelbooking.booking import _leading_int


@dataclass(frozen=True)
class KeyValues:
    """Fields read from the KEY=value tokens of a vehicle line."""

    vehicle_id: str = ""
    capacity: int = 0
    route: str = ""
    ac: bool = False


def parse_key_value(text: str) -> KeyValues:
    """Read ID, Capacity, Route and AC tokens from whitespace-separated text.

    A ``Compartments=`` token is not recognised, so a train's compartment
    count is never read back.
    """
    vehicle_id = ""
    capacity = 0
    route = ""
    ac = False
    for token in text.split():
        if token.startswith("ID="):
            vehicle_id = token[3:]
        elif token.startswith("Capacity="):
            capacity = _leading_int(token[9:])
        elif token.startswith("Route="):
            route = token[6:]
        elif token.startswith("AC="):
            ac = token[3:] == "Yes"
    return KeyValues(vehicle_id, capacity, route, ac)


@dataclass(frozen=True)
class Vehicle:
    """A vehicle with an identifier and a seat capacity."""

    kind: ClassVar[str] = "Vehicle"

    vehicle_id: str = ""
    capacity: int = 0

    def describe(self) -> str:
        """Return the one-line human-readable summary of the vehicle."""
        return f"[{self.kind}] ID: {self.vehicle_id}, Capacity: {self.capacity}"

    def to_line(self) -> str:
        """Return the vehicle as a line of the data file."""
        return f"Type={self.kind} ID={self.vehicle_id} Capacity={self.capacity}"


@dataclass(frozen=True)
class Bus(Vehicle):
    """A bus serving a route."""

    kind: ClassVar[str] = "Bus"

    route: str = ""

    def describe(self) -> str:
        return f"{super().describe()}, Route: {self.route}"

    def to_line(self) -> str:
        return f"{super().to_line()} Route={self.route}"


@dataclass(frozen=True)
class Train(Vehicle):
    """A train made up of compartments."""

    kind: ClassVar[str] = "Train"

    compartments: int = 0

    def describe(self) -> str:
        return f"{super().describe()}, Compartments: {self.compartments}"

    def to_line(self) -> str:
        return f"{super().to_line()} Compartments={self.compartments}"


@dataclass(frozen=True)
class Van(Vehicle):
    """A van, with or without air conditioning."""

    kind: ClassVar[str] = "Van"

    ac: bool = False

    def describe(self) -> str:
        return f"{super().describe()}, AC: {'Yes' if self.ac else 'No'}"

    def to_line(self) -> str:
        return f"{super().to_line()} AC={'Yes' if self.ac else 'No'}"


_BUILDERS: dict[str, Callable[[KeyValues], Vehicle]] = {
    "Bus": lambda fields: Bus(fields.vehicle_id, fields.capacity, fields.route),
    "Train": lambda fields: Train(fields.vehicle_id, fields.capacity),
    "Van": lambda fields: Van(fields.vehicle_id, fields.capacity, fields.ac),
}


def vehicle_from_line(line: str) -> Vehicle:
    """Parse a data-file line into a vehicle; raise ValueError if it is malformed."""
    type_token, _, rest = line.partition(" ")
    if not type_token.startswith("Type="):
        raise ValueError(f"vehicle line has no type: {line!r}")
    builder = _BUILDERS.get(type_token[5:])
    if builder is None:
        raise ValueError(f"unknown vehicle type: {type_token[5:]!r}")
    fields = parse_key_value(rest)
    if not fields.vehicle_id:
        raise ValueError(f"vehicle line has no id: {line!r}")
    return builder(fields)