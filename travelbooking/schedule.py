"""Departures of vehicles on routes."""

from __future__ import annotations

from dataclasses import dataclass

_KEYS = {
    "VehicleID=": "vehicle_id",
    "Route=": "route",
    "DepartureTime=": "departure_time",
    "Date=": "date",
}


@dataclass(frozen=True)
class Schedule:
    """A vehicle departing on a route at a given time and date."""

    vehicle_id: str = ""
    route: str = ""
    departure_time: str = ""
    date: str = ""

    def describe(self) -> str:
        """Return the one-line human-readable summary of the schedule."""
        return (
            f"Vehicle ID: {self.vehicle_id}, Route: {self.route}, "
            f"Departure: {self.departure_time}, Date: {self.date}"
        )

    def to_line(self) -> str:
        """Return the schedule as a line of the data file."""
        return (
            f"VehicleID={self.vehicle_id} Route={self.route} "
            f"DepartureTime={self.departure_time} Date={self.date}"
        )

    @classmethod
    def from_line(cls, line: str) -> Schedule:
        """Parse whitespace-separated KEY=value tokens; the vehicle id is required."""
        values = dict.fromkeys(_KEYS.values(), "")
        for token in line.split():
            for prefix, name in _KEYS.items():
                if token.startswith(prefix):
                    values[name] = token[len(prefix):]
                    break
        if not values["vehicle_id"]:
            raise ValueError(f"schedule line has no vehicle id: {line!r}")
        return cls(**values)