"""Saving and loading the travel data file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum, auto

from travelbooking.booking import Booking
from travelbooking.schedule import Schedule
from travelbooking.vehicles import Vehicle, vehicle_from_line

DEFAULT_LIMIT = 100


class _Section(Enum):
    VEHICLES = auto()
    BOOKINGS = auto()
    SCHEDULES = auto()


_HEADERS = {
    "[VEHICLES]": _Section.VEHICLES,
    "[BOOKINGS]": _Section.BOOKINGS,
    "[SCHEDULES]": _Section.SCHEDULES,
}


@dataclass
class TravelData:
    """Everything the booking system keeps: vehicles, bookings and schedules."""

    vehicles: list[Vehicle] = field(default_factory=list)
    bookings: list[Booking] = field(default_factory=list)
    schedules: list[Schedule] = field(default_factory=list)


def save_data(data: TravelData, path: str | os.PathLike[str]) -> None:
    """Write all data to ``path``, replacing its contents."""
    lines = [
        "[VEHICLES]",
        *(vehicle.to_line() for vehicle in data.vehicles),
        "[BOOKINGS]",
        *(booking.to_line() for booking in data.bookings),
        "[SCHEDULES]",
        *(schedule.to_line() for schedule in data.schedules),
    ]
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def load_data(
    path: str | os.PathLike[str],
    max_vehicles: int = DEFAULT_LIMIT,
    max_bookings: int = DEFAULT_LIMIT,
    max_schedules: int = DEFAULT_LIMIT,
) -> TravelData:
    """Read data from ``path``.

    Malformed lines and vehicles whose id was already seen are skipped, and
    each list stops growing at its maximum. Raises OSError if the file
    cannot be opened.
    """
    data = TravelData()
    section: _Section | None = None
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.removesuffix("\n")
            if not line:
                continue
            if line in _HEADERS:
                section = _HEADERS[line]
                continue
            try:
                if section is _Section.VEHICLES and len(data.vehicles) < max_vehicles:
                    vehicle = vehicle_from_line(line)
                    if all(v.vehicle_id != vehicle.vehicle_id for v in data.vehicles):
                        data.vehicles.append(vehicle)
                elif section is _Section.BOOKINGS and len(data.bookings) < max_bookings:
                    data.bookings.append(Booking.from_line(line))
                elif section is _Section.SCHEDULES and len(data.schedules) < max_schedules:
                    data.schedules.append(Schedule.from_line(line))
            except ValueError:
                continue
    return data