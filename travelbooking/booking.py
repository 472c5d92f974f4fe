"""Passenger bookings and their one-line text form."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def _take(text: str, delimiter: str) -> tuple[str, str]:
    """Split off the field before ``delimiter``; fail if nothing is left to read."""
    if not text:
        raise ValueError("unexpected end of booking line")
    head, _, tail = text.partition(delimiter)
    return head, tail


@dataclass(frozen=True)
class Booking:
    """A reservation of seats on a vehicle for one date."""

    booking_id: str = ""
    passenger_name: str = ""
    vehicle_id: str = ""
    date: str = ""
    seats: int = 0

    def describe(self) -> str:
        """Return the one-line human-readable summary of the booking."""
        return (
            f"Booking ID: {self.booking_id}, Passenger: {self.passenger_name}, "
            f"Vehicle ID: {self.vehicle_id}, Date: {self.date}, Seats: {self.seats}"
        )

    def to_line(self) -> str:
        """Return the booking as a line of the data file."""
        return (
            f'{self.booking_id},"{self.passenger_name}",'
            f"{self.vehicle_id},{self.date},{self.seats}"
        )

    @classmethod
    def from_line(cls, line: str) -> Booking:
        """Parse a data-file line; raise ValueError if it is malformed."""
        booking_id, rest = _take(line, ",")
        if not rest.startswith('"'):
            raise ValueError(f"passenger name must be quoted: {line!r}")
        passenger_name, rest = _take(rest[1:], '"')
        rest = rest[1:]  # the comma after the closing quote
        vehicle_id, rest = _take(rest, ",")
        date, rest = _take(rest, ",")
        if not rest:
            raise ValueError(f"missing seat count: {line!r}")
        return cls(booking_id, passenger_name, vehicle_id, date, _leading_int(rest))