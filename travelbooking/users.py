"""Admin and passenger operations on the travel data."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, replace

from travelbooking.booking import Booking
from travelbooking.storage import TravelData, save_data

_RULE_WIDTH = 62

_ADMIN_MENU_ITEMS = (
    "Add Vehicle",
    "View Vehicles",
    "Delete Vehicle",
    "Add Schedule",
    "View Schedules",
    "View All Bookings",
    "Modify Booking",
    "View Vehicle Availability",
    "Exit",
)

_PASSENGER_MENU_ITEMS = (
    "Book Ride",
    "View My Bookings",
    "Cancel Booking",
    "View All Bookings",
    "Exit",
)


def find_booking(bookings: Sequence[Booking], booking_id: str) -> int | None:
    """Return the position of the booking with ``booking_id``, or None."""
    return next(
        (index for index, booking in enumerate(bookings) if booking.booking_id == booking_id),
        None,
    )


def _render_menu(title: str, items: Sequence[str]) -> str:
    entries = (f"{number}. {item}" for number, item in enumerate(items, 1))
    return "\n".join(["", f"--- {title} Menu ---", *entries])


@dataclass
class _User:
    """Someone using the system."""

    username: str


@dataclass
class Admin(_User):
    """An administrator managing vehicles, schedules and bookings."""

    def menu_text(self) -> str:
        """Return the admin menu."""
        return _render_menu("Admin", _ADMIN_MENU_ITEMS)

    def bookings_report(self, bookings: Sequence[Booking]) -> str:
        """Return a table heading followed by every booking."""
        if not bookings:
            return "No bookings available."
        header = (
            f"{'Booking ID':<10}{'Passenger':<20}{'Vehicle ID':<12}"
            f"{'Date':<12}{'Seats':<8}"
        )
        return "\n".join(
            [
                "",
                "--- All Bookings ---",
                header,
                "-" * _RULE_WIDTH,
                *(booking.describe() for booking in bookings),
            ]
        )

    def modify_booking(
        self,
        data: TravelData,
        booking_id: str,
        seats: int,
        date: str,
        path: str | os.PathLike[str],
    ) -> Booking:
        """Change the seats and date of a booking, then save all data to ``path``."""
        if not data.bookings:
            raise LookupError("No bookings available to modify.")
        index = find_booking(data.bookings, booking_id)
        if index is None:
            raise LookupError("Booking ID not found.")
        if seats <= 0:
            raise ValueError("Seats must be a positive number.")
        updated = replace(data.bookings[index], seats=seats, date=date)
        data.bookings[index] = updated
        save_data(data, path)
        return updated

    def availability(self, data: TravelData, vehicle_id: str, date: str) -> str:
        """Return how many seats of a vehicle are still free on a date."""
        if not data.vehicles or not data.schedules:
            raise LookupError("No vehicles or schedules available.")
        capacity = next(
            (v.capacity for v in data.vehicles if v.vehicle_id == vehicle_id), 0
        )
        if capacity == 0:
            raise LookupError("Vehicle ID not found.")
        booked = sum(
            b.seats for b in data.bookings if b.vehicle_id == vehicle_id and b.date == date
        )
        return (
            f"Vehicle {vehicle_id} on {date}: {capacity - booked} seats available "
            f"(Total: {capacity}, Booked: {booked})"
        )


@dataclass
class Passenger(_User):
    """A traveller booking and cancelling rides."""

    def menu_text(self) -> str:
        """Return the passenger menu."""
        return _render_menu("Passenger", _PASSENGER_MENU_ITEMS)

    def my_bookings_report(self, bookings: Sequence[Booking], name: str) -> str:
        """Return the bookings made under ``name``."""
        mine = [booking.describe() for booking in bookings if booking.passenger_name == name]
        if not mine:
            mine = [f"No bookings found for {name}."]
        return "\n".join(["", "--- Your Bookings ---", *mine])

    def cancel_booking(
        self,
        data: TravelData,
        name: str,
        booking_id: str,
        path: str | os.PathLike[str],
    ) -> Booking:
        """Remove one of ``name``'s bookings and write the bookings to ``path``.

        Only the bookings are written; vehicles and schedules are left out of
        the file until the next full save.
        """
        if not data.bookings:
            raise LookupError("No bookings available.")
        index = next(
            (
                position
                for position, booking in enumerate(data.bookings)
                if booking.booking_id == booking_id and booking.passenger_name == name
            ),
            None,
        )
        if index is None:
            raise LookupError("Booking ID not found or not yours.")
        removed = data.bookings.pop(index)
        save_data(TravelData(bookings=list(data.bookings)), path)
        return removed