"""Interactive menu for administrators and passengers."""

from __future__ import annotations

import argparse
import os
from collections.abc import Callable, Iterable

from travelbooking.booking import Booking
from travelbooking.schedule import Schedule
from travelbooking.storage import TravelData, load_data, save_data
from travelbooking.users import Admin, Passenger, find_booking
from travelbooking.vehicles import Bus, Train, Van, Vehicle

DATA_FILE = "travel_data.txt"
MAX_VEHICLES = 100
MAX_BOOKINGS = 100
MAX_SCHEDULES = 100

_MAIN_MENU = "\n--- Main Menu ---\n1. Admin\n2. Passenger\n0. Exit\nEnter choice: "


def vehicle_exists(vehicles: Iterable[Vehicle], vehicle_id: str) -> bool:
    """Tell whether a vehicle with ``vehicle_id`` is among ``vehicles``."""
    return any(vehicle.vehicle_id == vehicle_id for vehicle in vehicles)


def delete_vehicle(data: TravelData, vehicle_id: str) -> Vehicle:
    """Remove a vehicle together with its schedules and bookings."""
    index = next(
        (i for i, vehicle in enumerate(data.vehicles) if vehicle.vehicle_id == vehicle_id),
        None,
    )
    if index is None:
        raise LookupError("Vehicle ID not found.")
    data.schedules[:] = [s for s in data.schedules if s.vehicle_id != vehicle_id]
    data.bookings[:] = [b for b in data.bookings if b.vehicle_id != vehicle_id]
    return data.vehicles.pop(index)


def _ask_int(prompt: str, retry: str, valid: Callable[[int], bool]) -> int:
    answer = input(prompt)
    while True:
        try:
            value = int(answer.strip())
        except ValueError:
            pass
        else:
            if valid(value):
                return value
        answer = input(retry)


def _ask_token(prompt: str) -> str:
    answer = input(prompt)
    while not answer.split():
        answer = input()
    return answer.split()[0]


def _save(data: TravelData, path: str | os.PathLike[str]) -> None:
    try:
        save_data(data, path)
    except OSError:
        print(f"Error: Could not open file {path} for writing.")


def _input_vehicle(kind: int) -> Vehicle:
    vehicle_id = _ask_token("Enter Vehicle ID: ")
    capacity = _ask_int(
        "Enter Capacity: ", "Invalid capacity. Enter a positive number: ", lambda n: n > 0
    )
    if kind == 1:
        return Bus(vehicle_id, capacity, input("Enter Route: "))
    if kind == 2:
        compartments = _ask_int("Enter Compartments: ", "Enter Compartments: ", lambda n: True)
        return Train(vehicle_id, capacity, compartments)
    return Van(vehicle_id, capacity, _ask_token("Is it AC (y/n)? ")[0] in "yY")


def _print_vehicle_ids(data: TravelData) -> None:
    print("Available Vehicle IDs: " + ", ".join(v.vehicle_id for v in data.vehicles))


def _add_vehicle(admin: Admin, data: TravelData, path: str) -> None:
    if len(data.vehicles) >= MAX_VEHICLES:
        print("Cannot add more vehicles. Maximum limit reached.")
        return
    kind = _ask_int(
        "\nEnter Vehicle Type (1=Bus, 2=Train, 3=Van): ",
        "Invalid type. Enter 1, 2, or 3: ",
        lambda n: 1 <= n <= 3,
    )
    vehicle = _input_vehicle(kind)
    if vehicle_exists(data.vehicles, vehicle.vehicle_id):
        print(f"Error: Vehicle ID '{vehicle.vehicle_id}' already exists.")
        return
    data.vehicles.append(vehicle)
    print("Vehicle added successfully!")


def _view_vehicles(admin: Admin, data: TravelData, path: str) -> None:
    for vehicle in data.vehicles:
        print(vehicle.describe())


def _delete_vehicle(admin: Admin, data: TravelData, path: str) -> None:
    _print_vehicle_ids(data)
    vehicle_id = input("Enter Vehicle ID to delete: ")
    if not vehicle_exists(data.vehicles, vehicle_id):
        print("Error: Vehicle ID not found.")
        return
    confirm = _ask_token(f"Are you sure you want to delete vehicle {vehicle_id}? (y/n): ")
    if confirm[0] not in "yY":
        print("Deletion cancelled.")
        return
    delete_vehicle(data, vehicle_id)
    print("Vehicle and associated schedules/bookings deleted successfully!")


def _add_schedule(admin: Admin, data: TravelData, path: str) -> None:
    if len(data.schedules) >= MAX_SCHEDULES:
        print("Cannot add more schedules. Maximum limit reached.")
        return
    _print_vehicle_ids(data)
    vehicle_id = input("Enter Vehicle ID: ")
    if not vehicle_exists(data.vehicles, vehicle_id):
        print("Error: Vehicle ID not found.")
        return
    route = input("Enter Route: ")
    departure_time = input("Enter Departure Time: ").strip()
    if not departure_time:
        print("Error: Departure time cannot be empty.")
        return
    date = input("Enter Date: ").strip()
    if not date:
        print("Error: Date cannot be empty.")
        return
    data.schedules.append(Schedule(vehicle_id, route, departure_time, date))
    print("Schedule added successfully!")


def _view_schedules(admin: Admin, data: TravelData, path: str) -> None:
    for schedule in data.schedules:
        print(schedule.describe())


def _view_bookings(admin: Admin, data: TravelData, path: str) -> None:
    print(admin.bookings_report(data.bookings))


def _modify_booking(admin: Admin, data: TravelData, path: str) -> None:
    if not data.bookings:
        print("No bookings available to modify.")
        return
    print(admin.bookings_report(data.bookings))
    booking_id = input("Enter Booking ID to modify: ")
    if find_booking(data.bookings, booking_id) is None:
        print("Error: Booking ID not found.")
        return
    seats = _ask_int(
        "Enter new Number of Seats: ",
        "Invalid seats. Enter a positive number: ",
        lambda n: n > 0,
    )
    date = input("Enter new Date: ")
    try:
        admin.modify_booking(data, booking_id, seats, date, path)
    except OSError:
        print(f"Error: Could not open file {path} for writing.")
    print("Booking modified successfully!")


def _availability(admin: Admin, data: TravelData, path: str) -> None:
    if not data.vehicles or not data.schedules:
        print("No vehicles or schedules available.")
        return
    vehicle_id = input("Enter Vehicle ID: ")
    date = input("Enter Date: ")
    try:
        print(admin.availability(data, vehicle_id, date))
    except LookupError as exc:
        print(f"Error: {exc}")


_ADMIN_ACTIONS: dict[int, Callable[[Admin, TravelData, str], None]] = {
    1: _add_vehicle,
    2: _view_vehicles,
    3: _delete_vehicle,
    4: _add_schedule,
    5: _view_schedules,
    6: _view_bookings,
    7: _modify_booking,
    8: _availability,
}


def _admin_session(data: TravelData, path: str) -> None:
    admin = Admin("AdminUser")
    while True:
        print(admin.menu_text())
        choice = _ask_int("", "Invalid choice. Enter 1-8: ", lambda n: 1 <= n <= 9)
        if choice == 9:
            return
        _ADMIN_ACTIONS[choice](admin, data, path)


def _book_ride(passenger: Passenger, data: TravelData, path: str) -> None:
    if len(data.bookings) >= MAX_BOOKINGS:
        print("Cannot add more bookings. Maximum limit reached.")
        return
    print("\nAvailable Schedules:")
    if not data.schedules:
        print("No schedules available.")
        return
    for number, schedule in enumerate(data.schedules, 1):
        print(f"{number}. {schedule.describe()}")
    count = len(data.schedules)
    number = _ask_int(
        "Select schedule number: ",
        f"Invalid schedule number. Enter 1-{count}: ",
        lambda n: 1 <= n <= count,
    )
    name = input("Enter Name: ")
    seats = _ask_int(
        "Enter Number of Seats: ",
        "Invalid seats. Enter a positive number: ",
        lambda n: n > 0,
    )
    schedule = data.schedules[number - 1]
    data.bookings.append(
        Booking(f"B{len(data.bookings) + 1}", name, schedule.vehicle_id, schedule.date, seats)
    )
    print("Booking Successful!")


def _my_bookings(passenger: Passenger, data: TravelData, path: str) -> None:
    name = input("Enter your name: ")
    print(passenger.my_bookings_report(data.bookings, name))


def _cancel_booking(passenger: Passenger, data: TravelData, path: str) -> None:
    name = input("Enter your name: ")
    if not data.bookings:
        print("No bookings available.")
        return
    print(passenger.my_bookings_report(data.bookings, name))
    booking_id = input("Enter Booking ID to cancel: ")
    try:
        passenger.cancel_booking(data, name, booking_id, path)
    except LookupError as exc:
        print(f"Error: {exc}")
        return
    except OSError:
        print(f"Error: Could not open file {path} for writing.")
    print("Booking cancelled successfully!")


def _all_bookings(passenger: Passenger, data: TravelData, path: str) -> None:
    for booking in data.bookings:
        print(booking.describe())


_PASSENGER_ACTIONS: dict[int, Callable[[Passenger, TravelData, str], None]] = {
    1: _book_ride,
    2: _my_bookings,
    3: _cancel_booking,
    4: _all_bookings,
}


def _passenger_session(data: TravelData, path: str) -> None:
    passenger = Passenger("PassengerUser")
    while True:
        print(passenger.menu_text())
        choice = _ask_int("", "Invalid choice. Enter 1-5: ", lambda n: 1 <= n <= 5)
        if choice == 5:
            return
        _PASSENGER_ACTIONS[choice](passenger, data, path)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive booking system on a data file."""
    parser = argparse.ArgumentParser(
        prog="travelbooking", description="Manage vehicles, schedules and bookings."
    )
    parser.add_argument("data_file", nargs="?", default=DATA_FILE)
    path = parser.parse_args(argv).data_file

    try:
        data = load_data(path, MAX_VEHICLES, MAX_BOOKINGS, MAX_SCHEDULES)
    except OSError:
        print(f"Warning: Could not open file {path} for reading.")
        data = TravelData()

    try:
        while True:
            choice = _ask_int(
                _MAIN_MENU, "Invalid choice. Enter 0, 1, or 2: ", lambda n: 0 <= n <= 2
            )
            if choice == 0:
                break
            if choice == 1:
                _admin_session(data, path)
            else:
                _passenger_session(data, path)
    except EOFError:
        print()

    _save(data, path)
    return 0