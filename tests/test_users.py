import pytest

from travelbooking.booking import Booking
from travelbooking.schedule import Schedule
from travelbooking.storage import TravelData, load_data
from travelbooking.users import Admin, Passenger, find_booking
from travelbooking.vehicles import Bus, Van


def _data():
    return TravelData(
        vehicles=[Bus("V1", 10, "North"), Van("V2", 8, True)],
        bookings=[
            Booking("B1", "Ann", "V1", "2024-05-01", 3),
            Booking("B2", "Bob", "V1", "2024-05-01", 4),
            Booking("B3", "Ann", "V1", "2024-05-02", 2),
        ],
        schedules=[Schedule("V1", "North", "08:00", "2024-05-01")],
    )


def test_find_booking_returns_position():
    data = _data()
    assert find_booking(data.bookings, "B2") == 1
    assert find_booking(data.bookings, "B9") is None


def test_admin_menu_lists_exit_last():
    text = Admin("AdminUser").menu_text()
    assert "--- Admin Menu ---" in text
    assert text.endswith("9. Exit")


def test_passenger_menu_lists_exit_last():
    text = Passenger("PassengerUser").menu_text()
    assert "--- Passenger Menu ---" in text
    assert text.endswith("5. Exit")


def test_bookings_report_empty():
    assert Admin("a").bookings_report([]) == "No bookings available."


def test_bookings_report_lists_every_booking():
    data = _data()
    lines = Admin("a").bookings_report(data.bookings).splitlines()
    assert lines[1] == "--- All Bookings ---"
    assert lines[2].startswith("Booking ID")
    assert lines[3] == "-" * 62
    assert lines[4:] == [b.describe() for b in data.bookings]


def test_modify_booking_updates_and_saves(tmp_path):
    path = tmp_path / "data.txt"
    data = _data()
    updated = Admin("a").modify_booking(data, "B2", 6, "2024-06-01", path)
    assert updated == Booking("B2", "Bob", "V1", "2024-06-01", 6)
    assert data.bookings[1] == updated
    assert load_data(path) == data


def test_modify_booking_unknown_id(tmp_path):
    with pytest.raises(LookupError):
        Admin("a").modify_booking(_data(), "B9", 1, "d", tmp_path / "x.txt")


def test_modify_booking_rejects_non_positive_seats(tmp_path):
    with pytest.raises(ValueError):
        Admin("a").modify_booking(_data(), "B1", 0, "d", tmp_path / "x.txt")


def test_modify_booking_without_bookings(tmp_path):
    with pytest.raises(LookupError):
        Admin("a").modify_booking(TravelData(), "B1", 1, "d", tmp_path / "x.txt")


def test_availability_counts_seats_on_date():
    report = Admin("a").availability(_data(), "V1", "2024-05-01")
    assert report == "Vehicle V1 on 2024-05-01: 3 seats available (Total: 10, Booked: 7)"


def test_availability_with_no_bookings_is_full_capacity():
    report = Admin("a").availability(_data(), "V2", "2024-05-01")
    assert "(Total: 8, Booked: 0)" in report


def test_availability_unknown_vehicle():
    with pytest.raises(LookupError):
        Admin("a").availability(_data(), "V9", "2024-05-01")


def test_availability_needs_schedules():
    data = _data()
    data.schedules.clear()
    with pytest.raises(LookupError):
        Admin("a").availability(data, "V1", "2024-05-01")


def test_my_bookings_report_filters_by_name():
    data = _data()
    lines = Passenger("p").my_bookings_report(data.bookings, "Ann").splitlines()
    assert lines[1:] == ["--- Your Bookings ---", data.bookings[0].describe(), data.bookings[2].describe()]


def test_my_bookings_report_none_found():
    text = Passenger("p").my_bookings_report(_data().bookings, "Zed")
    assert text.splitlines()[-1] == "No bookings found for Zed."


def test_cancel_booking_removes_and_saves_bookings_only(tmp_path):
    path = tmp_path / "data.txt"
    data = _data()
    removed = Passenger("p").cancel_booking(data, "Ann", "B3", path)
    assert removed.booking_id == "B3"
    assert [b.booking_id for b in data.bookings] == ["B1", "B2"]
    saved = load_data(path)
    assert saved.bookings == data.bookings
    assert saved.vehicles == []
    assert saved.schedules == []


def test_cancel_booking_of_someone_else(tmp_path):
    data = _data()
    with pytest.raises(LookupError):
        Passenger("p").cancel_booking(data, "Ann", "B2", tmp_path / "x.txt")
    assert len(data.bookings) == 3


def test_cancel_booking_without_bookings(tmp_path):
    with pytest.raises(LookupError):
        Passenger("p").cancel_booking(TravelData(), "Ann", "B1", tmp_path / "x.txt")