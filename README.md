# travelbooking

A menu-driven console program for running a small travel service. Admins
register buses, trains and vans, set up schedules and manage bookings.
Passengers book seats on scheduled trips and cancel their own bookings.

## Installation

```
pip install .
```

## Running

```
travelbooking
```

The program reads its data from `travel_data.txt` in the current directory.
You can name another file instead:

```
travelbooking path/to/data.txt
```

If the file cannot be opened, a warning is printed and the program starts
with no data. The data is written back to the file when you choose 0 at the
main menu, or when input ends.

The main menu offers:

1. **Admin**: add and list vehicles, delete a vehicle (which also removes
   its schedules and bookings), add and list schedules, view and modify
   bookings, and check how many seats a vehicle has left on a date.
   Modifying a booking saves the whole data file straight away.
2. **Passenger**: book a ride on a listed schedule, view your bookings,
   cancel one of your bookings, or list every booking. Cancelling a booking
   writes the file straight away, but with the bookings only; vehicles and
   schedules are written again at the next full save on exit.

0 exits and saves.

## Data file

The data file is plain text with three sections:

```
[VEHICLES]
Type=Bus ID=BUS-01 Capacity=40 Route=North
Type=Train ID=TRN-01 Capacity=300 Compartments=10
Type=Van ID=VAN-01 Capacity=8 AC=Yes
[BOOKINGS]
B1,"Jane Doe",BUS-01,2024-05-01,2
[SCHEDULES]
VehicleID=BUS-01 Route=North DepartureTime=08:00 Date=2024-05-01
```

When the file is loaded:

- empty lines and lines that cannot be parsed are skipped;
- a vehicle whose ID was already read is ignored;
- at most 100 vehicles, 100 bookings and 100 schedules are kept;
- vehicle and schedule lines are read as whitespace-separated `KEY=value`
  tokens, so a route, time or date containing spaces keeps only its first
  word;
- a train's `Compartments=` value is written but not read back, so loaded
  trains have 0 compartments.

## Using the library

The pieces of the program can be used directly:

```python
from travelbooking.storage import load_data, save_data
from travelbooking.users import Admin

data = load_data("travel_data.txt", 100, 100, 100)
print(Admin("AdminUser").availability(data, "BUS-01", "2024-05-01"))
save_data(data, "travel_data.txt")
```

- `travelbooking.storage`: `TravelData` (lists of vehicles, bookings and
  schedules), `save_data(data, path)` and `load_data(path, max_vehicles,
  max_bookings, max_schedules)`; `load_data` raises `OSError` if the file
  cannot be opened.
- `travelbooking.booking.Booking` and `travelbooking.schedule.Schedule`:
  `describe()` gives a one-line summary, `to_line()` a data-file line, and
  `from_line()` parses one, raising `ValueError` if it is malformed.
- `travelbooking.vehicles`: `Bus`, `Train` and `Van` with `describe()` and
  `to_line()`, `vehicle_from_line()` to parse a vehicle line, and
  `parse_key_value()` for the `KEY=value` tokens.
- `travelbooking.users`: `Admin` (`menu_text`, `bookings_report`,
  `modify_booking`, `availability`), `Passenger` (`menu_text`,
  `my_bookings_report`, `cancel_booking`) and `find_booking`. Missing
  bookings or vehicles raise `LookupError`.
- `travelbooking.cli`: `vehicle_exists`, `delete_vehicle` and `main`.

## Limitations

- Booking a ride does not check the vehicle's capacity; the availability
  report can show a negative number of free seats.
- Data lives in one plain text file with no locking; running two copies on
  the same file lets the last one to save win.
- There are no user accounts or passwords: anyone can open the admin menu,
  and a passenger is identified only by the name typed in.

## Tests

```
pip install ".[test]"
pytest
```