"""Console travel booking: vehicles, schedules and seat bookings kept in a text file."""

__version__ = "1.0.0"