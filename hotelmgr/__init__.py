"""Hotel front-desk management on SQLite: rooms, reservations, check-in and check-out."""

__version__ = "0.1.0"