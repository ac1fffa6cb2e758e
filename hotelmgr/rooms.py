"""Hotel rooms: storage, lookup and occupancy."""

from __future__ import annotations

from dataclasses import dataclass

from .database import Database, HotelError


class RoomNotFoundError(HotelError):
    """Raised when a room number does not exist."""

    def __init__(self, room_no: int) -> None:
        super().__init__(f"room {room_no} not found")
        self.room_no = room_no


@dataclass
class Room:
    """A room with its number, nightly rate and occupancy."""

    number: int
    daily_rate: float
    occupied: bool = False


def create_room_table(db: Database) -> None:
    """Create the rooms table unless it already exists."""
    with db.transaction() as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS rooms (
                roomNumber INTEGER PRIMARY KEY,
                isOccupied INTEGER NOT NULL,
                dailyRate REAL NOT NULL
            )
            """
        )


def add_room(db: Database, room: Room) -> None:
    """Store a new room; raises HotelError if the number is taken."""
    with db.transaction() as conn:
        conn.execute(
            "INSERT INTO rooms (roomNumber, isOccupied, dailyRate) VALUES (?, ?, ?)",
            (room.number, int(room.occupied), float(room.daily_rate)),
        )


def find_room(db: Database, room_no: int) -> Room:
    """Return the room with the given number."""
    with db.transaction() as conn:
        row = conn.execute(
            "SELECT roomNumber, isOccupied, dailyRate FROM rooms WHERE roomNumber = ?",
            (room_no,),
        ).fetchone()
    if row is None:
        raise RoomNotFoundError(room_no)
    number, occupied, rate = row
    return Room(number=int(number), daily_rate=float(rate), occupied=bool(occupied))


def toggle_occupancy(db: Database, room_no: int) -> bool:
    """Flip a room between free and occupied and return the new state."""
    with db.transaction() as conn:
        room = find_room(db, room_no)
        new_status = not room.occupied
        conn.execute(
            "UPDATE rooms SET isOccupied = ? WHERE roomNumber = ?",
            (int(new_status), room.number),
        )
    return new_status


def is_room_occupied(db: Database, room_no: int) -> bool:
    """Whether the room is occupied; an unknown room counts as free."""
    with db.transaction() as conn:
        row = conn.execute(
            "SELECT isOccupied FROM rooms WHERE roomNumber = ?", (room_no,)
        ).fetchone()
    return bool(row[0]) if row is not None else False