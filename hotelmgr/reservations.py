"""Reservations: check-in, check-out, extra expenses and guest lists."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List

from .database import Database, HotelError
from .rooms import toggle_occupancy


class ReservationNotFoundError(HotelError):
    """Raised when a reservation id does not exist."""

    def __init__(self, reservation_id: int) -> None:
        super().__init__(f"reservation {reservation_id} not found")
        self.reservation_id = reservation_id


@dataclass
class Reservation:
    """A guest's stay in one room."""

    customer_name: str
    room_no: int
    reservation_id: int = 0
    extra_expenses: float = 0.0
    total_fee: float = 0.0


def create_reservation_table(db: Database) -> None:
    """Create the reservation table unless it already exists."""
    with db.transaction() as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS hotel (
                reservationId INTEGER PRIMARY KEY AUTOINCREMENT,
                customerName TEXT NOT NULL,
                roomNo INTEGER NOT NULL,
                extraExpenses REAL NOT NULL,
                totalFee REAL NOT NULL
            )
            """
        )


def _row_to_reservation(row) -> Reservation:
    reservation_id, name, room_no, extra, total = row
    return Reservation(
        customer_name=name,
        room_no=int(room_no),
        reservation_id=int(reservation_id),
        extra_expenses=float(extra),
        total_fee=float(total),
    )


def check_in(db: Database, customer_name: str, room_no: int) -> Reservation:
    """Mark the room occupied and record a new reservation."""
    reservation = Reservation(customer_name=customer_name, room_no=room_no)
    with db.transaction() as conn:
        toggle_occupancy(db, room_no)
        cursor = conn.execute(
            "INSERT INTO hotel (customerName, roomNo, extraExpenses, totalFee) "
            "VALUES (?, ?, ?, ?)",
            (
                reservation.customer_name,
                reservation.room_no,
                reservation.extra_expenses,
                reservation.total_fee,
            ),
        )
        reservation.reservation_id = int(cursor.lastrowid)
    return reservation


def check_out(
    db: Database, reservation: Reservation, extra_expenses: float, total_fee: float
) -> Reservation:
    """Free the room and store the final charges of the reservation."""
    with db.transaction() as conn:
        toggle_occupancy(db, reservation.room_no)
        cursor = conn.execute(
            "UPDATE hotel SET extraExpenses = ?, totalFee = ? WHERE reservationId = ?",
            (float(extra_expenses), float(total_fee), reservation.reservation_id),
        )
        if cursor.rowcount == 0:
            raise ReservationNotFoundError(reservation.reservation_id)
    return replace(
        reservation, extra_expenses=float(extra_expenses), total_fee=float(total_fee)
    )


def extra_expenses(db: Database, reservation_id: int) -> float:
    """Extra expenses booked on a reservation; 0.0 if there is none."""
    with db.transaction() as conn:
        row = conn.execute(
            "SELECT extraExpenses FROM hotel WHERE reservationId = ?",
            (reservation_id,),
        ).fetchone()
    return float(row[0]) if row is not None else 0.0


def add_extra_expenses(db: Database, reservation_id: int, amount: float) -> None:
    """Add an amount to a reservation's extra expenses."""
    with db.transaction() as conn:
        cursor = conn.execute(
            "UPDATE hotel SET extraExpenses = extraExpenses + ? WHERE reservationId = ?",
            (float(amount), reservation_id),
        )
        if cursor.rowcount == 0:
            raise ReservationNotFoundError(reservation_id)


def find_reservation(db: Database, reservation_id: int) -> Reservation:
    """Return the reservation with the given id."""
    with db.transaction() as conn:
        row = conn.execute(
            "SELECT reservationId, customerName, roomNo, extraExpenses, totalFee "
            "FROM hotel WHERE reservationId = ?",
            (reservation_id,),
        ).fetchone()
    if row is None:
        raise ReservationNotFoundError(reservation_id)
    return _row_to_reservation(row)


def current_guests(db: Database) -> List[Reservation]:
    """Reservations not yet checked out, i.e. with no total fee."""
    with db.transaction() as conn:
        rows = conn.execute(
            "SELECT reservationId, customerName, roomNo, extraExpenses, totalFee "
            "FROM hotel WHERE totalFee = 0 ORDER BY reservationId"
        ).fetchall()
    return [_row_to_reservation(row) for row in rows]