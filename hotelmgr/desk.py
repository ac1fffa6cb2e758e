"""Front-desk operations: input validation around check-in, check-out and extras."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from . import reservations
from .database import Database, HotelError
from .reservations import Reservation
from .rooms import find_room, is_room_occupied

DEFAULT_ROOM_NUMBERS: Tuple[int, ...] = (101, 102, 103, 104, 201, 202, 203)

OCCUPIED_COLOUR = "#FF5733"
FREE_COLOUR = "#28a745"
UNAVAILABLE_COLOUR = "#d3d3d3"

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


class ValidationError(HotelError):
    """Raised when user input at the desk is missing or malformed."""


class OperationMode(Enum):
    """What the room picker is being used for."""

    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"


@dataclass(frozen=True)
class RoomState:
    """How a room is presented in the room picker."""

    room_no: int
    occupied: bool
    selectable: bool
    colour: str


def _parse_reservation_id(text: str, empty_message: str) -> int:
    text = text.strip()
    if not text:
        raise ValidationError(empty_message)
    if not _INT_RE.fullmatch(text):
        raise ValidationError("Invalid Reservation ID format.")
    return int(text)


def _parse_amount(text: str) -> Optional[float]:
    text = text.strip()
    if not _FLOAT_RE.fullmatch(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


class FrontDesk:
    """The operations a receptionist performs, backed by a database."""

    def __init__(
        self, db: Database, room_numbers: Iterable[int] = DEFAULT_ROOM_NUMBERS
    ) -> None:
        self.db = db
        self.room_numbers = tuple(room_numbers)

    def room_states(self, mode: OperationMode) -> List[RoomState]:
        """Occupancy and availability of every room for the given operation."""
        states = []
        for room_no in self.room_numbers:
            occupied = is_room_occupied(self.db, room_no)
            if mode is OperationMode.CHECK_IN:
                selectable = not occupied
                colour = OCCUPIED_COLOUR if occupied else FREE_COLOUR
            else:
                selectable = occupied
                colour = OCCUPIED_COLOUR if occupied else UNAVAILABLE_COLOUR
            states.append(RoomState(room_no, occupied, selectable, colour))
        return states

    def check_in(self, room_no: int, customer_name: str) -> Reservation:
        """Check a named customer into a room and return the new reservation."""
        name = customer_name.strip()
        if not name:
            raise ValidationError("Customer name can not be empty!")
        return reservations.check_in(self.db, name, room_no)

    def fetch_guest(self, room_no: int, reservation_text: str) -> Reservation:
        """Look up a reservation and make sure it belongs to the given room."""
        reservation_id = _parse_reservation_id(
            reservation_text, "Please enter a Reservation ID."
        )
        guest = reservations.find_reservation(self.db, reservation_id)
        if guest.room_no != room_no:
            raise ValidationError("This guest is not assigned to the selected room.")
        return guest

    def calculate_total(
        self, room_no: int, reservation_text: str, days_text: str
    ) -> float:
        """Nightly rate times days stayed plus the reservation's extras."""
        days_text = days_text.strip()
        days = int(days_text) if _INT_RE.fullmatch(days_text) else 0
        if days <= 0:
            raise ValidationError("Please enter a valid number of days.")
        room = find_room(self.db, room_no)
        reservation_id = _parse_reservation_id(
            reservation_text, "Please enter a Reservation ID."
        )
        guest = reservations.find_reservation(self.db, reservation_id)
        extra = reservations.extra_expenses(self.db, guest.reservation_id)
        return room.daily_rate * days + extra

    def check_out(
        self, room_no: int, reservation_text: str, total_fee_text: str
    ) -> Reservation:
        """Close a reservation with its calculated total and free the room."""
        reservation_id = _parse_reservation_id(
            reservation_text, "Reservation Id can not be empty!"
        )
        guest = reservations.find_reservation(self.db, reservation_id)
        if guest.room_no != room_no:
            raise ValidationError("This guest is not assigned to the selected room.")
        extra = reservations.extra_expenses(self.db, reservation_id)
        total_text = total_fee_text.strip()
        if not total_text:
            raise ValidationError(
                "You can not continue without calculating total fee!"
            )
        total_fee = _parse_amount(total_text)
        if total_fee is None:
            raise ValidationError("Invalid total fee.")
        return reservations.check_out(self.db, guest, extra, total_fee)

    def fetch_reservation(self, reservation_text: str) -> Reservation:
        """Look up a reservation by the id typed at the desk."""
        reservation_id = _parse_reservation_id(
            reservation_text, "Please enter a Reservation ID."
        )
        return reservations.find_reservation(self.db, reservation_id)

    def add_extra(self, reservation_id: Optional[int], amount_text: str) -> None:
        """Book an extra, non-negative amount on a fetched reservation."""
        if not reservation_id:
            raise ValidationError("Please fetch a valid reservation first.")
        text = amount_text.strip()
        if not text:
            raise ValidationError("Please enter an extra amount.")
        amount = _parse_amount(text)
        if amount is None or amount < 0:
            raise ValidationError("Invalid extra amount.")
        reservations.add_extra_expenses(self.db, reservation_id, amount)

    def guest_list(self) -> List[Reservation]:
        """Guests currently staying in the hotel."""
        return reservations.current_guests(self.db)