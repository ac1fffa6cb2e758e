"""Command-line front end for the hotel front desk."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, Sequence

from .database import Database, HotelError
from .desk import FrontDesk, OperationMode
from .reservations import create_reservation_table
from .rooms import Room, add_room, create_room_table

DEFAULT_DATABASE = "hotel.db"

# Nightly rates of the rooms a fresh hotel starts with.
DEFAULT_ROOMS: Dict[int, float] = {
    101: 150.0,
    102: 180.0,
    103: 200.0,
    104: 220.0,
    201: 230.0,
    202: 230.0,
    203: 550.0,
}

_MODES = {mode.value: mode for mode in OperationMode}


def _format_amount(value: float) -> str:
    return f"{value:g}"


def _cmd_init(desk: FrontDesk, args: argparse.Namespace) -> None:
    if args.seed:
        with desk.db.transaction():
            for number, rate in DEFAULT_ROOMS.items():
                add_room(desk.db, Room(number=number, daily_rate=rate))
        print(f"Added {len(DEFAULT_ROOMS)} rooms.")
    print("Database is ready.")


def _cmd_add_room(desk: FrontDesk, args: argparse.Namespace) -> None:
    add_room(desk.db, Room(number=args.room_no, daily_rate=args.daily_rate))
    print(f"Room {args.room_no} added.")


def _cmd_rooms(desk: FrontDesk, args: argparse.Namespace) -> None:
    for state in desk.room_states(_MODES[args.mode]):
        status = "occupied" if state.occupied else "free"
        availability = "available" if state.selectable else "unavailable"
        print(f"{state.room_no}\t{status}\t{availability}")


def _cmd_check_in(desk: FrontDesk, args: argparse.Namespace) -> None:
    reservation = desk.check_in(args.room_no, args.customer_name)
    print(f"Reservation ID: {reservation.reservation_id}")


def _cmd_fetch(desk: FrontDesk, args: argparse.Namespace) -> None:
    guest = desk.fetch_guest(args.room_no, args.reservation)
    print(guest.customer_name)


def _cmd_total(desk: FrontDesk, args: argparse.Namespace) -> None:
    total = desk.calculate_total(args.room_no, args.reservation, args.days)
    print(_format_amount(total))


def _cmd_check_out(desk: FrontDesk, args: argparse.Namespace) -> None:
    desk.check_out(args.room_no, args.reservation, args.total_fee)
    print("See you again!")


def _cmd_extra(desk: FrontDesk, args: argparse.Namespace) -> None:
    guest = desk.fetch_reservation(args.reservation)
    print(f"Customer: {guest.customer_name} | Room No: {guest.room_no}")
    desk.add_extra(guest.reservation_id, args.amount)
    print("Extra expenses updated successfully!")


def _cmd_guests(desk: FrontDesk, args: argparse.Namespace) -> None:
    print("Customer Name\tRoom No\tReservation ID")
    for guest in desk.guest_list():
        print(f"{guest.customer_name}\t{guest.room_no}\t{guest.reservation_id}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per desk operation."""
    parser = argparse.ArgumentParser(
        prog="hotelmgr", description="Hotel front-desk management."
    )
    parser.add_argument(
        "--db", default=DEFAULT_DATABASE, help="path of the SQLite database file"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init", help="create the tables")
    init.add_argument(
        "--seed", action="store_true", help="add the hotel's standard rooms"
    )
    init.set_defaults(handler=_cmd_init)

    room = sub.add_parser("add-room", help="add a room")
    room.add_argument("room_no", type=int)
    room.add_argument("daily_rate", type=float)
    room.set_defaults(handler=_cmd_add_room)

    rooms = sub.add_parser("rooms", help="show the rooms for an operation")
    rooms.add_argument("--mode", choices=sorted(_MODES), default="check-in")
    rooms.set_defaults(handler=_cmd_rooms)

    check_in = sub.add_parser("check-in", help="check a customer into a room")
    check_in.add_argument("room_no", type=int)
    check_in.add_argument("customer_name")
    check_in.set_defaults(handler=_cmd_check_in)

    fetch = sub.add_parser("fetch", help="show the guest of a reservation")
    fetch.add_argument("room_no", type=int)
    fetch.add_argument("reservation")
    fetch.set_defaults(handler=_cmd_fetch)

    total = sub.add_parser("total", help="calculate the total fee of a stay")
    total.add_argument("room_no", type=int)
    total.add_argument("reservation")
    total.add_argument("days")
    total.set_defaults(handler=_cmd_total)

    check_out = sub.add_parser("check-out", help="check a guest out")
    check_out.add_argument("room_no", type=int)
    check_out.add_argument("reservation")
    check_out.add_argument("total_fee")
    check_out.set_defaults(handler=_cmd_check_out)

    extra = sub.add_parser("extra", help="add extra expenses to a reservation")
    extra.add_argument("reservation")
    extra.add_argument("amount")
    extra.set_defaults(handler=_cmd_extra)

    guests = sub.add_parser("guests", help="list the guests staying now")
    guests.set_defaults(handler=_cmd_guests)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one desk command and return the process exit status."""
    args = build_parser().parse_args(argv)
    handler: Callable[[FrontDesk, argparse.Namespace], None] = args.handler
    try:
        with Database(args.db) as db:
            create_room_table(db)
            create_reservation_table(db)
            handler(FrontDesk(db), args)
    except HotelError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())