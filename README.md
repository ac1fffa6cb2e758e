# hotelmgr

A small front-desk system for a hotel. It keeps rooms and reservations in a
SQLite database and supports the everyday desk operations:

- **check in** a customer to a room, which marks the room occupied and gives
  back a reservation ID;
- **add extras** to a reservation (any non-negative amount);
- **calculate the total** for a stay: daily rate × days + extras;
- **check out**, which stores the extras and the total fee and frees the room;
- **list current guests**: every reservation whose total fee is still 0.

## Installation

```
pip install .
```

## Command line

The package installs one command, `hotelmgr`:

```
hotelmgr --help
```

Every call opens the database given by `--db` (default `hotel.db`), creates
the `rooms` and `hotel` tables if they do not exist, and runs one
sub-command:

| Sub-command | Arguments | What it does |
|---|---|---|
| `init` | `[--seed]` | Makes sure the tables exist; with `--seed`, adds rooms 101–104 and 201–203 with their standard nightly rates. |
| `add-room` | `ROOM_NO DAILY_RATE` | Adds one free room. |
| `rooms` | `[--mode check-in\|check-out]` | Prints each standard room as free/occupied and available/unavailable for the chosen operation. |
| `check-in` | `ROOM_NO CUSTOMER_NAME` | Checks a customer in and prints the reservation ID. |
| `fetch` | `ROOM_NO RESERVATION` | Prints the customer of a reservation, if it belongs to that room. |
| `total` | `ROOM_NO RESERVATION DAYS` | Prints rate × days + extras. |
| `check-out` | `ROOM_NO RESERVATION TOTAL_FEE` | Records the total fee and frees the room. |
| `extra` | `RESERVATION AMOUNT` | Shows the reservation's customer and room, then adds the amount to its extras. |
| `guests` | | Lists customer name, room number and reservation ID of current guests. |

On any error the command prints `Error: <message>` to standard error and
exits with status 1.

A typical stay:

```
hotelmgr init --seed
hotelmgr check-in 101 "Ada Example"
hotelmgr extra 1 25
hotelmgr total 101 1 3
hotelmgr check-out 101 1 475
```

## Library use

```python
from hotelmgr.database import Database
from hotelmgr.rooms import Room, create_room_table, add_room
from hotelmgr.reservations import create_reservation_table
from hotelmgr.desk import FrontDesk, OperationMode

with Database("hotel.db") as db:
    create_room_table(db)
    create_reservation_table(db)
    add_room(db, Room(101, 150.0))

    desk = FrontDesk(db, [101])
    reservation = desk.check_in(101, "Ada Example")
    desk.add_extra(reservation.reservation_id, "25")
    total = desk.calculate_total(101, str(reservation.reservation_id), "3")
    desk.check_out(101, str(reservation.reservation_id), str(total))
```

The modules:

- `hotelmgr.database` — `Database`, one SQLite connection (default
  `":memory:"`) usable as a context manager, with a reentrant
  `transaction()`; `HotelError`, the base of every error here. SQLite errors
  inside a transaction are raised as `HotelError`.
- `hotelmgr.rooms` — the `Room` dataclass and `create_room_table`,
  `add_room`, `find_room`, `toggle_occupancy` and `is_room_occupied`
  (an unknown room counts as free).
- `hotelmgr.reservations` — the `Reservation` dataclass and
  `create_reservation_table`, `check_in`, `check_out`, `extra_expenses`,
  `add_extra_expenses`, `find_reservation` and `current_guests`.
  `check_in` and `check_out` each flip the room's occupancy.
- `hotelmgr.desk` — `FrontDesk`, which takes the text typed at the desk,
  validates it and calls the functions above; `OperationMode` and
  `RoomState`, which `FrontDesk.room_states` uses to report, per room,
  whether it is occupied and whether it may be chosen (free rooms for
  check-in, occupied rooms for check-out).
- `hotelmgr.cli` — `build_parser()` and `main(argv=None)` behind the
  `hotelmgr` command.

Invalid input at the desk (an empty name, an empty or malformed reservation
ID, a non-positive or non-integer number of days, a guest in another room, a
missing or malformed total fee, a negative extra) raises
`hotelmgr.desk.ValidationError`. Unknown rooms and reservations raise
`RoomNotFoundError` and `ReservationNotFoundError`. All of these derive from
`hotelmgr.database.HotelError`.

## What it does not do

There is no graphical or interactive interface: each operation is a single
command or function call. `FrontDesk.check_in` does not itself refuse an
occupied room; `room_states` only reports which rooms are available.

## Tests

```
pip install ".[test]"
pytest
```