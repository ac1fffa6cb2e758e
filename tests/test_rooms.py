import pytest

from hotelmgr.database import Database, HotelError
from hotelmgr.rooms import (
    Room,
    RoomNotFoundError,
    add_room,
    create_room_table,
    find_room,
    is_room_occupied,
    toggle_occupancy,
)


@pytest.fixture
def db():
    database = Database(":memory:")
    create_room_table(database)
    yield database
    database.close()


def test_add_and_find_round_trip(db):
    add_room(db, Room(101, 150.0))
    assert find_room(db, 101) == Room(101, 150.0, False)


def test_duplicate_room_rejected(db):
    add_room(db, Room(102, 180.0))
    with pytest.raises(HotelError):
        add_room(db, Room(102, 200.0))
    assert find_room(db, 102).daily_rate == 180.0


def test_missing_room_raises(db):
    with pytest.raises(RoomNotFoundError) as info:
        find_room(db, 999)
    assert info.value.room_no == 999


def test_toggle_flips_state(db):
    add_room(db, Room(103, 200.0))
    assert toggle_occupancy(db, 103) is True
    assert is_room_occupied(db, 103) is True
    assert toggle_occupancy(db, 103) is False
    assert find_room(db, 103).occupied is False


def test_toggle_missing_room_raises(db):
    with pytest.raises(RoomNotFoundError):
        toggle_occupancy(db, 404)


def test_unknown_room_counts_as_free(db):
    assert is_room_occupied(db, 555) is False


def test_create_table_is_idempotent(db):
    add_room(db, Room(201, 230.0))
    create_room_table(db)
    assert find_room(db, 201).number == 201