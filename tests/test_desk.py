import pytest

from hotelmgr.database import Database
from hotelmgr.desk import (
    FrontDesk,
    OperationMode,
    RoomState,
    ValidationError,
)
from hotelmgr.reservations import (
    ReservationNotFoundError,
    create_reservation_table,
    extra_expenses,
    find_reservation,
)
from hotelmgr.rooms import (
    Room,
    RoomNotFoundError,
    add_room,
    create_room_table,
    is_room_occupied,
)


@pytest.fixture
def db():
    database = Database(":memory:")
    create_room_table(database)
    create_reservation_table(database)
    add_room(database, Room(101, 150.0))
    add_room(database, Room(102, 180.0))
    yield database
    database.close()


@pytest.fixture
def desk(db):
    return FrontDesk(db, [101, 102])


def test_default_room_numbers(db):
    states = FrontDesk(db).room_states(OperationMode.CHECK_IN)
    assert [s.room_no for s in states] == [101, 102, 103, 104, 201, 202, 203]


def test_check_in_mode_all_free(desk):
    states = desk.room_states(OperationMode.CHECK_IN)
    assert states == [
        RoomState(101, False, True, "#28a745"),
        RoomState(102, False, True, "#28a745"),
    ]


def test_check_out_mode_free_rooms_unavailable(desk):
    states = desk.room_states(OperationMode.CHECK_OUT)
    assert all(not s.selectable for s in states)
    assert {s.colour for s in states} == {"#d3d3d3"}


def test_states_after_check_in(desk):
    desk.check_in(101, "Alice")
    check_in = {s.room_no: s for s in desk.room_states(OperationMode.CHECK_IN)}
    check_out = {s.room_no: s for s in desk.room_states(OperationMode.CHECK_OUT)}
    assert check_in[101].occupied and not check_in[101].selectable
    assert check_in[101].colour == "#FF5733"
    assert check_out[101].selectable
    assert not check_out[102].selectable


@pytest.mark.parametrize("name", ["", "   "])
def test_check_in_rejects_empty_name(desk, db, name):
    with pytest.raises(ValidationError):
        desk.check_in(101, name)
    assert is_room_occupied(db, 101) is False


def test_check_in_strips_name(desk, db):
    reservation = desk.check_in(101, "  Alice  ")
    assert reservation.customer_name == "Alice"
    assert find_reservation(db, reservation.reservation_id).room_no == 101
    assert is_room_occupied(db, 101) is True


def test_check_in_unknown_room(desk):
    with pytest.raises(RoomNotFoundError):
        desk.check_in(999, "Alice")
    assert desk.guest_list() == []


def test_fetch_guest(desk):
    reservation = desk.check_in(102, "Bob")
    found = desk.fetch_guest(102, f" {reservation.reservation_id} ")
    assert found.customer_name == "Bob"
    assert found.reservation_id == reservation.reservation_id


def test_fetch_guest_wrong_room(desk):
    reservation = desk.check_in(102, "Bob")
    with pytest.raises(ValidationError):
        desk.fetch_guest(101, str(reservation.reservation_id))


@pytest.mark.parametrize("text", ["", "abc", "1.5", "1_0"])
def test_fetch_guest_bad_id(desk, text):
    with pytest.raises(ValidationError):
        desk.fetch_guest(101, text)


def test_fetch_guest_unknown_id(desk):
    with pytest.raises(ReservationNotFoundError):
        desk.fetch_guest(101, "42")


def test_calculate_total_includes_extras(desk):
    reservation = desk.check_in(101, "Alice")
    desk.add_extra(reservation.reservation_id, "20")
    assert desk.calculate_total(101, str(reservation.reservation_id), "3") == 470.0


@pytest.mark.parametrize("days", ["0", "-1", "x", ""])
def test_calculate_total_bad_days(desk, days):
    reservation = desk.check_in(101, "Alice")
    with pytest.raises(ValidationError):
        desk.calculate_total(101, str(reservation.reservation_id), days)


def test_calculate_total_unknown_room(desk):
    with pytest.raises(RoomNotFoundError):
        desk.calculate_total(999, "1", "2")


def test_calculate_total_unknown_reservation(desk):
    with pytest.raises(ReservationNotFoundError):
        desk.calculate_total(101, "77", "2")


def test_check_out_flow(desk, db):
    reservation = desk.check_in(101, "Alice")
    rid = str(reservation.reservation_id)
    desk.add_extra(reservation.reservation_id, "12.5")
    total = desk.calculate_total(101, rid, "2")
    closed = desk.check_out(101, rid, str(total))
    assert closed.total_fee == total
    assert closed.extra_expenses == 12.5
    assert is_room_occupied(db, 101) is False
    assert desk.guest_list() == []
    assert find_reservation(db, reservation.reservation_id).total_fee == total


def test_check_out_requires_total(desk, db):
    reservation = desk.check_in(101, "Alice")
    with pytest.raises(ValidationError):
        desk.check_out(101, str(reservation.reservation_id), "  ")
    assert is_room_occupied(db, 101) is True


def test_check_out_requires_id(desk):
    with pytest.raises(ValidationError):
        desk.check_out(101, "", "100")


def test_check_out_unknown_reservation(desk):
    with pytest.raises(ReservationNotFoundError):
        desk.check_out(101, "5", "100")


def test_fetch_reservation(desk):
    reservation = desk.check_in(102, "Carol")
    assert desk.fetch_reservation(str(reservation.reservation_id)) == reservation
    with pytest.raises(ReservationNotFoundError):
        desk.fetch_reservation("999")
    with pytest.raises(ValidationError):
        desk.fetch_reservation("")


@pytest.mark.parametrize("amount", ["", "-1", "abc", "nan", "inf"])
def test_add_extra_rejects_bad_amount(desk, db, amount):
    reservation = desk.check_in(101, "Alice")
    with pytest.raises(ValidationError):
        desk.add_extra(reservation.reservation_id, amount)
    assert extra_expenses(db, reservation.reservation_id) == 0.0


@pytest.mark.parametrize("rid", [0, None])
def test_add_extra_requires_reservation(desk, rid):
    with pytest.raises(ValidationError):
        desk.add_extra(rid, "10")


def test_add_extra_accumulates(desk, db):
    reservation = desk.check_in(101, "Alice")
    desk.add_extra(reservation.reservation_id, "10")
    desk.add_extra(reservation.reservation_id, "5.5")
    assert extra_expenses(db, reservation.reservation_id) == 15.5


def test_add_extra_unknown_reservation(desk):
    with pytest.raises(ReservationNotFoundError):
        desk.add_extra(99, "10")


def test_guest_list_in_reservation_order(desk):
    first = desk.check_in(102, "Bob")
    second = desk.check_in(101, "Alice")
    guests = desk.guest_list()
    assert [g.reservation_id for g in guests] == [
        first.reservation_id,
        second.reservation_id,
    ]
    assert [(g.customer_name, g.room_no) for g in guests] == [
        ("Bob", 102),
        ("Alice", 101),
    ]