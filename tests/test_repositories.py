"""Repository tests against the in-memory Supabase fake."""

from __future__ import annotations

import asyncio

import pytest

from Database.repositories import HotelRepository, SessionRepository, TicketRepository
from Tickets.structure import TicketStatus
from fakes import FakeDB, FakeSupabaseResponse, FakeTable


@pytest.fixture()
def db() -> FakeDB:
    return FakeDB()


def test_find_enrollment_by_user_id(db: FakeDB) -> None:
    db.add("Enrollment", userId=1, name="Ada")
    db.add("Enrollment", userId=2, name="Grace")

    enrollment = asyncio.run(HotelRepository(db).find_enrollment_by_user_id(2))

    assert enrollment is not None
    assert enrollment.name == "Grace"
    assert asyncio.run(HotelRepository(db).find_enrollment_by_user_id(3)) is None


def test_find_ticket_by_enrollment_id(db: FakeDB) -> None:
    db.add("Ticket", enrollmentId=4, ticketTypeId=1, status="RESERVED")

    ticket = asyncio.run(TicketRepository(db).find_ticket_by_enrollment_id(4))

    assert ticket is not None
    assert ticket.status is TicketStatus.RESERVED
    assert asyncio.run(TicketRepository(db).find_ticket_by_enrollment_id(5)) is None


def test_find_ticket_type(db: FakeDB) -> None:
    db.add("TicketType", name="Online", price=100, isRemote=True, includesHotel=False)

    ticket_type = asyncio.run(HotelRepository(db).find_ticket_type(1))

    assert ticket_type is not None
    assert ticket_type.is_remote


def test_find_hotels_keeps_id_order(db: FakeDB) -> None:
    db.add("Hotel", id=2, name="B", image="b.png")
    db.add("Hotel", id=1, name="A", image="a.png")

    hotels = asyncio.run(HotelRepository(db).find_hotels())

    assert hotels is not None
    assert [hotel.name for hotel in hotels] == ["A", "B"]


def test_find_hotels_distinguishes_empty_from_missing(db: FakeDB) -> None:
    assert asyncio.run(HotelRepository(db).find_hotels()) == []

    class NoPayloadTable(FakeTable):
        def execute(self) -> FakeSupabaseResponse:
            return FakeSupabaseResponse(None)

    class NoPayloadDB(FakeDB):
        def table(self, name: str) -> FakeTable:
            return NoPayloadTable(self.tables[name])

    assert asyncio.run(HotelRepository(NoPayloadDB()).find_hotels()) is None


def test_find_hotel_with_rooms_only_includes_its_rooms(db: FakeDB) -> None:
    db.add("Hotel", name="A", image="a.png")
    db.add("Hotel", name="B", image="b.png")
    db.add("Room", name="A1", capacity=2, hotelId=1)
    db.add("Room", name="B1", capacity=1, hotelId=2)
    db.add("Room", name="A2", capacity=3, hotelId=1)

    hotel = asyncio.run(HotelRepository(db).find_hotel_with_rooms(1))

    assert hotel is not None
    assert hotel.name == "A"
    assert [room.name for room in hotel.rooms] == ["A1", "A2"]
    assert asyncio.run(HotelRepository(db).find_hotel_with_rooms(9)) is None


def test_find_session_by_token(db: FakeDB) -> None:
    db.add("Session", userId=3, token="header.payload.signature")

    session = asyncio.run(SessionRepository(db).find_session_by_token("header.payload.signature"))

    assert session is not None
    assert session.user_id == 3
    assert asyncio.run(SessionRepository(db).find_session_by_token("other")) is None
