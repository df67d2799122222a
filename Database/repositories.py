"""Read-only repositories over the Supabase tables used for hotel access."""

import logging
from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool

from Hotels.structure import Hotel, HotelWithRooms, Room
from Tickets.structure import Enrollment, Ticket, TicketType
from Users.session import Session

logger = logging.getLogger(__name__)

ENROLLMENT_TABLE_NAME = "Enrollment"
TICKET_TABLE_NAME = "Ticket"
TICKET_TYPE_TABLE_NAME = "TicketType"
HOTEL_TABLE_NAME = "Hotel"
ROOMS_TABLE_NAME = "Room"
SESSION_TABLE_NAME = "Session"


async def _select_first(db: Any, table: str, column: str, value: Any) -> Optional[dict[str, Any]]:
    """
    Return the first row of ``table`` whose ``column`` equals ``value``.

    Args:
        db: Supabase client.
        table: Table to query.
        column: Column used as filter.
        value: Value the column must match.

    Returns:
        The matching row as a dictionary, or None when nothing matches.
    """

    result = await run_in_threadpool(
        lambda: db.table(table).select("*").eq(column, value).limit(1).execute()
    )
    if not result.data:
        return None
    return result.data[0]


class HotelRepository:
    """Queries on enrollments, ticket types, hotels and rooms."""

    def __init__(self, db: Any) -> None:
        self._db = db

    async def find_enrollment_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        row = await _select_first(self._db, ENROLLMENT_TABLE_NAME, "userId", user_id)
        return Enrollment(**row) if row else None

    async def find_ticket_type(self, ticket_type_id: int) -> Optional[TicketType]:
        row = await _select_first(self._db, TICKET_TYPE_TABLE_NAME, "id", ticket_type_id)
        return TicketType(**row) if row else None

    async def find_hotels(self) -> Optional[list[Hotel]]:
        """
        Fetch every hotel.

        Returns:
            The hotels in store order, or None when the client returned no
            payload at all. An empty table yields an empty list.
        """

        result = await run_in_threadpool(
            lambda: self._db.table(HOTEL_TABLE_NAME).select("*").order("id").execute()
        )
        if result.data is None:
            return None
        return [Hotel(**row) for row in result.data]

    async def find_hotel_with_rooms(self, hotel_id: int) -> Optional[HotelWithRooms]:
        """
        Fetch one hotel and its rooms.

        Args:
            hotel_id: Identifier of the hotel.

        Returns:
            The hotel with its rooms, or None when the hotel does not exist.
        """

        row = await _select_first(self._db, HOTEL_TABLE_NAME, "id", hotel_id)
        if row is None:
            return None

        rooms = await run_in_threadpool(
            lambda: self._db.table(ROOMS_TABLE_NAME).select("*").eq("hotelId", hotel_id).order("id").execute()
        )
        logger.debug("Hotel rooms fetched", extra={"hotel_id": hotel_id, "rooms": len(rooms.data or [])})
        return HotelWithRooms(**row, Rooms=[Room(**room) for room in rooms.data or []])


class TicketRepository:
    """Queries on tickets."""

    def __init__(self, db: Any) -> None:
        self._db = db

    async def find_ticket_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        row = await _select_first(self._db, TICKET_TABLE_NAME, "enrollmentId", enrollment_id)
        return Ticket(**row) if row else None


class SessionRepository:
    """Queries on login sessions."""

    def __init__(self, db: Any) -> None:
        self._db = db

    async def find_session_by_token(self, token: str) -> Optional[Session]:
        row = await _select_first(self._db, SESSION_TABLE_NAME, "token", token)
        return Session(**row) if row else None
