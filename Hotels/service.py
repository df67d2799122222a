'''
Eligibility checks gating access to hotel data.

A user may see hotels only with an enrollment, a paid ticket on it, and a
ticket type that is in person and includes hotel access. Checks run in that
order and the first failing one decides the error.
'''
import logging
from typing import TYPE_CHECKING, Optional

from Hotels.errors import ConflictError, NotFoundError
from Hotels.structure import Hotel, HotelWithRooms

if TYPE_CHECKING:
    from Database.repositories import HotelRepository, TicketRepository

logger = logging.getLogger(__name__)


class HotelService:
    """Hotel listing behind the enrollment and ticket rules."""

    def __init__(self, hotels: "HotelRepository", tickets: "TicketRepository") -> None:
        self._hotels = hotels
        self._tickets = tickets

    async def _check_eligibility(self, user_id: int) -> None:
        """
        Ensure the user holds a paid, in-person ticket that includes a hotel.

        Args:
            user_id: Authenticated user.

        Raises:
            NotFoundError: No enrollment, ticket or ticket type for the user.
            ConflictError: The ticket is unpaid, remote or without hotel.
        """

        log_context = {"user_id": user_id}

        enrollment = await self._hotels.find_enrollment_by_user_id(user_id)
        if enrollment is None:
            logger.info("User has no enrollment", extra=log_context)
            raise NotFoundError()

        ticket = await self._tickets.find_ticket_by_enrollment_id(enrollment.id)
        if ticket is None:
            logger.info("Enrollment has no ticket", extra={**log_context, "enrollment_id": enrollment.id})
            raise NotFoundError()
        if not ticket.is_paid:
            logger.info("Ticket not paid", extra={**log_context, "ticket_id": ticket.id})
            raise ConflictError("ticket not paid")

        ticket_type = await self._hotels.find_ticket_type(ticket.ticket_type_id)
        if ticket_type is None:
            logger.info("Ticket type missing", extra={**log_context, "ticket_type_id": ticket.ticket_type_id})
            raise NotFoundError()
        if ticket_type.is_remote:
            logger.info("Remote ticket", extra={**log_context, "ticket_type_id": ticket_type.id})
            raise ConflictError("remote ticket")
        # same message as the remote case; callers only see the kind
        if not ticket_type.includes_hotel:
            logger.info("Ticket without hotel", extra={**log_context, "ticket_type_id": ticket_type.id})
            raise ConflictError("remote ticket")

    async def list_hotels(self, user_id: int) -> list[Hotel]:
        """
        Return every hotel for an eligible user.

        An empty list is a valid answer; only a missing result is an error.
        """

        await self._check_eligibility(user_id)

        hotels = await self._hotels.find_hotels()
        if hotels is None:
            raise NotFoundError()
        logger.debug("Hotels listed", extra={"user_id": user_id, "count": len(hotels)})
        return hotels

    async def find_hotel_by_id(self, user_id: int, hotel_id: int) -> Optional[HotelWithRooms]:
        """Return one hotel with its rooms, or None when no such hotel exists."""

        await self._check_eligibility(user_id)
        return await self._hotels.find_hotel_with_rooms(hotel_id)
