"""Hotel-related FastAPI routes."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from .utils import _parse_id as _parse_hotel_id
from .security import get_current_user_id

from Hotels.errors import ConflictError, HotelAccessError
from Hotels.service import HotelService
from Hotels.structure import Hotel, HotelWithRooms
from Database.deps import get_hotel_service

from .models import ErrorResponse, MessageResponse

logger = logging.getLogger(__name__)

HOTEL = "hotel"

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}

# mount api router
hotel_router = APIRouter()

def _to_http_exception(error: HotelAccessError) -> HTTPException:
    """
    Map a classified service error onto its HTTP response.

    The service has already logged the refusal.

    Args:
        error: ConflictError or NotFoundError raised by the eligibility service.

    Returns:
        HTTPException carrying the error kind as detail.
    """

    if isinstance(error, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=error.kind)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.kind)

@hotel_router.get("/health", response_model=MessageResponse)
async def health_check() -> MessageResponse:
    """Quick liveness probe for the hotel service."""

    return MessageResponse(status=status.HTTP_200_OK, message="Hotel service is healthy")

@hotel_router.get(
    "",
    response_model=list[Hotel],
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def list_hotels(
    user_id: int = Depends(get_current_user_id),
    service: HotelService = Depends(get_hotel_service),
) -> list[Hotel]:
    """
    List every hotel for a user holding a paid, in-person, hotel ticket.

    Args:
        user_id: Authenticated user, resolved from the bearer token.
        service: Eligibility service injected via dependency.

    Returns:
        The hotels, possibly none.
    """

    log_context = {"user_id": user_id}
    try:
        hotels = await service.list_hotels(user_id)
    except HotelAccessError as exc:
        raise _to_http_exception(exc) from exc
    except Exception as exc:
        logger.exception("Failed to list hotels", extra=log_context)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve hotels due to an internal error.",
        ) from exc

    logger.info("Hotels retrieved", extra={**log_context, "count": len(hotels)})
    return hotels

@hotel_router.get(
    "/{hotel_id}",
    response_model=Optional[HotelWithRooms],
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}, **ERROR_RESPONSES},
)
async def get_hotel(
    hotel_id: str,
    user_id: int = Depends(get_current_user_id),
    service: HotelService = Depends(get_hotel_service),
) -> Optional[HotelWithRooms]:
    """
    Retrieve a single hotel with its rooms.

    Args:
        hotel_id: Integer id of the target hotel (path parameter).
        user_id: Authenticated user, resolved from the bearer token.
        service: Eligibility service injected via dependency.

    Returns:
        The hotel with its rooms, or null when no hotel has that id.
    """

    parsed_id = _parse_hotel_id(hotel_id, logger, HOTEL)
    log_context = {"user_id": user_id, "hotel_id": parsed_id}

    try:
        hotel = await service.find_hotel_by_id(user_id, parsed_id)
    except HotelAccessError as exc:
        raise _to_http_exception(exc) from exc
    except Exception as exc:
        logger.exception("Failed to fetch hotel", extra=log_context)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve hotel due to an internal error.",
        ) from exc

    logger.info("Hotel retrieved", extra={**log_context, "found": hotel is not None})
    return hotel
