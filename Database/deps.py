"""FastAPI dependencies wiring the Supabase client into repositories and services."""

from typing import Any

from fastapi import Depends, Request

from Database.repositories import HotelRepository, SessionRepository, TicketRepository
from Hotels.service import HotelService


def get_db(request: Request) -> Any:
    """Return the Supabase client created once in the application lifespan."""

    return request.app.state.db


def get_session_repository(db=Depends(get_db)) -> SessionRepository:
    return SessionRepository(db)


def get_hotel_service(db=Depends(get_db)) -> HotelService:
    return HotelService(HotelRepository(db), TicketRepository(db))
