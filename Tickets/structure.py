'''
Enrollment and ticket records consulted before granting hotel access.
'''
from enum import Enum
from typing import Optional
from datetime import datetime, timezone
from pydantic import Field
from utils import CamelModel


class TicketStatus(str, Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"


class Enrollment(CamelModel):
    """A user's registration for the event."""

    id : int = Field(frozen=True)
    user_id : int = Field(frozen=True)
    name : Optional[str] = None
    created_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc), frozen=True)
    updated_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class TicketType(CamelModel):

    id : int = Field(frozen=True)
    name : str
    price : int
    is_remote : bool
    includes_hotel : bool
    created_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc), frozen=True)
    updated_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Ticket(CamelModel):

    id : int = Field(frozen=True)
    enrollment_id : int = Field(frozen=True)
    ticket_type_id : int
    status : TicketStatus
    created_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc), frozen=True)
    updated_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_paid(self) -> bool:
        return self.status == TicketStatus.PAID
