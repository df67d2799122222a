"""Shared API response models for the hotel access service."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Envelope for simple string responses."""

    status: int
    message: str


class ErrorResponse(BaseModel):
    """Body FastAPI sends for an HTTPException."""

    detail: str
