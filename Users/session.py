"""Stored session binding an issued token to a user."""
from datetime import datetime, timezone

from pydantic import Field, field_validator

from utils import CamelModel


class Session(CamelModel):
    """Login session; a bearer token is honoured only while its session exists."""

    id: int = Field(frozen=True)
    user_id: int = Field(frozen=True)
    token: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), frozen=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("token")
    @classmethod
    def token_not_blank(cls, value: str) -> str:
        """
        Reject empty tokens.

        Args:
            value: Raw token string.

        Returns:
            The token stripped of surrounding whitespace.

        Raises:
            ValueError: If the token is blank.
        """
        stripped = value.strip()
        if not stripped:
            raise ValueError("Session token must not be blank.")
        return stripped
