"""Bearer-token authentication for the hotel routes."""

import logging
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config import Settings, get_settings
from Database.deps import get_session_repository
from Database.repositories import SessionRepository

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="You must be signed in to continue",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    sessions: SessionRepository = Depends(get_session_repository),
) -> int:
    """
    Resolve the authenticated user id from the Authorization header.

    Args:
        credentials: Bearer credentials, None when the header is missing.
        settings: Application settings holding the signing secret.
        sessions: Repository used to confirm the token has a live session.

    Returns:
        The ``userId`` claim of a verified token backed by a session.

    Raises:
        HTTPException: 401 for any missing, invalid or unknown token.
    """

    if credentials is None:
        raise _unauthorized()

    if not settings.jwt_secret:
        logger.error("JWT_SECRET is not configured; rejecting token")
        raise _unauthorized()

    token = credentials.credentials
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError as exc:
        logger.warning("Rejected bearer token", extra={"reason": str(exc)})
        raise _unauthorized() from exc

    user_id = payload.get("userId")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        logger.warning("Token carries no userId claim")
        raise _unauthorized()

    session = await sessions.find_session_by_token(token)
    if session is None:
        logger.warning("No session for token", extra={"user_id": user_id})
        raise _unauthorized()

    return user_id
