from fastapi import HTTPException, status
from logging import Logger
from typing import Literal

entity_type : Literal['hotel', 'undefined_entity'] = 'undefined_entity'

def _parse_id(
        id: str,
        logger: Logger,
        entity: Literal['hotel', 'undefined_entity'] = entity_type
    ) -> int:
    """Validate and normalize a numeric identifier for a hotel
    (or an undefined entity).
    """

    try:
        return int(id)
    except ValueError as exc:
        logger.warning(f"Invalid id supplied for {entity}_id", extra={f"{entity}_id": id})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"The supplied {entity} id is not a valid integer.",
        ) from exc
