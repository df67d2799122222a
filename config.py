'''
Runtime configuration for the hotel access service.

Values are read from the process environment, after loading a local
.env file when present.
'''
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel


class Settings(BaseModel):
    """Application settings sourced from environment variables."""

    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    jwt_secret: Optional[str] = None
    jwt_algorithm: str = "HS256"
    log_level: str = "INFO"
    database_url: Optional[str] = None


@lru_cache
def get_settings() -> Settings:
    """
    Build the settings once per process.

    Also usable as a FastAPI dependency, so tests can override it.
    """

    load_dotenv()
    return Settings(
        supabase_url=os.environ.get("SUPABASE_URL"),
        supabase_key=os.environ.get("SUPABASE_KEY"),
        jwt_secret=os.environ.get("JWT_SECRET"),
        jwt_algorithm=os.environ.get("JWT_ALGORITHM", "HS256"),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        database_url=os.environ.get("DATABASE_URL"),
    )
