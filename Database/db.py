'''
This file contains the database configuration for the hotel access service.
'''
from typing import Optional

from supabase import create_client, Client

from config import Settings, get_settings


class BookingDB:
    """Database Client"""

    # private interface
    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        url: Optional[str] = settings.supabase_url
        key: Optional[str] = settings.supabase_key
        if url is None or key is None:
            raise ValueError("Database URL or Key not found in environment variables.")
        self.client: Client = create_client(url, key)


if __name__ == "__main__":
    db_conn = BookingDB()

    _ = db_conn.client.table("Hotel").select("*").execute()
    print(_)
