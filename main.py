'''
FastAPI application for the hotel access service.

Authenticated users holding a paid, in-person ticket that includes
accommodation can browse the event hotels.

Available endpoints:
- /hotels: List hotels.
- /hotels/{hotel_id}: Read one hotel with its rooms.
- /hotels/health: Liveness probe.
'''

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from config import get_settings
from Database.db import BookingDB

# routers
from api.hotel_routes import hotel_router


def setup_logging(level: str) -> None:
    '''Configure the root logger once.'''
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup ---
    settings = get_settings()
    setup_logging(settings.log_level)
    app.state.db = BookingDB(settings).client   # create ONCE
    yield

# Initialize FastAPI app
app = FastAPI(title="Hotel Access API", version="1.0.0", lifespan=lifespan)

app.include_router(hotel_router, prefix="/hotels", tags=["Hotels"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Hotel Access API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="localhost", port=8000, reload=True)
