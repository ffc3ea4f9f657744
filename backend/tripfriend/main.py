import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tripfriend.core.config import APP_NAME, APP_VERSION, CORS_ORIGINS, SERVER_HOST, SERVER_PORT
from tripfriend.core.logging import setup_logging
from tripfriend.db.database import check_connection, close_database_connection, init_indexes
from tripfriend.router.auth import router as auth_router
from tripfriend.router.system import router as system_router
from tripfriend.router.trip_information import router as trip_information_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Starting up %s %s", APP_NAME, APP_VERSION)
    if await check_connection():
        await init_indexes()
    yield
    logger.info("Shutting down %s", APP_NAME)
    await close_database_connection()


app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(system_router)
app.include_router(auth_router)
app.include_router(trip_information_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
