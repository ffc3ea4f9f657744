"""
MongoDB Database Configuration and Connection
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from tripfriend.core.config import DATABASE_NAME, MONGODB_URI

logger = logging.getLogger(__name__)

# Global database client
_client = None
_database = None


def get_database():
    """
    Get MongoDB database instance
    Creates a new connection if one doesn't exist
    """
    global _client, _database

    if _database is None:
        if not MONGODB_URI:
            raise ValueError("MONGODB_URI environment variable is not set")

        _client = AsyncIOMotorClient(MONGODB_URI, server_api=ServerApi("1"))
        _database = _client[DATABASE_NAME]

        logger.info("Connected to MongoDB database: %s", DATABASE_NAME)

    return _database


async def init_indexes():
    """
    Initialize database indexes for lookups by identifier
    """
    try:
        users_collection = get_users_collection()
        trip_informations_collection = get_trip_informations_collection()
        places_collection = get_places_collection()

        # Users are keyed by the identity provider and its subject id
        await users_collection.create_index(
            [("provider", ASCENDING), ("provider_id", ASCENDING)],
            unique=True,
            name="uniq_provider_subject",
        )
        await users_collection.create_index("email")

        await trip_informations_collection.create_index("trip_information_id", unique=True)
        await trip_informations_collection.create_index("trip_schedule_id")
        await trip_informations_collection.create_index("place_id")

        await places_collection.create_index("place_id", unique=True)

        logger.info("Database indexes created successfully")
    except PyMongoError as e:
        logger.warning("Index creation warning: %s", e)


async def close_database_connection():
    """
    Close the MongoDB connection
    Call this when shutting down the application
    """
    global _client, _database

    if _client:
        _client.close()
        _client = None
        _database = None
        logger.info("Closed MongoDB connection")


async def check_connection():
    """
    Ping MongoDB and report whether the server is reachable
    """
    try:
        db = get_database()
        await db.command("ping")
        logger.info("MongoDB connection successful")
        return True
    except (PyMongoError, ValueError) as e:
        logger.error("MongoDB connection failed: %s", e)
        return False


def get_users_collection():
    """
    Get the users collection from the database
    """
    db = get_database()
    return db.users


def get_trip_informations_collection():
    """
    Get the trip_informations collection from the database
    """
    db = get_database()
    return db.trip_informations


def get_places_collection():
    """
    Get the places collection from the database
    """
    db = get_database()
    return db.places
