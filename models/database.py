"""Database models and connection setup."""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING

from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)

USERS_COLLECTION = "users"
WORKOUTS_COLLECTION = "workouts"


class Database:
    """Database connection manager."""

    client: Optional[AsyncIOMotorClient] = None


db = Database()


async def connect_to_mongo():
    """Create database connection."""
    db.client = AsyncIOMotorClient(settings.mongodb_url, tz_aware=True)
    logger.info(f"Connected to MongoDB database '{settings.database_name}'")


async def close_mongo_connection():
    """Close database connection."""
    if db.client:
        db.client.close()
        db.client = None
        logger.info("Disconnected from MongoDB")


async def init_mongo():
    """Connect and create the indexes both collections rely on."""
    await connect_to_mongo()
    database = get_database()

    # Users: primary key plus the unique email lookup index
    users_collection = database[USERS_COLLECTION]
    await users_collection.create_index([("user_id", ASCENDING)], unique=True)
    await users_collection.create_index([("email", ASCENDING)], unique=True)

    # Workouts: queried by owner and time range
    workouts_collection = database[WORKOUTS_COLLECTION]
    await workouts_collection.create_index([("workout_id", ASCENDING)], unique=True)
    await workouts_collection.create_index([("user_id", ASCENDING), ("created_at", ASCENDING)])

    logger.info("MongoDB initialized: users and workouts indexes ensured")


def get_database():
    """Get database instance."""
    if db.client is None:
        raise RuntimeError("MongoDB client is not connected")
    return db.client[settings.database_name]


def get_users_collection():
    """Get users collection."""
    return get_database()[USERS_COLLECTION]


def get_workouts_collection():
    """Get workouts collection."""
    return get_database()[WORKOUTS_COLLECTION]
