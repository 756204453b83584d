# db.py
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from config.env_config import MONGODB_URI, MONGODB_DB_NAME
from config.log_config import get_logger

logger = get_logger("MongoDB")


def create_mongo_client(uri: str = MONGODB_URI) -> AsyncIOMotorClient:
    logger.info(f"Connecting to MongoDB at {uri}")
    return AsyncIOMotorClient(uri, uuidRepresentation="standard")


# Dependency for FastAPI
def get_database(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.db


async def init_db(db: AsyncIOMotorDatabase):
    users_collection = db.get_collection("users")

    # Create unique index for email
    await users_collection.create_index(
        [("email", 1)],
        unique=True,
        name="unique_email_index"
    )
    logger.info(f"MongoDB client initialized ({MONGODB_DB_NAME})")
