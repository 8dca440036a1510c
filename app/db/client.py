import asyncio

from motor.motor_asyncio import AsyncIOMotorClient

from app.config.settings import Settings
from app.services.base import ConfigurationError, DatabaseConnectionError
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Process-wide client, created on the first request that needs the database
mongo_client: AsyncIOMotorClient | None = None
# Held while a connection is being established so concurrent first requests share it
_connect_lock = asyncio.Lock()


def _client_options(settings: Settings) -> dict:
    options = {}
    if settings.MONGO_SERVER_SELECTION_TIMEOUT_MS is not None:
        options["serverSelectionTimeoutMS"] = settings.MONGO_SERVER_SELECTION_TIMEOUT_MS
    return options


async def get_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Return the cached MongoDB client, connecting on first use.

    Raises:
        ConfigurationError: If MONGODB_URI is not set
        DatabaseConnectionError: If the server cannot be reached; the cache stays empty
    """
    global mongo_client
    if mongo_client is not None:
        return mongo_client

    async with _connect_lock:
        if mongo_client is not None:
            # Another request finished connecting while we waited
            return mongo_client

        if not settings.MONGODB_URI:
            raise ConfigurationError("MONGODB_URI environment variable is not set")

        client = None
        try:
            client = AsyncIOMotorClient(settings.MONGODB_URI, **_client_options(settings))
            # Ping the server to check connection
            await client.admin.command("ping")
        except Exception as err:
            logger.error(f"Database connection error: {err}")
            if client is not None:
                client.close()
            raise DatabaseConnectionError(f"Could not connect to MongoDB: {err}") from err

        mongo_client = client
        logger.info("Connected to MongoDB")
        return client


def get_database(client: AsyncIOMotorClient, database_name: str):
    return client[database_name]


def get_collection(client: AsyncIOMotorClient, database_name: str, collection_name: str):
    return get_database(client, database_name)[collection_name]


async def close_mongo_connection() -> None:
    global mongo_client, _connect_lock
    if mongo_client is not None:
        mongo_client.close()
        mongo_client = None
    _connect_lock = asyncio.Lock()
