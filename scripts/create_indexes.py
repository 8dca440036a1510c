"""
Script to create the MongoDB index backing the history listing.
The history route sorts by timestamp (newest first) and caps at 100 entries.
"""
import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import DESCENDING
from pymongo.errors import OperationFailure

from app.config.settings import Settings
from app.utils.logger import setup_logger

logger = setup_logger(__name__, level="INFO")

HISTORY_INDEX_NAME = "history_timestamp_desc"
HISTORY_INDEX_KEYS = [("timestamp", DESCENDING), ("_id", DESCENDING)]


async def find_history_index(collection):
    """Return the history index description, or None if it does not exist."""
    indexes = await collection.index_information()
    return indexes.get(HISTORY_INDEX_NAME)


async def create_history_index(settings: Settings, client=None) -> bool:
    """
    Create the timestamp index on the history collection.

    Returns:
        True if the index was created, False if it already existed
    """
    logger.info("=" * 60)
    logger.info("History Index Creation")
    logger.info("=" * 60)

    if not settings.MONGODB_URI and client is None:
        raise ValueError("MONGODB_URI environment variable is not set.")

    owns_client = client is None
    client = client or AsyncIOMotorClient(settings.MONGODB_URI)
    collection = client[settings.CANDIDATE_DATABASE][settings.HISTORY_COLLECTION]

    try:
        existing = await find_history_index(collection)
        if existing is not None:
            logger.info(f"✓ Index '{HISTORY_INDEX_NAME}' already exists: {existing.get('key')}")
            return False

        logger.info(f"Creating index '{HISTORY_INDEX_NAME}' on {settings.CANDIDATE_DATABASE}.{settings.HISTORY_COLLECTION}")
        await collection.create_index(HISTORY_INDEX_KEYS, name=HISTORY_INDEX_NAME)
        logger.info("✓ Index created")
        return True
    except OperationFailure as exc:
        logger.error(f"✗ Failed to create history index: {exc}")
        raise
    finally:
        if owns_client:
            client.close()
        logger.info("=" * 60)


async def check_index_status(settings: Settings, client=None) -> bool:
    """Report whether the history index exists."""
    if not settings.MONGODB_URI and client is None:
        raise ValueError("MONGODB_URI environment variable is not set.")

    owns_client = client is None
    client = client or AsyncIOMotorClient(settings.MONGODB_URI)
    collection = client[settings.CANDIDATE_DATABASE][settings.HISTORY_COLLECTION]

    try:
        existing = await find_history_index(collection)
        if existing is None:
            logger.info(f"✗ Index '{HISTORY_INDEX_NAME}' not found. Run this script to create it.")
            return False
        logger.info(f"✓ Found index: {HISTORY_INDEX_NAME} {existing.get('key')}")
        return True
    finally:
        if owns_client:
            client.close()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Create or check the history timestamp index"
    )
    parser.add_argument(
        "--check-only",
        action="store_true",
        help="Only check index status, don't create"
    )

    args = parser.parse_args()
    settings = Settings()

    if args.check_only:
        asyncio.run(check_index_status(settings))
    else:
        asyncio.run(create_history_index(settings))


if __name__ == "__main__":
    main()
