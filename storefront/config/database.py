"""
Database configuration and connection management.
Handles MongoDB connection lifecycle and database operations.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from .settings import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


class DatabaseManager:
    """Manages MongoDB database connection and operations."""

    def __init__(self):
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        """Establish connection to MongoDB."""
        try:
            logger.info(f"Connecting to MongoDB at {settings.mongodb_url}")

            self.client = AsyncIOMotorClient(
                settings.mongodb_url,
                serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
                connectTimeoutMS=settings.mongodb_connect_timeout_ms,
                socketTimeoutMS=settings.mongodb_socket_timeout_ms,
                maxPoolSize=settings.mongodb_max_pool_size,
                minPoolSize=settings.mongodb_min_pool_size,
                retryWrites=settings.mongodb_retry_writes,
            )
            database = self.client[settings.database_name]

            await self.client.admin.command("ping")
            self.database = database
            logger.info(f"Connected to MongoDB database '{settings.database_name}'")

        except Exception as db_error:
            # The app still starts; database-backed endpoints answer 503.
            logger.warning(f"MongoDB connection failed: {db_error}")

    async def disconnect(self) -> None:
        """Close MongoDB connection."""
        try:
            if self.client is not None:
                self.client.close()
                logger.info("MongoDB connection closed")
        except Exception as e:
            logger.error(f"Error during database disconnect: {e}")
        finally:
            self.client = None
            self.database = None

    async def create_indexes(self) -> None:
        """Create the indexes the storefront queries rely on."""
        if self.database is None:
            logger.warning("Database not connected, skipping index creation")
            return

        try:
            await self.database.products.create_index("active")
            await self.database.products.create_index("category")
            await self.database.products.create_index([("created_at", DESCENDING)])

            await self.database.orders.create_index("user_id")
            await self.database.orders.create_index("status")
            await self.database.orders.create_index([("created_at", DESCENDING)])
            await self.database.orders.create_index([("user_id", ASCENDING), ("created_at", DESCENDING)])

            await self.database.reviews.create_index(
                [("product_id", ASCENDING), ("user_id", ASCENDING), ("order_id", ASCENDING)]
            )
            await self.database.reviews.create_index([("product_id", ASCENDING), ("approved", ASCENDING)])

            await self.database.messages.create_index([("created_at", DESCENDING)])
            await self.database.messages.create_index("read")

            await self.database.users.create_index("google_id", unique=True, sparse=True)
            await self.database.users.create_index("email")
            await self.database.admins.create_index("username", unique=True)

            logger.info("Database indexes created successfully")

        except Exception as index_error:
            logger.warning(f"Failed to create indexes: {index_error}")

    def get_database(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        if self.database is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.database

    def is_connected(self) -> bool:
        """Check if database is connected."""
        return self.database is not None


# Global database manager instance
db_manager = DatabaseManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for database connection."""
    logger.info(f"Starting up {settings.app_name} v{settings.app_version}")
    await db_manager.connect()
    await db_manager.create_indexes()
    app.state.db_manager = db_manager

    yield

    await db_manager.disconnect()


async def get_database() -> AsyncIOMotorDatabase:
    """FastAPI dependency to get database instance."""
    if not db_manager.is_connected():
        raise HTTPException(
            status_code=503,
            detail="Database connection not available. Please check your MongoDB connection.",
        )
    return db_manager.get_database()


def get_database_manager() -> DatabaseManager:
    """Get database manager instance."""
    return db_manager
