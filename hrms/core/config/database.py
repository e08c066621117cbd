from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from .hrms_settings import HrmsSettings
from hrms.utils.exceptions import DatabaseConnectionError
from hrms.utils.logger import Logger

db_logger = Logger(__name__)


class DatabaseManager:
    """Owns the single MongoDB client shared by every request"""

    def __init__(self, settings: HrmsSettings):
        self.settings = settings
        self.client: AsyncIOMotorClient | None = None
        self.database: AsyncIOMotorDatabase | None = None
        self._is_connected = False

    async def connect(self) -> AsyncIOMotorDatabase:
        """
        Connect and verify with a ping.

        Raises DatabaseConnectionError when the server cannot be reached within
        the connection timeout; the service cannot run without storage.
        """
        client = AsyncIOMotorClient(
            self.settings.mongodb_uri,
            serverSelectionTimeoutMS=self.settings.connection_timeout_ms,
            timeoutMS=self.settings.query_timeout_ms,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            db_logger.critical(f"Failed to connect to MongoDB: {e}")
            raise DatabaseConnectionError(str(e)) from e

        self.client = client
        self.database = client[self.settings.database_name]
        self._is_connected = True
        db_logger.info(f"Connected to MongoDB database '{self.settings.database_name}'")
        return self.database

    def close(self):
        if self.client:
            self.client.close()
            self._is_connected = False
            db_logger.info("Database connection closed")

    async def ping(self) -> bool:
        if not self.client:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            db_logger.warning(f"Database ping failed: {e}")
            return False

    def get_database(self) -> AsyncIOMotorDatabase:
        if self.database is None:
            raise DatabaseConnectionError("Database is not connected")
        return self.database

    def is_connected(self) -> bool:
        return self._is_connected


# FastAPI dependency
async def get_database(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.db_manager.get_database()
