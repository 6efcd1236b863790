# database.py
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from config import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """Owns a single Motor client, created on first use and reused afterwards."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client: Optional[AsyncIOMotorClient] = None

    @property
    def client(self) -> AsyncIOMotorClient:
        if self._client is None:
            logger.info("Connecting to MongoDB database %s", self.settings.MONGODB_DB_NAME)
            self._client = AsyncIOMotorClient(self.settings.MONGODB_URI)
        return self._client

    @property
    def db(self) -> AsyncIOMotorDatabase:
        return self.client[self.settings.MONGODB_DB_NAME]

    def get_employee_collection(self) -> AsyncIOMotorCollection:
        return self.db[self.settings.EMPLOYEE_COLLECTION]

    def close(self):
        if self._client is not None:
            self._client.close()
            self._client = None
