# adapters/mongodb/connection.py

"""
MongoDB connection manager for the Habitat Condition System.

Provides a singleton connection pool and database reference.
Supports both local MongoDB and MongoDB Atlas (mongodb+srv://).
"""

import os
import re
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from domain.ports import Logger


DEFAULT_URI = "mongodb://localhost:27017"
DEFAULT_DATABASE = "geckowatch"


def mask_connection_string(uri: str) -> str:
    """Mask password in connection string for safe logging."""
    return re.sub(r'(://[^:]+:)[^@]+(@)', r'\1****\2', uri)


class MongoDBConnection:
    """
    Singleton MongoDB connection manager.

    Usage:
        conn = MongoDBConnection.from_env()
        db = conn.get_database()
        readings = db["readings"]
    """

    _instance: Optional['MongoDBConnection'] = None
    _client: Optional[MongoClient] = None
    _database: Optional[Database] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(
        self,
        uri: str = DEFAULT_URI,
        database: str = DEFAULT_DATABASE,
        server_selection_timeout_ms: int = 5000,
        logger: Optional[Logger] = None
    ):
        """
        Initialize MongoDB connection.

        Args:
            uri: MongoDB connection URI (supports mongodb:// and mongodb+srv://)
            database: Database name to use
            server_selection_timeout_ms: How long to wait for a reachable server
            logger: Port for logging (optional, uses print if not provided)
        """
        if self._client is None:
            self._uri = uri
            self._database_name = database
            self._timeout_ms = server_selection_timeout_ms
            self._logger = logger
            self._connect()

    @classmethod
    def from_env(cls, logger: Optional[Logger] = None) -> 'MongoDBConnection':
        """Build the connection from MONGODB_URI / MONGODB_DATABASE."""
        return cls(
            uri=os.getenv("MONGODB_URI", DEFAULT_URI),
            database=os.getenv("MONGODB_DATABASE", DEFAULT_DATABASE),
            logger=logger
        )

    def _connect(self):
        """Establish connection to MongoDB and verify it with a ping."""
        self._log(f"Connecting to MongoDB at {mask_connection_string(self._uri)}...")
        self._client = MongoClient(self._uri, serverSelectionTimeoutMS=self._timeout_ms)
        self._database = self._client[self._database_name]

        try:
            self._client.admin.command('ping')
        except PyMongoError as e:
            self._log(f"MongoDB connection failed: {e}", error=True)
            raise
        self._log(f"Connected to MongoDB database: {self._database_name}")

    def _log(self, message: str, error: bool = False):
        if self._logger is None:
            print(message)
        elif error:
            self._logger.error(message)
        else:
            self._logger.info(message)

    def get_database(self) -> Database:
        """Get the database reference."""
        if self._database is None:
            self._connect()
        return self._database

    def close(self):
        """Close the MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            self._log("MongoDB connection closed")

    @classmethod
    def reset(cls):
        """Reset the singleton instance (useful for testing)."""
        if cls._instance is not None:
            cls._instance.close()
        cls._instance = None
