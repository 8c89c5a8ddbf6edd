# api/database.py

"""
MongoDB connection management for the Geckowatch API.
Supports both local MongoDB and MongoDB Atlas (mongodb+srv://).
"""

from pymongo import MongoClient
from pymongo.database import Database

from adapters.mongodb.connection import mask_connection_string
from api.config import get_settings

# Global client instance
_client: MongoClient | None = None


def get_client() -> MongoClient:
    """Get or create MongoDB client."""
    global _client
    if _client is None:
        settings = get_settings()
        print(f"Connecting to MongoDB at {mask_connection_string(settings.mongodb_uri)}...")
        _client = MongoClient(settings.mongodb_uri)
    return _client


def get_database() -> Database:
    """Get the geckowatch database."""
    settings = get_settings()
    return get_client()[settings.mongodb_database]


def close_connection():
    """Close the MongoDB connection."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
