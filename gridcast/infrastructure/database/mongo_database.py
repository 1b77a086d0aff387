"""
MongoDB Database - Infrastructure Layer

Thin wrapper around a pymongo client exposing the handful of
collection operations the repositories need.
"""

from typing import Any, Dict, List, Optional, Sequence

import pymongo.errors
import structlog
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = structlog.get_logger(__name__)

STATIONS_COLLECTION = "stations"
DEMANDS_COLLECTION = "demands"


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Find a single document in a collection.

        Returns:
            The document if found, None otherwise
        """
        return self.db[collection_name].find_one(query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = ASCENDING,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field to sort by
            sort_direction: 1 for ascending, -1 for descending
            skip: Number of documents to skip
            limit: Maximum number of documents to return, 0 for no limit

        Returns:
            List of documents
        """
        cursor = self.db[collection_name].find(query)

        if sort_by:
            cursor = cursor.sort(sort_by, sort_direction)

        cursor = cursor.skip(skip).limit(limit)

        return list(cursor)

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]:
        result = self.db[collection_name].insert_one(document)
        if not result.acknowledged:
            raise pymongo.errors.OperationFailure(
                f"Failed to insert document in {collection_name}"
            )
        return document

    async def insert_many(
        self, collection_name: str, documents: Sequence[Dict[str, Any]]
    ) -> int:
        """
        Insert documents into a collection.

        Returns:
            Number of inserted documents
        """
        if not documents:
            return 0
        result = self.db[collection_name].insert_many(list(documents))
        if not result.acknowledged:
            raise pymongo.errors.OperationFailure(
                f"Failed to insert documents in {collection_name}"
            )
        return len(result.inserted_ids)

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self) -> None:
        """Create the indexes used by the repositories. Called at startup."""
        try:
            self.db[STATIONS_COLLECTION].create_index(
                "id", name="station_id_idx", unique=True
            )
            self.db[DEMANDS_COLLECTION].create_index(
                [("date", DESCENDING)], name="date_desc_idx"
            )
            self.db[DEMANDS_COLLECTION].create_index(
                [("station_id", ASCENDING), ("date", DESCENDING)],
                name="station_date_idx",
            )
        except pymongo.errors.OperationFailure as e:
            logger.warning("mongo.create_indexes_failed", error=str(e))
