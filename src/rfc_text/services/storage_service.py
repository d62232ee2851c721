"""
MongoDB-backed document cache.

Stores one MongoDB document per RFC with the RFC number as _id, so the
unique primary key gives first-writer-wins semantics across processes:
a DuplicateKeyError on insert means another writer already stored it.
"""

from datetime import datetime
import logging
from typing import Any, Dict, Optional

from pymongo import MongoClient
from pymongo.errors import DuplicateKeyError, PyMongoError

from rfc_text.config import get_app_config
from rfc_text.models import Document
from rfc_text.services.cache import DocumentCache

logger = logging.getLogger(__name__)


class MongoDocumentCache(DocumentCache):
    """
    DocumentCache persisted in a MongoDB collection.

    Storage errors never fail a retrieval: a failed lookup is a miss and a
    failed write returns the freshly parsed document uncached.

    Usage:
        >>> cache = MongoDocumentCache()
        >>> service = RfcRetrievalService(cache=cache)
        >>> doc = service.resolve('2616')
        >>> cache.close()

    Context Manager:
        >>> with MongoDocumentCache() as cache:
        ...     cache.get('2616')

    Environment Variables (via config facade):
        - MONGO_HOST: MongoDB host (default: localhost:27017)
        - DB_NAME: Database name (default: RFC)
        - COLLECTION_NAME: Collection name (default: documents)
    """

    def __init__(
        self,
        mongo_uri: Optional[str] = None,
        database: Optional[str] = None,
        collection: Optional[str] = None
    ):
        """
        Connect to MongoDB.

        Parameters take precedence over config values.

        Args:
            mongo_uri: MongoDB connection string
            database: Database name
            collection: Collection name

        Raises:
            ConnectionFailure: If MongoDB is unreachable
        """
        config = get_app_config()

        self.mongo_uri = mongo_uri or config.mongodb_uri
        self.database_name = database or config.db_name
        self.collection_name = collection or config.collection_name

        self.client = MongoClient(
            self.mongo_uri,
            serverSelectionTimeoutMS=5000  # 5 second timeout
        )

        # Test connection
        self.client.admin.command('ping')

        self.db = self.client[self.database_name]
        self.collection = self.db[self.collection_name]

    @staticmethod
    def to_mongo_dict(document: Document) -> Dict[str, Any]:
        """Document as a MongoDB record keyed by RFC number."""
        data = document.to_dict()
        data['_id'] = document.metadata.number
        data['stored_at'] = datetime.now()
        return data

    def get(self, number: str) -> Optional[Document]:
        try:
            record = self.collection.find_one({'_id': number})
        except PyMongoError as e:
            logger.warning(f"Cache lookup failed for RFC {number}: {e}")
            return None

        if record is None:
            return None
        return Document.from_dict(record)

    def put_if_absent(self, document: Document) -> Document:
        number = document.metadata.number
        try:
            self.collection.insert_one(self.to_mongo_dict(document))
            logger.debug(f"Stored RFC {number} in {self.database_name}.{self.collection_name}")
            return document
        except DuplicateKeyError:
            logger.debug(f"RFC {number} already stored, keeping existing document")
            existing = self.get(number)
            return existing if existing is not None else document
        except PyMongoError as e:
            logger.error(f"Failed to store RFC {number}: {e}")
            return document

    def delete(self, number: str) -> int:
        """
        Remove a cached document.

        Returns:
            Number of records deleted (0 or 1)
        """
        result = self.collection.delete_one({'_id': number})
        return result.deleted_count

    def close(self) -> None:
        """Close the MongoDB connection."""
        self.client.close()

    def __enter__(self) -> 'MongoDocumentCache':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
