"""
Document cache interface and in-process implementation.

Contract required by the retrieval service:
- get(number) returns a stored Document or None
- put_if_absent(document) stores it unless one is already stored for the
  same number, and returns whichever document is stored (first writer wins)

Documents are immutable once published, so there is no invalidation.
"""

from abc import ABC, abstractmethod
import threading
from typing import Dict, Optional

from rfc_text.models import Document


class DocumentCache(ABC):
    """Abstract base class for Document caches keyed by RFC number."""

    @abstractmethod
    def get(self, number: str) -> Optional[Document]:
        """
        Look up a cached document.

        Args:
            number: RFC number (e.g., '2616')

        Returns:
            Cached Document, or None on a miss
        """
        pass

    @abstractmethod
    def put_if_absent(self, document: Document) -> Document:
        """
        Store a document unless one is already cached for its number.

        Args:
            document: Freshly parsed Document

        Returns:
            The document that is cached after the call (the earlier one if
            another writer got there first)
        """
        pass


class InMemoryDocumentCache(DocumentCache):
    """
    Process-memory cache backed by a dict.

    Safe to share between threads: the lock makes put_if_absent atomic.

    Example:
        >>> cache = InMemoryDocumentCache()
        >>> cache.get('2616') is None
        True
    """

    def __init__(self):
        self._documents: Dict[str, Document] = {}
        self._lock = threading.Lock()

    def get(self, number: str) -> Optional[Document]:
        with self._lock:
            return self._documents.get(number)

    def put_if_absent(self, document: Document) -> Document:
        number = document.metadata.number
        with self._lock:
            return self._documents.setdefault(number, document)

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    def __contains__(self, number: object) -> bool:
        with self._lock:
            return number in self._documents
