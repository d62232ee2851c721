"""
Service layer for rfc-text.

- RfcRetrievalService: identifier -> Document with HTML-first, text-fallback policy
- RfcTransport: HTTP fetch of raw bodies (requests)
- InMemoryDocumentCache / MongoDocumentCache: optional lookup-or-populate caches
"""

from rfc_text.services.cache import DocumentCache, InMemoryDocumentCache
from rfc_text.services.retrieval import (
    FORMAT_ORDER,
    RetrievalAttempt,
    RfcRetrievalService,
)
from rfc_text.services.storage_service import MongoDocumentCache
from rfc_text.services.transport import RfcTransport

__all__ = [
    'DocumentCache',
    'InMemoryDocumentCache',
    'MongoDocumentCache',
    'FORMAT_ORDER',
    'RetrievalAttempt',
    'RfcRetrievalService',
    'RfcTransport',
]
