"""
rfc-text: RFC retrieval and normalization library.

Main package exports for user-facing API.
"""

from rfc_text.exceptions import (
    CompositeRetrievalFailure,
    InvalidIdentifierError,
    RfcTextError,
    StructuralParseFailure,
    TransportFailure,
)
from rfc_text.models import Document, DocumentMetadata, Section, Subsection
from rfc_text.services import (
    InMemoryDocumentCache,
    MongoDocumentCache,
    RfcRetrievalService,
    RfcTransport,
)

__all__ = [
    'CompositeRetrievalFailure',
    'Document',
    'DocumentMetadata',
    'InMemoryDocumentCache',
    'InvalidIdentifierError',
    'MongoDocumentCache',
    'RfcRetrievalService',
    'RfcTextError',
    'RfcTransport',
    'Section',
    'StructuralParseFailure',
    'Subsection',
    'TransportFailure',
    'fetch_rfc',
]


def fetch_rfc(identifier: str) -> Document:
    """
    Resolve a single RFC with a short-lived transport and no cache.

    Args:
        identifier: RFC identifier (e.g., '2616' or 'RFC 2616')

    Returns:
        Parsed Document

    Raises:
        InvalidIdentifierError: If identifier has no usable RFC number
        CompositeRetrievalFailure: If both the HTML and text variants failed

    Example:
        >>> from rfc_text import fetch_rfc
        >>> doc = fetch_rfc('RFC 2616')
        >>> doc.metadata.title
        'Hypertext Transfer Protocol -- HTTP/1.1'
    """
    with RfcTransport() as transport:
        return RfcRetrievalService(transport=transport).resolve(identifier)
