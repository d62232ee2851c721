"""
RFC Retrieval Service

Resolves an RFC identifier to a Document:
- HTML variant first (richer structure: subsections, markup content)
- Plain-text variant on any HTML fetch or parse failure
- CompositeRetrievalFailure only when both variants failed

Each variant is attempted exactly once. Every attempt yields a tagged
RetrievalAttempt; the fallback policy reads the tag instead of nesting
exception handlers.
"""

from dataclasses import dataclass
import logging
from typing import Callable, Dict, Optional, Tuple

from rfc_text.config import SourcesConfig, get_sources_config
from rfc_text.exceptions import CompositeRetrievalFailure
from rfc_text.models import Document
from rfc_text.parsers.html_parser import parse_html_rfc
from rfc_text.parsers.text_parser import parse_text_rfc
from rfc_text.services.cache import DocumentCache
from rfc_text.services.transport import RfcTransport
from rfc_text.validators import validate_rfc_number

logger = logging.getLogger(__name__)


# Format variants in the order they are attempted
FORMAT_ORDER: Tuple[str, ...] = ('html', 'text')

_PARSERS: Dict[str, Callable[[str, str, str], Document]] = {
    'html': parse_html_rfc,
    'text': parse_text_rfc,
}


@dataclass
class RetrievalAttempt:
    """Result of fetching and parsing one format variant."""
    format: str  # 'html', 'text'
    url: str
    status: str  # 'success', 'failed'
    document: Optional[Document] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.status == 'success'


class RfcRetrievalService:
    """
    Service for resolving RFC identifiers to parsed Documents.

    Usage:
        with RfcTransport() as transport:
            service = RfcRetrievalService(transport=transport)
            doc = service.resolve('RFC 2616')
            print(doc.metadata.title, doc.metadata.url)

    With a cache (lookup-or-populate, first writer wins):
        service = RfcRetrievalService(cache=InMemoryDocumentCache())
    """

    def __init__(
        self,
        transport: Optional[RfcTransport] = None,
        cache: Optional[DocumentCache] = None,
        sources: Optional[SourcesConfig] = None
    ):
        """
        Args:
            transport: Object with fetch(url) -> str raising TransportFailure
                (default: RfcTransport())
            cache: Optional DocumentCache consulted before fetching
            sources: URL templates (default: config/sources.yaml)
        """
        self.transport = transport or RfcTransport()
        self.cache = cache
        self.sources = sources or get_sources_config()

    def variant_url(self, variant: str, number: str) -> str:
        """URL of a format variant for an RFC number."""
        if variant == 'html':
            return self.sources.html_url(number)
        if variant == 'text':
            return self.sources.text_url(number)
        raise ValueError(f"Unknown format variant: {variant}")

    def attempt(self, variant: str, number: str) -> RetrievalAttempt:
        """
        Fetch and parse a single format variant.

        Any failure (transport, parse, or an unexpected error from an injected
        transport) is captured in the returned attempt, not raised.
        """
        url = self.variant_url(variant, number)
        parser = _PARSERS[variant]

        try:
            body = self.transport.fetch(url)
            document = parser(body, number, url)
        except Exception as e:
            return RetrievalAttempt(format=variant, url=url, status='failed', error=e)

        return RetrievalAttempt(format=variant, url=url, status='success', document=document)

    def resolve(self, identifier: str) -> Document:
        """
        Resolve an RFC identifier to a Document.

        Args:
            identifier: RFC identifier ('2616', 'RFC 2616', 'rfc2616')

        Returns:
            Parsed Document; metadata.url is the URL of the variant that
            succeeded and metadata.number is the canonical number (prefix
            and leading zeros removed, so '0793' resolves as '793')

        Raises:
            InvalidIdentifierError: If identifier has no usable RFC number
            CompositeRetrievalFailure: If every format variant failed

        Example:
            >>> service = RfcRetrievalService()
            >>> doc = service.resolve('2616')
            >>> doc.metadata.number
            '2616'
        """
        number = validate_rfc_number(identifier)

        if self.cache is not None:
            cached = self.cache.get(number)
            if cached is not None:
                logger.info(f"RFC {number} served from cache")
                return cached

        last_attempt = None
        for variant in FORMAT_ORDER:
            if last_attempt is not None:
                logger.warning(
                    f"Failed to fetch {last_attempt.format.upper()} format for RFC {number}, "
                    f"trying {variant.upper()} format: {last_attempt.error}"
                )

            last_attempt = self.attempt(variant, number)
            if last_attempt.succeeded:
                break

        if not last_attempt.succeeded:
            logger.error(
                f"All formats failed for RFC {number}; "
                f"last {last_attempt.format} error: {last_attempt.error}"
            )
            raise CompositeRetrievalFailure(
                number, last_attempt.format, last_attempt.error
            ) from last_attempt.error

        document = last_attempt.document
        logger.info(
            f"Resolved RFC {number} via {last_attempt.format} "
            f"({len(document.sections)} sections): {document.metadata.title}"
        )

        if self.cache is not None:
            document = self.cache.put_if_absent(document)

        return document
