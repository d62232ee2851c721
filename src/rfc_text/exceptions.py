"""
Error taxonomy for RFC retrieval.

Only CompositeRetrievalFailure (and InvalidIdentifierError for bad input)
ever reaches callers of RfcRetrievalService.resolve(). Transport and parse
failures are recovered locally by falling back to the next format variant.
Missing optional fields are never errors.
"""

from typing import Optional


class RfcTextError(Exception):
    """Base class for all rfc-text errors."""


class InvalidIdentifierError(RfcTextError, ValueError):
    """Raised when an RFC identifier does not contain a usable number."""


class TransportFailure(RfcTextError):
    """
    Fetch could not complete (connection error, timeout, HTTP error, empty body).

    Attributes:
        url: URL that was requested
        cause: Underlying exception or reason string
    """

    def __init__(self, url: str, cause: object):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch {url}: {cause}")


class StructuralParseFailure(RfcTextError):
    """
    Navigating the fetched content failed.

    Signals the orchestrator to fall back; never surfaced to callers directly.
    """

    def __init__(self, number: str, cause: object):
        self.number = number
        self.cause = cause
        super().__init__(f"Failed to parse RFC {number}: {cause}")


class CompositeRetrievalFailure(RfcTextError):
    """
    Every format variant was attempted and failed.

    Attributes:
        number: Requested RFC number
        variant: Format of the last attempted variant ('html' or 'text')
        cause: Exception raised by the last attempted variant
    """

    def __init__(self, number: str, variant: str, cause: Optional[BaseException]):
        self.number = number
        self.variant = variant
        self.cause = cause
        super().__init__(
            f"Failed to fetch RFC {number}: {variant} variant failed: {cause}"
        )
