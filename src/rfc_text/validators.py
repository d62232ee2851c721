"""
Reusable field validators for Pydantic models and service inputs.

Accepts the identifier spellings people actually type ('2616', 'RFC 2616',
'rfc2616', 'RFC-0793') and reduces them to the bare RFC number.
"""

import re

from rfc_text.exceptions import InvalidIdentifierError


_IDENTIFIER_PATTERN = re.compile(r'^\s*(?:rfc)?[\s-]*0*(\d+)\s*$', re.IGNORECASE)


def validate_rfc_number(identifier: str) -> str:
    """
    Validate an RFC identifier and return its canonical number.

    Args:
        identifier: RFC identifier (e.g., '2616', 'RFC 2616', 'rfc2616')

    Returns:
        Number without prefix or leading zeros (e.g., '2616')

    Raises:
        InvalidIdentifierError: If no positive RFC number can be read

    Example:
        >>> validate_rfc_number('RFC 2616')
        '2616'
        >>> validate_rfc_number('rfc0793')
        '793'
        >>> validate_rfc_number('draft-ietf-foo')  # Raises InvalidIdentifierError
    """
    if identifier is None:
        raise InvalidIdentifierError("RFC identifier must not be None")

    match = _IDENTIFIER_PATTERN.match(str(identifier))
    if not match:
        raise InvalidIdentifierError(
            f"RFC identifier must be a number, optionally prefixed with 'RFC', "
            f"got: '{identifier}'\n"
            f"Example: '2616' or 'RFC 2616'"
        )

    number = match.group(1)
    if int(number) == 0:
        raise InvalidIdentifierError(
            f"RFC number must be positive, got: '{identifier}'"
        )

    return number
