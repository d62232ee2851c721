"""
Pydantic models for parsed RFC documents.

Both parsing pipelines produce the same canonical shape defined here.
"""

from rfc_text.models.document import (
    Document,
    DocumentMetadata,
    Section,
    Subsection,
    placeholder_title,
)

__all__ = [
    'Document',
    'DocumentMetadata',
    'Section',
    'Subsection',
    'placeholder_title',
]
