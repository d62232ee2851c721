"""
Wraps raw parser output into the canonical Document model.

Both pipelines hand over plain dicts/strings; this is the single place where
defaults are applied and the model invariants (non-empty section titles,
subsections None instead of empty, non-empty full_text) are enforced.
"""

from typing import Any, Dict, Iterable, List, Optional

from rfc_text.models import Document, DocumentMetadata, Section, Subsection, placeholder_title


def normalize_subsections(raw: Optional[Iterable[Dict[str, Any]]]) -> Optional[List[Subsection]]:
    """Convert subsection dicts, dropping untitled ones. Returns None if none remain."""
    if not raw:
        return None

    subsections = [
        Subsection(title=item['title'].strip(), content=item.get('content') or '')
        for item in raw
        if (item.get('title') or '').strip()
    ]
    return subsections or None


def normalize_sections(raw: Iterable[Dict[str, Any]]) -> List[Section]:
    """
    Convert section dicts into Section models, preserving order.

    Args:
        raw: Section dicts with 'title', 'content' and optional 'subsections'

    Returns:
        Sections with non-empty titles only
    """
    sections = []
    for item in raw:
        title = (item.get('title') or '').strip()
        if not title:
            continue
        sections.append(Section(
            title=title,
            content=item.get('content') or '',
            subsections=normalize_subsections(item.get('subsections'))
        ))
    return sections


def build_document(
    number: str,
    url: str,
    title: str = '',
    authors: Optional[Iterable[str]] = None,
    date: str = '',
    status: str = '',
    abstract: str = '',
    sections: Optional[Iterable[Dict[str, Any]]] = None,
    full_text: str = '',
    raw: str = ''
) -> Document:
    """
    Assemble a Document, guaranteeing every field is present and typed.

    Args:
        number: RFC number (becomes metadata.number)
        url: Source URL of the parsed variant
        title: Extracted title ('' -> 'RFC {number}')
        authors: Extracted author names (empty entries dropped)
        date: Extracted date
        status: Extracted status
        abstract: Extracted abstract
        sections: Section dicts from a structural parser
        full_text: Extracted full text
        raw: Original input; used as full_text when extraction produced nothing

    Returns:
        Immutable Document
    """
    author_list = [a.strip() for a in (authors or []) if a and a.strip()]

    if not full_text.strip():
        full_text = raw

    metadata = DocumentMetadata(
        number=number,
        title=(title or '').strip() or placeholder_title(number),
        authors=author_list,
        date=(date or '').strip(),
        status=(status or '').strip(),
        abstract=(abstract or '').strip(),
        url=url
    )

    return Document(
        metadata=metadata,
        sections=normalize_sections(sections or []),
        full_text=full_text
    )
