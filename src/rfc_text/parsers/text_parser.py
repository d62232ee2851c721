"""
Structural parser for the plain-text variant of an RFC.

Plain-text RFCs have no markup, so structure is inferred:
- Metadata from labeled fields ('Date:', 'Category:', ...) via extract_labeled
- Sections from numbered heading lines at column 0 ('1. Introduction',
  '3.2. Framing')

Lettered appendix headings ('Appendix A. ...', 'A.1. ...') are not
recognized as section starts; their lines stay in the preceding section.
The text pipeline never produces subsections.
"""

import logging
import re
from typing import Dict, List

from rfc_text.exceptions import StructuralParseFailure
from rfc_text.models import Document
from rfc_text.parsers.field_extractor import (
    LINE_BREAK,
    PARAGRAPH_BREAK,
    collapse_lines,
    extract_labeled,
)
from rfc_text.parsers.normalizer import build_document

logger = logging.getLogger(__name__)


TITLE_LABEL = r'(?:Title|Internet-Draft):'
AUTHORS_LABEL = r'(?:Author|Authors):'
DATE_LABEL = r'(?:Date|Published):'
STATUS_LABEL = r'(?:Status of this Memo|Category):'
# A line that is exactly 'Abstract', plus the line break(s) after it
ABSTRACT_LABEL = r'^[ \t]*Abstract[ \t]*(?:\r?\n)+'

SECTION_HEADING = re.compile(r'^(?:\d+\.)+\s+(.+)$')
_AUTHORS_LABEL_LINE = re.compile(r'^Authors?:', re.IGNORECASE)


def extract_title(text: str) -> str:
    """Single-line value after 'Title:' / 'Internet-Draft:', ended by a blank line."""
    return extract_labeled(text, TITLE_LABEL, PARAGRAPH_BREAK, multiline=False) or ''


def extract_authors(text: str) -> List[str]:
    """
    Authors from an 'Author:' / 'Authors:' block, one per line.

    Example:
        >>> extract_authors('Authors: R. Fielding\\n  J. Gettys\\n\\nBody')
        ['R. Fielding', 'J. Gettys']
    """
    block = extract_labeled(text, AUTHORS_LABEL, PARAGRAPH_BREAK)
    if not block:
        return []

    authors = []
    for line in block.splitlines():
        name = line.strip()
        if name and not _AUTHORS_LABEL_LINE.match(name):
            authors.append(name)
    return authors


def extract_date(text: str) -> str:
    """Value after 'Date:' / 'Published:' up to the end of that line."""
    return extract_labeled(text, DATE_LABEL, LINE_BREAK, multiline=False) or ''


def extract_status(text: str) -> str:
    """Value after 'Status of this Memo:' / 'Category:', collapsed to one line."""
    value = extract_labeled(text, STATUS_LABEL, PARAGRAPH_BREAK)
    return collapse_lines(value) if value else ''


def extract_abstract(text: str) -> str:
    """
    First paragraph after an 'Abstract' line, collapsed to one line.

    Example:
        >>> extract_abstract('Abstract\\n\\nThis document specifies...\\n\\nStatus of this Memo...')
        'This document specifies...'
    """
    value = extract_labeled(text, ABSTRACT_LABEL, PARAGRAPH_BREAK)
    return collapse_lines(value) if value else ''


def split_sections(text: str) -> List[Dict[str, str]]:
    """
    Split text into sections at numbered heading lines.

    Lines between two headings are the first heading's body, kept verbatim
    (blank lines included). A heading whose body has no lines before the
    next heading, or before end of input, is dropped. Lines before the first
    heading belong to no section.

    Returns:
        List of {'title': ..., 'content': ...} dicts in document order
    """
    sections = []
    current_title = None
    current_lines: List[str] = []

    def flush() -> None:
        if current_title is not None and current_lines:
            sections.append({
                'title': current_title,
                'content': '\n'.join(current_lines)
            })

    for line in text.split('\n'):
        match = SECTION_HEADING.match(line)
        title = match.group(1).strip() if match else ''

        if title:
            flush()
            current_title = title
            current_lines = []
        elif current_title is not None:
            current_lines.append(line)

    flush()
    return sections


def parse_text_rfc(text: str, number: str, url: str) -> Document:
    """
    Parse the plain-text variant of an RFC into a Document.

    Args:
        text: Raw text body
        number: RFC number (e.g., '2616')
        url: URL the text was fetched from

    Returns:
        Parsed Document; full_text is the unmodified input

    Raises:
        StructuralParseFailure: If scanning the text fails unexpectedly or
            the result is not a valid Document (e.g. a non-canonical number)
    """
    try:
        title = extract_title(text)
        authors = extract_authors(text)
        date = extract_date(text)
        status = extract_status(text)
        abstract = extract_abstract(text)
        sections = split_sections(text)

        document = build_document(
            number=number,
            url=url,
            title=title,
            authors=authors,
            date=date,
            status=status,
            abstract=abstract,
            sections=sections,
            full_text=text,
            raw=text,
        )
    except Exception as e:
        raise StructuralParseFailure(number, e) from e

    logger.debug(
        f"Parsed text for RFC {number}: {len(document.sections)} sections, "
        f"{len(document.metadata.authors)} authors"
    )
    return document
