"""
Structural parser for the HTML variant of an RFC.

Key conventions of the RFC HTML rendering:
1. Document title is the first <h1>
2. Metadata lives in class-tagged containers (.authors .author, .pubdate,
   .abstract, .status)
3. Every <section> at any depth is a section candidate; only candidates with
   a heading are emitted
4. Nested <section> elements anywhere inside a candidate are its subsections
"""

import logging
from typing import Any, Dict, List, Sequence

from lxml import etree, html as lxml_html

from rfc_text.exceptions import StructuralParseFailure
from rfc_text.models import Document
from rfc_text.parsers.field_extractor import (
    all_texts,
    class_xpath,
    first_text,
    inner_html,
    node_text,
)
from rfc_text.parsers.normalizer import build_document

logger = logging.getLogger(__name__)


# Heading rank search order (highest rank first)
SECTION_HEADING_RANKS = ('h2', 'h3', 'h4')
SUBSECTION_HEADING_RANKS = ('h3', 'h4', 'h5')

TITLE_XPATH = '//h1'
AUTHOR_XPATH = class_xpath('authors', 'author')
DATE_XPATH = class_xpath('pubdate')
ABSTRACT_XPATH = class_xpath('abstract')
STATUS_XPATH = class_xpath('status')


def load_html(html: str) -> etree._Element:
    """
    Parse markup into a queryable tree.

    Args:
        html: Raw HTML document

    Returns:
        Root <html> element

    Raises:
        lxml.etree.ParserError: If the document is empty
    """
    try:
        return lxml_html.document_fromstring(html)
    except ValueError:
        # str input carrying an XML encoding declaration
        return lxml_html.document_fromstring(html.encode('utf-8'))


def find_heading(element: etree._Element, ranks: Sequence[str]) -> str:
    """
    Find the heading text of a structural element.

    Headings are searched by rank: every descendant of ranks[0] is tried
    before any of ranks[1], and so on. Headings with no text are passed over.

    Args:
        element: Structural element to search inside
        ranks: Heading tags in search order (e.g., ('h2', 'h3', 'h4'))

    Returns:
        Trimmed heading text, or '' if no non-empty heading exists
    """
    for rank in ranks:
        for heading in element.iterdescendants(rank):
            text = node_text(heading)
            if text:
                return text
    return ''


def parse_subsections(section_elem: etree._Element) -> List[Dict[str, str]]:
    """
    Collect titled subsections of a section element.

    Any <section> nested inside section_elem counts, regardless of depth.
    Subsections without a heading are skipped.
    """
    subsections = []
    for child in section_elem.iterdescendants('section'):
        title = find_heading(child, SUBSECTION_HEADING_RANKS)
        if not title:
            continue
        subsections.append({
            'title': title,
            'content': inner_html(child)
        })
    return subsections


def parse_sections(root: etree._Element) -> List[Dict[str, Any]]:
    """
    Build the section list from every <section> element in document order.

    Returns:
        List of section dicts:
        [
            {
                'title': '1. Introduction',
                'content': '<h2>1. Introduction</h2><p>...</p>',
                'subsections': [{'title': ..., 'content': ...}, ...]
            },
            ...
        ]
    """
    sections = []
    for section_elem in root.iter('section'):
        title = find_heading(section_elem, SECTION_HEADING_RANKS)
        if not title:
            # No heading: skip the element along with its content
            continue

        sections.append({
            'title': title,
            'content': inner_html(section_elem),
            'subsections': parse_subsections(section_elem)
        })
    return sections


def extract_full_text(root: etree._Element) -> str:
    """Text content of <body> (or the whole tree if there is none), trimmed."""
    body = root.find('body')
    if body is None:
        body = root
    return node_text(body)


def parse_html_rfc(html: str, number: str, url: str) -> Document:
    """
    Parse the HTML variant of an RFC into a Document.

    Missing metadata never fails the parse; fields fall back to empty values
    and the title to 'RFC {number}'.

    Args:
        html: Raw HTML body
        number: RFC number (e.g., '2616')
        url: URL the HTML was fetched from

    Returns:
        Parsed Document

    Raises:
        StructuralParseFailure: If the markup cannot be turned into a tree
            or navigating it fails, or the result is not a valid Document
            (e.g. a number that is not canonical)
    """
    try:
        root = load_html(html)

        title = first_text(root, TITLE_XPATH)
        authors = all_texts(root, AUTHOR_XPATH)
        date = first_text(root, DATE_XPATH)
        abstract = first_text(root, ABSTRACT_XPATH)
        status = first_text(root, STATUS_XPATH)
        sections = parse_sections(root)
        full_text = extract_full_text(root)

        document = build_document(
            number=number,
            url=url,
            title=title,
            authors=authors,
            date=date,
            status=status,
            abstract=abstract,
            sections=sections,
            full_text=full_text,
            raw=html,
        )
    except Exception as e:
        raise StructuralParseFailure(number, e) from e

    logger.debug(
        f"Parsed HTML for RFC {number}: {len(document.sections)} sections, "
        f"{len(document.metadata.authors)} authors"
    )
    return document
