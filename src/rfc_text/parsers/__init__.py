"""
Parsing modules for RFC documents.

Two independent pipelines produce the same Document shape:
- HTML: DOM navigation over class/tag conventions (lxml)
- Text: line scanning for numbered headings plus labeled-field regex windows
"""

from .field_extractor import (
    LINE_BREAK,
    PARAGRAPH_BREAK,
    all_texts,
    class_xpath,
    collapse_lines,
    extract_labeled,
    first_text,
    inner_html,
)
from .html_parser import (
    SECTION_HEADING_RANKS,
    SUBSECTION_HEADING_RANKS,
    find_heading,
    parse_html_rfc,
)
from .normalizer import build_document
from .text_parser import parse_text_rfc, split_sections

__all__ = [
    # Field extraction
    'LINE_BREAK',
    'PARAGRAPH_BREAK',
    'all_texts',
    'class_xpath',
    'collapse_lines',
    'extract_labeled',
    'first_text',
    'inner_html',
    # HTML pipeline
    'SECTION_HEADING_RANKS',
    'SUBSECTION_HEADING_RANKS',
    'find_heading',
    'parse_html_rfc',
    # Text pipeline
    'parse_text_rfc',
    'split_sections',
    # Normalization
    'build_document',
]
