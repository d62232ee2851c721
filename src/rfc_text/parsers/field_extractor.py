"""
Field extraction primitives shared by the HTML and text parsers.

Absence is a normal outcome here: every helper returns an empty value
(or None for extract_labeled) instead of raising when nothing matches.
"""

import re
from html import escape
from typing import List, Optional

from lxml import etree, html as lxml_html


# Value ends at a blank line (whitespace-only lines count as blank)
PARAGRAPH_BREAK = r'(?:\r?\n\r?\n|\r?\n\s*\r?\n)'

# Value ends at the next line break, or at end of input
LINE_BREAK = r'(?:\r?\n|\Z)'

_LINE_BREAKS = re.compile(r'[ \t]*\r?\n\s*')


def class_xpath(*class_names: str) -> str:
    """
    Build a descendant XPath that matches elements by CSS class.

    Each class name is one step deeper in the tree, so
    class_xpath('authors', 'author') is the XPath form of the CSS selector
    '.authors .author'.

    Example:
        >>> class_xpath('pubdate')
        "//*[contains(concat(' ', normalize-space(@class), ' '), ' pubdate ')]"
    """
    steps = [
        f"//*[contains(concat(' ', normalize-space(@class), ' '), ' {name} ')]"
        for name in class_names
    ]
    return ''.join(steps)


def node_text(node: etree._Element) -> str:
    """Trimmed text content of a node (including descendants)."""
    return ''.join(node.itertext()).strip()


def first_text(root: etree._Element, xpath: str) -> str:
    """
    Return the trimmed text of the first node matching xpath, or ''.

    Args:
        root: Element to search from
        xpath: XPath locator (absolute '//...' paths are scoped to root's tree)

    Returns:
        Trimmed text of the first match, '' when nothing matches
    """
    matches = root.xpath(xpath)
    if not matches:
        return ''
    return node_text(matches[0])


def all_texts(root: etree._Element, xpath: str) -> List[str]:
    """
    Return the trimmed text of every node matching xpath, in document order.

    Nodes whose text is empty are skipped.
    """
    texts = []
    for node in root.xpath(xpath):
        text = node_text(node)
        if text:
            texts.append(text)
    return texts


def inner_html(element: etree._Element) -> str:
    """
    Serialize an element's inner markup (children and text, not the element tag).

    Example:
        >>> el = lxml_html.fragment_fromstring('<section><h2>Intro</h2>Hi</section>')
        >>> inner_html(el)
        '<h2>Intro</h2>Hi'
    """
    parts = [escape(element.text, quote=False) if element.text else '']
    for child in element:
        # tostring() includes the child's tail text by default
        parts.append(lxml_html.tostring(child, encoding='unicode'))
    return ''.join(parts)


def extract_labeled(
    text: str,
    label: str,
    terminator: str = PARAGRAPH_BREAK,
    multiline: bool = True
) -> Optional[str]:
    """
    Extract the value that follows a label in plain text.

    The value starts after the label (leading whitespace skipped) and runs
    lazily up to the first terminator. Matching is case-insensitive; '^' and
    '$' in label match at line boundaries.

    Args:
        text: Text to search
        label: Regex fragment for the label, e.g. r'(?:Date|Published):'
        terminator: Regex fragment ending the value (PARAGRAPH_BREAK or LINE_BREAK)
        multiline: Allow the value to span lines (only meaningful with PARAGRAPH_BREAK)

    Returns:
        Trimmed value, or None if the label was not found or the value is empty

    Example:
        >>> extract_labeled('Date: June 1999\\nStatus: ok', r'Date:', LINE_BREAK)
        'June 1999'
        >>> extract_labeled('nothing here', r'Date:') is None
        True
    """
    flags = re.IGNORECASE | re.MULTILINE
    if multiline:
        flags |= re.DOTALL

    pattern = re.compile(label + r'\s*(.*?)' + terminator, flags)
    match = pattern.search(text)
    if not match:
        return None

    value = match.group(1).strip()
    return value or None


def collapse_lines(value: str) -> str:
    """
    Collapse a multi-line value onto one line.

    Each line break (with surrounding indentation) becomes a single space.

    Example:
        >>> collapse_lines('This document\\n   specifies HTTP.')
        'This document specifies HTTP.'
    """
    return _LINE_BREAKS.sub(' ', value).strip()
