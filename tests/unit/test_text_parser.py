"""
Unit tests for the plain-text structural parser.

Key behaviours:
- Labeled metadata fields via regex windows
- Numbered heading lines start sections; bodies kept verbatim
- Headings with no body lines are dropped
- full_text is the unmodified input
"""

import pytest

from rfc_text.exceptions import StructuralParseFailure
from rfc_text.parsers.text_parser import (
    extract_abstract,
    extract_authors,
    extract_date,
    extract_status,
    extract_title,
    parse_text_rfc,
    split_sections,
)


URL = "https://rfc.test/rfc/rfc9999.txt"


@pytest.fixture
def document(sample_text):
    return parse_text_rfc(sample_text, "9999", URL)


class TestMetadata:
    """Test labeled metadata extraction."""

    def test_parsed_metadata(self, document):
        meta = document.metadata
        assert meta.number == "9999"
        assert meta.title == "Example Protocol Framework"
        assert meta.authors == ("A. Author", "B. Writer")
        assert meta.date == "March 2024"
        assert meta.status == "Standards Track"
        assert meta.abstract == (
            "This document specifies an example protocol for testing purposes."
        )
        assert meta.url == URL

    def test_abstract_stops_at_blank_line(self):
        text = "Abstract\n\nThis document specifies...\n\nStatus of this Memo..."
        assert extract_abstract(text) == "This document specifies..."

    def test_abstract_line_must_be_exact(self):
        text = "The Abstract of this memo\n\nIs not an abstract.\n\n"
        assert extract_abstract(text) == ""

    def test_abstract_heading_case_insensitive(self):
        text = "ABSTRACT\n\n   Shouted abstract.\n\n"
        assert extract_abstract(text) == "Shouted abstract."

    def test_authors_on_label_line(self):
        text = "Author: J. Postel\n\nBody"
        assert extract_authors(text) == ["J. Postel"]

    def test_authors_missing(self):
        assert extract_authors("No people here.\n\n") == []

    def test_date_is_single_line(self):
        text = "Published: June 1999\nNot part of the date\n"
        assert extract_date(text) == "June 1999"

    def test_status_of_this_memo_label_collapsed(self):
        text = "Status of this Memo: This memo provides\n   information.\n\n"
        assert extract_status(text) == "This memo provides information."

    def test_internet_draft_title(self):
        text = "Internet-Draft: My Draft Title\n\nBody"
        assert extract_title(text) == "My Draft Title"

    def test_missing_title_uses_placeholder(self):
        doc = parse_text_rfc("1.  Intro\n\n   Body.\n", "768", URL)
        assert doc.metadata.title == "RFC 768"

    def test_missing_fields_are_empty(self):
        doc = parse_text_rfc("Nothing structured here.\n", "1", URL)
        meta = doc.metadata
        assert (meta.authors, meta.date, meta.status, meta.abstract) == ((), "", "", "")


class TestSections:
    """Test numbered-heading section detection."""

    def test_sections_from_fixture(self, document):
        """'2. Protocol Overview' has no body before '2.1.' so it is dropped."""
        assert [s.title for s in document.sections] == [
            "Introduction",
            "Framing",
            "Security Considerations",
        ]

    def test_body_is_verbatim_including_blank_lines(self, document):
        assert document.sections[0].content == "\n   The example protocol is simple.\n"

    def test_text_sections_have_no_subsections(self, document):
        assert all(s.subsections is None for s in document.sections)

    def test_heading_without_body_is_dropped(self):
        text = "1. Intro\n2. Background\nSome background."
        sections = split_sections(text)

        assert [s['title'] for s in sections] == ["Background"]
        assert sections[0]['content'] == "Some background."

    def test_final_heading_without_body_is_dropped(self):
        assert split_sections("1. Only\nbody\n2. Trailing") == [
            {'title': 'Only', 'content': 'body'}
        ]

    def test_lines_before_first_heading_are_ignored(self):
        sections = split_sections("Preamble\nmore preamble\n1. First\nbody")
        assert sections == [{'title': 'First', 'content': 'body'}]

    def test_dotted_groups(self):
        sections = split_sections("3.2.1. Deep Framing\nx\n")
        assert sections[0]['title'] == "Deep Framing"

    def test_indented_and_unnumbered_lines_are_not_headings(self):
        text = "1. Real\n   2. Indented\n1 Missing dot\nA.1. Appendix\n"
        sections = split_sections(text)

        assert [s['title'] for s in sections] == ["Real"]
        assert "A.1. Appendix" in sections[0]['content']

    def test_crlf_headings_stripped_bodies_verbatim(self):
        """Titles lose the trailing CR; body lines keep it."""
        sections = split_sections("1. Intro\r\nbody\r\n2. Next\r\nmore")

        assert sections == [
            {'title': 'Intro', 'content': 'body\r'},
            {'title': 'Next', 'content': 'more'},
        ]

    def test_crlf_document(self):
        text = "Title: Example\r\n\r\nDate: May 2020\r\n\r\n1.  Intro\r\n   Body.\r\n"
        doc = parse_text_rfc(text, "1", URL)

        assert doc.metadata.title == "Example"
        assert doc.metadata.date == "May 2020"
        assert [s.title for s in doc.sections] == ["Intro"]
        assert doc.full_text == text

    def test_no_headings_means_no_sections(self):
        text = "Just some text\nwithout numbered headings\n"
        doc = parse_text_rfc(text, "1", URL)

        assert doc.sections == ()
        assert doc.full_text == text


class TestFailures:
    """Test structural failures."""

    def test_non_canonical_number_raises_structural_parse_failure(self):
        with pytest.raises(StructuralParseFailure) as exc_info:
            parse_text_rfc("1. A\nb\n", "2616a", URL)

        assert exc_info.value.number == "2616a"
        assert exc_info.value.__cause__ is not None


class TestFullText:
    """Test full text fallback."""

    def test_full_text_is_unmodified_input(self, sample_text, document):
        assert document.full_text == sample_text

    def test_parsing_is_idempotent(self, sample_text):
        assert parse_text_rfc(sample_text, "9999", URL) == parse_text_rfc(sample_text, "9999", URL)
