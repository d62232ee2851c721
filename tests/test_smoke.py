"""
Smoke Tests - Quick sanity checks with the live RFC host

These tests make REAL HTTP requests to verify basic functionality.
Run them manually to ensure the system works end-to-end.

Usage:
    # Run smoke tests explicitly
    poetry run pytest -m smoke -v

    # Skip smoke tests (default)
    poetry run pytest tests/

Requirements:
- Active internet connection
- Optional .env overriding RFC_BASE_URL / REQUEST_TIMEOUT
"""

import pytest
from dotenv import load_dotenv

from rfc_text import fetch_rfc


# Mark all tests in this file as smoke tests (disabled by default)
pytestmark = pytest.mark.smoke


@pytest.fixture(scope="module", autouse=True)
def load_env():
    load_dotenv()


@pytest.mark.parametrize("identifier,number", [
    ("2616", "2616"),
    ("RFC 9110", "9110"),
    ("rfc-791", "791"),
])
def test_fetch_rfc(identifier, number):
    doc = fetch_rfc(identifier)

    print(f"\n✓ RFC {doc.metadata.number}: {doc.metadata.title}")
    print(f"  {len(doc.sections)} sections, {len(doc.full_text):,} chars")

    assert doc.metadata.number == number
    assert doc.metadata.title
    assert doc.full_text
