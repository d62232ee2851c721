"""
Fetch Script: Resolve RFCs and print a summary

Resolves each RFC number given on the command line (HTML first, plain text
as fallback) and prints its metadata and section outline.

Usage:
    python fetch_rfc.py 2616 7230 "RFC 9110"
    python fetch_rfc.py 2616 --store     # also cache documents in MongoDB
"""

import logging
import sys

from rfc_text.config import get_app_config, get_sources_config
from rfc_text.exceptions import CompositeRetrievalFailure, InvalidIdentifierError
from rfc_text.services import MongoDocumentCache, RfcRetrievalService, RfcTransport

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

STORE = '--store' in sys.argv
identifiers = [arg for arg in sys.argv[1:] if not arg.startswith('--')]

if not identifiers:
    print(__doc__)
    sys.exit(1)

print("=" * 80)
print("RFC FETCH")
print("=" * 80)

# === Step 1: Load Configuration ===
print("\n[Step 1] Loading configuration...")
config = get_app_config()
sources = get_sources_config()
print(f"  ✓ Config loaded")
print(f"    - HTML variant: {sources.html_url('<number>')}")
print(f"    - Text variant: {sources.text_url('<number>')}")
print(f"    - Timeout: {config.request_timeout}s")

# === Step 2: Optional MongoDB Cache ===
cache = None
if STORE:
    print("\n[Step 2] Connecting to MongoDB...")
    try:
        cache = MongoDocumentCache()
        print(f"  ✓ Connected to MongoDB: {config.db_name}.{config.collection_name}")
    except Exception as e:
        print(f"  ✗ Failed to connect to MongoDB: {e}")
        sys.exit(1)
else:
    print("\n[Step 2] MongoDB cache disabled (pass --store to enable)")

# === Step 3: Resolve ===
print(f"\n[Step 3] Resolving {len(identifiers)} RFC(s)...")
failed = 0

with RfcTransport() as transport:
    service = RfcRetrievalService(transport=transport, cache=cache)

    for identifier in identifiers:
        try:
            doc = service.resolve(identifier)
        except (InvalidIdentifierError, CompositeRetrievalFailure) as e:
            failed += 1
            print(f"\n  ✗ {identifier}: {e}")
            continue

        meta = doc.metadata
        print(f"\n  ✓ RFC {meta.number}: {meta.title}")
        print(f"    - Source: {meta.url}")
        print(f"    - Authors: {', '.join(meta.authors) or '(none found)'}")
        print(f"    - Date: {meta.date or '(none found)'}")
        print(f"    - Status: {meta.status or '(none found)'}")
        print(f"    - Sections: {len(doc.sections)}")
        for section in doc.sections[:10]:
            sub_count = len(section.subsections) if section.subsections else 0
            print(f"        {section.title}" + (f" [{sub_count} subsections]" if sub_count else ""))
        if len(doc.sections) > 10:
            print(f"        ... {len(doc.sections) - 10} more")

if cache is not None:
    cache.close()

print("\n" + "=" * 80)
print(f"Done: {len(identifiers) - failed} resolved, {failed} failed")
print("=" * 80)
