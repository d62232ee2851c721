"""Integration tests for rfc-text.

Integration tests validate components with external dependencies:
- Live fetches from the RFC publication host
- Real MongoDB connections

Run with: poetry run pytest tests/integration/ -m integration -v -s
Skipped by default: addopts deselects the integration marker.
"""
