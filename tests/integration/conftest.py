"""Integration test conftest — real SQL fixtures.

Inherits the root conftest.py fixtures (test_engine, db_session,
test_product) and adds integration-specific markers.

All tests in this directory execute real SQL against an in-memory
database that is discarded after each test.
"""

import pytest


@pytest.fixture(autouse=True)
def _mark_integration(request):
    """Auto-mark all tests in this directory as integration."""
    request.node.add_marker(pytest.mark.integration)
