"""Root test configuration: shared fixture file paths"""

from pathlib import Path

import pytest


_FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(name="documents_yaml")
def documents_yaml_fixture():
    """Five project documents; the last one has no id."""
    return _FIXTURES / "documents.yaml"
