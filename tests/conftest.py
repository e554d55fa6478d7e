"""Pytest configuration for bucketfs tests.

Ensures the project root is in sys.path so imports work correctly.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tests.fakes.object_store import FakeObjectStore  # noqa: E402


@pytest.fixture
def fake_store() -> FakeObjectStore:
    return FakeObjectStore()
