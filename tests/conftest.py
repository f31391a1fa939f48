"""pytest configuration and fixtures for formulaops tests"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add the project root to the Python path
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from formulaops.main import api_app
from formulaops.operators.registry import OperatorRegistry, default_registry


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "contract: operator contract tests")


@pytest.fixture(scope="function")
def api_client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(api_app)


@pytest.fixture(scope="session")
def registry() -> OperatorRegistry:
    return default_registry()
