"""
Global pytest configuration and fixtures for the meetingsdk test suite.

This file contains shared fixtures and configurations that are available
to all test modules without explicit import.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Generator

import pytest  # type: ignore
from faker import Faker  # type: ignore

# Make the project root (for tests.*) and the package source importable
project_root: Path = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "backend" / "python"))

from tests.fixtures.http_fixtures import (  # noqa: E402, F401
    meeting_client,
    recorder,
    users_datasource,
)

# Initialize Faker for generating test data
fake: Faker = Faker()


# ============================================================================
# Session-level fixtures
# ============================================================================


@pytest.fixture(scope="session")
def faker_instance() -> Faker:
    """
    Provide a Faker instance for generating test data.

    Returns:
        Configured Faker instance
    """
    return fake


# ============================================================================
# Function-level fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """
    Reset environment state after each test.
    This ensures tests don't interfere with each other.
    """
    original_env: Dict[str, str] = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


# ============================================================================
# Test lifecycle hooks
# ============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Add markers to tests based on their location.
    """
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
