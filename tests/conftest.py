"""
Pytest configuration and shared fixtures for valdn tests.
"""

import pytest
from faker import Faker

from valdn import default_registry

fake = Faker()


@pytest.fixture
def sample_data():
    """Provide a valid sign-up payload."""
    return {
        "name": fake.name(),
        "email": fake.email(),
        "company": fake.company(),
        "tags": [fake.word() + "x", fake.word() + "y"],
    }


@pytest.fixture
def registry():
    """A private registry, so tests can register rules freely."""
    return default_registry()


# Configure pytest-asyncio
pytest_plugins = ['pytest_asyncio']
