"""
Pytest configuration and shared fixtures for backend tests.

This module provides test fixtures for:
- A fresh in-memory catalog per test
- FastAPI test client bound to that catalog
- Users and bearer-token headers
- Test data factories
"""

import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from wanderly.application.services.catalog_store import CatalogStore
from wanderly.config import get_settings
from wanderly.core.dependencies import build_catalog_store
from wanderly.core.security import Principal, hash_password, issue_token
from wanderly.domain.value_objects.coordinates import Location
from wanderly.domain.value_objects.enums import Role
from wanderly.main import create_app


# ==============================================================================
# CATALOG FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def store() -> CatalogStore:
    """Create an empty catalog for testing."""
    return build_catalog_store()


@pytest.fixture
def make_attraction(store):
    """Factory that creates an attraction in the test catalog."""

    def _make(name="Test Attraction", lat=28.6, lng=77.2, **overrides):
        fields = {
            "name": name,
            "category": "historic",
            "description": "A great test attraction",
            "location": Location(lat=lat, lng=lng, address=f"{name} Road, Test City"),
            "price": "$$",
            "images": ["https://example.com/photo.jpg"],
            "amenities": ["Parking"],
        }
        fields.update(overrides)
        return store.create_attraction(fields)

    return _make


# ==============================================================================
# USER FIXTURES
# ==============================================================================

@pytest.fixture
def regular_user(store):
    """A plain user with password 'secret123'."""
    return store.create_user(
        username="traveler",
        email="traveler@example.com",
        password_hash=hash_password("secret123", iterations=1000),
    )


@pytest.fixture
def admin_user(store):
    """An admin user with password 'admin123'."""
    return store.create_user(
        username="admin",
        email="admin@example.com",
        password_hash=hash_password("admin123", iterations=1000),
        role=Role.ADMIN,
    )


def _bearer(user) -> dict:
    principal = Principal(user_id=user.id, email=user.email, role=user.role)
    token = issue_token(principal, get_settings().TOKEN_SECRET, ttl_seconds=3600)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(regular_user):
    """Headers authenticating as the regular user."""
    return _bearer(regular_user)


@pytest.fixture
def admin_headers(admin_user):
    """Headers authenticating as the admin user."""
    return _bearer(admin_user)


# ==============================================================================
# APPLICATION FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def client(store) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client serving the test catalog."""
    app = create_app(catalog_store=store, seed_on_startup=False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables and cached settings after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )
