"""Pytest fixtures: isolated stores, app clients and admin credentials."""

import pytest
from fastapi.testclient import TestClient

from spirit_emeraude_api.app.core.security import ADMIN_ROLE, create_access_token
from spirit_emeraude_api.app.core.store import RecordStore
from spirit_emeraude_api.app.main import create_app


@pytest.fixture
def store():
    """Seeded store, fresh for every test."""
    return RecordStore(seed=True)


@pytest.fixture
def empty_store():
    return RecordStore(seed=False)


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_token():
    return create_access_token({"sub": "admin@spiritemeraude.test", "role": ADMIN_ROLE})


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def user_headers():
    token = create_access_token({"sub": "visitor@spiritemeraude.test", "role": "user"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_product():
    return {
        "name": "Sac Test",
        "category": "sac",
        "price": 10000,
        "description": "d",
        "images": ["x.jpg"],
        "isFeatured": False,
        "inStock": True,
        "slug": "sac-test",
    }
