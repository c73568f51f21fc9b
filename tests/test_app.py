"""Application wiring: health check, isolation and error envelope."""

from fastapi.testclient import TestClient

from spirit_emeraude_api.app.api.deps import get_product_service
from spirit_emeraude_api.app.core.config import settings
from spirit_emeraude_api.app.core.store import RecordStore
from spirit_emeraude_api.app.main import create_app

PREFIX = settings.api_prefix


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_apps_do_not_share_stores():
    first = TestClient(create_app(store=RecordStore(seed=False)))
    second = TestClient(create_app(store=RecordStore(seed=True)))
    assert first.get(f"{PREFIX}/product").json()["data"] == []
    assert second.get(f"{PREFIX}/product").json()["data"]


def test_default_store_is_seeded():
    client = TestClient(create_app())
    assert client.get(f"{PREFIX}/gallery").json()["data"]


def test_unexpected_failure_is_500_envelope(app):
    class BrokenService:
        async def list(self, category=None):
            raise RuntimeError("boom")

    app.dependency_overrides[get_product_service] = lambda: BrokenService()
    client = TestClient(app, raise_server_exceptions=False)
    response = client.get(f"{PREFIX}/product")
    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error", "data": None}


def test_unknown_route_uses_envelope(client):
    response = client.get(f"{PREFIX}/nothing-here")
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_plural_aliases_hidden_from_schema(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert f"{PREFIX}/product" in paths
    assert f"{PREFIX}/products" not in paths
