"""HTTP tests for the contact form and its admin views."""

import pytest

from spirit_emeraude_api.app.core.config import settings

PREFIX = settings.api_prefix

MESSAGE = {
    "name": "Awa Mabiala",
    "phone": "06 123 45 67",
    "email": "awa@example.com",
    "subject": "Formation",
    "message": "Bonjour, quelles sont les dates de la prochaine formation ?",
}


def test_send_contact_message(client, store):
    response = client.post(f"{PREFIX}/contact", json=MESSAGE)
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Message envoyé avec succès"
    assert body["data"]["id"]
    assert {k: body["data"][k] for k in MESSAGE} == MESSAGE
    assert [m.id for m in store.contact_messages.list()] == [body["data"]["id"]]


def test_optional_fields_may_be_omitted_or_blank(client):
    payload = {"name": "Jo", "phone": "06123456", "email": "", "message": "Un message assez long."}
    response = client.post(f"{PREFIX}/contact", json=payload)
    assert response.status_code == 201
    assert response.json()["data"]["email"] is None
    assert response.json()["data"]["subject"] is None


def test_email_domain_is_stored_lowercased(client, store):
    response = client.post(f"{PREFIX}/contact", json={**MESSAGE, "email": "Awa@Example.COM"})
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["email"] == "Awa@example.com"
    assert store.contact_messages.get(data["id"]).email == "Awa@example.com"


@pytest.mark.parametrize(
    "field, value",
    [("name", "A"), ("message", "123456789"), ("email", "not-an-email"), ("phone", "123")],
)
def test_invalid_message_is_rejected_and_not_stored(client, store, field, value):
    before = len(store.contact_messages.list())
    response = client.post(f"{PREFIX}/contact", json={**MESSAGE, field: value})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert body["data"] is None
    assert [d["loc"] for d in body["details"]] == [["body", field]]
    assert len(store.contact_messages.list()) == before


def test_missing_required_fields_are_all_reported(client):
    response = client.post(f"{PREFIX}/contact", json={})
    assert response.status_code == 400
    fields = {d["loc"][-1] for d in response.json()["details"]}
    assert fields == {"name", "phone", "message"}


def test_admin_lists_and_deletes_messages(client, admin_headers):
    sent = client.post(f"{PREFIX}/contact", json=MESSAGE).json()["data"]

    listed = client.get(f"{PREFIX}/contact", headers=admin_headers)
    assert listed.status_code == 200
    assert [m["id"] for m in listed.json()["data"]] == [sent["id"]]

    fetched = client.get(f"{PREFIX}/contact/{sent['id']}", headers=admin_headers)
    assert fetched.json()["data"] == sent

    deleted = client.delete(f"{PREFIX}/contact/{sent['id']}", headers=admin_headers)
    assert deleted.status_code == 200
    assert client.get(f"{PREFIX}/contact", headers=admin_headers).json()["data"] == []
    assert client.delete(f"{PREFIX}/contact/{sent['id']}", headers=admin_headers).status_code == 404


def test_listing_messages_requires_admin(client, user_headers):
    assert client.get(f"{PREFIX}/contact").status_code == 401
    assert client.get(f"{PREFIX}/contact", headers=user_headers).status_code == 403
