from fastapi.testclient import TestClient

from app.core.security import create_access_token
from app.main import create_app


def test_unexpected_failure_maps_to_server_error(monkeypatch):
    def _boom(db, user_id):
        raise RuntimeError("database went away")

    monkeypatch.setattr("app.services.brands.list_brands", _boom)
    token = create_access_token(1, "user1@example.com")
    with TestClient(create_app(), raise_server_exceptions=False) as test_client:
        resp = test_client.get("/api/brands", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 500
    assert resp.json() == {"message": "Server error"}


def test_malformed_json_body_is_a_bad_request(client, auth_headers):
    resp = client.post(
        "/api/brands",
        headers={**auth_headers, "Content-Type": "application/json"},
        content="{not json",
    )
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid JSON body"}
