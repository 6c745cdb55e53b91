from datetime import timedelta

from app.core.security import create_access_token, decode_access_token


def test_login_returns_token_for_seeded_user(client):
    resp = client.post("/api/auth/login", json={"email": "user1@example.com", "password": "password123"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Login successful"
    assert body["user"]["email"] == "user1@example.com"
    claims = decode_access_token(body["token"])
    assert claims == {"id": body["user"]["id"], "email": "user1@example.com"}


def test_login_rejects_bad_credentials_with_401(client):
    attempts = [
        {"email": "user1@example.com", "password": "wrong"},
        {"email": "nobody@example.com", "password": "password123"},
        {"email": "not-an-email", "password": "password123"},
        {"email": "user1@example.com"},
        {},
        {"email": None, "password": "password123"},
        {"email": 123, "password": "x"},
        {"email": "user1@example.com", "password": None},
        {"email": ["user1@example.com"], "password": "password123"},
    ]
    for payload in attempts:
        resp = client.post("/api/auth/login", json=payload)
        assert resp.status_code == 401, payload
        assert resp.json() == {"message": "Invalid credentials"}


def test_logout_is_stateless(client):
    resp = client.post("/api/auth/logout")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Logout successful"}


def test_verify_requires_token(client, auth_headers):
    missing = client.get("/api/auth/verify")
    assert missing.status_code == 401
    assert missing.json() == {"message": "Access token required"}

    invalid = client.get("/api/auth/verify", headers={"Authorization": "Bearer not-a-jwt"})
    assert invalid.status_code == 403
    assert invalid.json() == {"message": "Invalid token"}

    ok = client.get("/api/auth/verify", headers=auth_headers)
    assert ok.status_code == 200
    assert ok.json()["valid"] is True
    assert ok.json()["user"]["email"] == "user1@example.com"


def test_expired_token_is_rejected(client):
    token = create_access_token(1, "user1@example.com", expires_delta=timedelta(seconds=-5))
    resp = client.get("/api/brands", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 403


def test_protected_routes_reject_anonymous_requests(client):
    routes = [
        ("get", "/api/brands"),
        ("post", "/api/brands"),
        ("put", "/api/brands/1"),
        ("delete", "/api/brands/1"),
        ("get", "/api/responses/brand/1"),
        ("post", "/api/responses/generate/1"),
        ("post", "/api/responses/1/rate"),
    ]
    for method, path in routes:
        resp = getattr(client, method)(path)
        assert resp.status_code == 401, path


def test_health_and_backend_test_endpoints(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/api/test").json() == {"message": "Backend works!"}
