import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class BrandMonitorClient:
    """Thin wrapper over the REST API that remembers the bearer token.

    ``http`` may be any ``httpx.Client``; tests pass FastAPI's ``TestClient``.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        http: httpx.Client | None = None,
        token: str | None = None,
    ) -> None:
        self._http = http or httpx.Client(base_url=base_url, timeout=30.0)
        self.token = token
        self.user: dict | None = None

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        resp = self._http.request(method, path, json=json, headers=headers)
        if resp.status_code >= 400:
            try:
                message = resp.json().get("message", resp.text)
            except ValueError:
                message = resp.text
            logger.warning("api_request_failed", extra={"path": path, "status": resp.status_code})
            raise ApiError(resp.status_code, message)
        return resp.json()

    def login(self, email: str, password: str) -> dict:
        data = self._request("POST", "/api/auth/login", json={"email": email, "password": password})
        self.token = data["token"]
        self.user = data["user"]
        return data

    def logout(self) -> dict:
        data = self._request("POST", "/api/auth/logout")
        self.token = None
        self.user = None
        return data

    def verify(self) -> dict:
        return self._request("GET", "/api/auth/verify")

    def list_brands(self) -> list[dict]:
        return self._request("GET", "/api/brands")

    def create_brand(self, name: str, prompt: str = "") -> dict:
        return self._request("POST", "/api/brands", json={"name": name, "prompt": prompt})

    def update_brand(self, brand_id: int, name: str, prompt: str | None) -> dict:
        return self._request("PUT", f"/api/brands/{brand_id}", json={"name": name, "prompt": prompt})

    def delete_brand(self, brand_id: int) -> dict:
        return self._request("DELETE", f"/api/brands/{brand_id}")

    def list_responses(self, brand_id: int) -> list[dict]:
        return self._request("GET", f"/api/responses/brand/{brand_id}")

    def generate_response(self, brand_id: int) -> dict:
        return self._request("POST", f"/api/responses/generate/{brand_id}")

    def rate_response(self, response_id: int, rating: bool) -> dict:
        return self._request("POST", f"/api/responses/{response_id}/rate", json={"rating": rating})
