"""Integration tests for error responses outside the validation chains."""

import pytest

pytestmark = pytest.mark.integration


class TestErrorFormat:
    def test_unknown_path(self, api_client):
        response = api_client.get("/menu")
        assert response.status_code == 404
        assert response.json() == {"error": "Path not found: /menu"}

    def test_malformed_json(self, api_client):
        response = api_client.post(
            "/dishes", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        assert "error" in response.json()

    def test_unsupported_media_type(self, api_client):
        response = api_client.post("/orders", data="x=1", content_type="text/plain")
        assert response.status_code == 415
        assert "error" in response.json()

    def test_patch_order_not_allowed(self, api_client):
        response = api_client.patch("/orders/1", {"data": {}}, format="json")
        assert response.status_code == 405
        assert response.json() == {"error": "PATCH not allowed for /orders/1"}
