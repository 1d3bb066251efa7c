class TestOpenApiSchema:
    def test_schema_lists_resource_paths(self, client):
        response = client.get("/api/schema/", HTTP_ACCEPT="application/vnd.oai.openapi+json")
        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/dishes" in paths
        assert "/orders/{order_id}" in paths
