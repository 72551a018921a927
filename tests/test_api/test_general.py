def test_root_lists_features_and_sections(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert [f["title"] for f in data["features"]] == [
        "Smart Irrigation",
        "Soil Analysis",
        "Rainwater Harvesting",
    ]
    assert data["endpoints"]["education"] == "/api/v1/articles"


def test_api_prefix_serves_home(client):
    response = client.get("/api/v1")
    assert response.status_code == 200
    assert "features" in response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_request_id_header(client):
    response = client.get("/", headers={"X-Request-ID": "abc"})
    assert response.headers["X-Request-ID"] == "abc"
