from __future__ import annotations

from starlette.testclient import TestClient


def test_create_product_returns_201_with_store_defaults(client: TestClient, repository) -> None:
    resp = client.post("/api/products", json={"name": "Monitor", "price": 300})

    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["id"] == 1
    assert data["name"] == "Monitor"
    assert data["price"] == 300
    assert data["availability"] is True
    assert repository.writes == ["create"]


def test_create_product_keeps_explicit_availability(client: TestClient) -> None:
    resp = client.post("/api/products", json={"name": "Keyboard", "price": 49.9, "availability": False})

    assert resp.status_code == 201
    assert resp.json()["data"]["availability"] is False


def test_create_product_ignores_client_supplied_id(client: TestClient, repository) -> None:
    repository.seed(name="Existing", price=10)

    resp = client.post("/api/products", json={"id": 1, "name": "Mouse", "price": 20})

    assert resp.status_code == 201
    assert resp.json()["data"]["id"] == 2
    assert repository.rows[1]["name"] == "Existing"


def test_list_products_orders_by_id_descending(client: TestClient, repository) -> None:
    for name in ("first", "second", "third"):
        repository.seed(name=name, price=1)

    resp = client.get("/api/products")

    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()["data"]] == [3, 2, 1]


def test_list_products_empty(client: TestClient) -> None:
    resp = client.get("/api/products")

    assert resp.status_code == 200
    assert resp.json() == {"data": []}


def test_get_product_by_id(client: TestClient, repository) -> None:
    repository.seed(name="Monitor", price=300)

    resp = client.get("/api/products/1")

    assert resp.status_code == 200
    assert resp.json()["data"]["name"] == "Monitor"


def test_get_missing_product_returns_404(client: TestClient) -> None:
    resp = client.get("/api/products/999")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_update_product_replaces_fields(client: TestClient, repository) -> None:
    repository.seed(name="Monitor", price=300)

    resp = client.put(
        "/api/products/1",
        json={"name": "Curved monitor", "price": 450, "availability": False},
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["id"] == 1
    assert data["name"] == "Curved monitor"
    assert data["price"] == 450
    assert data["availability"] is False
    assert repository.rows[1]["name"] == "Curved monitor"


def test_update_missing_product_returns_404_without_writing(client: TestClient, repository) -> None:
    resp = client.put("/api/products/7", json={"name": "Ghost", "price": 1, "availability": True})

    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}
    assert repository.writes == []


def test_toggle_flips_availability(client: TestClient, repository) -> None:
    repository.seed(name="Monitor", price=300, availability=True)

    resp = client.patch("/api/products/1")

    assert resp.status_code == 200
    assert resp.json()["data"]["availability"] is False


def test_toggle_twice_restores_availability(client: TestClient, repository) -> None:
    repository.seed(name="Monitor", price=300, availability=False)

    client.patch("/api/products/1")
    resp = client.patch("/api/products/1")

    assert resp.status_code == 200
    assert resp.json()["data"]["availability"] is False


def test_toggle_ignores_request_body(client: TestClient, repository) -> None:
    repository.seed(name="Monitor", price=300, availability=True)

    resp = client.patch("/api/products/1", json={"availability": True})

    assert resp.status_code == 200
    assert resp.json()["data"]["availability"] is False


def test_toggle_missing_product_returns_404(client: TestClient, repository) -> None:
    resp = client.patch("/api/products/5")

    assert resp.status_code == 404
    assert repository.writes == []


def test_delete_then_get_returns_404(client: TestClient, repository) -> None:
    repository.seed(name="Monitor", price=300)

    deleted = client.delete("/api/products/1")
    fetched = client.get("/api/products/1")

    assert deleted.status_code == 200
    assert deleted.json() == {"data": "Product deleted"}
    assert fetched.status_code == 404


def test_delete_missing_product_returns_404(client: TestClient, repository) -> None:
    resp = client.delete("/api/products/42")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}
    assert repository.writes == []


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    resp = client.get("/api/unknown")

    assert resp.status_code == 404
    assert "error" in resp.json()


def test_wrong_method_uses_error_envelope(client: TestClient) -> None:
    resp = client.post("/api/products/1", json={"name": "x", "price": 1})

    assert resp.status_code == 405
    assert "error" in resp.json()
