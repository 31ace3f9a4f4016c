def test_root_and_health(client):
    assert client.get("/").json()["health"] == "/health"

    body = client.get("/health").json()
    assert body["status"] == "OK"
    assert body["timestamp"]


def test_list_services_groups_items_by_category(client):
    res = client.get("/api/services")

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    laundry = next(s for s in body["data"] if s["slug"] == "laundry-services")
    assert sorted(laundry["items"]) == ["men", "women"]
    shirt = next(i for i in laundry["items"]["men"] if i["id"] == "svc-1")
    assert shirt["price"] == 5.0
    assert shirt["unit"] == "Per Item"
    assert shirt["description"] == ""


def test_get_service_by_slug(client):
    res = client.get("/api/services/dry-cleaning-services")

    assert res.status_code == 200
    assert res.json()["data"]["title"] == "Dry Cleaning Services"


def test_get_missing_service(client):
    res = client.get("/api/services/nope")

    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Service not found"}


def test_create_service_and_duplicate_slug(client):
    payload = {"slug": "ironing", "title": "Ironing", "description": "Pressed clothes"}

    res = client.post("/api/services", json=payload)
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["fullDescription"] == "Pressed clothes"
    assert data["duration"] == "24-48 hours"
    assert data["items"] == {}

    dup = client.post("/api/services", json=payload)
    assert dup.status_code == 409
    assert dup.json()["success"] is False


def test_add_item_to_service(client):
    res = client.post(
        "/api/services/laundry-services/items",
        json={"name": "Jacket", "category": "men", "price": 12.5},
    )

    assert res.status_code == 201
    item = res.json()["data"]
    assert item["price"] == 12.5
    assert item["unit"] == "Per Item"

    men = client.get("/api/services/laundry-services").json()["data"]["items"]["men"]
    assert "Jacket" in [i["name"] for i in men]


def test_add_item_rejects_non_positive_price(client):
    res = client.post(
        "/api/services/laundry-services/items",
        json={"name": "Free", "category": "men", "price": 0},
    )

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Validation failed"
    assert body["errors"][0]["field"] == "price"


def test_list_items_filtered_by_service(client):
    service_id = client.get("/api/services/dry-cleaning-services").json()["data"]["id"]

    res = client.get("/api/items", params={"serviceId": service_id})

    assert res.status_code == 200
    assert [i["id"] for i in res.json()["data"]] == ["gown-35"]


def test_list_items_for_unknown_service(client):
    assert client.get("/api/items", params={"serviceId": 999}).status_code == 404


def test_create_item_and_bulk(client):
    service_id = client.get("/api/services/dry-cleaning-services").json()["data"]["id"]

    single = client.post(
        "/api/items",
        json={"serviceId": service_id, "name": "Scarf", "category": "women", "price": 4},
    )
    assert single.status_code == 201
    assert single.json()["data"]["serviceId"] == service_id

    bulk = client.put(
        "/api/items/bulk",
        json={
            "serviceId": service_id,
            "items": [
                {"name": "Tie", "category": "men", "price": 5},
                {"name": "Coat", "category": "women", "price": 30, "unit": "Per Piece"},
            ],
        },
    )
    assert bulk.status_code == 201
    assert bulk.json()["message"] == "2 items added successfully"
    assert [i["unit"] for i in bulk.json()["data"]] == ["Per Item", "Per Piece"]


def test_create_item_for_unknown_service(client):
    res = client.post(
        "/api/items",
        json={"serviceId": 999, "name": "Scarf", "category": "women", "price": 4},
    )

    assert res.status_code == 404


def test_unknown_route(client):
    res = client.get("/api/nothing-here")

    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Route not found"}
