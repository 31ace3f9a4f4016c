from sqlalchemy import func, select

from freshora.data.models import CartItemModel


def add(client, item_id, quantity=1, session_id="s1", name="Shirt", price=5):
    return client.post(
        "/api/cart",
        json={
            "item": {"id": item_id, "name": name, "price": price, "quantity": quantity},
            "sessionId": session_id,
        },
    )


def test_empty_cart(client):
    res = client.get("/api/cart", params={"sessionId": "fresh"})

    assert res.status_code == 200
    assert res.json()["data"] == {"sessionId": "fresh", "items": [], "totalItems": 0, "totalPrice": 0.0}


def test_add_twice_increments_quantity(client, database):
    add(client, "svc-1", 2)
    res = add(client, "svc-1", 3)

    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Item added to cart successfully"
    assert body["data"]["items"][0]["quantity"] == 5
    assert body["data"]["totalPrice"] == 25.0

    with database.session_scope() as session:
        assert session.execute(select(func.count()).select_from(CartItemModel)).scalar_one() == 1


def test_cart_uses_catalog_price(client):
    res = add(client, "suit-10", 1, price=0.01, name="whatever")

    line = res.json()["data"]["items"][0]
    assert line["price"] == 10.0
    assert line["name"] == "Suit"
    assert line["serviceType"] == "Regular Laundry Services"


def test_add_defaults_to_default_session(client):
    client.post("/api/cart", json={"item": {"id": "svc-1", "name": "Shirt", "price": 5}})

    data = client.get("/api/cart").json()["data"]
    assert data["sessionId"] == "default"
    assert data["totalItems"] == 1


def test_add_unknown_item(client):
    res = add(client, "missing", 1)

    assert res.status_code == 404
    assert res.json()["success"] is False


def test_add_requires_item_name(client):
    res = client.post("/api/cart", json={"item": {"id": "svc-1", "price": 5}, "sessionId": "s1"})

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Validation failed"
    assert "item.name" in [e["field"] for e in body["errors"]]


def test_add_rejects_zero_quantity(client):
    assert add(client, "svc-1", 0).status_code == 400


def test_update_quantity(client):
    add(client, "svc-1", 2)

    res = client.put("/api/cart/svc-1", json={"quantity": 7, "sessionId": "s1"})

    assert res.status_code == 200
    assert res.json()["data"]["totalItems"] == 7


def test_update_missing_line(client):
    add(client, "svc-1", 1)

    res = client.put("/api/cart/suit-10", json={"quantity": 2, "sessionId": "s1"})

    assert res.status_code == 404
    assert res.json()["error"] == "Item not found in cart"


def test_update_without_cart(client):
    res = client.put("/api/cart/svc-1", json={"quantity": 2, "sessionId": "nobody"})

    assert res.status_code == 404
    assert res.json()["error"] == "Cart not found"


def test_update_rejects_zero(client):
    add(client, "svc-1", 1)

    assert client.put("/api/cart/svc-1", json={"quantity": 0, "sessionId": "s1"}).status_code == 400


def test_remove_is_idempotent(client):
    add(client, "svc-1", 1)
    add(client, "suit-10", 1)

    first = client.delete("/api/cart/svc-1", params={"sessionId": "s1"})
    second = client.delete("/api/cart/svc-1", params={"sessionId": "s1"})

    assert first.status_code == second.status_code == 200
    assert [i["id"] for i in second.json()["data"]["items"]] == ["suit-10"]


def test_clear_cart(client):
    add(client, "svc-1", 1)
    add(client, "suit-10", 2)

    res = client.delete("/api/cart", params={"sessionId": "s1"})

    assert res.status_code == 200
    assert res.json()["message"] == "Cart cleared successfully"
    assert res.json()["data"]["items"] == []
    assert client.delete("/api/cart", params={"sessionId": "s1"}).status_code == 200


def test_sessions_are_isolated(client):
    add(client, "svc-1", 1, session_id="a")
    add(client, "suit-10", 4, session_id="b")

    a = client.get("/api/cart", params={"sessionId": "a"}).json()["data"]
    b = client.get("/api/cart", params={"sessionId": "b"}).json()["data"]
    assert [i["id"] for i in a["items"]] == ["svc-1"]
    assert b["totalItems"] == 4
