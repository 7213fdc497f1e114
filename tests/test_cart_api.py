def test_get_cart_creates_empty_cart(client, customer_headers):
    first = client.get("/cart", headers=customer_headers)
    second = client.get("/cart", headers=customer_headers)

    assert first.status_code == 200
    assert first.json()["items"] == []
    assert first.json()["cartId"] == second.json()["cartId"]


def test_add_update_remove(client, customer_headers, make_product):
    product = make_product(name="Mouse", price=25.5)

    added = client.post(
        "/cart/items", json={"productId": product.id, "quantity": 2}, headers=customer_headers
    )
    again = client.post(
        "/cart/items", json={"productId": product.id}, headers=customer_headers
    )

    assert added.status_code == 201
    assert again.status_code == 200
    assert again.json()["item"]["quantity"] == 3

    updated = client.put(
        f"/cart/items/{product.id}", json={"quantity": 5}, headers=customer_headers
    )
    assert updated.json()["item"]["quantity"] == 5

    items = client.get("/cart", headers=customer_headers).json()["items"]
    assert [(i["productId"], i["name"], i["price"], i["quantity"]) for i in items] == [
        (product.id, "Mouse", 25.5, 5)
    ]

    removed = client.delete(f"/cart/items/{product.id}", headers=customer_headers)
    assert removed.status_code == 200
    assert client.get("/cart", headers=customer_headers).json()["items"] == []


def test_add_unknown_product(client, customer_headers):
    response = client.post(
        "/cart/items", json={"productId": 999, "quantity": 1}, headers=customer_headers
    )

    assert response.status_code == 404


def test_bad_quantities(client, customer_headers, make_product):
    product = make_product()

    add = client.post(
        "/cart/items", json={"productId": product.id, "quantity": 0}, headers=customer_headers
    )
    update = client.put(
        f"/cart/items/{product.id}", json={"quantity": 0}, headers=customer_headers
    )

    assert add.status_code == 400
    assert update.status_code == 400


def test_quantity_beyond_column_range(client, customer_headers, make_product):
    product = make_product()

    huge = client.post(
        "/cart/items", json={"productId": product.id, "quantity": 10**30}, headers=customer_headers
    )
    client.post(
        "/cart/items", json={"productId": product.id, "quantity": 2**31 - 1}, headers=customer_headers
    )
    overflow = client.post(
        "/cart/items", json={"productId": product.id, "quantity": 1}, headers=customer_headers
    )

    assert huge.status_code == 400
    assert overflow.status_code == 400
    assert overflow.json()["detail"] == "Quantity exceeds the allowed maximum."


def test_missing_lines(client, customer_headers):
    assert client.put("/cart/items/5", json={"quantity": 1}, headers=customer_headers).status_code == 404
    assert client.delete("/cart/items/5", headers=customer_headers).status_code == 404


def test_cart_requires_token(client):
    assert client.get("/cart").status_code == 401


def test_products(client, make_product):
    product = make_product(name="Webcam HD", price=49.99)

    listed = client.get("/products").json()
    single = client.get(f"/products/{product.id}")

    assert [p["name"] for p in listed] == ["Webcam HD"]
    assert single.json()["price"] == 49.99
    assert client.get("/products/999").status_code == 404
