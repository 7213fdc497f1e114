import pytest
from sqlmodel import select

from storefront.models.product import Product


def _product_body(**overrides):
    body = {
        "name": "Desk Lamp",
        "description": "LED lamp",
        "price": 39.5,
        "image_url": "/images/lamp.jpg",
        "category": "Home",
        "stock_quantity": 12,
    }
    body.update(overrides)
    return body


class TestCreateProduct:
    def test_creates_product(self, client, session, admin_headers):
        response = client.post("/admin/products", json=_product_body(), headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["message"] == "New product created successfully!"

        product = session.get(Product, response.json()["productId"])
        assert (product.name, product.price, product.category, product.stock_quantity) == (
            "Desk Lamp", 39.5, "Home", 12
        )

    def test_numeric_strings_accepted(self, client, session, admin_headers):
        response = client.post(
            "/admin/products",
            json=_product_body(price="19.99", stock_quantity="3"),
            headers=admin_headers,
        )

        product = session.get(Product, response.json()["productId"])
        assert product.price == 19.99
        assert product.stock_quantity == 3

    @pytest.mark.parametrize("missing", ["name", "price", "category", "stock_quantity"])
    def test_required_fields(self, client, admin_headers, missing):
        body = _product_body()
        del body[missing]

        response = client.post("/admin/products", json=body, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "Name, price, category, and stock_quantity are required."
        )

    @pytest.mark.parametrize(
        "overrides", [{"price": "cheap"}, {"stock_quantity": "lots"}, {"stock_quantity": 2.5}]
    )
    def test_non_numeric_values(self, client, session, admin_headers, overrides):
        response = client.post(
            "/admin/products", json=_product_body(**overrides), headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Price and stock quantity must be numbers."
        assert session.exec(select(Product)).all() == []

    @pytest.mark.parametrize("overrides", [{"price": -1}, {"stock_quantity": -4}])
    def test_negative_values(self, client, admin_headers, overrides):
        response = client.post(
            "/admin/products", json=_product_body(**overrides), headers=admin_headers
        )

        assert response.status_code == 400

    def test_requires_admin(self, client, customer_headers):
        response = client.post("/admin/products", json=_product_body(), headers=customer_headers)

        assert response.status_code == 403

    def test_requires_token(self, client):
        assert client.post("/admin/products", json=_product_body()).status_code == 401


class TestUpdateProduct:
    def test_updates_every_field(self, client, session, admin_headers, make_product):
        product = make_product(name="Old", price=1.0)

        response = client.put(
            f"/admin/products/{product.id}",
            json=_product_body(name="New", price=2.5, stock_quantity=0),
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["message"] == f"Product ID {product.id} updated successfully."

        session.refresh(product)
        assert (product.name, product.price, product.stock_quantity) == ("New", 2.5, 0)
        assert client.get(f"/products/{product.id}").json()["name"] == "New"

    def test_unknown_product(self, client, admin_headers):
        response = client.put("/admin/products/999", json=_product_body(), headers=admin_headers)

        assert response.status_code == 404

    def test_invalid_product_id(self, client, admin_headers):
        response = client.put("/admin/products/abc", json=_product_body(), headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid Product ID provided."

    def test_invalid_body_leaves_product_alone(self, client, session, admin_headers, make_product):
        product = make_product(name="Keep", price=3.0)

        response = client.put(
            f"/admin/products/{product.id}",
            json=_product_body(name=""),
            headers=admin_headers,
        )

        assert response.status_code == 400
        session.refresh(product)
        assert product.name == "Keep"
