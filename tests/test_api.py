"""HTTP-level tests for the product API.

These tests verify:
- greeting and health endpoints
- the create / read / update / delete cycle over multipart requests
- dd-MM-yyyy date round-trip and decimal price rendering
- image upload, preservation on update and download
- 404 / 422 / 500 translation
- CORS headers
"""

import base64
import json

from sqlalchemy.exc import SQLAlchemyError

from core.dependencies import get_product_service
from main import app


def product_form(**fields) -> dict:
    return {"product": json.dumps(fields)}


def create(client, image=None, **fields) -> dict:
    files = {"imageFile": image} if image else None
    response = client.post("/api/product", data=product_form(**fields), files=files)
    assert response.status_code == 201, response.text
    return response.json()


class TestGreeting:

    def test_greeting_is_plain_text(self, client):
        response = client.get("/api")
        assert response.status_code == 200
        assert response.text == "Welcome"
        assert response.headers["content-type"].startswith("text/plain")

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestProductLifecycle:

    def test_end_to_end(self, client):
        created = create(client, name="Shoe", price=29.99, quantity=10)
        product_id = created["id"]
        assert product_id > 0
        assert created["imageName"] is None

        fetched = client.get(f"/api/product/{product_id}")
        assert fetched.status_code == 200
        assert fetched.json() == created

        updated = client.put(f"/api/product/{product_id}", data=product_form(quantity=5))
        assert updated.status_code == 200

        after_update = client.get(f"/api/product/{product_id}").json()
        assert after_update["quantity"] == 5
        assert after_update["imageName"] is None
        assert after_update["imageType"] is None
        assert after_update["imageData"] is None

        deleted = client.delete(f"/api/product/{product_id}")
        assert deleted.status_code == 204
        assert deleted.content == b""

        assert client.get(f"/api/product/{product_id}").status_code == 404

    def test_response_uses_camel_case_and_numbers(self, client):
        created = create(client, name="Shoe", price="29.99", releaseDate="15-03-2024", available=True)
        assert created["price"] == 29.99
        assert created["releaseDate"] == "15-03-2024"
        assert created["available"] is True
        assert set(created) == {
            "id", "name", "description", "brand", "category", "price", "releaseDate",
            "available", "quantity", "imageName", "imageType", "imageData",
        }

    def test_release_date_round_trip(self, client):
        created = create(client, name="Shoe", releaseDate="01-12-2023")
        fetched = client.get(f"/api/product/{created['id']}").json()
        assert fetched["releaseDate"] == "01-12-2023"

    def test_client_supplied_id_is_ignored(self, client):
        first = create(client, id=777, name="Shoe")
        assert first["id"] != 777

    def test_list_products(self, client):
        create(client, name="A")
        create(client, name="B")
        response = client.get("/api/products")
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["A", "B"]

    def test_list_empty(self, client):
        assert client.get("/api/products").json() == []

    def test_delete_unknown_id_succeeds(self, client):
        assert client.delete("/api/product/4242").status_code == 204


class TestSearch:

    def test_search_by_keyword(self, client):
        create(client, name="Trail Shoe", brand="Acme")
        create(client, name="Laptop", brand="Tech")
        response = client.get("/api/products/search", params={"keyword": "SHOE"})
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Trail Shoe"]

    def test_empty_keyword_returns_all(self, client):
        create(client, name="A")
        create(client, name="B")
        assert len(client.get("/api/products/search", params={"keyword": ""}).json()) == 2
        assert len(client.get("/api/products/search").json()) == 2


class TestImages:

    def test_upload_and_download(self, client):
        created = create(client, image=("shoe.png", b"\x89PNG\r\n", "image/png"), name="Shoe")
        assert created["imageName"] == "shoe.png"
        assert created["imageType"] == "image/png"
        assert base64.b64decode(created["imageData"]) == b"\x89PNG\r\n"

        download = client.get(f"/api/product/{created['id']}/image")
        assert download.status_code == 200
        assert download.content == b"\x89PNG\r\n"
        assert download.headers["content-type"] == "image/png"

    def test_update_without_file_keeps_image(self, client):
        created = create(client, image=("shoe.png", b"old", "image/png"), name="Shoe")
        response = client.put(f"/api/product/{created['id']}", data=product_form(name="Boot"))
        body = response.json()
        assert body["name"] == "Boot"
        assert body["imageName"] == "shoe.png"
        assert base64.b64decode(body["imageData"]) == b"old"

    def test_update_with_file_replaces_image(self, client):
        created = create(client, image=("shoe.png", b"old", "image/png"), name="Shoe")
        response = client.put(
            f"/api/product/{created['id']}",
            data=product_form(name="Boot"),
            files={"imageFile": ("boot.jpg", b"new", "image/jpeg")},
        )
        body = response.json()
        assert body["imageName"] == "boot.jpg"
        assert body["imageType"] == "image/jpeg"
        assert base64.b64decode(body["imageData"]) == b"new"

    def test_download_without_image_is_404(self, client):
        created = create(client, name="Shoe")
        assert client.get(f"/api/product/{created['id']}/image").status_code == 404

    def test_image_download_is_not_sniffed(self, client):
        created = create(client, image=("shoe.png", b"png", "image/png"), name="Shoe")
        download = client.get(f"/api/product/{created['id']}/image")
        assert download.headers["x-content-type-options"] == "nosniff"
        assert "content-disposition" not in download.headers

    def test_non_image_upload_is_served_as_attachment(self, client):
        markup = b"<script>alert(1)</script>"
        created = create(client, image=("page.html", markup, "text/html"), name="Shoe")
        download = client.get(f"/api/product/{created['id']}/image")
        assert download.status_code == 200
        assert download.content == markup
        assert download.headers["x-content-type-options"] == "nosniff"
        assert download.headers["content-disposition"] == "attachment"


class TestErrors:

    def test_get_unknown_product_is_404(self, client):
        response = client.get("/api/product/9999")
        assert response.status_code == 404
        assert response.json() == {"detail": "Product not found"}

    def test_update_unknown_product_is_404(self, client):
        response = client.put("/api/product/9999", data=product_form(name="Ghost"))
        assert response.status_code == 404
        assert client.get("/api/products").json() == []

    def test_non_integer_id_is_422(self, client):
        assert client.get("/api/product/abc").status_code == 422

    def test_malformed_json_is_422(self, client):
        response = client.post("/api/product", data={"product": "{not json"})
        assert response.status_code == 422

    def test_bad_date_format_is_422(self, client):
        response = client.post("/api/product", data=product_form(name="Shoe", releaseDate="2024-03-15"))
        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"] == ["releaseDate"]

    def test_bad_price_is_422(self, client):
        response = client.post("/api/product", data=product_form(name="Shoe", price="cheap"))
        assert response.status_code == 422

    def test_price_with_more_than_two_decimals_is_422(self, client):
        response = client.post("/api/product", data=product_form(name="Shoe", price="29.999"))
        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"] == ["price"]
        assert client.get("/api/products").json() == []

    def test_quantity_out_of_integer_range_is_422(self, client):
        response = client.post("/api/product", data=product_form(name="Shoe", quantity=2**63))
        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"] == ["quantity"]

    def test_update_with_out_of_range_quantity_is_422(self, client):
        created = create(client, name="Shoe", quantity=1)
        response = client.put(f"/api/product/{created['id']}", data=product_form(quantity=-2**40))
        assert response.status_code == 422
        assert client.get(f"/api/product/{created['id']}").json()["quantity"] == 1

    def test_missing_product_part_is_422(self, client):
        assert client.post("/api/product", data={}).status_code == 422

    def test_store_failure_is_500(self, client):
        class FailingService:
            async def list_all(self):
                raise SQLAlchemyError("database is locked")

        app.dependency_overrides[get_product_service] = lambda: FailingService()
        response = client.get("/api/products")
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestCors:

    def test_any_origin_allowed(self, client):
        response = client.get("/api/products", headers={"Origin": "http://shop.example"})
        assert response.headers["access-control-allow-origin"] in ("*", "http://shop.example")

    def test_preflight(self, client):
        response = client.options(
            "/api/product",
            headers={
                "Origin": "http://shop.example",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] in ("*", "http://shop.example")
