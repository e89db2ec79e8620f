import cloudinary.uploader
import pytest

from core.config import settings

API = settings.API_V1_STR

BOLO = {
    "id": "101",
    "restaurant_id": "1",
    "restaurant_name": "Doce Paixão",
    "name": "Bolo de Chocolate",
    "price": 10.0,
}
SUSHI = {
    "id": "201",
    "restaurant_id": "2",
    "restaurant_name": "Restaurante Japonês",
    "name": "Combinado Salmão",
    "price": 59.9,
}
ADDRESS = {"street": "Av. Paulista", "number": "1000", "city": "São Paulo"}


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_session_object(client, user_headers):
    response = client.get(f"{API}/auth/me", headers=user_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "maria@storefront.io"
    assert set(body) == {"id", "email", "email_confirmed_at"}


def test_duplicate_registration_and_bad_login(client, user_headers):
    response = client.post(
        f"{API}/auth/register",
        json={"email": "MARIA@storefront.io", "password": "whatever1", "name": "Maria"},
    )
    assert response.status_code == 400

    response = client.post(f"{API}/auth/login", data={"username": "maria@storefront.io", "password": "wrong"})
    assert response.status_code == 401


def test_protected_routes_need_a_token(client):
    assert client.get(f"{API}/cart/").status_code == 401


def test_catalog_is_seeded(client):
    restaurants = client.get(f"{API}/restaurants/").json()
    assert {r["id"] for r in restaurants} >= {"1", "2", "3", "4"}

    menu = client.get(f"{API}/restaurants/1/menu").json()
    assert {item["id"] for item in menu} == {"101", "102"}

    by_rating = client.get(f"{API}/menu/items", params={"sort": "rating"}).json()
    assert by_rating[-1]["id"] == "202"

    found = client.get(f"{API}/menu/items", params={"search": "temaki"}).json()
    assert [item["id"] for item in found] == ["202"]

    assert client.get(f"{API}/menu/items", params={"sort": "price"}).status_code == 400


def test_admin_only_writes(client, user_headers, admin_headers):
    payload = {"name": "Pizzaria Napoli", "category_id": "1", "delivery_fee": 3.5}

    assert client.post(f"{API}/restaurants/", json=payload, headers=user_headers).status_code == 403

    response = client.post(f"{API}/restaurants/", json=payload, headers=admin_headers)
    assert response.status_code == 201
    restaurant_id = response.json()["id"]

    response = client.post(
        f"{API}/menu/items",
        json={"restaurant_id": restaurant_id, "name": "Margherita", "price": 42.0},
        headers=admin_headers,
    )
    assert response.status_code == 201

    assert client.delete(f"{API}/restaurants/{restaurant_id}", headers=admin_headers).status_code == 200
    assert client.get(f"{API}/restaurants/{restaurant_id}").status_code == 404


def test_cart_flow(client, user_headers):
    response = client.post(f"{API}/cart/items", json={**BOLO, "quantity": 2}, headers=user_headers)
    assert response.status_code == 200
    assert response.json()["total"] == 20.0

    response = client.post(f"{API}/cart/items", json=SUSHI, headers=user_headers)
    assert response.status_code == 409

    response = client.put(f"{API}/cart/items/101", json={"quantity": 5}, headers=user_headers)
    assert response.json()["total_items"] == 5

    response = client.put(f"{API}/cart/items/101", json={"quantity": -5}, headers=user_headers)
    body = response.json()
    assert body["items"] == []
    assert body["restaurant_id"] is None

    response = client.delete(f"{API}/cart/", headers=user_headers)
    assert response.json()["total"] == 0


def test_cart_is_per_user(client, user_headers, login_as):
    other_headers = login_as("joao@storefront.io", name="João")
    client.post(f"{API}/cart/items", json=BOLO, headers=user_headers)

    assert client.get(f"{API}/cart/", headers=other_headers).json()["items"] == []
    assert client.post(f"{API}/cart/items", json=SUSHI, headers=other_headers).status_code == 200


def test_promo_code_endpoint(client):
    response = client.post(f"{API}/checkout/promo", json={"code": "primeiracompra"})
    assert response.status_code == 200
    assert response.json()["discount_rate"] == 0.10

    assert client.post(f"{API}/checkout/promo", json={"code": "FREE"}).status_code == 400


def test_checkout_and_order_lifecycle(client, user_headers, admin_headers):
    address = client.post(f"{API}/addresses/", json=ADDRESS, headers=user_headers).json()
    assert address["is_default"] is True

    client.post(f"{API}/cart/items", json={**BOLO, "quantity": 2}, headers=user_headers)

    summary = client.get(
        f"{API}/checkout/summary", params={"promo_code": "PRIMEIRACOMPRA"}, headers=user_headers
    ).json()
    assert summary["subtotal"] == 20.0
    assert summary["delivery_fee"] == 4.99
    assert summary["total"] == pytest.approx(round((20.0 + 4.99 + 2.0) * 0.9, 2))

    response = client.post(
        f"{API}/checkout/place-order",
        json={"delivery_address_id": address["id"], "payment_type": "pix"},
        headers=user_headers,
    )
    assert response.status_code == 201, response.text
    order = response.json()
    assert order["status"] == "pending"
    assert order["total"] == pytest.approx(26.99)

    assert client.get(f"{API}/cart/", headers=user_headers).json()["items"] == []

    detail = client.get(f"{API}/orders/{order['id']}", headers=user_headers).json()
    assert detail["address"] == "Av. Paulista, 1000, São Paulo"

    status_url = f"{API}/orders/admin/{order['id']}/status"
    assert client.put(status_url, json={"status": "delivered"}, headers=user_headers).status_code == 403
    assert client.put(status_url, json={"status": "delivered"}, headers=admin_headers).status_code == 200
    assert client.put(status_url, json={"status": "ready"}, headers=admin_headers).status_code == 400

    rating_url = f"{API}/orders/{order['id']}/rating"
    assert client.post(rating_url, json={"rating": 6}, headers=user_headers).status_code == 422
    assert client.post(rating_url, json={"rating": 5}, headers=user_headers).json()["rating"] == 5
    assert client.post(rating_url, json={"rating": 1}, headers=user_headers).status_code == 400

    orders = client.get(f"{API}/orders/", headers=user_headers).json()
    assert [o["id"] for o in orders] == [order["id"]]


def test_place_order_validations(client, user_headers):
    response = client.post(
        f"{API}/checkout/place-order", json={"delivery_address_id": "nope"}, headers=user_headers
    )
    assert response.status_code == 400

    address = client.post(f"{API}/addresses/", json=ADDRESS, headers=user_headers).json()
    response = client.post(
        f"{API}/checkout/place-order", json={"delivery_address_id": address["id"]}, headers=user_headers
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Cart is empty"


def test_address_rules(client, user_headers):
    first = client.post(f"{API}/addresses/", json=ADDRESS, headers=user_headers).json()

    response = client.delete(f"{API}/addresses/{first['id']}", headers=user_headers)
    assert response.status_code == 400

    second = client.post(f"{API}/addresses/", json={**ADDRESS, "number": "2"}, headers=user_headers).json()
    client.put(f"{API}/addresses/{second['id']}/default", headers=user_headers)

    addresses = client.get(f"{API}/addresses/", headers=user_headers).json()
    assert [a["id"] for a in addresses if a["is_default"]] == [second["id"]]

    assert client.delete(f"{API}/addresses/{second['id']}", headers=user_headers).status_code == 200
    assert client.get(f"{API}/addresses/{first['id']}", headers=user_headers).json()["is_default"] is True


def test_payment_methods_and_favorites(client, user_headers):
    response = client.post(
        f"{API}/payment-methods/",
        json={"type": "credit", "card_number": "4111 1111 1111 1234", "card_name": "MARIA S", "expiry_date": "12/29"},
        headers=user_headers,
    )
    assert response.status_code == 201
    assert response.json()["card_number"] == "**** **** **** 1234"
    assert response.json()["is_default"] is True

    toggled = client.post(f"{API}/favorites/2/toggle", headers=user_headers).json()
    assert toggled == {"restaurant_id": "2", "is_favorite": True}

    favorites = client.get(f"{API}/favorites/", headers=user_headers).json()
    assert favorites[0]["restaurant"]["name"] == "Restaurante Japonês"

    assert client.post(f"{API}/favorites/missing/toggle", headers=user_headers).status_code == 404


def test_menu_item_image_upload(client, admin_headers, monkeypatch):
    def fake_upload(data_uri, **kwargs):
        assert data_uri.startswith("data:image/png;base64,")
        return {"public_id": f"{kwargs['folder']}/{kwargs['public_id']}", "secure_url": "https://cdn.test/bolo.png"}

    monkeypatch.setattr(cloudinary.uploader, "upload", fake_upload)

    response = client.post(
        f"{API}/menu/items/101/image",
        files={"image": ("bolo.png", b"\x89PNG fake", "image/png")},
        headers=admin_headers,
    )

    assert response.status_code == 200, response.text
    assert response.json()["image_url"] == "https://cdn.test/bolo.png"


def test_delete_account(client, user_headers):
    client.post(f"{API}/addresses/", json=ADDRESS, headers=user_headers)

    response = client.delete(f"{API}/account/", headers=user_headers)
    assert response.status_code == 200
    assert "message" in response.json()

    response = client.delete(f"{API}/account/", headers=user_headers)
    assert response.status_code == 400
    assert "error" in response.json()


def test_delete_account_without_token(client):
    response = client.delete(f"{API}/account/")
    assert response.status_code == 400
    assert response.json() == {"error": "Not authorized"}

    response = client.delete(f"{API}/account/", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 400


def test_menu_item_image_must_be_an_image(client, admin_headers):
    response = client.post(
        f"{API}/menu/items/101/image",
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )

    assert response.status_code == 400


def test_null_in_required_field_is_rejected_without_writing(client, admin_headers):
    response = client.put(f"{API}/restaurants/1", json={"name": None}, headers=admin_headers)
    assert response.status_code == 422

    response = client.put(f"{API}/menu/items/101", json={"price": None}, headers=admin_headers)
    assert response.status_code == 422

    response = client.put(f"{API}/menu/categories/1", json={"name": None}, headers=admin_headers)
    assert response.status_code == 422

    restaurants = client.get(f"{API}/restaurants/")
    assert restaurants.status_code == 200
    assert client.get(f"{API}/restaurants/1").json()["name"] == "Doce Paixão"
    assert client.get(f"{API}/menu/items/101").json()["price"] == 14.9


def test_optional_fields_can_still_be_cleared(client, admin_headers):
    response = client.put(f"{API}/restaurants/1", json={"image_url": None}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["image_url"] is None


def test_null_address_and_payment_fields_are_rejected(client, user_headers):
    address = client.post(f"{API}/addresses/", json=ADDRESS, headers=user_headers).json()

    response = client.put(f"{API}/addresses/{address['id']}", json={"street": None}, headers=user_headers)
    assert response.status_code == 422
    assert client.get(f"{API}/addresses/{address['id']}", headers=user_headers).json()["street"] == "Av. Paulista"

    method = client.post(f"{API}/payment-methods/", json={"type": "pix"}, headers=user_headers).json()
    response = client.put(f"{API}/payment-methods/{method['id']}", json={"type": None}, headers=user_headers)
    assert response.status_code == 422
    assert client.get(f"{API}/payment-methods/", headers=user_headers).json()[0]["type"] == "pix"
