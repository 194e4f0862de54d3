import pytest
from sqlalchemy.exc import IntegrityError

from conftest import CONTACT_NUMBER, PASSWORD, basic_auth
from foodorder_shared.services import customer_service as customer_module


def _signup(client, **overrides):
    body = {
        "first_name": "Asha",
        "last_name": "Rao",
        "email_address": "asha@example.com",
        "contact_number": CONTACT_NUMBER,
        "password": PASSWORD,
    }
    body.update(overrides)
    return client.post("/customer/signup", json=body)


def _login(client):
    response = client.post(
        "/customer/login", headers={"Authorization": basic_auth(CONTACT_NUMBER, PASSWORD)}
    )
    assert response.status_code == 200
    return response.headers["access-token"]


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def token(client):
    assert _signup(client).status_code == 201
    return _login(client)


@pytest.fixture
def address_id(client, token, catalog):
    response = client.post(
        "/address",
        headers=_bearer(token),
        json={
            "flat_building_name": "12, Lake View Apartments",
            "locality": "Indiranagar",
            "city": "Bengaluru",
            "pincode": "560038",
            "state_uuid": catalog["state"],
        },
    )
    assert response.status_code == 201
    return response.get_json()["id"]


def _order_body(catalog, address_id):
    return {
        "address_id": address_id,
        "payment_id": catalog["payment"],
        "coupon_id": catalog["coupon"],
        "restaurant_id": catalog["restaurant"],
        "bill": 216,
        "discount": 24,
        "item_quantities": [{"item_id": catalog["masala_dosa"], "quantity": 2, "price": 240}],
    }


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_signup(client):
    response = _signup(client)
    assert response.status_code == 201
    body = response.get_json()
    assert body["id"]
    assert body["status"] == "CUSTOMER CREATED SUCCESSFULLY"


def test_signup_duplicate_contact(client):
    _signup(client)
    response = _signup(client)
    assert response.status_code == 400
    assert response.get_json()["code"] == "SGR-001"


def test_signup_with_empty_body(client):
    response = client.post("/customer/signup")
    assert response.status_code == 400
    assert response.get_json() == {
        "code": "SGR-005",
        "message": "Except last name all fields should be filled",
    }


def test_signup_name_longer_than_column(client):
    response = _signup(client, first_name="A" * 31)
    assert response.status_code == 400
    assert response.get_json()["code"] == "SGR-006"


def test_signup_email_longer_than_column(client):
    response = _signup(client, email_address="a" * 39 + "@example.com")
    assert response.status_code == 400
    assert response.get_json()["code"] == "SGR-002"


def test_signup_unrelated_integrity_error_is_generic(client, monkeypatch):
    def add(self, customer):
        raise IntegrityError("INSERT INTO customer", {}, Exception("CHECK constraint failed"))

    monkeypatch.setattr(customer_module.CustomerRepository, "add", add)
    response = _signup(client)
    assert response.status_code == 500
    assert response.get_json()["code"] == "GEN-001"


def test_signup_with_wrongly_typed_field(client):
    response = _signup(client, first_name=["Asha"])
    assert response.status_code == 400
    assert response.get_json()["code"] == "GEN-002"


def test_login_returns_token_header(client):
    signed_up = _signup(client).get_json()
    response = client.post(
        "/customer/login", headers={"Authorization": basic_auth(CONTACT_NUMBER, PASSWORD)}
    )

    assert response.status_code == 200
    assert response.headers["access-token"]
    assert response.get_json() == {
        "id": signed_up["id"],
        "first_name": "Asha",
        "last_name": "Rao",
        "contact_number": CONTACT_NUMBER,
        "email_address": "asha@example.com",
        "message": "LOGGED IN SUCCESSFULLY",
    }


def test_login_exposes_token_header_for_cors(client):
    _signup(client)
    response = client.post(
        "/customer/login",
        headers={
            "Authorization": basic_auth(CONTACT_NUMBER, PASSWORD),
            "Origin": "http://localhost:3000",
        },
    )
    assert "access-token" in response.headers["Access-Control-Expose-Headers"].lower()


@pytest.mark.parametrize(
    "authorization, status, code",
    [
        (None, 401, "ATH-004"),
        ("Bearer abc", 401, "ATH-004"),
        ("Basic !!!", 401, "ATH-003"),
        (basic_auth(CONTACT_NUMBER, PASSWORD).replace("Basic ", "Basic x"), 401, "ATH-003"),
        (basic_auth(CONTACT_NUMBER, "Wrong#Pass1"), 401, "ATH-002"),
        (basic_auth("9999999999", PASSWORD), 401, "ATH-002"),
    ],
)
def test_login_failures(client, authorization, status, code):
    _signup(client)
    headers = {"Authorization": authorization} if authorization else {}
    response = client.post("/customer/login", headers=headers)
    assert response.status_code == status
    assert response.get_json()["code"] == code


def test_logout(client, token):
    response = client.post("/customer/logout", headers=_bearer(token))
    assert response.status_code == 200
    assert response.get_json()["message"] == "LOGGED OUT SUCCESSFULLY"

    again = client.post("/customer/logout", headers=_bearer(token))
    assert again.status_code == 403
    assert again.get_json()["code"] == "ATHR-002"


@pytest.mark.parametrize(
    "headers, code",
    [
        ({}, "ATHR-001"),
        ({"Authorization": "Token abc"}, "ATHR-005"),
        ({"Authorization": "Bearer "}, "ATHR-001"),
        ({"Authorization": "Bearer unknown"}, "ATHR-001"),
    ],
)
def test_protected_endpoints_need_bearer_token(client, headers, code):
    response = client.get("/address/customer", headers=headers)
    assert response.status_code == 403
    assert response.get_json()["code"] == code


def test_expired_token_is_rejected(client, token, clock):
    clock.advance(hours=8)
    response = client.get("/address/customer", headers=_bearer(token))
    assert response.status_code == 403
    assert response.get_json()["code"] == "ATHR-003"


def test_update_customer(client, token):
    response = client.put(
        "/customer", headers=_bearer(token), json={"first_name": "Asha", "last_name": "Sharma"}
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body["last_name"] == "Sharma"
    assert body["status"] == "CUSTOMER DETAILS UPDATED SUCCESSFULLY"


def test_update_customer_requires_first_name(client, token):
    response = client.put("/customer", headers=_bearer(token), json={"last_name": "Sharma"})
    assert response.status_code == 400
    assert response.get_json()["code"] == "UCR-002"


def test_update_customer_long_last_name(client, token):
    response = client.put(
        "/customer", headers=_bearer(token), json={"first_name": "Asha", "last_name": "S" * 31}
    )
    assert response.status_code == 400
    assert response.get_json()["code"] == "UCR-005"


def test_update_password(client, token):
    response = client.put(
        "/customer/password",
        headers=_bearer(token),
        json={"old_password": PASSWORD, "new_password": "New#Pass123"},
    )
    assert response.status_code == 200
    assert response.get_json()["status"] == "CUSTOMER PASSWORD UPDATED SUCCESSFULLY"

    relogin = client.post(
        "/customer/login", headers={"Authorization": basic_auth(CONTACT_NUMBER, "New#Pass123")}
    )
    assert relogin.status_code == 200


def test_update_password_wrong_old_password(client, token):
    response = client.put(
        "/customer/password",
        headers=_bearer(token),
        json={"old_password": "Wrong#Pass1", "new_password": "New#Pass123"},
    )
    assert response.status_code == 400
    assert response.get_json()["code"] == "UCR-004"


def test_states(client, catalog):
    response = client.get("/states")
    assert response.status_code == 200
    assert response.get_json() == {"states": [{"id": catalog["state"], "state_name": "Karnataka"}]}


def test_address_flow(client, token, address_id):
    listed = client.get("/address/customer", headers=_bearer(token))
    assert listed.status_code == 200
    assert [address["id"] for address in listed.get_json()["addresses"]] == [address_id]

    deleted = client.delete(f"/address/{address_id}", headers=_bearer(token))
    assert deleted.status_code == 200
    assert deleted.get_json() == {"id": address_id, "status": "ADDRESS DELETED SUCCESSFULLY"}

    assert client.get("/address/customer", headers=_bearer(token)).get_json()["addresses"] == []


def test_save_address_invalid_pincode(client, token, catalog):
    response = client.post(
        "/address",
        headers=_bearer(token),
        json={
            "flat_building_name": "12",
            "locality": "Indiranagar",
            "city": "Bengaluru",
            "pincode": "ABC123",
            "state_uuid": catalog["state"],
        },
    )
    assert response.status_code == 400
    assert response.get_json()["code"] == "SAR-002"


def test_delete_unknown_address(client, token):
    response = client.delete("/address/no-such-address", headers=_bearer(token))
    assert response.status_code == 404
    assert response.get_json()["code"] == "ANF-003"


def test_coupon_lookup(client, token, catalog):
    response = client.get("/order/coupon/FLAT10", headers=_bearer(token))
    assert response.status_code == 200
    assert response.get_json() == {"id": catalog["coupon"], "coupon_name": "FLAT10", "percent": 10}


def test_coupon_lookup_errors(client, token, catalog):
    missing = client.get("/order/coupon/NOPE", headers=_bearer(token))
    assert missing.status_code == 404
    assert missing.get_json()["code"] == "CPF-001"

    empty = client.get("/order/coupon/", headers=_bearer(token))
    assert empty.status_code == 404
    assert empty.get_json()["code"] == "CPF-002"


def test_orders_empty_returns_no_content(client, token):
    response = client.get("/order", headers=_bearer(token))
    assert response.status_code == 204


def test_place_and_list_orders(client, token, catalog, address_id):
    placed = client.post("/order", headers=_bearer(token), json=_order_body(catalog, address_id))
    assert placed.status_code == 201
    assert placed.get_json()["status"] == "ORDER SUCCESSFULLY PLACED"

    response = client.get("/order", headers=_bearer(token))
    assert response.status_code == 200
    orders = response.get_json()["orders"]
    assert [order["id"] for order in orders] == [placed.get_json()["id"]]
    assert orders[0]["bill"] == 216
    assert orders[0]["item_quantities"][0]["item"]["item_name"] == "Masala Dosa"


def test_place_order_unknown_restaurant(client, token, catalog, address_id):
    body = _order_body(catalog, address_id)
    body["restaurant_id"] = "no-such-restaurant"
    response = client.post("/order", headers=_bearer(token), json=body)
    assert response.status_code == 404
    assert response.get_json()["code"] == "RNF-001"
    assert client.get("/order", headers=_bearer(token)).status_code == 204


def test_place_order_malformed_payload(client, token, catalog, address_id):
    body = _order_body(catalog, address_id)
    body["bill"] = "lots"
    response = client.post("/order", headers=_bearer(token), json=body)
    assert response.status_code == 400
    assert response.get_json()["code"] == "GEN-002"


def test_payment_methods(client, catalog):
    response = client.get("/payment")
    assert response.status_code == 200
    assert response.get_json() == {
        "payment_methods": [{"id": catalog["payment"], "payment_name": "Cash on Delivery"}]
    }


def test_payment_methods_empty(client):
    assert client.get("/payment").status_code == 204


def test_unknown_route(client):
    response = client.get("/no-such-route")
    assert response.status_code == 404
    assert response.get_json()["code"] == "GEN-003"


def test_wrong_method(client):
    response = client.get("/customer/signup")
    assert response.status_code == 405
    assert response.get_json()["code"] == "GEN-004"
