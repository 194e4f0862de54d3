from foodorder_api.app import create_app
from foodorder_shared.db import get_session, reset_engine
from foodorder_shared.services.reference_data import (
    DEFAULT_COUPONS,
    DEFAULT_PAYMENT_METHODS,
    DEFAULT_STATES,
    load_reference_data,
)


def test_load_reference_data_is_idempotent(db, address_service, payment_service, order_service):
    with get_session() as session:
        first = load_reference_data(session)
    with get_session() as session:
        second = load_reference_data(session)

    assert first == {
        "states": len(DEFAULT_STATES),
        "payments": len(DEFAULT_PAYMENT_METHODS),
        "coupons": len(DEFAULT_COUPONS),
    }
    assert second == {"states": 0, "payments": 0, "coupons": 0}
    assert len(address_service.list_states()) == len(DEFAULT_STATES)
    assert len(payment_service.list_payment_methods()) == len(DEFAULT_PAYMENT_METHODS)
    assert order_service.get_coupon_by_name("FLAT20")["percent"] == 20


def test_create_app_can_load_reference_data(config):
    config.load_reference_data = True
    try:
        client = create_app(config).test_client()
        response = client.get("/states")
        assert response.status_code == 200
        assert len(response.get_json()["states"]) == len(DEFAULT_STATES)
    finally:
        reset_engine()
