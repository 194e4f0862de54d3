import base64
import uuid
from datetime import datetime, timedelta

import pytest

from foodorder_api.app import Services, create_app
from foodorder_shared.config import AppConfig
from foodorder_shared.db import get_session, init_db, init_engine, reset_engine
from foodorder_shared.models import Base, Coupon, Item, Payment, Restaurant, State
from foodorder_shared.services import (
    AddressService,
    CustomerService,
    OrderService,
    PaymentService,
)

TEST_SECRET = "test-secret-key"
CONTACT_NUMBER = "9876543210"
PASSWORD = "Secret#123"


class FakeClock:
    """Controllable replacement for `utcnow`."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def basic_auth(contact_number: str, password: str) -> str:
    raw = f"{contact_number}:{password}".encode()
    return "Basic " + base64.b64encode(raw).decode()


@pytest.fixture
def config():
    return AppConfig(
        app_name="foodorder-test",
        database_url="sqlite://",
        secret_key=TEST_SECRET,
        log_level="WARNING",
    )


@pytest.fixture
def db(config):
    init_engine(config)
    init_db(Base.metadata)
    yield
    reset_engine()


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 15, 12, 0, 0))


@pytest.fixture
def customer_service(db, clock):
    return CustomerService(secret_key=TEST_SECRET, clock=clock)


@pytest.fixture
def address_service(db):
    return AddressService()


@pytest.fixture
def order_service(db, clock):
    return OrderService(clock=clock)


@pytest.fixture
def payment_service(db):
    return PaymentService()


@pytest.fixture
def catalog(db):
    """One state, restaurant, two items, a coupon and a payment method."""
    rows = {
        "state": State(uuid=str(uuid.uuid4()), state_name="Karnataka"),
        "restaurant": Restaurant(
            uuid=str(uuid.uuid4()),
            restaurant_name="Dosa Corner",
            customer_rating=4.0,
            average_price_for_two=300,
            number_of_customers_rated=3,
        ),
        "masala_dosa": Item(uuid=str(uuid.uuid4()), item_name="Masala Dosa", price=120, type="VEG"),
        "chicken_65": Item(
            uuid=str(uuid.uuid4()), item_name="Chicken 65", price=220, type="NON_VEG"
        ),
        "coupon": Coupon(uuid=str(uuid.uuid4()), coupon_name="FLAT10", percent=10),
        "payment": Payment(uuid=str(uuid.uuid4()), payment_name="Cash on Delivery"),
    }
    with get_session() as session:
        session.add_all(rows.values())
    return {name: row.uuid for name, row in rows.items()}


@pytest.fixture
def customer(customer_service):
    return customer_service.signup(
        first_name="Asha",
        last_name="Rao",
        email="asha@example.com",
        contact_number=CONTACT_NUMBER,
        password=PASSWORD,
    )


@pytest.fixture
def login(customer_service, customer):
    return customer_service.authenticate(CONTACT_NUMBER, PASSWORD)


@pytest.fixture
def app(db, config, customer_service, address_service, order_service, payment_service):
    services = Services(
        customers=customer_service,
        addresses=address_service,
        orders=order_service,
        payments=payment_service,
    )
    app = create_app(config, services=services)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
