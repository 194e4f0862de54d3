"""
Storage accessors, one per entity.

Each repository wraps the active session and exposes the inserts and lookups
the services need. Updates are done by mutating rows loaded through them;
the surrounding `get_session()` block commits or rolls back.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .models import (
    Address,
    Coupon,
    Customer,
    CustomerAuth,
    Item,
    Order,
    OrderItem,
    Payment,
    Restaurant,
    State,
)


class _Repository:
    model: type

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, instance):
        self.session.add(instance)
        self.session.flush()
        return instance

    def get_by_uuid(self, uuid: str):
        return (
            self.session.execute(select(self.model).where(self.model.uuid == uuid))
            .scalars()
            .one_or_none()
        )


class CustomerRepository(_Repository):
    model = Customer

    def get_by_contact_number(self, contact_number: str) -> Customer | None:
        return (
            self.session.execute(
                select(Customer).where(Customer.contact_number == contact_number)
            )
            .scalars()
            .one_or_none()
        )


class CustomerAuthRepository(_Repository):
    model = CustomerAuth

    def get_by_access_token(self, access_token: str) -> CustomerAuth | None:
        return (
            self.session.execute(
                select(CustomerAuth).where(CustomerAuth.access_token == access_token)
            )
            .scalars()
            .one_or_none()
        )


class StateRepository(_Repository):
    model = State

    def list_all(self) -> list[State]:
        return list(self.session.execute(select(State).order_by(State.state_name)).scalars())


class AddressRepository(_Repository):
    model = Address

    def list_active_for_customer(self, customer_id: int) -> list[Address]:
        query = (
            select(Address)
            .where(Address.customer_id == customer_id, Address.active.is_(True))
            .order_by(Address.id.desc())
        )
        return list(self.session.execute(query).scalars())

    def count_orders(self, address_id: int) -> int:
        return (
            self.session.execute(
                select(func.count(Order.id)).where(Order.address_id == address_id)
            ).scalar()
            or 0
        )

    def delete(self, address: Address) -> None:
        self.session.delete(address)
        self.session.flush()


class RestaurantRepository(_Repository):
    model = Restaurant


class ItemRepository(_Repository):
    model = Item


class CouponRepository(_Repository):
    model = Coupon

    def get_by_name(self, coupon_name: str) -> Coupon | None:
        return (
            self.session.execute(select(Coupon).where(Coupon.coupon_name == coupon_name))
            .scalars()
            .one_or_none()
        )


class PaymentRepository(_Repository):
    model = Payment

    def list_all(self) -> list[Payment]:
        return list(self.session.execute(select(Payment).order_by(Payment.id)).scalars())


class OrderRepository(_Repository):
    model = Order

    def add_item(self, order_item: OrderItem) -> OrderItem:
        self.session.add(order_item)
        return order_item

    def list_for_customer(self, customer_id: int) -> list[Order]:
        query = (
            select(Order)
            .where(Order.customer_id == customer_id)
            .order_by(Order.date.desc(), Order.id.desc())
        )
        return list(self.session.execute(query).scalars())

    def items_for_order(self, order_id: int) -> list[OrderItem]:
        return list(
            self.session.execute(
                select(OrderItem).where(OrderItem.order_id == order_id).order_by(OrderItem.id)
            ).scalars()
        )
