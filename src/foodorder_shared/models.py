"""
SQLAlchemy ORM models shared by the food ordering services.

Associations only point from the owning row to its parent (many-to-one).
Collections such as "addresses of a customer" are explicit repository
queries, so no model holds a back-reference to its children.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from .constants import ItemType


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


class Customer(Base):
    __tablename__ = "customer"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uuid: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str] = mapped_column(String(50), nullable=False)
    contact_number: Mapped[str] = mapped_column(
        String(30), nullable=False, unique=True, index=True
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    salt: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Customer {self.uuid} contact={self.contact_number}>"


class CustomerAuth(Base):
    """One login session; rows are kept after logout or expiry."""

    __tablename__ = "customer_auth"
    __table_args__ = (Index("ix_customer_auth_customer_id", "customer_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uuid: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    customer_id: Mapped[int] = mapped_column(
        ForeignKey("customer.id", ondelete="CASCADE"), nullable=False
    )
    access_token: Mapped[str] = mapped_column(String(500), unique=True, nullable=False)
    login_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    logout_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    customer: Mapped[Customer] = relationship("Customer", lazy="joined")

    def __repr__(self) -> str:
        return (
            f"<CustomerAuth {self.uuid} customer_id={self.customer_id} "
            f"expires_at={self.expires_at} logout_at={self.logout_at}>"
        )


class State(Base):
    __tablename__ = "state"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uuid: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    state_name: Mapped[str] = mapped_column(String(30), nullable=False)

    def __repr__(self) -> str:
        return f"<State {self.state_name}>"


class Address(Base):
    __tablename__ = "address"
    __table_args__ = (Index("ix_address_customer_active", "customer_id", "active"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uuid: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    flat_building_name: Mapped[str] = mapped_column(String(255), nullable=False)
    locality: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(30), nullable=False)
    pincode: Mapped[str] = mapped_column(String(30), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    customer_id: Mapped[int] = mapped_column(ForeignKey("customer.id"), nullable=False)
    state_id: Mapped[int] = mapped_column(ForeignKey("state.id"), nullable=False)

    state: Mapped[State] = relationship("State", lazy="joined")

    def __repr__(self) -> str:
        return f"<Address {self.uuid} active={self.active}>"


class Restaurant(Base):
    __tablename__ = "restaurant"
    __table_args__ = (
        CheckConstraint(
            "customer_rating >= 0 AND customer_rating <= 5",
            name="chk_restaurant_rating_range",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uuid: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    restaurant_name: Mapped[str] = mapped_column(String(50), nullable=False)
    customer_rating: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    average_price_for_two: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_customers_rated: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Restaurant {self.restaurant_name}>"


class Item(Base):
    __tablename__ = "item"
    __table_args__ = (CheckConstraint("price >= 0", name="chk_item_price_positive"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uuid: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    item_name: Mapped[str] = mapped_column(String(30), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False, default=ItemType.VEG.value)

    def __repr__(self) -> str:
        return f"<Item {self.item_name} price={self.price}>"


class Coupon(Base):
    __tablename__ = "coupon"
    __table_args__ = (
        CheckConstraint("percent >= 0 AND percent <= 100", name="chk_coupon_percent_valid"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uuid: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    coupon_name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    percent: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Coupon {self.coupon_name} {self.percent}%>"


class Payment(Base):
    __tablename__ = "payment"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uuid: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    payment_name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Payment {self.payment_name}>"


class Order(Base):
    """Created once at checkout and never modified afterwards."""

    __tablename__ = "orders"
    __table_args__ = (
        Index("ix_orders_customer_date", "customer_id", "date"),
        Index("ix_orders_address_id", "address_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uuid: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    bill: Mapped[float] = mapped_column(Float, nullable=False)
    discount: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    customer_id: Mapped[int] = mapped_column(ForeignKey("customer.id"), nullable=False)
    address_id: Mapped[int] = mapped_column(ForeignKey("address.id"), nullable=False)
    restaurant_id: Mapped[int] = mapped_column(ForeignKey("restaurant.id"), nullable=False)
    coupon_id: Mapped[int | None] = mapped_column(ForeignKey("coupon.id"), nullable=True)
    payment_id: Mapped[int | None] = mapped_column(ForeignKey("payment.id"), nullable=True)

    customer: Mapped[Customer] = relationship("Customer")
    address: Mapped[Address] = relationship("Address")
    restaurant: Mapped[Restaurant] = relationship("Restaurant")
    coupon: Mapped[Coupon | None] = relationship("Coupon")
    payment: Mapped[Payment | None] = relationship("Payment")

    def __repr__(self) -> str:
        return f"<Order {self.uuid} bill={self.bill} discount={self.discount}>"


class OrderItem(Base):
    __tablename__ = "order_item"
    __table_args__ = (
        Index("ix_order_item_order_id", "order_id"),
        CheckConstraint("quantity > 0", name="chk_order_item_quantity_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id"), nullable=False)
    item_id: Mapped[int] = mapped_column(ForeignKey("item.id"), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)

    item: Mapped[Item] = relationship("Item", lazy="joined")

    def __repr__(self) -> str:
        return f"<OrderItem order_id={self.order_id} item_id={self.item_id} x{self.quantity}>"
