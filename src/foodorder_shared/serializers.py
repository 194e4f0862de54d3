"""
Serializers for consistent API responses.

Called while the owning session is still open so lazy relationships can load.
"""

from typing import Any

from .models import Address, Coupon, Customer, Order, OrderItem, Payment, State


def serialize_customer(customer: Customer) -> dict[str, Any]:
    """Serialize Customer model. Password and salt never leave the service layer."""
    return {
        "id": customer.uuid,
        "first_name": customer.first_name,
        "last_name": customer.last_name,
        "email_address": customer.email,
        "contact_number": customer.contact_number,
    }


def serialize_state(state: State | None) -> dict[str, Any] | None:
    if state is None:
        return None
    return {"id": state.uuid, "state_name": state.state_name}


def serialize_address(address: Address) -> dict[str, Any]:
    return {
        "id": address.uuid,
        "flat_building_name": address.flat_building_name,
        "locality": address.locality,
        "city": address.city,
        "pincode": address.pincode,
        "state": serialize_state(address.state),
    }


def serialize_coupon(coupon: Coupon | None) -> dict[str, Any] | None:
    if coupon is None:
        return None
    return {"id": coupon.uuid, "coupon_name": coupon.coupon_name, "percent": coupon.percent}


def serialize_payment(payment: Payment | None) -> dict[str, Any] | None:
    if payment is None:
        return None
    return {"id": payment.uuid, "payment_name": payment.payment_name}


def serialize_order_item(order_item: OrderItem) -> dict[str, Any]:
    item = order_item.item
    return {
        "item": {
            "id": item.uuid,
            "item_name": item.item_name,
            "item_price": item.price,
            "type": item.type,
        },
        "quantity": order_item.quantity,
        "price": order_item.price,
    }


def serialize_order(order: Order, items: list[OrderItem]) -> dict[str, Any]:
    return {
        "id": order.uuid,
        "bill": order.bill,
        "discount": order.discount,
        "date": order.date.isoformat(),
        "customer": serialize_customer(order.customer),
        "address": serialize_address(order.address),
        "coupon": serialize_coupon(order.coupon),
        "payment": serialize_payment(order.payment),
        "item_quantities": [serialize_order_item(order_item) for order_item in items],
    }


def error_response(code: str, message: str) -> dict[str, str]:
    """Create a standardized error response."""
    return {"code": code, "message": message}
