"""
Order service: coupon lookup, order history and checkout.

Checkout resolves every referenced row before inserting anything, and the
whole placement runs in one transaction, so a failed lookup leaves no order
or order item behind.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import datetime
from typing import Any

from foodorder_shared.datetime_utils import utcnow
from foodorder_shared.db import get_session
from foodorder_shared.errors import CouponNotFoundError
from foodorder_shared.logging_config import LoggerAdapter, get_logger
from foodorder_shared.models import Coupon, Order, OrderItem
from foodorder_shared.repositories import CouponRepository, OrderRepository
from foodorder_shared.schemas import SaveOrderRequest
from foodorder_shared.serializers import serialize_coupon, serialize_order
from foodorder_shared.services.address_service import resolve_owned_address
from foodorder_shared.services.payment_service import find_payment
from foodorder_shared.services.restaurant_service import find_item, find_restaurant
from foodorder_shared.validation import is_blank

logger = get_logger(__name__)


def _find_coupon_by_uuid(session, coupon_uuid: str) -> Coupon:
    coupon = CouponRepository(session).get_by_uuid(coupon_uuid)
    if coupon is None:
        raise CouponNotFoundError("CPF-003")
    return coupon


class OrderService:
    def __init__(
        self,
        session_scope: Callable = get_session,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.session_scope = session_scope
        self.clock = clock

    def get_coupon_by_name(self, coupon_name: str | None) -> dict[str, Any]:
        """
        Raises:
            CouponNotFoundError: CPF-002 empty name, CPF-001 unknown name.
        """
        if is_blank(coupon_name):
            raise CouponNotFoundError("CPF-002")
        with self.session_scope() as session:
            coupon = CouponRepository(session).get_by_name(coupon_name)
            if coupon is None:
                raise CouponNotFoundError("CPF-001")
            return serialize_coupon(coupon)

    def list_orders(self, customer_id: int) -> list[dict[str, Any]]:
        with self.session_scope() as session:
            orders = OrderRepository(session)
            return [
                serialize_order(order, orders.items_for_order(order.id))
                for order in orders.list_for_customer(customer_id)
            ]

    def place_order(self, customer_id: int, request: SaveOrderRequest) -> dict[str, Any]:
        """
        Place an order for the customer.

        Lookups run in this order: coupon (CPF-003), payment (PNF-002),
        address (ANF-005, ANF-003, ATHR-004), restaurant (RNF-002, RNF-001),
        then each item (INF-001). Bill and discount are stored as sent.
        """
        log = LoggerAdapter(logger, {"customer_id": customer_id})

        with self.session_scope() as session:
            coupon = None
            if not is_blank(request.coupon_id):
                coupon = _find_coupon_by_uuid(session, request.coupon_id)

            payment = None
            if not is_blank(request.payment_id):
                payment = find_payment(session, request.payment_id)

            address = resolve_owned_address(session, customer_id, request.address_id)
            restaurant = find_restaurant(session, request.restaurant_id)
            lines = [
                (find_item(session, line.item_id), line.quantity, line.price)
                for line in request.item_quantities
            ]

            orders = OrderRepository(session)
            order = orders.add(
                Order(
                    uuid=str(uuid.uuid4()),
                    bill=request.bill,
                    discount=request.discount or 0,
                    date=self.clock(),
                    customer_id=customer_id,
                    address_id=address.id,
                    restaurant_id=restaurant.id,
                    coupon_id=coupon.id if coupon else None,
                    payment_id=payment.id if payment else None,
                )
            )
            for item, quantity, price in lines:
                orders.add_item(
                    OrderItem(order_id=order.id, item_id=item.id, quantity=quantity, price=price)
                )
            session.flush()

            log.info("Order %s placed with %d item(s)", order.uuid, len(lines))
            return {"id": order.uuid}
