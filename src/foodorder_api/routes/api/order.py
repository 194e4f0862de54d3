"""
Orders API - coupon lookup, order history and checkout.
"""

from http import HTTPStatus

from flask import Blueprint, current_app, g, jsonify, request

from foodorder_api.decorators import customer_required
from foodorder_shared.constants import ResponseStatus
from foodorder_shared.schemas import SaveOrderRequest

order_bp = Blueprint("order", __name__)


def _orders():
    return current_app.extensions["foodorder"].orders


@order_bp.get("/order/coupon/")
@order_bp.get("/order/coupon/<coupon_name>")
@customer_required
def get_coupon(coupon_name: str = ""):
    return jsonify(_orders().get_coupon_by_name(coupon_name)), HTTPStatus.OK


@order_bp.get("/order")
@customer_required
def list_orders():
    orders = _orders().list_orders(g.customer.id)
    if not orders:
        return "", HTTPStatus.NO_CONTENT
    return jsonify({"orders": orders}), HTTPStatus.OK


@order_bp.post("/order")
@customer_required
def place_order():
    """
    Body:
        {address_id, payment_id, coupon_id, restaurant_id, bill, discount,
         item_quantities: [{item_id, quantity, price}]}
    """
    payload = SaveOrderRequest.model_validate(request.get_json(silent=True) or {})
    order = _orders().place_order(g.customer.id, payload)
    return jsonify(
        {"id": order["id"], "status": ResponseStatus.ORDER_PLACED.value}
    ), HTTPStatus.CREATED
