"""
Payment API - available payment methods.
"""

from http import HTTPStatus

from flask import Blueprint, current_app, jsonify

payment_bp = Blueprint("payment", __name__)


@payment_bp.get("/payment")
def list_payment_methods():
    payment_methods = current_app.extensions["foodorder"].payments.list_payment_methods()
    if not payment_methods:
        return "", HTTPStatus.NO_CONTENT
    return jsonify({"payment_methods": payment_methods}), HTTPStatus.OK
