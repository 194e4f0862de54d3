"""
Food ordering API - Modular Blueprint Structure

Each module handles one resource: customers, addresses, orders and payments.
"""

from flask import Blueprint

api_bp = Blueprint("api", __name__)

from .address import address_bp  # noqa: E402
from .customer import customer_bp  # noqa: E402
from .order import order_bp  # noqa: E402
from .payment import payment_bp  # noqa: E402

api_bp.register_blueprint(customer_bp)
api_bp.register_blueprint(address_bp)
api_bp.register_blueprint(order_bp)
api_bp.register_blueprint(payment_bp)
