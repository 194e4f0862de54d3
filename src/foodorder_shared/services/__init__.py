"""
Business services for customers, addresses, orders and payments.
"""

from foodorder_shared.services.address_service import AddressService
from foodorder_shared.services.customer_service import CustomerService
from foodorder_shared.services.order_service import OrderService
from foodorder_shared.services.payment_service import PaymentService

__all__ = [
    "AddressService",
    "CustomerService",
    "OrderService",
    "PaymentService",
]
