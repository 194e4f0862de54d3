"""
Payment method lookups.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from foodorder_shared.db import get_session
from foodorder_shared.errors import PaymentMethodNotFoundError
from foodorder_shared.models import Payment
from foodorder_shared.repositories import PaymentRepository
from foodorder_shared.serializers import serialize_payment
from foodorder_shared.validation import is_blank


def find_payment(session, payment_uuid: str | None) -> Payment:
    payment = None if is_blank(payment_uuid) else PaymentRepository(session).get_by_uuid(payment_uuid)
    if payment is None:
        raise PaymentMethodNotFoundError("PNF-002")
    return payment


class PaymentService:
    def __init__(self, session_scope: Callable = get_session) -> None:
        self.session_scope = session_scope

    def list_payment_methods(self) -> list[dict[str, Any]]:
        with self.session_scope() as session:
            return [serialize_payment(payment) for payment in PaymentRepository(session).list_all()]
