"""
Reference data every deployment needs: states, payment methods and coupons.

`load_reference_data` is idempotent; rows are matched by name and only the
missing ones are inserted.
"""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from foodorder_shared.logging_config import get_logger
from foodorder_shared.models import Coupon, Payment, State

logger = get_logger(__name__)

DEFAULT_STATES = (
    "Andhra Pradesh",
    "Delhi",
    "Goa",
    "Gujarat",
    "Karnataka",
    "Kerala",
    "Maharashtra",
    "Punjab",
    "Rajasthan",
    "Tamil Nadu",
    "Telangana",
    "Uttar Pradesh",
    "West Bengal",
)

DEFAULT_PAYMENT_METHODS = (
    "Cash on Delivery",
    "Wallet",
    "NetBanking",
    "Credit Card",
    "Debit Card",
)

DEFAULT_COUPONS = {
    "FLAT10": 10,
    "FLAT20": 20,
    "FLAT30": 30,
}


def _existing(session: Session, column) -> set[str]:
    return set(session.execute(select(column)).scalars())


def load_reference_data(session: Session) -> dict[str, int]:
    """Insert missing reference rows and return how many of each were added."""
    added = {"states": 0, "payments": 0, "coupons": 0}

    known_states = _existing(session, State.state_name)
    for name in DEFAULT_STATES:
        if name not in known_states:
            session.add(State(uuid=str(uuid.uuid4()), state_name=name))
            added["states"] += 1

    known_payments = _existing(session, Payment.payment_name)
    for name in DEFAULT_PAYMENT_METHODS:
        if name not in known_payments:
            session.add(Payment(uuid=str(uuid.uuid4()), payment_name=name))
            added["payments"] += 1

    known_coupons = _existing(session, Coupon.coupon_name)
    for name, percent in DEFAULT_COUPONS.items():
        if name not in known_coupons:
            session.add(Coupon(uuid=str(uuid.uuid4()), coupon_name=name, percent=percent))
            added["coupons"] += 1

    session.flush()
    logger.info("Reference data loaded: %s", added)
    return added
