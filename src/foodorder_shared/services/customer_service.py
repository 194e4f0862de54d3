"""
Customer service: signup, login/logout, profile and password updates.

Also owns the access-token lifecycle. A session row is created at login,
checked on every authenticated request and closed at logout.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from sqlalchemy.exc import IntegrityError

from foodorder_shared.constants import NAME_MAX_LENGTH
from foodorder_shared.datetime_utils import utcnow
from foodorder_shared.db import get_session
from foodorder_shared.errors import (
    AuthenticationFailedError,
    AuthorizationFailedError,
    SignUpRestrictedError,
    UpdateCustomerError,
)
from foodorder_shared.logging_config import get_logger
from foodorder_shared.models import Customer, CustomerAuth
from foodorder_shared.repositories import CustomerAuthRepository, CustomerRepository
from foodorder_shared.security import (
    create_access_token,
    generate_salt,
    hash_password,
    verify_password,
)
from foodorder_shared.serializers import serialize_customer
from foodorder_shared.validation import (
    exceeds_length,
    is_blank,
    is_strong_password,
    is_valid_contact_number,
    is_valid_email,
)

logger = get_logger(__name__)

DEFAULT_TOKEN_TTL_HOURS = 8

# Appears in the driver message of a duplicate contact number insert
CONTACT_NUMBER_COLUMN = "contact_number"


def _names_too_long(first_name: str | None, last_name: str | None) -> bool:
    return exceeds_length(first_name, NAME_MAX_LENGTH) or exceeds_length(
        last_name, NAME_MAX_LENGTH
    )


@dataclass
class CustomerData:
    """Customer information usable outside of the database session."""

    id: int
    uuid: str
    first_name: str
    last_name: str | None
    email: str
    contact_number: str

    @classmethod
    def from_model(cls, customer: Customer) -> CustomerData:
        return cls(
            id=customer.id,
            uuid=customer.uuid,
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            contact_number=customer.contact_number,
        )


@dataclass
class LoginResult:
    customer: CustomerData
    access_token: str
    login_at: datetime
    expires_at: datetime


class CustomerService:
    """Business rules around customers and their sessions."""

    def __init__(
        self,
        secret_key: str,
        session_scope: Callable = get_session,
        clock: Callable[[], datetime] = utcnow,
        token_ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS,
    ) -> None:
        self.secret_key = secret_key
        self.session_scope = session_scope
        self.clock = clock
        self.token_ttl = timedelta(hours=token_ttl_hours)

    def signup(
        self,
        first_name: str | None,
        last_name: str | None,
        email: str | None,
        contact_number: str | None,
        password: str | None,
    ) -> dict[str, Any]:
        """
        Register a new customer.

        Raises:
            SignUpRestrictedError: SGR-005 missing field, SGR-006 name too long,
                SGR-002 bad email, SGR-003 bad contact number, SGR-004 weak password,
                SGR-001 contact number already registered.
        """
        if any(is_blank(value) for value in (first_name, email, contact_number, password)):
            raise SignUpRestrictedError("SGR-005")
        if _names_too_long(first_name, last_name):
            raise SignUpRestrictedError("SGR-006")
        if not is_valid_email(email):
            raise SignUpRestrictedError("SGR-002")
        if not is_valid_contact_number(contact_number):
            raise SignUpRestrictedError("SGR-003")
        if not is_strong_password(password):
            raise SignUpRestrictedError("SGR-004")

        with self.session_scope() as session:
            customers = CustomerRepository(session)
            if customers.get_by_contact_number(contact_number) is not None:
                logger.warning("Signup rejected: contact number already registered")
                raise SignUpRestrictedError("SGR-001")

            salt = generate_salt()
            customer = Customer(
                uuid=str(uuid.uuid4()),
                first_name=first_name,
                last_name=last_name or None,
                email=email,
                contact_number=contact_number,
                salt=salt,
                password=hash_password(password, salt),
            )
            try:
                customers.add(customer)
            except IntegrityError as exc:
                # Lost a race with a concurrent signup for the same number
                if CONTACT_NUMBER_COLUMN in str(exc.orig):
                    raise SignUpRestrictedError("SGR-001") from None
                raise

            logger.info("Customer %s signed up", customer.uuid)
            return serialize_customer(customer)

    def authenticate(self, contact_number: str, password: str) -> LoginResult:
        """
        Check credentials and open a new session.

        Unknown contact numbers and wrong passwords are indistinguishable to
        the caller: both raise ATH-002.
        """
        with self.session_scope() as session:
            customer = CustomerRepository(session).get_by_contact_number(contact_number)
            if customer is None or not verify_password(
                password, customer.salt, customer.password
            ):
                logger.warning("Login rejected: invalid credentials")
                raise AuthenticationFailedError("ATH-002")

            login_at = self.clock()
            expires_at = login_at + self.token_ttl
            customer_auth = CustomerAuth(
                uuid=str(uuid.uuid4()),
                customer_id=customer.id,
                access_token=create_access_token(
                    customer.uuid, login_at, expires_at, self.secret_key
                ),
                login_at=login_at,
                expires_at=expires_at,
                logout_at=None,
            )
            CustomerAuthRepository(session).add(customer_auth)

            logger.info("Customer %s logged in", customer.uuid)
            return LoginResult(
                customer=CustomerData.from_model(customer),
                access_token=customer_auth.access_token,
                login_at=login_at,
                expires_at=expires_at,
            )

    def _validate_session(self, session, access_token: str) -> CustomerAuth:
        customer_auth = CustomerAuthRepository(session).get_by_access_token(access_token)
        if customer_auth is None:
            raise AuthorizationFailedError("ATHR-001")
        if self.clock() >= customer_auth.expires_at:
            raise AuthorizationFailedError("ATHR-003")
        if customer_auth.logout_at is not None:
            raise AuthorizationFailedError("ATHR-002")
        return customer_auth

    def get_customer(self, access_token: str) -> CustomerData:
        """
        Resolve the customer behind a bearer token.

        Raises:
            AuthorizationFailedError: ATHR-001 unknown token, ATHR-003 expired,
                ATHR-002 logged out.
        """
        with self.session_scope() as session:
            customer_auth = self._validate_session(session, access_token)
            return CustomerData.from_model(customer_auth.customer)

    def logout(self, access_token: str) -> CustomerData:
        with self.session_scope() as session:
            customer_auth = self._validate_session(session, access_token)
            customer_auth.logout_at = self.clock()
            logger.info("Customer %s logged out", customer_auth.customer.uuid)
            return CustomerData.from_model(customer_auth.customer)

    def update_customer(
        self, access_token: str, first_name: str | None, last_name: str | None
    ) -> dict[str, Any]:
        if is_blank(first_name):
            raise UpdateCustomerError("UCR-002")
        if _names_too_long(first_name, last_name):
            raise UpdateCustomerError("UCR-005")

        with self.session_scope() as session:
            customer = self._validate_session(session, access_token).customer
            customer.first_name = first_name
            customer.last_name = last_name or None
            logger.info("Customer %s updated details", customer.uuid)
            return serialize_customer(customer)

    def update_password(
        self, access_token: str, old_password: str | None, new_password: str | None
    ) -> dict[str, Any]:
        """
        Replace the customer's password after re-checking the old one.

        Raises:
            UpdateCustomerError: UCR-003 missing field, UCR-001 weak new
                password, UCR-004 old password does not match.
        """
        if is_blank(old_password) or is_blank(new_password):
            raise UpdateCustomerError("UCR-003")

        with self.session_scope() as session:
            customer = self._validate_session(session, access_token).customer
            if not is_strong_password(new_password):
                raise UpdateCustomerError("UCR-001")
            if not verify_password(old_password, customer.salt, customer.password):
                logger.warning("Password change rejected for customer %s", customer.uuid)
                raise UpdateCustomerError("UCR-004")

            salt = generate_salt()
            customer.salt = salt
            customer.password = hash_password(new_password, salt)
            logger.info("Customer %s changed password", customer.uuid)
            return serialize_customer(customer)
