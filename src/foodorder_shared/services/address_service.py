"""
Address service: registration, listing and deletion of delivery addresses.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import Any

from sqlalchemy.orm import Session

from foodorder_shared.constants import ADDRESS_LINE_MAX_LENGTH, CITY_MAX_LENGTH
from foodorder_shared.db import get_session
from foodorder_shared.errors import (
    AddressNotFoundError,
    AuthorizationFailedError,
    SaveAddressError,
)
from foodorder_shared.logging_config import get_logger
from foodorder_shared.models import Address
from foodorder_shared.repositories import AddressRepository, StateRepository
from foodorder_shared.serializers import serialize_address, serialize_state
from foodorder_shared.validation import exceeds_length, is_blank, is_valid_pincode

logger = get_logger(__name__)


def resolve_owned_address(session: Session, customer_id: int, address_uuid: str | None) -> Address:
    """
    Load an address by uuid and check that it belongs to the customer.

    Raises:
        AddressNotFoundError: ANF-005 empty id, ANF-003 unknown id.
        AuthorizationFailedError: ATHR-004 address of another customer.
    """
    if is_blank(address_uuid):
        raise AddressNotFoundError("ANF-005")
    address = AddressRepository(session).get_by_uuid(address_uuid)
    if address is None:
        raise AddressNotFoundError("ANF-003")
    if address.customer_id != customer_id:
        raise AuthorizationFailedError("ATHR-004")
    return address


class AddressService:
    def __init__(self, session_scope: Callable = get_session) -> None:
        self.session_scope = session_scope

    def save_address(
        self,
        customer_id: int,
        flat_building_name: str | None,
        locality: str | None,
        city: str | None,
        pincode: str | None,
        state_uuid: str | None,
    ) -> dict[str, Any]:
        """
        Register a new active address for the customer.

        Raises:
            SaveAddressError: SAR-001 empty field, SAR-003 field too long,
                SAR-002 invalid pincode.
            AddressNotFoundError: ANF-002 unknown state.
        """
        fields = (flat_building_name, locality, city, pincode, state_uuid)
        if any(is_blank(value) for value in fields):
            raise SaveAddressError("SAR-001")
        if (
            exceeds_length(flat_building_name, ADDRESS_LINE_MAX_LENGTH)
            or exceeds_length(locality, ADDRESS_LINE_MAX_LENGTH)
            or exceeds_length(city, CITY_MAX_LENGTH)
        ):
            raise SaveAddressError("SAR-003")
        if not is_valid_pincode(pincode):
            raise SaveAddressError("SAR-002")

        with self.session_scope() as session:
            state = StateRepository(session).get_by_uuid(state_uuid)
            if state is None:
                raise AddressNotFoundError("ANF-002")

            address = Address(
                uuid=str(uuid.uuid4()),
                flat_building_name=flat_building_name,
                locality=locality,
                city=city,
                pincode=pincode,
                active=True,
                customer_id=customer_id,
                state_id=state.id,
            )
            AddressRepository(session).add(address)
            logger.info("Address %s saved for customer_id=%s", address.uuid, customer_id)
            return serialize_address(address)

    def list_addresses(self, customer_id: int) -> list[dict[str, Any]]:
        with self.session_scope() as session:
            addresses = AddressRepository(session).list_active_for_customer(customer_id)
            return [serialize_address(address) for address in addresses]

    def list_states(self) -> list[dict[str, Any]]:
        with self.session_scope() as session:
            return [serialize_state(state) for state in StateRepository(session).list_all()]

    def delete_address(self, customer_id: int, address_uuid: str | None) -> dict[str, Any]:
        """
        Delete an address the customer owns.

        Addresses referenced by past orders are only flagged inactive so the
        order history keeps pointing at them; others are removed.
        """
        with self.session_scope() as session:
            address = resolve_owned_address(session, customer_id, address_uuid)
            addresses = AddressRepository(session)
            serialized = serialize_address(address)

            if addresses.count_orders(address.id) > 0:
                address.active = False
                logger.info("Address %s deactivated (referenced by orders)", address.uuid)
            else:
                addresses.delete(address)
                logger.info("Address %s deleted", serialized["id"])
            return serialized
