"""
Address API - delivery addresses of the logged-in customer, plus the state list.
"""

from http import HTTPStatus

from flask import Blueprint, current_app, g, jsonify, request

from foodorder_api.decorators import customer_required
from foodorder_shared.constants import ResponseStatus
from foodorder_shared.schemas import SaveAddressRequest

address_bp = Blueprint("address", __name__)


def _addresses():
    return current_app.extensions["foodorder"].addresses


@address_bp.post("/address")
@customer_required
def save_address():
    """
    Body:
        {flat_building_name, locality, city, pincode, state_uuid}
    """
    payload = SaveAddressRequest.model_validate(request.get_json(silent=True) or {})
    address = _addresses().save_address(
        customer_id=g.customer.id,
        flat_building_name=payload.flat_building_name,
        locality=payload.locality,
        city=payload.city,
        pincode=payload.pincode,
        state_uuid=payload.state_uuid,
    )
    return jsonify(
        {"id": address["id"], "status": ResponseStatus.ADDRESS_REGISTERED.value}
    ), HTTPStatus.CREATED


@address_bp.get("/address/customer")
@customer_required
def list_addresses():
    return jsonify({"addresses": _addresses().list_addresses(g.customer.id)}), HTTPStatus.OK


@address_bp.delete("/address/<address_id>")
@customer_required
def delete_address(address_id: str):
    address = _addresses().delete_address(g.customer.id, address_id)
    return jsonify(
        {"id": address["id"], "status": ResponseStatus.ADDRESS_DELETED.value}
    ), HTTPStatus.OK


@address_bp.get("/states")
def list_states():
    return jsonify({"states": _addresses().list_states()}), HTTPStatus.OK
