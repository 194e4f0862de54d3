"""
Customer API - signup, login/logout and profile updates.
"""

from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request

from foodorder_shared.constants import HTTP_ACCESS_TOKEN_HEADER, ResponseStatus
from foodorder_shared.logging_config import get_logger
from foodorder_shared.schemas import (
    SignupCustomerRequest,
    UpdateCustomerRequest,
    UpdatePasswordRequest,
)
from foodorder_shared.security import decode_basic_credentials, extract_bearer_token

customer_bp = Blueprint("customer", __name__)
logger = get_logger(__name__)


def _customers():
    return current_app.extensions["foodorder"].customers


@customer_bp.post("/customer/signup")
def signup():
    """
    Register a customer.

    Body:
        {first_name, last_name, email_address, contact_number, password}
    """
    payload = SignupCustomerRequest.model_validate(request.get_json(silent=True) or {})
    customer = _customers().signup(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email_address,
        contact_number=payload.contact_number,
        password=payload.password,
    )
    return jsonify(
        {"id": customer["id"], "status": ResponseStatus.CUSTOMER_CREATED.value}
    ), HTTPStatus.CREATED


@customer_bp.post("/customer/login")
def login():
    """
    Log a customer in with `Authorization: Basic base64(contact:password)`.

    The access token is returned in the `access-token` response header.
    """
    contact_number, password = decode_basic_credentials(request.headers.get("Authorization"))
    result = _customers().authenticate(contact_number, password)
    customer = result.customer

    response = jsonify(
        {
            "id": customer.uuid,
            "first_name": customer.first_name,
            "last_name": customer.last_name,
            "contact_number": customer.contact_number,
            "email_address": customer.email,
            "message": ResponseStatus.LOGGED_IN.value,
        }
    )
    response.headers[HTTP_ACCESS_TOKEN_HEADER] = result.access_token
    return response, HTTPStatus.OK


@customer_bp.post("/customer/logout")
def logout():
    access_token = extract_bearer_token(request.headers.get("Authorization"))
    customer = _customers().logout(access_token)
    return jsonify(
        {"id": customer.uuid, "message": ResponseStatus.LOGGED_OUT.value}
    ), HTTPStatus.OK


@customer_bp.put("/customer")
def update_customer():
    payload = UpdateCustomerRequest.model_validate(request.get_json(silent=True) or {})
    access_token = extract_bearer_token(request.headers.get("Authorization"))
    customer = _customers().update_customer(access_token, payload.first_name, payload.last_name)
    return jsonify(
        {
            "id": customer["id"],
            "first_name": customer["first_name"],
            "last_name": customer["last_name"],
            "status": ResponseStatus.CUSTOMER_UPDATED.value,
        }
    ), HTTPStatus.OK


@customer_bp.put("/customer/password")
def update_password():
    payload = UpdatePasswordRequest.model_validate(request.get_json(silent=True) or {})
    access_token = extract_bearer_token(request.headers.get("Authorization"))
    customer = _customers().update_password(
        access_token, payload.old_password, payload.new_password
    )
    return jsonify(
        {"id": customer["id"], "status": ResponseStatus.PASSWORD_UPDATED.value}
    ), HTTPStatus.OK
