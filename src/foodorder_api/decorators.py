"""Decorators for route protection using customer access tokens."""

from __future__ import annotations

from functools import wraps

from flask import current_app, g, request

from foodorder_shared.security import extract_bearer_token


def customer_required(f):
    """
    Require a valid `Bearer <token>` Authorization header.

    The resolved customer is stored on `g.customer` and the raw token on
    `g.access_token`. Authorization errors propagate to the error handlers.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        access_token = extract_bearer_token(request.headers.get("Authorization"))
        customers = current_app.extensions["foodorder"].customers
        g.customer = customers.get_customer(access_token)
        g.access_token = access_token
        return f(*args, **kwargs)

    return decorated_function
