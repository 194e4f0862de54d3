"""
Factory for the food ordering REST API.

Customers authenticate with Basic credentials at login and then send the
issued access token as `Authorization: Bearer <token>`.
"""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, jsonify
from flask_cors import CORS

from foodorder_api.error_handlers import register_error_handlers
from foodorder_api.routes.api import api_bp
from foodorder_shared.config import AppConfig, load_config, validate_required_env_vars
from foodorder_shared.constants import HTTP_ACCESS_TOKEN_HEADER
from foodorder_shared.db import get_session, init_db, init_engine
from foodorder_shared.logging_config import configure_logging
from foodorder_shared.models import Base
from foodorder_shared.services import (
    AddressService,
    CustomerService,
    OrderService,
    PaymentService,
)
from foodorder_shared.services.reference_data import load_reference_data


@dataclass
class Services:
    """Service instances shared by every request of one application."""

    customers: CustomerService
    addresses: AddressService
    orders: OrderService
    payments: PaymentService


def build_services(config: AppConfig) -> Services:
    return Services(
        customers=CustomerService(
            secret_key=config.secret_key,
            session_scope=get_session,
            token_ttl_hours=config.access_token_expires_hours,
        ),
        addresses=AddressService(session_scope=get_session),
        orders=OrderService(session_scope=get_session),
        payments=PaymentService(session_scope=get_session),
    )


def create_app(config: AppConfig | None = None, services: Services | None = None) -> Flask:
    if config is None:
        # Validate all required environment variables (fail-fast)
        validate_required_env_vars(skip_in_debug=True)
        config = load_config("foodorder-api")

    app = Flask(__name__)
    configure_logging(config.app_name, config.log_level)

    # Database
    init_engine(config)
    init_db(Base.metadata)

    if config.load_reference_data:
        app.logger.info("Loading reference data...")
        with get_session() as session:
            load_reference_data(session)

    app.config["SECRET_KEY"] = config.secret_key
    app.config["APP_NAME"] = config.app_name
    app.config["DEBUG_MODE"] = config.debug_mode

    app.extensions["foodorder"] = services or build_services(config)

    app.register_blueprint(api_bp)
    register_error_handlers(app)

    CORS(
        app,
        origins=config.cors_allowed_origins,
        expose_headers=[HTTP_ACCESS_TOKEN_HEADER],
    )

    @app.get("/health")
    def health():
        return jsonify({"status": "ok", "service": config.app_name}), 200

    return app
