"""
Security helpers for hashing credentials, issuing access tokens and parsing
Authorization headers.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import secrets
import uuid
from datetime import datetime

import jwt

from .constants import PASSWORD_HASH_ITERATIONS, PREFIX_BASIC, PREFIX_BEARER
from .errors import AuthenticationFailedError, AuthorizationFailedError
from .validation import is_valid_basic_credentials

JWT_ALGORITHM = "HS256"


def generate_salt() -> str:
    """Random per-customer salt."""
    return secrets.token_urlsafe(32)


def hash_password(password: str, salt: str) -> str:
    """
    Hash a password with the customer's salt. Only the hash is stored; the raw
    value is discarded.
    """
    digest = hashlib.pbkdf2_hmac(
        "sha512",
        password.encode("utf-8"),
        salt.encode("utf-8"),
        PASSWORD_HASH_ITERATIONS,
    )
    return digest.hex()


def verify_password(password: str | None, salt: str, stored_hash: str) -> bool:
    """
    Compare a candidate password against the stored hash.
    """
    if not stored_hash or password is None:
        return False
    candidate = hash_password(password, salt)
    return secrets.compare_digest(candidate, stored_hash)


def create_access_token(
    customer_uuid: str, issued_at: datetime, expires_at: datetime, secret: str
) -> str:
    """
    Create the access token handed to a customer at login.

    The token is opaque to clients. The server never trusts its claims: a
    token is valid only while its session row says so.
    """
    payload = {
        "sub": customer_uuid,
        "iat": issued_at,
        "exp": expires_at,
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_basic_credentials(header: str | None) -> tuple[str, str]:
    """
    Split a `Basic base64(contact:password)` header into its two parts.

    Raises:
        AuthenticationFailedError: ATH-004 when the prefix is missing,
            ATH-003 when the payload is not `contact:password`.
    """
    if not header or not header.startswith(PREFIX_BASIC):
        raise AuthenticationFailedError("ATH-004")

    encoded = header[len(PREFIX_BASIC) :].strip()
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        raise AuthenticationFailedError("ATH-003") from None

    if not is_valid_basic_credentials(decoded):
        raise AuthenticationFailedError("ATH-003")

    contact_number, password = decoded.split(":", 1)
    return contact_number, password


def extract_bearer_token(header: str | None) -> str:
    """
    Return the token from a `Bearer <token>` header.

    Raises:
        AuthorizationFailedError: ATHR-001 when no token is sent,
            ATHR-005 when the prefix is wrong.
    """
    # Proxies may strip the trailing space of a bare "Bearer " header
    if not header or header.strip() == PREFIX_BEARER.strip():
        raise AuthorizationFailedError("ATHR-001")
    if not header.startswith(PREFIX_BEARER):
        raise AuthorizationFailedError("ATHR-005")

    token = header[len(PREFIX_BEARER) :].strip()
    if not token:
        raise AuthorizationFailedError("ATHR-001")
    return token
