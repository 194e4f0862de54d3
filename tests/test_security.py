import base64
from datetime import timedelta

import jwt
import pytest

from foodorder_shared.datetime_utils import utcnow
from foodorder_shared.errors import AuthenticationFailedError, AuthorizationFailedError
from foodorder_shared.security import (
    create_access_token,
    decode_basic_credentials,
    extract_bearer_token,
    generate_salt,
    hash_password,
    verify_password,
)


def _basic(raw: str) -> str:
    return "Basic " + base64.b64encode(raw.encode()).decode()


def test_hash_is_deterministic_for_same_salt():
    salt = generate_salt()
    assert hash_password("Secret#123", salt) == hash_password("Secret#123", salt)


def test_hash_changes_with_salt():
    assert hash_password("Secret#123", generate_salt()) != hash_password(
        "Secret#123", generate_salt()
    )


def test_hash_never_contains_plaintext():
    salt = generate_salt()
    assert "Secret#123" not in hash_password("Secret#123", salt)


def test_verify_password():
    salt = generate_salt()
    stored = hash_password("Secret#123", salt)
    assert verify_password("Secret#123", salt, stored)
    assert not verify_password("Secret#124", salt, stored)
    assert not verify_password(None, salt, stored)


def test_access_tokens_are_unique_and_carry_subject():
    issued_at = utcnow()
    expires_at = issued_at + timedelta(hours=8)
    first = create_access_token("customer-uuid", issued_at, expires_at, "secret")
    second = create_access_token("customer-uuid", issued_at, expires_at, "secret")

    assert first != second
    claims = jwt.decode(first, "secret", algorithms=["HS256"])
    assert claims["sub"] == "customer-uuid"
    assert claims["exp"] - claims["iat"] == 8 * 3600


def test_decode_basic_credentials():
    assert decode_basic_credentials(_basic("9876543210:Secret#123")) == (
        "9876543210",
        "Secret#123",
    )


def test_decode_basic_credentials_splits_on_first_colon():
    assert decode_basic_credentials(_basic("9876543210:pa:ss")) == ("9876543210", "pa:ss")


@pytest.mark.parametrize("header", [None, "", "Bearer abc", "basic abc"])
def test_decode_basic_credentials_requires_prefix(header):
    with pytest.raises(AuthenticationFailedError) as exc_info:
        decode_basic_credentials(header)
    assert exc_info.value.code == "ATH-004"


@pytest.mark.parametrize(
    "header",
    ["Basic not-base64!!", _basic("9876543210"), _basic(":Secret#123"), "Basic "],
)
def test_decode_basic_credentials_rejects_bad_payload(header):
    with pytest.raises(AuthenticationFailedError) as exc_info:
        decode_basic_credentials(header)
    assert exc_info.value.code == "ATH-003"


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc.def") == "abc.def"


@pytest.mark.parametrize(
    "header, code",
    [
        (None, "ATHR-001"),
        ("", "ATHR-001"),
        ("Bearer ", "ATHR-001"),
        ("Token abc", "ATHR-005"),
        ("abc.def", "ATHR-005"),
    ],
)
def test_extract_bearer_token_errors(header, code):
    with pytest.raises(AuthorizationFailedError) as exc_info:
        extract_bearer_token(header)
    assert exc_info.value.code == code
