from datetime import timedelta

import pytest

from agroflow.core import security
from agroflow.core.exceptions import UnauthorizedError


def test_password_hash_roundtrip():
    hashed = security.hash_password("segredo")
    assert hashed != "segredo"
    assert security.verify_password("segredo", hashed)
    assert not security.verify_password("errado", hashed)
    assert not security.verify_password("segredo", "")


def test_access_token_carries_claims():
    token = security.create_access_token({"id": "abc", "role": "farmer"})
    claims = security.decode_token(token)
    assert claims["id"] == "abc"
    assert claims["role"] == "farmer"
    assert claims["type"] == security.ACCESS_TOKEN


def test_token_type_is_enforced():
    refresh = security.create_refresh_token({"id": "abc", "role": "farmer"})
    with pytest.raises(UnauthorizedError):
        security.decode_token(refresh)
    assert security.decode_token(refresh, expected_type=security.REFRESH_TOKEN)["id"] == "abc"


def test_expired_token_is_rejected():
    token = security._encode({"id": "abc"}, security.ACCESS_TOKEN, timedelta(seconds=-5))
    with pytest.raises(UnauthorizedError) as exc_info:
        security.decode_token(token)
    assert exc_info.value.message == "Token expired"


def test_tampered_token_is_rejected():
    token = security.create_access_token({"id": "abc"})
    with pytest.raises(UnauthorizedError) as exc_info:
        security.decode_token(token[:-2] + "xx")
    assert exc_info.value.message == "Invalid token"


def test_token_without_id_is_rejected():
    token = security.create_access_token({"role": "farmer"})
    with pytest.raises(UnauthorizedError):
        security.decode_token(token)
