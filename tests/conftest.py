"""
Shared test fixtures for jwksauthlib tests.
"""

import time
from typing import Any

import pytest

from tests.auth.jwks_helpers import generate_rsa_key_and_jwk


@pytest.fixture(scope="session")
def key1() -> tuple[bytes, dict[str, Any]]:
    return generate_rsa_key_and_jwk("key1")


@pytest.fixture(scope="session")
def key2() -> tuple[bytes, dict[str, Any]]:
    return generate_rsa_key_and_jwk("key2")


@pytest.fixture
def claims() -> dict[str, Any]:
    return {
        "sub": "user1",
        "iss": "https://issuer1",
        "aud": "client1",
        "exp": int(time.time()) + 3600,
        "scope": ["read", "write"],
        "profile": {"name": "User One", "verified": True, "age": None},
    }
