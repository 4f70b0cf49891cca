from jwksauthlib.auth.config.token_validator_config import TokenValidatorConfig
from jwksauthlib.auth.exceptions import (
    ErrorKind,
    InvalidJwksDocumentException,
    InvalidTokenException,
    JwksAuthException,
    NoMatchKeyException,
    TokenMissingKeyIdException,
)
from jwksauthlib.auth.key_store import KeyStore
from jwksauthlib.auth.models.claims import Claims
from jwksauthlib.auth.models.json_web_key import JsonWebKey, JsonWebKeySet
from jwksauthlib.auth.token_authenticator import TokenAuthenticator
from jwksauthlib.auth.token_validator import TokenValidator

__all__ = [
    "Claims",
    "ErrorKind",
    "InvalidJwksDocumentException",
    "InvalidTokenException",
    "JsonWebKey",
    "JsonWebKeySet",
    "JwksAuthException",
    "KeyStore",
    "NoMatchKeyException",
    "TokenAuthenticator",
    "TokenMissingKeyIdException",
    "TokenValidator",
    "TokenValidatorConfig",
]
