from jwksauthlib.auth.exceptions.error_kind import ErrorKind
from jwksauthlib.auth.exceptions.invalid_jwks_document_exception import (
    InvalidJwksDocumentException,
)
from jwksauthlib.auth.exceptions.invalid_token_exception import InvalidTokenException
from jwksauthlib.auth.exceptions.jwks_auth_exception import JwksAuthException
from jwksauthlib.auth.exceptions.no_match_key_exception import NoMatchKeyException
from jwksauthlib.auth.exceptions.token_missing_key_id_exception import (
    TokenMissingKeyIdException,
)

__all__ = [
    "ErrorKind",
    "InvalidJwksDocumentException",
    "InvalidTokenException",
    "JwksAuthException",
    "NoMatchKeyException",
    "TokenMissingKeyIdException",
]
