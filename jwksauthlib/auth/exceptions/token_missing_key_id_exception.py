from typing import ClassVar

from jwksauthlib.auth.exceptions.error_kind import ErrorKind
from jwksauthlib.auth.exceptions.jwks_auth_exception import JwksAuthException


class TokenMissingKeyIdException(JwksAuthException):
    """Raised when a decodable token header has no ``kid`` field."""

    kind: ClassVar[ErrorKind] = ErrorKind.TOKEN_MISSING_KEY_ID
