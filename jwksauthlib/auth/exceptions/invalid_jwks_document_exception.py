from typing import ClassVar

from jwksauthlib.auth.exceptions.error_kind import ErrorKind
from jwksauthlib.auth.exceptions.jwks_auth_exception import JwksAuthException


class InvalidJwksDocumentException(JwksAuthException):
    """
    Raised when a JWKS document is not valid JSON or does not have the
    expected shape. Indicates bad data from the key provider, not a bad request.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_JWKS_DOCUMENT
