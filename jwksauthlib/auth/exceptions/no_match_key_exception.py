from typing import ClassVar

from jwksauthlib.auth.exceptions.error_kind import ErrorKind
from jwksauthlib.auth.exceptions.jwks_auth_exception import JwksAuthException


class NoMatchKeyException(JwksAuthException):
    """
    Raised when the token's ``kid`` is not in the key store.

    This is the expected outcome after a key rotation retired the signing key,
    so callers may refresh their JWKS and retry once.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.NO_MATCH_KEY

    def __init__(self, *, message: str, kid: str) -> None:
        super().__init__(message=message)
        self.kid: str = kid
