from typing import ClassVar, Optional

from jwksauthlib.auth.exceptions.error_kind import ErrorKind
from jwksauthlib.auth.exceptions.jwks_auth_exception import JwksAuthException


class InvalidTokenException(JwksAuthException):
    """
    Raised when the token header cannot be decoded, or when signature
    verification, payload decoding or claims validation fails for any reason.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_TOKEN

    def __init__(self, *, message: str, kid: Optional[str] = None) -> None:
        super().__init__(message=message)
        self.kid: Optional[str] = kid
