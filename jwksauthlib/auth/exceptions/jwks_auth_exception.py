from typing import ClassVar

from jwksauthlib.auth.exceptions.error_kind import ErrorKind


class JwksAuthException(Exception):
    """
    Base class of every error raised by jwksauthlib.

    Each subclass pins a single ErrorKind so callers can either catch the
    concrete subclass or catch this class and branch on ``kind``.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, *, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"
