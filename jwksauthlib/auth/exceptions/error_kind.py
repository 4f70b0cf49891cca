from enum import Enum


class ErrorKind(str, Enum):
    """
    Closed set of failure kinds raised by the key store and the token validator.

    Callers are expected to branch on the kind only; the chained cause of an
    exception is diagnostic detail.
    """

    INVALID_TOKEN = "invalid_token"
    """Header undecodable, or signature/payload/claims verification failed."""
    TOKEN_MISSING_KEY_ID = "token_missing_key_id"
    """Token header carries no ``kid``."""
    NO_MATCH_KEY = "no_match_key"
    """The ``kid`` is not present in the current key store."""
    INVALID_JWKS_DOCUMENT = "invalid_jwks_document"
    """A JWKS document failed to parse or validate."""
