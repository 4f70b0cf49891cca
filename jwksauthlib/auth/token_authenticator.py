import logging
from typing import Optional

from jwksauthlib.auth.config.token_validator_config import TokenValidatorConfig
from jwksauthlib.auth.exceptions.invalid_token_exception import InvalidTokenException
from jwksauthlib.auth.key_store import KeyStore
from jwksauthlib.auth.models.claims import Claims
from jwksauthlib.auth.token_validator import TokenValidator
from jwksauthlib.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["AUTH"])


class TokenAuthenticator:
    """
    Bundles a KeyStore with a TokenValidator for hosts that hold one key set.

    Example:
        authenticator = TokenAuthenticator.from_jwks(jwks_text)
        claims = authenticator.validate_token(token)
        authenticator.update_keys(new_jwks_text)  # on key rotation
    """

    def __init__(
        self,
        *,
        key_store: KeyStore,
        token_validator: Optional[TokenValidator] = None,
    ) -> None:
        """
        Args:
            key_store (KeyStore): The store tokens are resolved against.
            token_validator (Optional[TokenValidator]): Validator to use; a default one is created if omitted.
        """
        if key_store is None:
            raise ValueError("KeyStore must be provided")
        if not isinstance(key_store, KeyStore):
            raise TypeError("key_store must be an instance of KeyStore")
        self.key_store: KeyStore = key_store
        self.token_validator: TokenValidator = token_validator or TokenValidator()

    @classmethod
    def from_jwks(
        cls, jwks_text: str | bytes, *, config: Optional[TokenValidatorConfig] = None
    ) -> "TokenAuthenticator":
        """
        Creates an authenticator from a JWKS document.

        Raises:
            InvalidJwksDocumentException: If the document is invalid.
        """
        return cls(
            key_store=KeyStore.build(jwks_text),
            token_validator=TokenValidator(config=config),
        )

    def update_keys(self, jwks_text: str | bytes) -> None:
        """
        Replaces the signing keys. On failure the current keys stay in use.

        Raises:
            InvalidJwksDocumentException: If the document is invalid.
        """
        self.key_store.rotate(jwks_text)

    def validate_token(self, token: str) -> Claims:
        return self.token_validator.validate(token, self.key_store)

    def validate_authorization_header(self, authorization_header: str | None) -> Claims:
        """
        Validates the bearer token of an ``Authorization`` header value.

        Raises:
            InvalidTokenException: If the header carries no bearer token.
        """
        token: Optional[str] = TokenValidator.extract_token(
            authorization_header=authorization_header
        )
        if not token:
            raise InvalidTokenException(
                message="Authorization header does not contain a bearer token"
            )
        return self.validate_token(token)
