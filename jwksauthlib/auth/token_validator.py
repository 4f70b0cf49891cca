import logging
from typing import Any, ClassVar, List, Optional

from joserfc import jws, jwt
from joserfc._rfc7515.model import CompactSignature
from joserfc.jwk import RSAKey
from opentelemetry import trace

from jwksauthlib.auth.config.token_validator_config import TokenValidatorConfig
from jwksauthlib.auth.exceptions.invalid_token_exception import InvalidTokenException
from jwksauthlib.auth.exceptions.jwks_auth_exception import JwksAuthException
from jwksauthlib.auth.exceptions.no_match_key_exception import NoMatchKeyException
from jwksauthlib.auth.exceptions.token_missing_key_id_exception import (
    TokenMissingKeyIdException,
)
from jwksauthlib.auth.key_store import KeyStore
from jwksauthlib.auth.models.claims import Claims
from jwksauthlib.auth.models.json_web_key import JsonWebKey
from jwksauthlib.open_telemetry.attribute_names import (
    JwksAuthOpenTelemetryAttributeNames,
)
from jwksauthlib.open_telemetry.span_names import JwksAuthOpenTelemetrySpanNames
from jwksauthlib.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["AUTH"])


class TokenValidator:
    """
    TokenValidator verifies JWT signatures against the keys of a KeyStore and returns the claims.

    The algorithm is pinned to RS256. The token header's ``alg`` is never used
    to choose how a signature is checked; a token declaring anything else is
    rejected as invalid.
    """

    ALGORITHM: ClassVar[str] = "RS256"

    def __init__(self, *, config: Optional[TokenValidatorConfig] = None) -> None:
        """
        Initializes the TokenValidator.
        Args:
            config (Optional[TokenValidatorConfig]): Claims validation settings. Defaults apply if omitted.
        """
        self.config: TokenValidatorConfig = config or TokenValidatorConfig()
        if not isinstance(self.config, TokenValidatorConfig):
            raise TypeError("config must be an instance of TokenValidatorConfig")
        errors: List[str] = self.config.validate()
        if errors:
            raise ValueError(f"Invalid TokenValidatorConfig: {'; '.join(errors)}")

    @staticmethod
    def extract_token(*, authorization_header: str | None) -> Optional[str]:
        """
        Extracts the JWT token from the Authorization header.
        Args:
            authorization_header (str | None): The Authorization header string.
        Returns:
            Optional[str]: The extracted JWT token if present, otherwise None.
        """
        if not authorization_header:
            return None
        parts = authorization_header.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
        return None

    @staticmethod
    def get_kid_from_token(*, token: str) -> Optional[str]:
        """
        Extracts the 'kid' (Key ID) from the JWT token header without verifying the signature.
        Args:
            token (str): The JWT token string.
        Returns:
            Optional[str]: The 'kid' if present, otherwise None.
        Raises:
            InvalidTokenException: If the header cannot be decoded or 'kid' is not a string.
        """
        if not token or not isinstance(token, str):
            raise InvalidTokenException(message="Token must be a non-empty string")
        try:
            token_content: CompactSignature = jws.extract_compact(token.encode())
            kid: Any = token_content.headers().get("kid")
        except Exception as e:
            logger.debug(f"Failed to decode token header: {type(e).__name__}: {e}")
            raise InvalidTokenException(
                message=f"Could not decode token header [{type(e).__name__}]"
            ) from e
        if kid is not None and not isinstance(kid, str):
            raise InvalidTokenException(
                message=f"Token header 'kid' must be a string, got {type(kid).__name__}"
            )
        return kid

    def validate(self, token: str, store: KeyStore) -> Claims:
        """
        Verify a JWT token against the keys of ``store``.

        Args:
            token: The JWT token string to validate.
            store: The key store to resolve the token's 'kid' in.
        Returns:
            The decoded claims if the token is valid.
        Throws:
            InvalidTokenException: If the header is undecodable or verification fails for any reason.
            TokenMissingKeyIdException: If the header has no 'kid'.
            NoMatchKeyException: If the 'kid' is not in the store.
        """
        tracer = trace.get_tracer(__name__)
        with tracer.start_as_current_span(
            JwksAuthOpenTelemetrySpanNames.VALIDATE_TOKEN.value
        ) as span:
            span.set_attribute(JwksAuthOpenTelemetryAttributeNames.ALGORITHM, self.ALGORITHM)
            try:
                kid: Optional[str] = self.get_kid_from_token(token=token)
                if kid is None:
                    raise TokenMissingKeyIdException(
                        message="Token header does not contain a key ID ('kid')"
                    )
                span.set_attribute(JwksAuthOpenTelemetryAttributeNames.KEY_ID, kid)

                # one snapshot read; a concurrent rotation cannot split this lookup
                key: Optional[JsonWebKey] = store.lookup(kid)
                if key is None:
                    raise NoMatchKeyException(
                        message=f"No matching key found in key store for kid: {kid}",
                        kid=kid,
                    )

                return self._verify(token=token, key=key)
            except JwksAuthException as e:
                span.set_attribute(
                    JwksAuthOpenTelemetryAttributeNames.ERROR_KIND, e.kind.value
                )
                logger.info(f"Token rejected [{e.kind.value}]: {e.message}")
                raise

    def _verify(self, *, token: str, key: JsonWebKey) -> Claims:
        try:
            public_key: RSAKey = RSAKey.import_key(key.to_rsa_components())
            # private header parameters (RFC 7515 4.3) are allowed; only the algorithm is pinned
            registry = jws.JWSRegistry(
                algorithms=[self.ALGORITHM], strict_check_header=False
            )
            verified = jwt.decode(
                token, public_key, algorithms=[self.ALGORITHM], registry=registry
            )
            claims: Any = verified.claims
            if not isinstance(claims, dict):
                raise ValueError(f"Token payload is not a JSON object: {type(claims).__name__}")
            self._claims_registry().validate(claims)
        except Exception as e:
            # the specific cause is diagnostic only; every failure here is InvalidToken
            logger.debug(
                f"Verification failed for kid '{key.key_id}': {type(e).__name__}: {e}"
            )
            raise InvalidTokenException(
                message=f"Token verification failed [{type(e).__name__}]",
                kid=key.key_id,
            ) from e
        logger.debug(f"Successfully verified token signed with kid '{key.key_id}'")
        return claims

    def _claims_registry(self) -> "TimeClaimsRegistry":
        return TimeClaimsRegistry(
            leeway=self.config.leeway_seconds,
            validate_not_before=self.config.validate_not_before,
            validate_issued_at=self.config.validate_issued_at,
            **{claim: {"essential": True} for claim in self.config.required_claims},
        )


class TimeClaimsRegistry(jwt.JWTClaimsRegistry):
    """
    Claims registry that always checks ``exp`` and checks ``nbf``/``iat`` only when enabled.
    """

    def __init__(
        self,
        *,
        leeway: int,
        validate_not_before: bool,
        validate_issued_at: bool,
        **kwargs: Any,
    ) -> None:
        super().__init__(leeway=leeway, **kwargs)
        self.validate_not_before: bool = validate_not_before
        self.validate_issued_at: bool = validate_issued_at

    def validate_nbf(self, value: Any) -> None:
        if self.validate_not_before:
            super().validate_nbf(value)

    def validate_iat(self, value: Any) -> None:
        if self.validate_issued_at:
            super().validate_iat(value)
