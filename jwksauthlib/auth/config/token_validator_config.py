"""Configuration model for token validation.

Immutable settings for claims validation, constructed explicitly or
loaded from environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import ClassVar

from jwksauthlib.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["CONFIG"])

# Environment variable names
ENV_VAR_LEEWAY_SECONDS: str = "JWKS_AUTH_LEEWAY_SECONDS"
ENV_VAR_REQUIRED_CLAIMS: str = "JWKS_AUTH_REQUIRED_CLAIMS"
ENV_VAR_VALIDATE_NBF: str = "JWKS_AUTH_VALIDATE_NBF"
ENV_VAR_VALIDATE_IAT: str = "JWKS_AUTH_VALIDATE_IAT"

# Boolean parsing
_TRUTHY_VALUES: frozenset[str] = frozenset(("true", "1", "yes", "on"))


def _parse_bool(value: str) -> bool:
    """
    Parse boolean value from string.

    Args:
        value: String value to parse

    Returns:
        True if value is in truthy set (case-insensitive), False otherwise
    """
    return value.lower() in _TRUTHY_VALUES


@dataclass(frozen=True)
class TokenValidatorConfig:
    """
    Immutable configuration for TokenValidator.

    The signing algorithm is deliberately absent: it is pinned by the
    validator and cannot be configured. ``exp`` is always checked when present;
    ``nbf`` and ``iat`` are only checked when enabled.
    """

    leeway_seconds: int = 60
    required_claims: tuple[str, ...] = ("exp",)
    validate_not_before: bool = False
    validate_issued_at: bool = False

    DEFAULT_LEEWAY_SECONDS: ClassVar[int] = 60
    DEFAULT_REQUIRED_CLAIMS: ClassVar[tuple[str, ...]] = ("exp",)

    @classmethod
    def from_environment(cls) -> "TokenValidatorConfig":
        """
        Load configuration from environment variables.

        Returns:
            Immutable configuration instance

        Environment Variables:
            JWKS_AUTH_LEEWAY_SECONDS: Allowed clock skew for exp/nbf/iat
            JWKS_AUTH_REQUIRED_CLAIMS: Comma-separated claims that must be present
            JWKS_AUTH_VALIDATE_NBF: Reject tokens whose nbf is in the future
            JWKS_AUTH_VALIDATE_IAT: Reject tokens whose iat is in the future
        """
        leeway_str = os.environ.get(ENV_VAR_LEEWAY_SECONDS, "")
        leeway_seconds = cls.DEFAULT_LEEWAY_SECONDS
        if leeway_str.strip():
            try:
                leeway_seconds = int(leeway_str)
            except ValueError:
                logger.warning(
                    f"Invalid {ENV_VAR_LEEWAY_SECONDS} value '{leeway_str}', "
                    f"using default {cls.DEFAULT_LEEWAY_SECONDS}"
                )

        claims_str = os.environ.get(ENV_VAR_REQUIRED_CLAIMS)
        if claims_str is None:
            required_claims = cls.DEFAULT_REQUIRED_CLAIMS
        else:
            required_claims = tuple(c.strip() for c in claims_str.split(",") if c.strip())

        validate_not_before = _parse_bool(os.environ.get(ENV_VAR_VALIDATE_NBF, "false"))
        validate_issued_at = _parse_bool(os.environ.get(ENV_VAR_VALIDATE_IAT, "false"))

        return cls(
            leeway_seconds=leeway_seconds,
            required_claims=required_claims,
            validate_not_before=validate_not_before,
            validate_issued_at=validate_issued_at,
        )

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of validation errors.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors: list[str] = []

        if self.leeway_seconds < 0:
            errors.append(
                f"{ENV_VAR_LEEWAY_SECONDS} must not be negative, got {self.leeway_seconds}"
            )

        return errors
