import os
from unittest.mock import patch

from jwksauthlib.auth.config.token_validator_config import (
    ENV_VAR_LEEWAY_SECONDS,
    ENV_VAR_REQUIRED_CLAIMS,
    ENV_VAR_VALIDATE_IAT,
    ENV_VAR_VALIDATE_NBF,
    TokenValidatorConfig,
)


def test_defaults() -> None:
    config = TokenValidatorConfig()
    assert config.leeway_seconds == 60
    assert config.required_claims == ("exp",)
    assert config.validate() == []


def test_from_environment_defaults() -> None:
    with patch.dict(os.environ, {}, clear=True):
        config = TokenValidatorConfig.from_environment()
    assert config == TokenValidatorConfig()


def test_from_environment_overrides() -> None:
    env = {
        ENV_VAR_LEEWAY_SECONDS: "10",
        ENV_VAR_REQUIRED_CLAIMS: "exp, sub ,,aud",
    }
    with patch.dict(os.environ, env, clear=True):
        config = TokenValidatorConfig.from_environment()
    assert config.leeway_seconds == 10
    assert config.required_claims == ("exp", "sub", "aud")


def test_from_environment_empty_required_claims() -> None:
    with patch.dict(os.environ, {ENV_VAR_REQUIRED_CLAIMS: ""}, clear=True):
        config = TokenValidatorConfig.from_environment()
    assert config.required_claims == ()


def test_from_environment_invalid_leeway_falls_back() -> None:
    with patch.dict(os.environ, {ENV_VAR_LEEWAY_SECONDS: "soon"}, clear=True):
        config = TokenValidatorConfig.from_environment()
    assert config.leeway_seconds == TokenValidatorConfig.DEFAULT_LEEWAY_SECONDS


def test_validate_negative_leeway() -> None:
    errors = TokenValidatorConfig(leeway_seconds=-5).validate()
    assert len(errors) == 1
    assert ENV_VAR_LEEWAY_SECONDS in errors[0]


def test_time_claim_checks_are_off_by_default() -> None:
    with patch.dict(os.environ, {}, clear=True):
        config = TokenValidatorConfig.from_environment()
    assert config.validate_not_before is False
    assert config.validate_issued_at is False


def test_from_environment_enables_time_claim_checks() -> None:
    env = {ENV_VAR_VALIDATE_NBF: "true", ENV_VAR_VALIDATE_IAT: "Yes"}
    with patch.dict(os.environ, env, clear=True):
        config = TokenValidatorConfig.from_environment()
    assert config.validate_not_before is True
    assert config.validate_issued_at is True
