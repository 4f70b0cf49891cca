from enum import Enum


class JwksAuthOpenTelemetrySpanNames(str, Enum):
    BUILD_KEY_STORE = "jwksauthlib.key_store.build"
    ROTATE_KEY_STORE = "jwksauthlib.key_store.rotate"
    VALIDATE_TOKEN = "jwksauthlib.token_validator.validate"
