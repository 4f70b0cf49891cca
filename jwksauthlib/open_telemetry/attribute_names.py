class JwksAuthOpenTelemetryAttributeNames:
    # key store attributes
    KEY_COUNT: str = "jwks.key_count"
    # token attributes
    KEY_ID: str = "jwt.kid"
    ALGORITHM: str = "jwt.alg"
    ERROR_KIND: str = "jwks_auth.error_kind"
