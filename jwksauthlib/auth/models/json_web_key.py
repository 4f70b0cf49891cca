from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class JsonWebKey(BaseModel):
    """
    One public signing key from a JSON Web Key Set.

    Field aliases are the JWKS wire names (``alg``, ``kty``, ``use``, ``n``,
    ``e``, ``kid``, ``x5c``, ``x5t``); unknown members are ignored.
    See https://auth0.com/docs/tokens/json-web-tokens/json-web-key-set-properties
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    algorithm: str = Field(alias="alg")
    """The specific cryptographic algorithm used with the key, e.g. RS256."""
    key_type: str = Field(alias="kty")
    """The family of cryptographic algorithms used with the key, e.g. RSA."""
    usage: str = Field(alias="use")
    """How the key was meant to be used; ``sig`` represents the signature."""
    modulus: str = Field(alias="n")
    """The base64url-encoded modulus of the RSA public key."""
    exponent: str = Field(alias="e")
    """The base64url-encoded exponent of the RSA public key."""
    key_id: str = Field(alias="kid")
    """The unique identifier for the key."""
    certificate_chain: Optional[Tuple[str, ...]] = Field(default=None, alias="x5c")
    """The x.509 certificate chain; the first entry is the signing certificate."""
    certificate_thumbprint: Optional[str] = Field(default=None, alias="x5t")
    """The SHA-1 thumbprint of the x.509 certificate."""

    def to_rsa_components(self) -> Dict[str, Any]:
        """
        Returns the RSA public key components as a minimal JWK dict.

        Only the modulus and exponent are used; ``kty``/``alg`` from the
        document are not trusted to choose the verification algorithm.
        """
        return {"kty": "RSA", "n": self.modulus, "e": self.exponent}


class JsonWebKeySet(BaseModel):
    """A JSON Web Key Set document: ``{"keys": [...]}``."""

    model_config = ConfigDict(frozen=True)

    keys: Tuple[JsonWebKey, ...]
