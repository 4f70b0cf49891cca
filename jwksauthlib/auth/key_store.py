import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from opentelemetry import trace
from pydantic import ValidationError

from jwksauthlib.auth.exceptions.invalid_jwks_document_exception import (
    InvalidJwksDocumentException,
)
from jwksauthlib.auth.models.json_web_key import JsonWebKey, JsonWebKeySet
from jwksauthlib.open_telemetry.attribute_names import (
    JwksAuthOpenTelemetryAttributeNames,
)
from jwksauthlib.open_telemetry.span_names import JwksAuthOpenTelemetrySpanNames
from jwksauthlib.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["AUTH"])


class KeyStore:
    """In-memory index of JWKS signing keys by key ID (``kid``).

    Responsibilities:
    - Parse a JWKS document into a ``kid`` -> JsonWebKey mapping. The whole
      document must validate; no partially parsed store is ever produced.
    - Resolve a ``kid`` to its key in O(1).
    - Replace the whole mapping on rotation.

    Duplicate Policy:
    - If a document lists the same ``kid`` more than once, the later entry
      in document order replaces the earlier one (a warning is logged).

    Concurrency Strategy:
    - The mapping is an immutable snapshot (MappingProxyType over a private dict).
    - rotate() builds the new dict completely, then installs it with a single
      assignment. Readers never lock: they see either the old or the new
      complete snapshot, never a mix.
    - _lock only serializes concurrent writers.
    """

    def __init__(self, *, keys: Optional[Iterable[JsonWebKey]] = None) -> None:
        self._lock: threading.Lock = threading.Lock()
        self._keys: Mapping[str, JsonWebKey] = MappingProxyType(
            self.index_keys(keys or ())
        )

    @classmethod
    def build(cls, jwks_text: str | bytes) -> "KeyStore":
        """
        Creates a KeyStore from a JSON Web Key Set document.

        Args:
            jwks_text (str | bytes): The JWKS JSON document.
        Returns:
            KeyStore: A new store holding every key of the document.
        Raises:
            InvalidJwksDocumentException: If the document is not valid JSON or
                does not match the JWKS shape.
        """
        tracer = trace.get_tracer(__name__)
        with tracer.start_as_current_span(
            JwksAuthOpenTelemetrySpanNames.BUILD_KEY_STORE.value
        ) as span:
            key_set = cls.parse_jwks(jwks_text)
            store = cls.from_key_set(key_set)
            span.set_attribute(JwksAuthOpenTelemetryAttributeNames.KEY_COUNT, len(store))
            logger.info(f"Built key store with {len(store)} keys: {store.key_ids}")
            return store

    @classmethod
    def from_key_set(cls, key_set: JsonWebKeySet) -> "KeyStore":
        return cls(keys=key_set.keys)

    @staticmethod
    def parse_jwks(jwks_text: str | bytes) -> JsonWebKeySet:
        """
        Parses and validates a JWKS document.

        Raises:
            InvalidJwksDocumentException: On malformed JSON, a missing ``keys``
                array, or any key entry missing a required member or having
                a member of the wrong type.
        """
        if not isinstance(jwks_text, (str, bytes)):
            raise InvalidJwksDocumentException(
                message=f"JWKS document must be str or bytes, got {type(jwks_text).__name__}"
            )
        try:
            return JsonWebKeySet.model_validate_json(jwks_text)
        except ValidationError as e:
            logger.warning(
                f"Rejected JWKS document with {e.error_count()} validation errors: {e}"
            )
            raise InvalidJwksDocumentException(
                message=f"Invalid JWKS document: {e.error_count()} validation errors"
            ) from e

    @staticmethod
    def index_keys(keys: Iterable[JsonWebKey]) -> Dict[str, JsonWebKey]:
        """
        Builds a ``kid`` -> JsonWebKey dict; later duplicates replace earlier ones.
        """
        key_map: Dict[str, JsonWebKey] = {}
        for key in keys:
            if key.key_id in key_map:
                logger.warning(
                    f"Duplicate key ID '{key.key_id}' found in JWKS document. "
                    f"The later entry replaces the earlier one."
                )
            key_map[key.key_id] = key
        return key_map

    def rotate(self, jwks_text: str | bytes) -> None:
        """
        Replaces every key with the keys of a new JWKS document.

        On failure the current keys are left untouched.

        Raises:
            InvalidJwksDocumentException: If the new document is invalid.
        """
        tracer = trace.get_tracer(__name__)
        with tracer.start_as_current_span(
            JwksAuthOpenTelemetrySpanNames.ROTATE_KEY_STORE.value
        ) as span:
            key_set = self.parse_jwks(jwks_text)
            new_keys = MappingProxyType(self.index_keys(key_set.keys))
            with self._lock:
                old_key_ids = list(self._keys)
                self._keys = new_keys
            span.set_attribute(
                JwksAuthOpenTelemetryAttributeNames.KEY_COUNT, len(new_keys)
            )
            logger.info(f"Rotated key store: {old_key_ids} -> {list(new_keys)}")

    def lookup(self, key_id: str) -> Optional[JsonWebKey]:
        """
        Returns the key for ``key_id``, or None if the store has no such key.
        """
        return self._keys.get(key_id)

    @property
    def keys(self) -> Mapping[str, JsonWebKey]:
        """Read-only snapshot of the current mapping; unaffected by later rotations."""
        return self._keys

    @property
    def key_ids(self) -> List[str]:
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key_id: object) -> bool:
        return key_id in self._keys

    def __repr__(self) -> str:
        return f"KeyStore(key_ids={self.key_ids!r})"
