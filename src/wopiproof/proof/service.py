"""Proof service: discovery attributes once, proof headers per request.

One ``ProofService`` is built at startup and handed to whatever issues WOPI
requests. Without a key both outputs are empty and callers carry on.
"""
from __future__ import annotations

import time
from typing import Callable, Optional, Tuple

from ..config import ProofConfig, load_proof_config
from ..crypto.capi_blob import rsa_to_capi_blob
from ..crypto.keyloader import KeyLoadResult, KeyPair, KeyStore
from ..crypto.sign import b64_single_line, sign_proof
from ..obs.prom import KEY_LOADED, observe_proof
from ..utils.logging import get_logger
from .message import build_proof_message
from .models import ProofKeyAttributes, ProofStatus, StringPairs
from .ticks import dotnet_ticks

log = get_logger()

TIMESTAMP_HEADER = "X-WOPI-TimeStamp"
PROOF_HEADER = "X-WOPI-Proof"


def discovery_attributes(key: KeyPair) -> ProofKeyAttributes:
    return ProofKeyAttributes(
        value=b64_single_line(rsa_to_capi_blob(key.modulus, key.exponent)),
        modulus=b64_single_line(key.modulus),
        exponent=b64_single_line(key.exponent),
    )


class ProofService:
    def __init__(
        self,
        key_store: KeyStore,
        clock: Callable[[], int] = time.time_ns,
        enabled: bool = True,
    ):
        self.key_path = key_store.path
        self._clock = clock
        if enabled:
            result = key_store.get()
        else:
            log.info("Proof key disabled by configuration")
            result = KeyLoadResult(reason="disabled by configuration")
        self._key: Optional[KeyPair] = result.key
        self._reason = result.reason
        self._attributes: Optional[ProofKeyAttributes] = None
        self._pairs: Tuple[Tuple[str, str], ...] = ()
        if self._key is not None:
            self._attributes = discovery_attributes(self._key)
            self._pairs = self._attributes.as_pairs()
        KEY_LOADED.set(1 if self._key is not None else 0)

    @property
    def enabled(self) -> bool:
        return self._key is not None

    @property
    def proof_key_attributes(self) -> Tuple[Tuple[str, str], ...]:
        return self._pairs

    def attributes_model(self) -> Optional[ProofKeyAttributes]:
        return self._attributes

    def status(self) -> ProofStatus:
        return ProofStatus(
            enabled=self.enabled,
            key_path=self.key_path,
            key_size=self._key.key_size if self._key is not None else None,
            reason=self._reason,
        )

    def get_proof_headers(self, access_token: str, uri: str) -> StringPairs:
        key = self._key
        if key is None:
            observe_proof("disabled")
            return []
        start = time.perf_counter()
        ticks = dotnet_ticks(self._clock())
        try:
            proof = sign_proof(build_proof_message(access_token, uri, ticks), key)
        except Exception:
            observe_proof("error")
            raise
        observe_proof("signed", (time.perf_counter() - start) * 1000)
        return [(TIMESTAMP_HEADER, str(ticks)), (PROOF_HEADER, proof)]


def proof_service_from_config(cfg: Optional[ProofConfig] = None) -> ProofService:
    cfg = cfg or load_proof_config()
    return ProofService(KeyStore(cfg.key_path), enabled=cfg.enabled)


__all__ = [
    "ProofService",
    "discovery_attributes",
    "proof_service_from_config",
    "TIMESTAMP_HEADER",
    "PROOF_HEADER",
]
