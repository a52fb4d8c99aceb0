"""Prometheus instrumentation for proof-key production.

A dedicated registry keeps these series separate from the default process
collectors; labels are fixed and low-cardinality.
"""
from __future__ import annotations

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

REGISTRY = CollectorRegistry()

KEY_LOADED = Gauge(
    "wopiproof_key_loaded",
    "1 when a proof key is loaded, 0 when proof generation is disabled.",
    registry=REGISTRY,
)
PROOFS = Counter(
    "wopiproof_proofs_total",
    "Proof header requests by outcome.",
    ["result"],
    registry=REGISTRY,
)
SIGN_LATENCY = Histogram(
    "wopiproof_sign_latency_ms",
    "Time to build and sign one proof (ms).",
    buckets=(0.5, 1, 2, 5, 10, 25, 50, 100),
    registry=REGISTRY,
)


def observe_proof(result: str, latency_ms: float | None = None):
    PROOFS.labels(result=result).inc()
    if latency_ms is not None:
        SIGN_LATENCY.observe(latency_ms)


def prometheus_latest() -> tuple[bytes, str]:
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST
