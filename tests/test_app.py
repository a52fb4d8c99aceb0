import xml.etree.ElementTree as ET

from fastapi.testclient import TestClient

from wopiproof.app import create_app, render_discovery
from wopiproof.proof.service import ProofService


def test_discovery_includes_proof_key(key_store):
    svc = ProofService(key_store)
    c = TestClient(create_app(svc))
    r = c.get("/hosting/discovery")
    assert r.status_code == 200
    root = ET.fromstring(r.content)
    pk = root.find("proof-key")
    assert pk is not None
    assert dict(pk.attrib) == dict(svc.proof_key_attributes)


def test_discovery_without_key(missing_key_store):
    c = TestClient(create_app(ProofService(missing_key_store)))
    root = ET.fromstring(c.get("/hosting/discovery").content)
    assert root.find("proof-key") is None
    assert root.find("net-zone") is not None
    assert c.get("/hosting/proof-key").status_code == 404


def test_proof_key_json(key_store):
    svc = ProofService(key_store)
    r = TestClient(create_app(svc)).get("/hosting/proof-key")
    assert r.status_code == 200
    assert r.json() == dict(svc.proof_key_attributes)


def test_health_reports_key_state(key_store, missing_key_store):
    ok = TestClient(create_app(ProofService(key_store))).get("/__health").json()
    assert ok["status"] == "ok"
    assert ok["proof_key"]["enabled"] is True
    degraded = TestClient(create_app(ProofService(missing_key_store))).get("/__health").json()
    assert degraded["status"] == "ok"
    assert degraded["proof_key"]["enabled"] is False


def test_metrics_exposed(key_store):
    svc = ProofService(key_store)
    svc.get_proof_headers("t", "u")
    r = TestClient(create_app(svc)).get("/metrics")
    assert r.status_code == 200
    assert "wopiproof_key_loaded" in r.text
    assert 'wopiproof_proofs_total{result="signed"}' in r.text


def test_render_discovery_net_zone(missing_key_store):
    body = render_discovery(ProofService(missing_key_store), "internal-https")
    assert body.startswith(b"<?xml")
    assert ET.fromstring(body).find("net-zone").get("name") == "internal-https"
