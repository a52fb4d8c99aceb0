from __future__ import annotations

import argparse
import json

from .config import load_proof_config
from .proof.service import ProofService, proof_service_from_config


def _service(key_path: str | None) -> ProofService:
    cfg = load_proof_config()
    if key_path:
        cfg = cfg.model_copy(update={"key_path": key_path})
    return proof_service_from_config(cfg)


def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog="wopiproof", description="WOPI proof-key tooling")
    p.add_argument("--key", help="Proof key path (default: PROOF_KEY_PATH)")
    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("discovery", help="Print proof-key discovery attributes as JSON")
    hp = sub.add_parser("headers", help="Sign a request and print the proof headers as JSON")
    hp.add_argument("--token", required=True, help="Access token as sent in the URL")
    hp.add_argument("--uri", required=True, help="Full request URI")
    args = p.parse_args(argv)

    service = _service(args.key)
    if not service.enabled:
        print(json.dumps({"error": service.status().reason}))
        return 1
    if args.command == "discovery":
        print(json.dumps(dict(service.proof_key_attributes), indent=2))
    else:
        print(json.dumps(dict(service.get_proof_headers(args.token, args.uri)), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
