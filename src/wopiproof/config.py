import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

WOPI_CONFIG_DIR = os.getenv("WOPI_CONFIG_DIR", "etc")
PROOF_KEY_PATH = os.getenv("PROOF_KEY_PATH", os.path.join(WOPI_CONFIG_DIR, "proof_key"))
FEATURE_PROOF_KEY = os.getenv("FEATURE_PROOF_KEY", "true").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DISCOVERY_NET_ZONE = os.getenv("DISCOVERY_NET_ZONE", "external-http")


class ProofConfig(BaseModel):
    key_path: str = PROOF_KEY_PATH
    enabled: bool = FEATURE_PROOF_KEY
    net_zone: str = DISCOVERY_NET_ZONE


def load_proof_config() -> ProofConfig:
    """Snapshot the current environment (tests monkeypatch env after import)."""
    config_dir = os.getenv("WOPI_CONFIG_DIR", WOPI_CONFIG_DIR)
    return ProofConfig(
        key_path=os.getenv("PROOF_KEY_PATH", os.path.join(config_dir, "proof_key")),
        enabled=os.getenv("FEATURE_PROOF_KEY", "true").lower() == "true",
        net_zone=os.getenv("DISCOVERY_NET_ZONE", DISCOVERY_NET_ZONE),
    )
