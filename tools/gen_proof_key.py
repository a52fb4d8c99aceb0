from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives import serialization
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from wopiproof.config import load_proof_config  # noqa: E402

path = sys.argv[1] if len(sys.argv) > 1 else load_proof_config().key_path
if os.path.exists(path):
    print(f"Refusing to overwrite existing key: {path}")
    raise SystemExit(1)
if os.path.dirname(path):
    os.makedirs(os.path.dirname(path), exist_ok=True)

# Proof key (traditional PEM, as older ssh-keygen emits)
sk = rsa.generate_private_key(public_exponent=65537, key_size=2048)
with open(path, "wb") as f:
    f.write(sk.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption()
    ))
os.chmod(path, 0o600)

print(f"Generated: {path}")
