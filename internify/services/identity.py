# internify/services/identity.py
import secrets
import string
import time
import uuid
from typing import NamedTuple

from internify.core.errors import IdentityGenerationError

CERT_PREFIX = "CERT"
BASE36_ALPHABET = string.digits + string.ascii_uppercase
SUFFIX_LENGTH = 9

class CertificateIdentity(NamedTuple):
    internal_id: str
    certificate_id: str

def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000

def generate_certificate_identity() -> CertificateIdentity:
    """
    internal_id: uuid4 (chave de armazenamento do Intern).
    certificate_id: CERT-<epoch ms>-<9 chars base36 maiúsculos>, público e
    ordenável pelo prefixo de tempo. Sem checagem de unicidade no banco.
    """
    try:
        internal_id = str(uuid.uuid4())
        suffix = "".join(secrets.choice(BASE36_ALPHABET) for _ in range(SUFFIX_LENGTH))
    except (OSError, NotImplementedError) as exc:
        # sem fonte de entropia não há fallback
        raise IdentityGenerationError("Randomness source unavailable") from exc
    return CertificateIdentity(internal_id, f"{CERT_PREFIX}-{_epoch_millis()}-{suffix}")
