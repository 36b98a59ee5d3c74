# internify/services/verification.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from internify.core.errors import CertificateNotFound, RecordNotFound
from internify.schemas.intern import InternRecord
from internify.schemas.settings import UserSettingsRecord
from internify.schemas.verification import VerificationRecord
from internify.store.base import RecordStore

logger = logging.getLogger(__name__)

def _now() -> datetime:
    return datetime.now(timezone.utc)

@dataclass(frozen=True)
class VerifiedCertificate:
    intern: InternRecord
    owner_settings: UserSettingsRecord
    verification: VerificationRecord

def verify_certificate(store: RecordStore, certificate_id: str) -> VerifiedCertificate:
    """
    Resolve o certificado público e conta a verificação.

    O contador sobe assim que o certificate_id é encontrado, mesmo que as
    etapas seguintes falhem. Qualquer "não encontrado" vira o mesmo
    CertificateNotFound, sem dizer qual registro faltou.
    """
    certificate_id = (certificate_id or "").strip()
    if not certificate_id:
        raise CertificateNotFound()

    # busca + incremento numa única operação atômica do storage
    try:
        verification = store.increment_verification(certificate_id, _now())
    except RecordNotFound:
        raise CertificateNotFound() from None

    intern = store.get_intern(verification.intern_id)
    if intern is None:
        logger.warning("verification %s points to missing intern", certificate_id)
        raise CertificateNotFound()

    owner = store.get_settings(intern.created_by)
    if owner is None:
        logger.warning("certificate %s: owner settings missing", certificate_id)
        raise CertificateNotFound()

    logger.info("certificate verified id=%s count=%d", certificate_id, verification.verification_count)
    return VerifiedCertificate(intern=intern, owner_settings=owner, verification=verification)
