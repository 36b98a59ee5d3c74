# internify/services/interns.py
from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional, Tuple, Union

from internify.core.errors import RecordNotFound
from internify.schemas.intern import InternCandidate, InternRecord, ValidatedIntern
from internify.services.identity import generate_certificate_identity
from internify.services.validation import validate_intern_record
from internify.store.base import RecordStore

logger = logging.getLogger(__name__)

def _now() -> datetime:
    return datetime.now(timezone.utc)

def create_intern(store: RecordStore, *, owner_id: str, data: ValidatedIntern) -> InternRecord:
    """Gera a identidade e persiste Intern + VerificationRecord (contador 0)."""
    identity = generate_certificate_identity()
    record = InternRecord(
        id=identity.internal_id,
        certificate_id=identity.certificate_id,
        created_by=owner_id,
        created_at=_now(),
        **data.model_dump(),
    )
    store.create_intern(record)
    logger.info("intern created owner=%s certificate_id=%s", owner_id, record.certificate_id)
    return record

def add_intern(
    store: RecordStore,
    *,
    owner_id: str,
    candidate: Union[InternCandidate, Mapping[str, Any]],
) -> InternRecord:
    return create_intern(store, owner_id=owner_id, data=validate_intern_record(candidate))

def get_owned_intern(store: RecordStore, *, owner_id: str, certificate_id: str) -> InternRecord:
    # só o dono enxerga pelo painel; para os demais é "não encontrado"
    ver = store.get_verification(certificate_id)
    intern = store.get_intern(ver.intern_id) if ver else None
    if intern is None or intern.created_by != owner_id:
        raise RecordNotFound("Intern not found", operation="get_intern")
    return intern

def filter_interns(
    interns: List[InternRecord],
    *,
    q: Optional[str] = None,
    domain: Optional[str] = None,
) -> List[InternRecord]:
    rows = interns
    if domain:
        rows = [i for i in rows if i.domain == domain]
    if q and q.strip():
        term = q.strip().lower()
        rows = [
            i for i in rows
            if term in i.full_name.lower() or (i.email and term in i.email.lower())
        ]
    return rows

def list_interns(
    store: RecordStore,
    *,
    owner_id: str,
    q: Optional[str] = None,
    domain: Optional[str] = None,
    page: int = 1,
    page_size: int = 10,
) -> Tuple[List[InternRecord], int, int, List[str]]:
    """Retorna (página, total filtrado, nº de páginas, domínios distintos da conta)."""
    interns = store.list_interns(owner_id)
    domains = sorted({i.domain for i in interns if i.domain})
    rows = filter_interns(interns, q=q, domain=domain)
    total = len(rows)
    pages = math.ceil(total / page_size) if total else 0
    start = (page - 1) * page_size
    return rows[start:start + page_size], total, pages, domains
