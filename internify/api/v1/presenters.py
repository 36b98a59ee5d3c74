# internify/api/v1/presenters.py
from typing import Optional

from fastapi import Request

from internify.core.config import settings
from internify.schemas.intern import InternOut, InternRecord
from internify.services.dates import calculate_duration

def verify_url(request: Request, certificate_id: str) -> str:
    # prioridade: env PUBLIC_BASE_URL; senão, monta com host da requisição
    base = settings.PUBLIC_BASE_URL or str(request.base_url)
    return f"{base.rstrip('/')}/verify/{certificate_id}"

def intern_out(request: Request, i: InternRecord, verification_count: Optional[int] = None) -> InternOut:
    return InternOut(
        full_name=i.full_name,
        email=i.email,
        domain=i.domain,
        start_date=i.start_date,
        end_date=i.end_date,
        certificate_id=i.certificate_id,
        status=i.status,
        created_at=i.created_at,
        duration=calculate_duration(i.start_date, i.end_date),
        verification_url=verify_url(request, i.certificate_id),
        verification_count=verification_count,
    )
