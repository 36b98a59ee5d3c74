# internify/api/v1/verify.py
from fastapi import APIRouter, Depends, Path, Request

from internify.api.deps import get_store
from internify.api.v1.presenters import verify_url
from internify.schemas.verification import IssuerBranding, VerificationOut, VerifiedIntern
from internify.services.dates import calculate_duration, format_date
from internify.services.verification import verify_certificate
from internify.store.base import RecordStore

router = APIRouter()  # público, sem Authorization

@router.get("/{certificate_id}", response_model=VerificationOut)
def verify_public(
    request: Request,
    certificate_id: str = Path(...),
    store: RecordStore = Depends(get_store),
):
    result = verify_certificate(store, certificate_id)
    i, s, v = result.intern, result.owner_settings, result.verification

    # resposta sem o id interno do intern nem o e-mail
    return VerificationOut(
        certificate_id=v.certificate_id,
        intern=VerifiedIntern(
            full_name=i.full_name,
            domain=i.domain,
            start_date=i.start_date,
            end_date=i.end_date,
            start_date_display=format_date(i.start_date),
            end_date_display=format_date(i.end_date),
            duration=calculate_duration(i.start_date, i.end_date),
            status=i.status,
        ),
        issuer=IssuerBranding(
            company_name=s.company_name,
            company_logo=s.company_logo,
            supervisor_name=s.supervisor_name,
            supervisor_signature=s.supervisor_signature,
            ceo_name=s.ceo_name,
            ceo_signature=s.ceo_signature,
            selected_template=s.selected_template,
        ),
        verification_count=v.verification_count,
        last_verified=v.last_verified,
        verification_url=verify_url(request, v.certificate_id),
    )
