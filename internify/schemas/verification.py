# internify/schemas/verification.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from internify.models.intern import InternStatus
from internify.models.user_settings import CertificateTemplate
from internify.services.dates import ensure_utc

class VerificationRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    certificate_id: str
    intern_id: str
    verification_count: int = 0
    last_verified: Optional[datetime] = None

    @field_validator("last_verified")
    @classmethod
    def _utc(cls, v):
        return ensure_utc(v)

# ---- resposta pública de /verify/{certificate_id} (sem id interno) ----

class VerifiedIntern(BaseModel):
    full_name: str
    domain: str
    start_date: date
    end_date: date
    start_date_display: str
    end_date_display: str
    duration: str
    status: InternStatus

class IssuerBranding(BaseModel):
    company_name: Optional[str] = None
    company_logo: Optional[str] = None
    supervisor_name: Optional[str] = None
    supervisor_signature: Optional[str] = None
    ceo_name: Optional[str] = None
    ceo_signature: Optional[str] = None
    selected_template: CertificateTemplate

class VerificationOut(BaseModel):
    certificate_id: str
    valid: bool = True
    intern: VerifiedIntern
    issuer: IssuerBranding
    verification_count: int
    last_verified: Optional[datetime] = None
    verification_url: str
