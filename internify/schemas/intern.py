# internify/schemas/intern.py
from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from internify.models.intern import InternStatus
from internify.services.dates import ensure_utc, to_calendar_date

class InternCandidate(BaseModel):
    """Entrada crua (formulário, JSON ou linha de CSV); quem valida é validate_intern_record."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    full_name: Optional[str] = None
    email: Optional[str] = None
    domain: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _date_value_to_text(cls, v):
        # date/datetime/timestamp legado viram texto ISO; texto segue como veio
        if v is None or isinstance(v, str):
            return v
        try:
            return to_calendar_date(v).isoformat()
        except ValueError:
            return str(v)

class ValidatedIntern(BaseModel):
    full_name: str
    email: Optional[str] = None
    domain: str
    start_date: date
    end_date: date
    status: InternStatus = InternStatus.active

class InternRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    full_name: str
    email: Optional[str] = None
    domain: str
    start_date: date
    end_date: date
    certificate_id: str
    created_by: str
    status: InternStatus
    created_at: datetime

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _calendar_date(cls, v):
        return to_calendar_date(v)

    @field_validator("created_at")
    @classmethod
    def _utc(cls, v):
        return ensure_utc(v)

class InternOut(BaseModel):
    full_name: str
    email: Optional[str] = None
    domain: str
    start_date: date
    end_date: date
    certificate_id: str
    status: InternStatus
    created_at: datetime
    duration: str
    verification_url: str
    verification_count: Optional[int] = None

class InternPage(BaseModel):
    items: List[InternOut]
    total: int
    page: int
    page_size: int
    pages: int
    domains: List[str]
