# internify/schemas/settings.py
from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from internify.models.user_settings import CertificateTemplate
from internify.services.dates import ensure_utc

IMAGE_REF_RE = re.compile(r"^(data:image/[a-zA-Z0-9.+-]+;base64,|https?://)\S+$")

class UserSettingsBase(BaseModel):
    company_name: Optional[str] = None
    company_logo: Optional[str] = None
    supervisor_name: Optional[str] = None
    supervisor_signature: Optional[str] = None
    ceo_name: Optional[str] = None
    ceo_signature: Optional[str] = None
    selected_template: CertificateTemplate = CertificateTemplate.modern

    @field_validator(
        "company_name", "company_logo", "supervisor_name",
        "supervisor_signature", "ceo_name", "ceo_signature",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("company_logo", "supervisor_signature", "ceo_signature")
    @classmethod
    def _image_ref(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not IMAGE_REF_RE.match(v):
            raise ValueError("must be a data:image URL or an http(s) URL")
        return v

class UserSettingsUpdate(UserSettingsBase):
    # aceita companyName (front) e company_name
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

class UserSettingsRecord(UserSettingsBase):
    model_config = ConfigDict(from_attributes=True)

    account_id: str
    setup_completed: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def _utc(cls, v):
        return ensure_utc(v)

class UserSettingsOut(UserSettingsBase):
    model_config = ConfigDict(from_attributes=True)

    setup_completed: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
