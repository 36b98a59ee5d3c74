from enum import Enum
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, Boolean, DateTime, func
from internify.db.base import Base

class CertificateTemplate(str, Enum):
    classic="classic"
    modern="modern"
    elegant="elegant"

class UserSettings(Base):
    __tablename__ = "user_settings"
    account_id: Mapped[str] = mapped_column(String(128), primary_key=True)

    company_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    # data URL (base64) ou URL remota
    company_logo: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    supervisor_name: Mapped[Optional[str]] = mapped_column(String(160), nullable=True)
    supervisor_signature: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    ceo_name: Mapped[Optional[str]] = mapped_column(String(160), nullable=True)
    ceo_signature: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    selected_template: Mapped[CertificateTemplate] = mapped_column(default=CertificateTemplate.modern)
    setup_completed: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
