from enum import Enum
from datetime import date, datetime
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Date, DateTime, func
from internify.db.base import Base

class InternStatus(str, Enum):
    active="active"
    completed="completed"

class Intern(Base):
    __tablename__ = "interns"
    # uuid4; chave interna, nunca exposta na verificação pública
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    full_name: Mapped[str] = mapped_column(String(200))
    email: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    domain: Mapped[str] = mapped_column(String(120), index=True)
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date] = mapped_column(Date)
    certificate_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    created_by: Mapped[str] = mapped_column(String(128), index=True)
    status: Mapped[InternStatus] = mapped_column(default=InternStatus.active)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    verification = relationship("CertificateVerification", back_populates="intern", uselist=False)
