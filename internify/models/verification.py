from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import ForeignKey, String, Integer, DateTime
from internify.db.base import Base

class CertificateVerification(Base):
    __tablename__ = "certificate_verifications"
    certificate_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    intern_id: Mapped[str] = mapped_column(ForeignKey("interns.id"), index=True)
    # só cresce; incrementado via UPDATE ... SET verification_count = verification_count + 1
    verification_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    last_verified: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    intern = relationship("Intern", back_populates="verification")
