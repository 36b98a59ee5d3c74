# internify/store/sql.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, Iterable, Iterator, List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import Session

from internify.core.errors import (
    PermissionDenied,
    RecordConflict,
    RecordNotFound,
    StorageUnavailable,
)
from internify.models.intern import Intern
from internify.models.user_settings import UserSettings
from internify.models.verification import CertificateVerification
from internify.schemas.intern import InternRecord
from internify.schemas.settings import UserSettingsRecord
from internify.schemas.verification import VerificationRecord
from internify.store.base import RecordStore

logger = logging.getLogger(__name__)

# SQLSTATE do Postgres para falta de privilégio
_PG_INSUFFICIENT_PRIVILEGE = "42501"

def _is_permission_error(exc: DBAPIError) -> bool:
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return code == _PG_INSUFFICIENT_PRIVILEGE


class SqlRecordStore(RecordStore):
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _op(self, operation: str) -> Iterator[None]:
        # traduz erros do SQLAlchemy para StorageError e desfaz a transação
        try:
            yield
        except IntegrityError as exc:
            self.db.rollback()
            raise RecordConflict(f"{operation}: duplicate record", operation=operation) from exc
        except DBAPIError as exc:
            self.db.rollback()
            if _is_permission_error(exc):
                raise PermissionDenied(f"{operation}: permission denied", operation=operation) from exc
            logger.error("storage failure during %s: %s", operation, exc)
            raise StorageUnavailable(f"{operation}: storage unavailable", operation=operation) from exc

    # ----------------------------- settings -----------------------------

    def get_settings(self, account_id: str) -> Optional[UserSettingsRecord]:
        with self._op("get_settings"):
            row = self.db.get(UserSettings, account_id)
        return UserSettingsRecord.model_validate(row) if row else None

    def save_settings(self, record: UserSettingsRecord) -> UserSettingsRecord:
        with self._op("save_settings"):
            row = self.db.get(UserSettings, record.account_id)
            data = record.model_dump()
            if row is None:
                row = UserSettings(**data)
            else:
                for k, v in data.items():
                    setattr(row, k, v)
            self.db.add(row); self.db.commit(); self.db.refresh(row)
        return UserSettingsRecord.model_validate(row)

    # ----------------------------- interns -----------------------------

    def create_intern(self, intern: InternRecord) -> VerificationRecord:
        with self._op("create_intern"):
            row = Intern(**intern.model_dump())
            ver = CertificateVerification(
                certificate_id=intern.certificate_id,
                intern_id=intern.id,
                verification_count=0,
                last_verified=None,
            )
            self.db.add_all([row, ver])
            self.db.commit()
        return VerificationRecord.model_validate(ver)

    def get_intern(self, intern_id: str) -> Optional[InternRecord]:
        with self._op("get_intern"):
            row = self.db.get(Intern, intern_id)
        return InternRecord.model_validate(row) if row else None

    def list_interns(self, owner_id: str) -> List[InternRecord]:
        with self._op("list_interns"):
            rows = self.db.execute(
                select(Intern)
                .where(Intern.created_by == owner_id)
                .order_by(Intern.created_at.desc(), Intern.certificate_id.desc())
            ).scalars().all()
        return [InternRecord.model_validate(r) for r in rows]

    # ----------------------------- verificação -----------------------------

    def get_verification(self, certificate_id: str) -> Optional[VerificationRecord]:
        with self._op("get_verification"):
            row = self.db.execute(
                select(CertificateVerification)
                .where(CertificateVerification.certificate_id == certificate_id)
                .execution_options(populate_existing=True)
            ).scalar_one_or_none()
        return VerificationRecord.model_validate(row) if row else None

    def increment_verification(self, certificate_id: str, at: datetime) -> VerificationRecord:
        stmt = (
            update(CertificateVerification)
            .where(CertificateVerification.certificate_id == certificate_id)
            .values(
                verification_count=CertificateVerification.verification_count + 1,
                last_verified=at,
            )
            .returning(
                CertificateVerification.certificate_id,
                CertificateVerification.intern_id,
                CertificateVerification.verification_count,
                CertificateVerification.last_verified,
            )
            .execution_options(synchronize_session=False)
        )
        with self._op("increment_verification"):
            row = self.db.execute(stmt).one_or_none()
            if row is None:
                self.db.rollback()
                raise RecordNotFound(
                    f"verification record {certificate_id} not found",
                    operation="increment_verification",
                )
            self.db.commit()
        return VerificationRecord(
            certificate_id=row.certificate_id,
            intern_id=row.intern_id,
            verification_count=row.verification_count,
            last_verified=row.last_verified,
        )

    def verification_counts(self, certificate_ids: Iterable[str]) -> Dict[str, int]:
        ids = list(certificate_ids)
        if not ids:
            return {}
        with self._op("verification_counts"):
            rows = self.db.execute(
                select(CertificateVerification.certificate_id, CertificateVerification.verification_count)
                .where(CertificateVerification.certificate_id.in_(ids))
            ).all()
        return {cid: count for cid, count in rows}
