# internify/store/memory.py
from __future__ import annotations

import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from internify.core.errors import RecordConflict, RecordNotFound
from internify.schemas.intern import InternRecord
from internify.schemas.settings import UserSettingsRecord
from internify.schemas.verification import VerificationRecord
from internify.store.base import RecordStore


class InMemoryRecordStore(RecordStore):
    """Store em memória (testes e desenvolvimento local). Um lock protege os três mapas."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._settings: Dict[str, UserSettingsRecord] = {}
        self._interns: Dict[str, InternRecord] = {}
        self._verifications: Dict[str, VerificationRecord] = {}

    def get_settings(self, account_id: str) -> Optional[UserSettingsRecord]:
        with self._lock:
            rec = self._settings.get(account_id)
            return rec.model_copy(deep=True) if rec else None

    def save_settings(self, record: UserSettingsRecord) -> UserSettingsRecord:
        with self._lock:
            self._settings[record.account_id] = record.model_copy(deep=True)
        return record

    def create_intern(self, intern: InternRecord) -> VerificationRecord:
        with self._lock:
            if intern.id in self._interns or intern.certificate_id in self._verifications:
                raise RecordConflict("create_intern: duplicate record", operation="create_intern")
            ver = VerificationRecord(certificate_id=intern.certificate_id, intern_id=intern.id)
            self._interns[intern.id] = intern.model_copy(deep=True)
            self._verifications[intern.certificate_id] = ver
            return ver.model_copy()

    def get_intern(self, intern_id: str) -> Optional[InternRecord]:
        with self._lock:
            rec = self._interns.get(intern_id)
            return rec.model_copy(deep=True) if rec else None

    def list_interns(self, owner_id: str) -> List[InternRecord]:
        with self._lock:
            rows = [r.model_copy(deep=True) for r in self._interns.values() if r.created_by == owner_id]
        return sorted(rows, key=lambda r: (r.created_at, r.certificate_id), reverse=True)

    def get_verification(self, certificate_id: str) -> Optional[VerificationRecord]:
        with self._lock:
            rec = self._verifications.get(certificate_id)
            return rec.model_copy() if rec else None

    def increment_verification(self, certificate_id: str, at: datetime) -> VerificationRecord:
        with self._lock:
            rec = self._verifications.get(certificate_id)
            if rec is None:
                raise RecordNotFound(
                    f"verification record {certificate_id} not found",
                    operation="increment_verification",
                )
            rec = rec.model_copy(update={"verification_count": rec.verification_count + 1, "last_verified": at})
            self._verifications[certificate_id] = rec
            return rec.model_copy()

    def verification_counts(self, certificate_ids: Iterable[str]) -> Dict[str, int]:
        with self._lock:
            return {
                cid: self._verifications[cid].verification_count
                for cid in certificate_ids
                if cid in self._verifications
            }
