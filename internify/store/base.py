# internify/store/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from internify.schemas.intern import InternRecord
from internify.schemas.settings import UserSettingsRecord
from internify.schemas.verification import VerificationRecord


class RecordStore(ABC):
    """
    Persistência dos três tipos de registro:
      - UserSettings       -> chave: account_id
      - Intern             -> chave: id interno (uuid)
      - VerificationRecord -> chave: certificate_id

    `get_*` devolvem None quando não existe. Falhas do backend sobem como
    StorageError (RecordNotFound / PermissionDenied / StorageUnavailable /
    RecordConflict).
    """

    @abstractmethod
    def get_settings(self, account_id: str) -> Optional[UserSettingsRecord]: ...

    @abstractmethod
    def save_settings(self, record: UserSettingsRecord) -> UserSettingsRecord:
        """Grava (ou sobrescreve por inteiro) as configurações da conta."""

    @abstractmethod
    def create_intern(self, intern: InternRecord) -> VerificationRecord:
        """Cria o Intern e o VerificationRecord (contador 0) na mesma transação."""

    @abstractmethod
    def get_intern(self, intern_id: str) -> Optional[InternRecord]: ...

    @abstractmethod
    def list_interns(self, owner_id: str) -> List[InternRecord]:
        """Interns da conta, mais recentes primeiro."""

    @abstractmethod
    def get_verification(self, certificate_id: str) -> Optional[VerificationRecord]: ...

    @abstractmethod
    def increment_verification(self, certificate_id: str, at: datetime) -> VerificationRecord:
        """
        Incremento atômico do contador + last_verified. Nunca faz
        ler-somar-gravar na aplicação. RecordNotFound se o certificado não existe
        (e nada é criado).
        """

    @abstractmethod
    def verification_counts(self, certificate_ids: Iterable[str]) -> Dict[str, int]: ...
