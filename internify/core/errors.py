# internify/core/errors.py
from __future__ import annotations

from typing import Any, Dict, Optional


class InternifyError(Exception):
    """Base de todos os erros de domínio; `code` vai para o envelope JSON da API."""

    code = "INTERNIFY_ERROR"

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


# ----------------------------- validação -----------------------------

class InternValidationError(InternifyError):
    code = "VALIDATION_ERROR"

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


class MissingField(InternValidationError):
    code = "MISSING_FIELD"

    def __init__(self, field: str):
        super().__init__(f"Missing value for {field}", field=field)


class InvalidEmail(InternValidationError):
    code = "INVALID_EMAIL"

    def __init__(self, field: str = "email"):
        super().__init__("Invalid email format", field=field)


class InvalidDateFormat(InternValidationError):
    code = "INVALID_DATE_FORMAT"

    def __init__(self, field: str):
        super().__init__(f"{field} must be a valid date in YYYY-MM-DD format", field=field)


class InvalidDateRange(InternValidationError):
    code = "INVALID_DATE_RANGE"

    def __init__(self):
        super().__init__("End date must be after start date", field="endDate")


class InvalidStatus(InternValidationError):
    code = "INVALID_STATUS"

    def __init__(self, value: str):
        super().__init__(f"Status must be 'active' or 'completed' (got '{value}')", field="status")


class FieldTooLong(InternValidationError):
    code = "FIELD_TOO_LONG"

    def __init__(self, field: str, max_length: int):
        super().__init__(f"{field} must be at most {max_length} characters", field=field)
        self.details["max_length"] = max_length


class InvalidSettings(InternValidationError):
    code = "INVALID_SETTINGS"


# ----------------------------- lote -----------------------------

class BatchError(InternifyError):
    """Erro estrutural: o lote inteiro é rejeitado antes de qualquer linha."""

    code = "BATCH_REJECTED"


# ----------------------------- storage -----------------------------

class StorageError(InternifyError):
    code = "STORAGE_ERROR"

    def __init__(self, message: str, *, operation: str):
        super().__init__(message, details={"operation": operation})
        self.operation = operation


class RecordNotFound(StorageError):
    code = "NOT_FOUND"


class PermissionDenied(StorageError):
    code = "PERMISSION_DENIED"


class StorageUnavailable(StorageError):
    code = "STORAGE_UNAVAILABLE"


class RecordConflict(StorageError):
    code = "UNIQUE_VIOLATION"


# ----------------------------- verificação / identidade -----------------------------

class CertificateNotFound(InternifyError):
    # mensagem única para qualquer etapa que falhe (não revela qual registro faltou)
    code = "CERTIFICATE_NOT_FOUND"

    def __init__(self):
        super().__init__("Certificate not found")


class IdentityGenerationError(InternifyError):
    code = "IDENTITY_GENERATION_FAILED"
