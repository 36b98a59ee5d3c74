# internify/services/validation.py
import re
from typing import Any, Mapping, Optional, Union

from internify.core.errors import (
    FieldTooLong,
    InvalidDateFormat,
    InvalidDateRange,
    InvalidEmail,
    InvalidStatus,
    MissingField,
)
from internify.models.intern import InternStatus
from internify.schemas.intern import InternCandidate, ValidatedIntern
from internify.services.dates import parse_iso_date

# mesma checagem de e-mail do app original (não é o EmailStr do pydantic):
# aceita qualquer "x@y.z" sem espaços, sem consultar DNS nem normalizar
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# (atributo, nome exibido ao usuário; é o mesmo do cabeçalho do CSV)
REQUIRED_FIELDS = (
    ("full_name", "fullName"),
    ("domain", "domain"),
    ("start_date", "startDate"),
    ("end_date", "endDate"),
)

# limites das colunas em models/intern.py
MAX_LENGTHS = (
    ("full_name", "fullName", 200),
    ("email", "email", 200),
    ("domain", "domain", 120),
)

STATUSES = {s.value for s in InternStatus}

def _clean(value: Optional[str]) -> str:
    return (value or "").strip()

def validate_intern_record(candidate: Union[InternCandidate, Mapping[str, Any]]) -> ValidatedIntern:
    """
    Valida um intern (formulário ou linha de CSV). Para no primeiro erro, nesta ordem:
    campos obrigatórios, tamanho máximo, e-mail, formato das datas, fim > início, status.
    Status ausente vira "active".
    """
    if not isinstance(candidate, InternCandidate):
        candidate = InternCandidate.model_validate(dict(candidate))

    for attr, label in REQUIRED_FIELDS:
        if not _clean(getattr(candidate, attr)):
            raise MissingField(label)

    for attr, label, limit in MAX_LENGTHS:
        if len(_clean(getattr(candidate, attr))) > limit:
            raise FieldTooLong(label, limit)

    email = _clean(candidate.email) or None
    if email is not None and not EMAIL_RE.match(email):
        raise InvalidEmail()

    try:
        start = parse_iso_date(candidate.start_date)
    except ValueError:
        raise InvalidDateFormat("startDate") from None
    try:
        end = parse_iso_date(candidate.end_date)
    except ValueError:
        raise InvalidDateFormat("endDate") from None

    if end <= start:
        raise InvalidDateRange()

    status = _clean(candidate.status) or InternStatus.active.value
    if status not in STATUSES:
        raise InvalidStatus(status)

    return ValidatedIntern(
        full_name=_clean(candidate.full_name),
        email=email,
        domain=_clean(candidate.domain),
        start_date=start,
        end_date=end,
        status=InternStatus(status),
    )
