# internify/services/dates.py
"""
Datas do domínio.

Registros antigos trazem datas em formatos diferentes: string ISO
("2024-01-15" ou "2024-01-15T00:00:00.000Z"), objetos date/datetime ou
timestamps legados no formato {"seconds": ..., "nanoseconds": ...}.
Tudo passa por `to_calendar_date` antes de qualquer conta.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Mapping, Optional, Union

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

@dataclass(frozen=True)
class LegacyTimestamp:
    seconds: int
    nanoseconds: int = 0

    def to_datetime(self) -> datetime:
        try:
            return datetime.fromtimestamp(self.seconds + self.nanoseconds / 1e9, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            # fora do intervalo do time_t da plataforma
            raise ValueError(f"Timestamp out of range: {self.seconds}") from exc

DateValue = Union[date, LegacyTimestamp]

def to_calendar_date(value: Any) -> date:
    """Converte qualquer representação aceita de data em `date`. ValueError se não der."""
    # datetime é subclasse de date: testar antes
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, LegacyTimestamp):
        return value.to_datetime().date()
    if isinstance(value, Mapping) and "seconds" in value:
        try:
            ts = LegacyTimestamp(int(value["seconds"]), int(value.get("nanoseconds") or 0))
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueError(f"Invalid timestamp: {value!r}") from exc
        return ts.to_datetime().date()
    if isinstance(value, str):
        text = value.strip()
        if ISO_DATE_RE.match(text):
            return date.fromisoformat(text)
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError as exc:
            raise ValueError(f"Invalid date: {value!r}") from exc
    raise ValueError(f"Unsupported date value: {value!r}")

def parse_iso_date(text: str) -> date:
    """Aceita somente YYYY-MM-DD que seja uma data de calendário real."""
    text = (text or "").strip()
    if not ISO_DATE_RE.match(text):
        raise ValueError(f"Not a YYYY-MM-DD date: {text!r}")
    return date.fromisoformat(text)

def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite devolve datetime sem tzinfo; tratamos tudo como UTC
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

def format_date(value: Any) -> str:
    try:
        return to_calendar_date(value).isoformat()
    except ValueError:
        return "Invalid Date"

def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'' if n == 1 else 's'}"

def calculate_duration(start: Any, end: Any) -> str:
    """
    Meses de calendário entre as datas; se der <= 0 meses, dias (arredondado
    para cima). Ex.: 2024-01-15 -> 2024-04-15 = "3 months"; 2024-01-15 ->
    2024-01-17 = "2 days".
    """
    try:
        start_d = to_calendar_date(start)
        end_d = to_calendar_date(end)
    except ValueError:
        return "Invalid duration"

    months = (end_d.year - start_d.year) * 12 + (end_d.month - start_d.month)
    if months <= 0:
        days = math.ceil((end_d - start_d).total_seconds() / 86400)
        return _plural(days, "day")
    return _plural(months, "month")
