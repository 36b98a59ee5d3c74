# internify/services/bulk_import.py
"""
Importação em lote de interns a partir de CSV.

Erros estruturais (colunas, contagem de colunas, tamanho do lote) rejeitam o
lote inteiro antes de qualquer gravação. Depois disso cada linha é validada e
gravada em sequência, na ordem do arquivo; uma linha com erro vira um
RowOutcome de falha e o processamento segue. Linhas já gravadas não são
desfeitas e linhas com erro não são repetidas.
"""
from __future__ import annotations

import csv
import io
import logging
from typing import List, Optional, Sequence

from internify.core.config import settings
from internify.core.errors import BatchError, InternValidationError, StorageError
from internify.schemas.bulk import RawRow, RowOutcome
from internify.services.interns import add_intern
from internify.store.base import RecordStore

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("fullName", "email", "domain", "startDate", "endDate", "status")

CSV_TEMPLATE = (
    "fullName,email,domain,startDate,endDate,status\n"
    "John Doe,john.doe@example.com,Web Development,2024-01-15,2024-04-15,completed\n"
    "Jane Smith,jane.smith@example.com,Data Science,2024-02-01,2024-05-01,active\n"
    "Mike Johnson,mike.johnson@example.com,Mobile Development,2024-01-10,2024-04-10,completed\n"
)

def parse_csv(text: str) -> List[RawRow]:
    """Lê o CSV (cabeçalho obrigatório) e devolve as linhas com o número da linha no arquivo."""
    reader = csv.reader(io.StringIO((text or "").lstrip("\ufeff")))
    header: Optional[List[str]] = None
    rows: List[RawRow] = []

    try:
        for values in reader:
            line = reader.line_num
            if not any(v.strip() for v in values):
                continue  # linha em branco
            values = [v.strip() for v in values]

            if header is None:
                header = values
                missing = [c for c in CSV_COLUMNS if c not in header]
                if missing:
                    raise BatchError(f"Missing required columns: {', '.join(missing)}",
                                     details={"missing": missing})
                unknown = [c for c in header if c not in CSV_COLUMNS]
                if unknown:
                    raise BatchError(f"Unexpected columns: {', '.join(unknown)}",
                                     details={"unexpected": unknown})
                if len(set(header)) != len(header):
                    raise BatchError("Duplicate columns in header")
                continue

            if len(values) != len(header):
                raise BatchError(f"Row {line}: Column count mismatch",
                                 details={"row": line, "expected": len(header), "found": len(values)})
            rows.append(RawRow(row=line, values=dict(zip(header, values))))
    except csv.Error as exc:
        # campo gigante, aspas sem fechar, byte nulo...
        raise BatchError(f"Malformed CSV: {exc}", details={"row": reader.line_num}) from exc

    if header is None:
        raise BatchError("CSV file is empty")
    return rows

def check_batch_size(rows: Sequence[RawRow], max_rows: Optional[int] = None) -> None:
    limit = max_rows if max_rows is not None else settings.MAX_IMPORT_ROWS
    if not rows:
        raise BatchError("No records found in CSV file")
    if len(rows) > limit:
        raise BatchError(f"Maximum {limit} records allowed per import",
                         details={"rows": len(rows), "limit": limit})

def import_batch(
    store: RecordStore,
    rows: Sequence[RawRow],
    owner_id: str,
    *,
    max_rows: Optional[int] = None,
) -> List[RowOutcome]:
    check_batch_size(rows, max_rows)

    outcomes: List[RowOutcome] = []
    for raw in rows:
        try:
            intern = add_intern(store, owner_id=owner_id, candidate=raw.values)
        except (InternValidationError, StorageError) as exc:
            logger.info("import row %s rejected: %s", raw.row, exc.message)
            outcomes.append(RowOutcome(row=raw.row, success=False, error=exc.message))
        else:
            outcomes.append(RowOutcome(row=raw.row, success=True, certificate_id=intern.certificate_id))

    ok = sum(1 for o in outcomes if o.success)
    logger.info("import finished owner=%s rows=%d ok=%d failed=%d", owner_id, len(outcomes), ok, len(outcomes) - ok)
    return outcomes

def import_csv(store: RecordStore, text: str, owner_id: str, *, max_rows: Optional[int] = None) -> List[RowOutcome]:
    return import_batch(store, parse_csv(text), owner_id, max_rows=max_rows)
