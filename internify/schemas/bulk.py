# internify/schemas/bulk.py
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

class RawRow(BaseModel):
    row: int                      # linha no arquivo (cabeçalho = 1)
    values: Dict[str, str]

class RowOutcome(BaseModel):
    row: int
    success: bool
    certificate_id: Optional[str] = None
    error: Optional[str] = None

class BulkImportRequest(BaseModel):
    csv: str = Field(min_length=1, description="Conteúdo CSV com cabeçalho")

class BulkImportResult(BaseModel):
    total: int
    succeeded: int
    failed: int
    results: List[RowOutcome]
