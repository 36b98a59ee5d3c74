# internify/api/v1/interns.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Request, status
from fastapi.responses import PlainTextResponse

from internify.api.deps import get_store, get_current_account
from internify.api.v1.presenters import intern_out
from internify.schemas.bulk import BulkImportRequest, BulkImportResult
from internify.schemas.intern import InternCandidate, InternOut, InternPage
from internify.services.bulk_import import CSV_TEMPLATE, import_csv
from internify.services.interns import add_intern, get_owned_intern, list_interns
from internify.store.base import RecordStore

router = APIRouter()

# -------------------------- listagem --------------------------

@router.get("/", response_model=InternPage)
def list_my_interns(
    request: Request,
    q: Optional[str] = Query(None, description="Busca por nome ou e-mail"),
    domain: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    store: RecordStore = Depends(get_store),
    account_id: str = Depends(get_current_account),
):
    rows, total, pages, domains = list_interns(
        store, owner_id=account_id, q=q, domain=domain, page=page, page_size=page_size,
    )
    counts = store.verification_counts(i.certificate_id for i in rows)
    return InternPage(
        items=[intern_out(request, i, counts.get(i.certificate_id, 0)) for i in rows],
        total=total,
        page=page,
        page_size=page_size,
        pages=pages,
        domains=domains,
    )

# -------------------------- cadastro --------------------------

@router.post("/", response_model=InternOut, status_code=status.HTTP_201_CREATED)
def create_intern(
    request: Request,
    body: InternCandidate,
    store: RecordStore = Depends(get_store),
    account_id: str = Depends(get_current_account),
):
    intern = add_intern(store, owner_id=account_id, candidate=body)
    return intern_out(request, intern, 0)

# -------------------------- importação em lote --------------------------

@router.get("/import/template", response_class=PlainTextResponse)
def import_template():
    return PlainTextResponse(
        CSV_TEMPLATE,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="intern_import_template.csv"'},
    )

@router.post("/import", response_model=BulkImportResult)
def import_interns(
    body: BulkImportRequest,
    store: RecordStore = Depends(get_store),
    account_id: str = Depends(get_current_account),
):
    results = import_csv(store, body.csv, account_id)
    ok = sum(1 for r in results if r.success)
    return BulkImportResult(total=len(results), succeeded=ok, failed=len(results) - ok, results=results)

# -------------------------- leitura --------------------------

@router.get("/{certificate_id}", response_model=InternOut)
def get_my_intern(
    request: Request,
    certificate_id: str = Path(..., min_length=1, max_length=64),
    store: RecordStore = Depends(get_store),
    account_id: str = Depends(get_current_account),
):
    intern = get_owned_intern(store, owner_id=account_id, certificate_id=certificate_id)
    counts = store.verification_counts([intern.certificate_id])
    return intern_out(request, intern, counts.get(intern.certificate_id, 0))
