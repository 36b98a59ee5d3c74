# internify/api/v1/router.py
from fastapi import APIRouter
from internify.api.v1 import (
    health,
    settings,
    interns,
    dashboard,
    verify,
)

api_router = APIRouter()

# -------- rotas públicas --------
api_router.include_router(health.router, tags=["health"])
api_router.include_router(verify.router, prefix="/verify", tags=["verify"])

# -------- rotas da conta autenticada --------
api_router.include_router(settings.router,  prefix="/settings",  tags=["settings"])
api_router.include_router(interns.router,   prefix="/interns",   tags=["interns"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])

# GET /verify/{certificate_id} (link impresso no certificado)
verify_router = verify.router
