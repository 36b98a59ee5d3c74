import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy.exc import IntegrityError
from starlette.requests import Request

from internify.api.v1.router import api_router, verify_router
from internify.core.config import settings
from internify.core.errors import (
    BatchError,
    CertificateNotFound,
    IdentityGenerationError,
    InternifyError,
    InternValidationError,
    PermissionDenied,
    RecordConflict,
    RecordNotFound,
    StorageUnavailable,
)
from internify.core.logging import setup_logging
from internify.db.bootstrap import run_migrations

setup_logging()
logger = logging.getLogger("internify")

api = FastAPI(
    title="Internify - Certificados de Estágio",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    swagger_ui_parameters={"displayRequestDuration": True, "persistAuthorization": True},
)

api.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# métricas /metrics (Prometheus)
Instrumentator().instrument(api).expose(api, include_in_schema=False, should_gzip=True)

api.include_router(api_router, prefix="/api/v1")
# link público impresso no certificado
api.include_router(verify_router, prefix="/verify", tags=["verify"])

@api.get("/healthz", tags=["health"])
def healthz():
    return {"status": "ok"}

@api.on_event("startup")
def startup():
    if settings.RUN_MIGRATIONS:
        run_migrations()

# ------------------------- erros -> envelope JSON -------------------------

_STATUS_BY_ERROR = (
    (InternValidationError, 422),
    (BatchError, 400),
    (CertificateNotFound, 404),
    (RecordNotFound, 404),
    (PermissionDenied, 403),
    (RecordConflict, 409),
    (StorageUnavailable, 503),
)

@api.exception_handler(InternifyError)
def handle_domain_error(request: Request, exc: InternifyError):
    status_code = next((code for cls, code in _STATUS_BY_ERROR if isinstance(exc, cls)), 500)
    if status_code >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    if isinstance(exc, IdentityGenerationError):
        logger.critical("certificate identity generation failed", exc_info=exc)
    return JSONResponse(status_code=status_code, content=exc.to_dict())

@api.exception_handler(IntegrityError)
def handle_integrity_error(request: Request, exc: IntegrityError):
    return JSONResponse(
        status_code=409,
        content={"code":"UNIQUE_VIOLATION","message":"Duplicate record.","details":str(getattr(exc, "orig", exc))}
    )

@api.exception_handler(Exception)
def handle_unexpected(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"code":"INTERNAL_ERROR","message":"Internal error.","details":str(exc)}
    )
