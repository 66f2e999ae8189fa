"""
CBS Backend: FastAPI Application.

This is the entry point for the application.
All routers are registered here, under /api.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from cbs_backend.config import get_settings
from cbs_backend.api.health import router as health_router
from cbs_backend.api.customers import router as customers_router
from cbs_backend.api.accounts import router as accounts_router
from cbs_backend.api.transactions import router as transactions_router
from cbs_backend.api.audit import router as audit_router
from cbs_backend.middleware.logging import configure_logging, logging_middleware

settings = get_settings()
configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Core banking demo API over customers, accounts and transactions",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(logging_middleware)


# --- Error responses ---
# Every error body has the same shape: {"success": false, "error": "..."}

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = [
        f"{'.'.join(str(part) for part in err['loc'] if part != 'body')}: {err['msg']}"
        for err in exc.errors()
    ]
    return error_response(400, "; ".join(messages) or "Invalid request body")


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(500, str(getattr(exc, "orig", None) or exc))


# Register routers
app.include_router(health_router, prefix="/api")
app.include_router(customers_router, prefix="/api")
app.include_router(accounts_router, prefix="/api")
app.include_router(transactions_router, prefix="/api")
app.include_router(audit_router, prefix="/api")
