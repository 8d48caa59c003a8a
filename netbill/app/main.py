# netbill/app/main.py
from __future__ import annotations

import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from netbill.app.config import get_settings
from netbill.app.logging import get_logger, setup_logging
from netbill.billing.module import register as register_billing
from netbill.services.billing.date_math import Clock, SystemClock
from netbill.shared.errors import DomainError, InvalidAmount, InvalidDate, NotFoundError
from netbill.shared.request_context import set_request_context

log = get_logger("netbill.http")

_AMOUNT_FIELDS = {"amount", "monthly_price"}
_DATE_FIELDS = {"date", "billing_date", "service_start_date", "today", "issue_date"}


def _error_response(exc: DomainError) -> JSONResponse:
    status_code = 404 if isinstance(exc, NotFoundError) else 400
    return JSONResponse(
        status_code=status_code,
        content={"detail": {"message": exc.message, "code": exc.code, "details": exc.details}},
    )


def _domain_error_from_validation(exc: RequestValidationError) -> DomainError | None:
    """Błędy kwot i dat z parsowania body idą tym samym kontraktem co błędy z core (400)."""
    for err in exc.errors():
        loc = tuple(err.get("loc") or ())
        names = [str(p) for p in loc if isinstance(p, str) and p != "body"]
        if not names:
            continue
        field = ".".join(str(p) for p in loc[1:])
        details = {"field": field, "error": err.get("type")}
        if names[-1] in _AMOUNT_FIELDS:
            return InvalidAmount(message=f"Nieprawidłowa kwota: {field}", details=details)
        if names[-1] in _DATE_FIELDS:
            return InvalidDate(message=f"Nieprawidłowa albo brakująca data: {field}", details=details)
    return None


def create_app(*, clock: Clock | None = None) -> FastAPI:
    settings = get_settings()
    setup_logging(settings)

    app = FastAPI(title="netbill", version="0.1")
    # "dziś" dla statusów; testy podmieniają na FixedClock
    app.state.clock = clock or SystemClock()

    register_billing(app)

    # --- Request context (request-id) ---
    @app.middleware("http")
    async def request_context_mw(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        set_request_context(request_id=request_id, path=request.url.path)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = int((time.perf_counter() - started) * 1000)

        response.headers["x-request-id"] = request_id
        log.info(
            "request handled",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response

    # --- Domain errors -> 400/404 (bez pół-zapisów: core niczego nie mutuje) ---
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        log.warning("domain error", extra={"code": exc.code, "path": request.url.path})
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        domain_exc = _domain_error_from_validation(exc)
        if domain_exc is None:
            return await request_validation_exception_handler(request, exc)
        log.warning("domain error", extra={"code": domain_exc.code, "path": request.url.path})
        return _error_response(domain_exc)

    # --- Health ---
    @app.get("/health")
    def health():
        return {"status": "ok", "env": settings.env_name}

    return app


app = create_app()
