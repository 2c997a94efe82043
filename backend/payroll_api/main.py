import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from payroll_api.core.config import settings
from payroll_api.core.database import create_tables
from payroll_api.core.exceptions import DomainError, PersistenceError, ValidationError
from payroll_api.api.v1.employees import router as employees_router
from payroll_api.api.v1.payrolls import router as payrolls_router
from payroll_api.api.v1.thirteenth_month import router as thirteenth_month_router
from payroll_api.api.v1.frontend import router as frontend_router

logger = logging.getLogger(__name__)
logging.getLogger("payroll_api").setLevel(settings.LOG_LEVEL.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tabellen beim Start anlegen (keine Migrationen)
    await create_tables()
    yield


app = FastAPI(
    title="Payroll API",
    description="Employee records, payroll snapshots and 13th-month pay",
    version="1.0.0",
    lifespan=lifespan,
    # Swagger UI nur in Entwicklung
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Fehlerbehandlung: jede Antwort im Fehlerfall ist {"error": ...} ──────────

@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    if isinstance(exc, PersistenceError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.__cause__ or exc)
    content = {"error": exc.message}
    if isinstance(exc, ValidationError) and exc.errors:
        content["details"] = [{"field": e.field, "message": e.message} for e in exc.errors]
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        details.append({"field": ".".join(loc) or "body", "message": err.get("msg", "is invalid")})
    message = "; ".join(f"{d['field']}: {d['message']}" for d in details)
    return JSONResponse(status_code=400, content={"error": message, "details": details})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


API_PREFIX = "/api"

app.include_router(payrolls_router, prefix=API_PREFIX)
app.include_router(employees_router, prefix=API_PREFIX)
app.include_router(thirteenth_month_router, prefix=API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Payroll API", "version": "1.0.0"}


app.include_router(frontend_router)  # catch-all, muss zuletzt kommen
