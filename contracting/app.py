"""Contracting Management API, FastAPI application.

REST API over an in-memory entity store: clients, projects, statements,
suppliers, employees, equipment and payments, plus dashboard
aggregations. All state is lost on restart.

Usage (local):
  uvicorn contracting.app:app --reload --port 4000
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__, deps, messages
from .config import ServiceConfig, get_config, setup_logging
from .errors import ApiError
from .middleware import RequestLoggingMiddleware
from .routers import (
    clients,
    dashboard,
    employees,
    equipment,
    payments,
    projects,
    statements,
    suppliers,
)
from .storage import create_store

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> tuple[int, str]:
    errors = exc.errors()
    # Non-numeric ids in the path behave like unknown ids
    if errors and all(err.get("loc", ("",))[0] == "path" for err in errors):
        return 404, messages.NOT_FOUND
    fields = sorted({str(err["loc"][-1]) for err in errors if err.get("loc")})
    return 400, f"{messages.INVALID_REQUEST}: {', '.join(fields)}"


def create_app(config: Optional[ServiceConfig] = None) -> FastAPI:
    """Build the application for ``config`` (defaults to the loaded config)."""
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize storage on startup."""
        store = create_store(config)
        deps.set_store(store)
        logger.info(f"Contracting API v{app.version} started")
        logger.info(f"Storage backend: {store.__class__.__name__}")
        yield
        deps.set_store(None)
        logger.info("Shutting down")

    app = FastAPI(
        title="Contracting Management API",
        description="Clients, projects, statements and site resources for a contracting company",
        version=__version__,
        lifespan=lifespan,
    )

    if config.logging.log_requests:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------------------------------------------------------------------------
    # Errors: every failure body is {"message": ...}
    # ---------------------------------------------------------------------------

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        status_code, message = _validation_message(exc)
        logger.warning(f"Rejected {request.method} {request.url.path}: {message}")
        return JSONResponse(status_code=status_code, content={"message": message})

    # ---------------------------------------------------------------------------
    # Routes
    # ---------------------------------------------------------------------------

    @app.get("/")
    async def root():
        return {"message": messages.API_RUNNING}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        store = deps.current_store()
        return {
            "status": "healthy" if store is not None else "starting",
            "service": "contracting-api",
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "storage": store.__class__.__name__ if store else "not initialized",
        }

    app.include_router(clients.router, prefix="/api/clients", tags=["Clients"])
    app.include_router(projects.router, prefix="/api/projects", tags=["Projects"])
    app.include_router(statements.router, prefix="/api/statements", tags=["Statements"])
    app.include_router(suppliers.router, prefix="/api/suppliers", tags=["Suppliers"])
    app.include_router(employees.router, prefix="/api/employees", tags=["Employees"])
    app.include_router(equipment.router, prefix="/api/equipment", tags=["Equipment"])
    app.include_router(payments.router, prefix="/api/payments", tags=["Payments"])
    app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])

    return app


setup_logging(get_config())
app = create_app()
