# app/main.py
import logging
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from app.core.config import get_settings, Settings
from app.core.logging_config import setup_logging
from app.db import EmployeeStore
from app.exceptions import EmployeeServiceError, MissingBodyError, NotFoundError, ValidationError
from app.routers import employees, system
from app.seed import seed_employees
from app.services import EmployeeService

logger = logging.getLogger("app")

tags_metadata = [
    {"name": "System", "description": "Service health and metadata."},
    {"name": "Employees", "description": "CRUD over in-memory employee records."},
]

STATUS_BY_ERROR = {
    MissingBodyError: status.HTTP_400_BAD_REQUEST,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


async def service_error_handler(request: Request, exc: EmployeeServiceError):
    code = STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(status_code=code, content={"detail": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed JSON, wrong field types, bad UUID in the path
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        openapi_tags=tags_metadata,
    )

    store = EmployeeStore()
    app.state.settings = settings
    app.state.employee_service = EmployeeService(store)
    if settings.SEED_DEMO_DATA:
        seed_employees(app.state.employee_service, settings.seed_path)

    for error_cls in STATUS_BY_ERROR:
        app.add_exception_handler(error_cls, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Redirect "/" -> "/docs"
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")
    app.include_router(system.router, prefix=settings.API_PREFIX)
    app.include_router(employees.router, prefix=settings.API_PREFIX)
    log_routes(app.routes)
    return app


def log_routes(routes) -> int:
    """Log each route at DEBUG; entries without a path (mounted routers) are skipped."""
    logged = 0
    for r in routes:
        path = getattr(r, "path", None)
        if path is None:
            continue
        logger.debug("route %s %s", path, sorted(getattr(r, "methods", None) or []))
        logged += 1
    return logged

app = create_app()
