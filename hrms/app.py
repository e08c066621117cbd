from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hrms.api.v1.employee_api import employee as employeeAPI
from hrms.core.config.database import DatabaseManager
from hrms.core.config.hrms_settings import HrmsSettings, get_settings
from hrms.core.middleware.request_logging import RequestLoggingMiddleware
from hrms.utils.exceptions import HrmsError
from hrms.utils.helpers import hrms_error_response
from hrms.utils.logger import Logger

app_logger = Logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    app_logger.info("Starting application...")
    # a DatabaseConnectionError here aborts startup
    await app.state.db_manager.connect()
    yield
    app.state.db_manager.close()
    app_logger.info("Shutting down application...")


def create_app(settings: HrmsSettings | None = None) -> FastAPI:
    """Create the HRMS FastAPI application"""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Employee records over MongoDB",
        version=settings.version,
        debug=settings.debug,
        docs_url="/api/docs",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_manager = DatabaseManager(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allowed_methods,
        allow_headers=settings.cors_allowed_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(HrmsError)
    async def hrms_exception_handler(request: Request, exc: HrmsError):
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            app_logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return hrms_error_response(exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        app_logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": getattr(request.state, "request_id", "unknown"),
            },
        )

    @app.get("/health")
    async def health_check():
        """
        Health check endpoint to verify API and database status.
        """
        database_up = await app.state.db_manager.ping()
        return JSONResponse(
            status_code=status.HTTP_200_OK
            if database_up
            else status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "ok" if database_up else "degraded",
                "database": "connected" if database_up else "disconnected",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    app.include_router(employeeAPI, prefix="/employee", tags=["Employee API's"])

    return app
