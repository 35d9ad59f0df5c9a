"""
AgroFlow - FastAPI Backend
Main application entry point
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import traceback

from agroflow.api.v1.endpoints import auth, crops, dashboard, farmers, harvests, properties, property_crop_harvest
from agroflow.core.config import settings
from agroflow.core.database import engine, wait_for_warmup_complete, warmup_pool
from agroflow.core.exceptions import AppError
from agroflow.core.logging_setup import configure_logging, log_requests

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    warmup_pool()
    yield
    try:
        wait_for_warmup_complete(timeout=1.0)
        logger.info("Closing database connection pool...")
        engine.dispose(close=True)
        logger.info("Database connection pool closed successfully")
    except Exception as e:
        logger.error(f"Error closing database connections: {e}")


app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Backend API for AgroFlow - farmers, properties, harvests and crops",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials="*" not in settings.origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.middleware("http")(log_requests)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"statusCode": status_code, "message": message})


def _validation_message(error: dict) -> str:
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(location)
    if error.get("type") == "missing":
        return f"{field} must be provided"
    message = error.get("msg", "Invalid value")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{field}: {message}" if field else message


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """All failing fields in one 400 message"""
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "; ".join(_validation_message(error) for error in exc.errors()),
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


# Global exception handler for database connection errors
@app.exception_handler(OperationalError)
async def database_error_handler(request: Request, exc: OperationalError):
    error_msg = str(exc.orig) if hasattr(exc, "orig") else str(exc)
    logger.error(f"Database operational error: {error_msg}")
    return error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Database connection error. The service may be temporarily unavailable.",
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Log the full traceback, answer with a generic 500"""
    tb = traceback.format_exc()
    logger.error(f"Unhandled exception: {exc}\n{tb}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# Include routers
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(farmers.router, prefix=settings.API_PREFIX)
app.include_router(crops.router, prefix=settings.API_PREFIX)
app.include_router(harvests.router, prefix=settings.API_PREFIX)
app.include_router(property_crop_harvest.router, prefix=settings.API_PREFIX)
app.include_router(properties.router, prefix=settings.API_PREFIX)
app.include_router(dashboard.router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    return {
        "message": f"{settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Fast health check, no database round trip"""
    return {
        "status": "healthy",
        "service": "agroflow-api",
        "version": settings.APP_VERSION,
    }


@app.get("/health/detailed")
async def health_check_detailed():
    """Detailed health check with database connectivity test"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "service": "agroflow-api",
            "database": "connected",
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "service": "agroflow-api",
                "database": "disconnected",
            },
        )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
