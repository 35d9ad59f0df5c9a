"""Logging setup and per-request access log"""
import logging
import logging.config
import time
import uuid

from fastapi import Request

logger = logging.getLogger("agroflow.http")

REQUEST_ID_HEADER = "X-Request-ID"


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "agroflow": {"handlers": ["console"], "level": level.upper(), "propagate": False},
            },
        }
    )


async def log_requests(request: Request, call_next):
    """HTTP middleware: one line per request, never including headers or bodies"""
    correlation_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request.state.correlation_id = correlation_id
    start = time.perf_counter()

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers[REQUEST_ID_HEADER] = correlation_id
        return response
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        user = getattr(request.state, "user", None)
        caller = f" user={user.id} role={user.role}" if user else ""
        message = (
            f"{request.method} {request.url.path} -> {status_code} "
            f"({duration_ms:.1f} ms) request_id={correlation_id}{caller}"
        )
        if status_code >= 500:
            logger.error(message)
        elif status_code >= 400:
            logger.warning(message)
        else:
            logger.info(message)
