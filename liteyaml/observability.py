"""Logging and metrics wiring shared by the HTTP service and the CLI."""
import logging
import sys
import time
from typing import IO, Optional

import structlog
from fastapi import FastAPI, Request
from prometheus_fastapi_instrumentator import Instrumentator

# health checks and metric scrapes are left out of the request metrics
_UNMETERED_PATHS = ["/metrics", "/health"]


def init_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> None:
    """Route structlog and stdlib records as JSON lines to *stream*.

    The service logs to stdout; the CLI passes ``sys.stderr`` so its stdout
    carries nothing but the JSON document it prints.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    logging.basicConfig(stream=stream or sys.stdout, level=numeric_level, format="%(message)s")
    logging.getLogger("liteyaml").setLevel(numeric_level)


def attach_instrumentation(app: FastAPI) -> None:
    Instrumentator(excluded_handlers=_UNMETERED_PATHS).instrument(app).expose(
        app, endpoint="/metrics", include_in_schema=False
    )

    @app.middleware("http")
    async def _latency(request: Request, call_next):
        start = time.perf_counter()
        resp = await call_next(request)
        if request.url.path in _UNMETERED_PATHS:
            return resp
        dur_ms = (time.perf_counter() - start) * 1000
        structlog.get_logger("request").info(
            "req",
            path=request.url.path,
            method=request.method,
            status=resp.status_code,
            bytes=request.headers.get("content-length"),
            duration_ms=round(dur_ms, 2),
        )
        return resp
