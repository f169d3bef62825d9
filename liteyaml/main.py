"""FastAPI entrypoint for the YAML parsing service."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from liteyaml.app.routers import parse as parse_router
from liteyaml.observability import attach_instrumentation, init_logging
from liteyaml.settings import settings

app = FastAPI(title="Lite YAML API", version="0.1.0")

# ---- Rate limiting ----
_rate_limit = (
    f"{settings.RATE_LIMIT_REQUESTS}/{settings.RATE_LIMIT_WINDOW_SECONDS} seconds"
)
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[_rate_limit],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


class UploadSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject documents larger than the configured cap before reading them."""

    def __init__(self, app, max_bytes: int):
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request: Request, call_next):
        cl = request.headers.get("content-length")
        # multipart framing adds a little on top of the document itself
        if cl and cl.isdigit() and int(cl) > self.max_bytes + 64 * 1024:
            return JSONResponse(status_code=413, content={"detail": "Payload too large"})
        return await call_next(request)


app.add_middleware(UploadSizeLimitMiddleware, max_bytes=settings.MAX_UPLOAD_BYTES)

init_logging(settings.LOG_LEVEL)
attach_instrumentation(app)

# Configure CORS differently for production vs development.
def _resolve_cors_origins() -> list[str]:
    if settings.ENVIRONMENT != "production":
        return ["*"]
    if not settings.ALLOWED_CORS_ORIGINS:
        raise RuntimeError(
            "ALLOWED_ORIGINS must be set when ENVIRONMENT=production"
        )
    return settings.ALLOWED_CORS_ORIGINS


app.add_middleware(
    CORSMiddleware,
    allow_origins=_resolve_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


@app.get("/health", tags=["ops"])
def health() -> dict[str, object]:
    """Simple readiness check."""
    return {
        "status": "ok",
        "max_depth": settings.YAML_MAX_DEPTH,
        "max_upload_bytes": settings.MAX_UPLOAD_BYTES,
    }


app.include_router(parse_router.router, prefix="/api")

__all__ = ["app", "limiter"]
