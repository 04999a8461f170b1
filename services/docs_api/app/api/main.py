# app/api/main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from contextlib import asynccontextmanager

from common.docpub_common.config import settings
from common.docpub_common.logging.logger import get_logger
from services.docs_api.app.api.routers import auth_routes, documents_routes
from services.docs_api.app.common.error_codes import ErrorCodes
from services.docs_api.app.common.exceptions import AppException
from services.docs_api.app.common.observability.metrics import metrics, increment_counter

logger = get_logger("api.main")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin-allow-popups",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for startup and shutdown.
    """
    logger.info("Starting docpub API env=%s", settings.ENV)
    if not settings.GOOGLE_CLIENT_ID:
        logger.warning("GOOGLE_CLIENT_ID is not set; OAuth consent URLs will be rejected by Google")
    yield
    logger.info("Shutting down docpub API")


app = FastAPI(
    title="docpub API",
    description="Publishes rich-text markup as formatted Google Docs",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


def _route_label(request: Request) -> str:
    """Matched route template, so unknown paths share one series."""
    route = request.scope.get("route")
    return getattr(route, "path", "unmatched")


@app.middleware("http")
async def limit_body_and_secure_headers(request: Request, call_next):
    """Reject oversized bodies up front and stamp security headers on every response."""
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > settings.MAX_BODY_BYTES:
        logger.warning(
            "%s %s rejected: body of %s bytes",
            request.method,
            request.url.path,
            content_length,
            extra={"ka_code": ErrorCodes.PAYLOAD_TOO_LARGE}
        )
        response = JSONResponse(status_code=413, content={"error": "Request body too large"})
    else:
        response = await call_next(request)

    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)

    increment_counter(
        "api_requests_total",
        labels={"route": _route_label(request), "method": request.method, "status": str(response.status_code)}
    )
    return response


@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, extra={"ka_code": exc.code})
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("%s %s crashed", request.method, request.url.path, extra={"ka_code": ErrorCodes.INTERNAL_ERROR})
    return JSONResponse(status_code=500, content={"error": "Internal server error", "details": str(exc)})


# Include routers
app.include_router(auth_routes.router)
app.include_router(documents_routes.router)


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "service": "docpub-api",
        "status": "healthy",
        "version": settings.SERVICE_VERSION,
        "features": [
            "auth",
            "save-to-drive",
            "get-documents",
            "compile"
        ]
    }


@app.get("/health")
async def health():
    """
    Detailed health check endpoint.
    Reports whether the Google OAuth client is configured.
    """
    oauth_configured = bool(settings.GOOGLE_CLIENT_ID and settings.GOOGLE_CLIENT_SECRET)

    return {
        "service": "docpub-api",
        "status": "healthy" if oauth_configured else "degraded",
        "version": settings.SERVICE_VERSION,
        "checks": {
            "google_oauth": "configured" if oauth_configured else "missing",
            "api": "running"
        }
    }


@app.get("/metrics")
async def metrics_endpoint():
    """
    Prometheus metrics endpoint.

    Available metrics:
    - docpub_compile_total
    - docpub_compile_operations
    - docpub_google_requests_total
    - docpub_google_latency_ms
    - docpub_publish_total
    - docpub_api_requests_total
    """
    return Response(content=metrics.get_metrics_text(), media_type=metrics.get_content_type())
