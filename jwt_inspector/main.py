import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import generate_latest

from .config import settings
from .crypto_backend import SUPPORTED_ALGORITHMS
from .logging_setup import setup_logging
from .metrics import HTTP_REQUESTS_TOTAL, HTTP_REQUEST_LATENCY_SECONDS
from .routes_decode import TokenRejected, router as decode_router
from .routes_verify import router as verify_router
from .schemas import ErrorResponse

setup_logging()

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Decode JWTs and verify HS/RS/ES signatures.",
)

app.include_router(decode_router)
app.include_router(verify_router)


@app.exception_handler(TokenRejected)
async def token_rejected_handler(request: Request, exc: TokenRejected) -> JSONResponse:
    body = ErrorResponse(error=exc.error, reason=exc.reason, detail=exc.detail)
    return JSONResponse(body.model_dump(), status_code=exc.status_code)


@app.middleware("http")
async def prometheus_middleware(request: Request, call_next):
    path = request.url.path
    method = request.method

    HTTP_REQUESTS_TOTAL.labels(method=method, path=path).inc()

    start = time.perf_counter()
    try:
        response = await call_next(request)
        return response
    finally:
        elapsed = time.perf_counter() - start
        HTTP_REQUEST_LATENCY_SECONDS.labels(path=path).observe(elapsed)


@app.get("/metrics", response_class=PlainTextResponse, tags=["internal"])
def metrics():
    # Prometheus scraping endpoint
    return PlainTextResponse(generate_latest().decode("utf-8"))


@app.get("/health", tags=["internal"])
def health():
    return {
        "status": "ok",
        "component": "jwt-inspector",
        "environment": settings.environment,
        "algorithms": sorted(SUPPORTED_ALGORITHMS),
    }
