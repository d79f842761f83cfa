import logging
import time
from contextlib import contextmanager
from typing import Iterator
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

# Define metrics (names follow Prometheus conventions)
REQ_COUNT = Counter("http_requests_total", "Total HTTP requests", ["path","method","code"])
REQ_LATENCY = Histogram("http_request_duration_seconds", "Request latency", ["path","method"])
OP_LATENCY = Histogram(
    "geovaluate_operation_duration_seconds",
    "Wall-clock duration of analysis operations",
    ["operation", "outcome"],
)

class PromMiddleware(BaseHTTPMiddleware):
    """
    Measures latency and counts requests.
    """
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed = time.perf_counter() - start

        # Use raw path to prevent label explosion in a real app (consider templating)
        path = request.url.path
        method = request.method
        code = str(response.status_code)

        REQ_COUNT.labels(path=path, method=method, code=code).inc()
        REQ_LATENCY.labels(path=path, method=method).observe(elapsed)
        return response

@contextmanager
def track_duration(operation: str, **fields) -> Iterator[None]:
    """
    Scoped timer: records how long the block took, whether it raised or not.

        with track_duration("find_rera_listings", address=addr):
            ...

    Extra keyword fields are attached to the log record.
    """
    start = time.perf_counter()
    outcome = "error"
    try:
        yield
        outcome = "ok"
    finally:
        elapsed = time.perf_counter() - start
        OP_LATENCY.labels(operation=operation, outcome=outcome).observe(elapsed)
        logger.info(
            "%s finished (%s) in %.1f ms", operation, outcome, elapsed * 1000,
            extra={"operation": operation, "duration_ms": round(elapsed * 1000, 1), **fields},
        )

async def metrics_endpoint(request: Request):
    """
    GET /metrics, scraped by Prometheus.
    """
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
