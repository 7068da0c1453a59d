import os
import json
import logging
import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("lagna.access")

# Set by the chart routes so the access log can tell degraded charts apart.
CHART_UNAVAILABLE_BODIES_HEADER = "X-Chart-Unavailable-Bodies"
CHART_GEOMETRY_HEADER = "X-Chart-Geometry"


def access_record(request: Request, status: int, headers, latency_ms: float) -> dict:
    record = {
        "ts": time.time(),
        "ip": request.client.host if request.client else None,
        "method": request.method,
        "endpoint": request.url.path,
        "status": status,
        "latency_ms": latency_ms,
    }
    unavailable = headers.get(CHART_UNAVAILABLE_BODIES_HEADER)
    if unavailable is not None:
        record["unavailable_bodies"] = int(unavailable)
        record["geometry"] = headers.get(CHART_GEOMETRY_HEADER)
    return record


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if os.getenv("LOGGING_ENABLED", "false").lower() != "true":
            return await call_next(request)

        start = time.time()
        response = await call_next(request)
        elapsed = round((time.time() - start) * 1000, 2)
        record = access_record(request, response.status_code, response.headers, elapsed)
        if record.get("unavailable_bodies") or record.get("geometry") not in (None, "ok"):
            logger.warning(json.dumps(record))
        else:
            logger.info(json.dumps(record))
        return response
