import time
import logging
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.request_context import HDR_REQUEST_ID

logger = logging.getLogger("access")

class LoggingMiddleware(BaseHTTPMiddleware):
    """Access log for dashboard requests; tags each request with a request id"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        request_id = request.headers.get(HDR_REQUEST_ID) or uuid4().hex
        request.state.request_id = request_id

        logger.info(
            f"🌐 [{request_id}] {request.method} {request.url.path} - "
            f"Client: {request.client.host if request.client else 'unknown'}"
        )

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"❌ [{request_id}] {request.method} {request.url.path} - "
                f"unhandled error after {time.time() - start_time:.4f}s"
            )
            raise

        process_time = time.time() - start_time
        employee = getattr(request.state, "current_employee", None)
        logger.info(
            f"✅ [{request_id}] {request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Employee: {employee.id if employee is not None else '-'} - "
            f"Time: {process_time:.4f}s"
        )

        response.headers["X-Process-Time"] = str(process_time)
        response.headers[HDR_REQUEST_ID] = request_id
        return response
