from typing import Optional, Dict
from fastapi import Request

# Header names set by the dashboard / reverse proxy
HDR_REQUEST_ID = "X-Request-Id"
HDR_FORWARDED_FOR = "X-Forwarded-For"

def get_request_context(request: Request) -> Dict[str, Optional[str]]:
    """
    Extracts endpoint, client IP, user-agent and request_id from the FastAPI Request.
    - The first X-Forwarded-For hop wins over the socket peer address.
    """
    forwarded = request.headers.get(HDR_FORWARDED_FOR)
    if forwarded:
        ip_address = forwarded.split(",")[0].strip()
    else:
        ip_address = request.client.host if request.client else None
    return {
        "ip_address": ip_address,
        "user_agent": request.headers.get("user-agent"),
        "endpoint": f"{request.method} {request.url.path}",
        "request_id": request.headers.get(HDR_REQUEST_ID) or getattr(request.state, "request_id", None),
    }
