from fastapi import APIRouter
from app.api.v1.endpoints.audit import audit_logs
from app.api.v1.endpoints.auth import me
from app.api.v1.endpoints.catalog import categories

api_router = APIRouter()

# Dashboard routes
api_router.include_router(me.router, prefix="/dashboard", tags=["Session"])
api_router.include_router(categories.router, prefix="/dashboard/categories", tags=["Categories"])
api_router.include_router(audit_logs.router, prefix="/dashboard/audit-logs", tags=["Audit Logs"])
