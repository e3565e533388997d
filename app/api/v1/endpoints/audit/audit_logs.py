from datetime import datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from app.api.dependencies import get_current_employee
from app.core.config import settings
from app.core.database import get_async_session
from app.models.auth.employee import Employee
from app.models.shared.enums import AuditStatus
from app.schemas.audit.audit_log import AuditLogEntry, AuditLogFilter
from app.schemas.common.pagination import PaginatedResponse
from app.services.audit.audit_log_service import AuditLogService

router = APIRouter()

@router.get("/", response_model=PaginatedResponse[AuditLogEntry])
async def get_audit_logs(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.AUDIT_LOG_PAGE_SIZE, ge=1, le=100),
    search: Optional[str] = Query(None),
    target_model: Optional[str] = Query(None),
    action_type: Optional[str] = Query(None),
    status: Optional[AuditStatus] = Query(None),
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    db: AsyncSession = Depends(get_async_session),
    current_employee: Employee = Depends(get_current_employee),
):
    """Audit trail, newest first, with human readable changes"""
    filters = AuditLogFilter(
        page=page,
        limit=limit,
        search=search,
        target_model=target_model,
        action_type=action_type,
        status=status,
        start_date=start_date,
        end_date=end_date,
    )
    service = AuditLogService(db)
    return await service.list_logs(filters)
