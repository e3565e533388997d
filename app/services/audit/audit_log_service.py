import logging
import math
from typing import Any, Dict, Optional

from sqlalchemy import and_, func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.models.auth.audit_log import AuditLog
from app.models.auth.employee import Employee
from app.models.shared.enums import AuditStatus, EntityKind
from app.schemas.audit.audit_log import AuditLogFilter
from app.services.audit.change_formatter import describe_action, format_change_set

logger = logging.getLogger(__name__)


class AuditLogService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def record(
        self,
        employee_id: int,
        action_type: str,
        target_model: EntityKind,
        target_id: Optional[int] = None,
        changes: Optional[Dict[str, Any]] = None,
        metadata: Optional[Dict[str, Any]] = None,
        status: AuditStatus = AuditStatus.SUCCESS,
        error_message: Optional[str] = None,
        context: Optional[Dict[str, Optional[str]]] = None,
        commit: bool = True,
    ) -> Optional[AuditLog]:
        """
        Append an audit entry. A failure to write the entry is logged and
        swallowed so the audited operation itself is not rolled back.
        """
        context = context or {}
        try:
            entry = AuditLog(
                employee_id=employee_id,
                action_type=action_type,
                target_id=target_id,
                target_model=EntityKind(target_model).value,
                changes=changes or {},
                meta=metadata or {},
                ip_address=context.get("ip_address"),
                user_agent=context.get("user_agent"),
                endpoint=context.get("endpoint"),
                request_id=context.get("request_id"),
                status=AuditStatus(status).value,
                error_message=error_message,
            )
            self.db.add(entry)
            if commit:
                await self.db.commit()
            return entry
        except Exception as e:
            logger.error(f"Error logging audit event {action_type}: {str(e)}")
            if commit:
                await self.db.rollback()
            return None

    def _filter_query(self, filters: AuditLogFilter):
        conditions = []
        if filters.target_model and filters.target_model != "all":
            conditions.append(AuditLog.target_model == filters.target_model)
        if filters.action_type:
            conditions.append(AuditLog.action_type == filters.action_type)
        if filters.status:
            conditions.append(AuditLog.status == AuditStatus(filters.status).value)
        if filters.start_date:
            conditions.append(AuditLog.timestamp >= filters.start_date)
        if filters.end_date:
            conditions.append(AuditLog.timestamp <= filters.end_date)

        query = select(AuditLog).outerjoin(Employee, AuditLog.employee_id == Employee.id)
        if filters.search:
            pattern = f"%{filters.search}%"
            conditions.append(
                or_(
                    Employee.name.ilike(pattern),
                    Employee.email.ilike(pattern),
                    AuditLog.action_type.ilike(pattern),
                )
            )
        if conditions:
            query = query.where(and_(*conditions))
        return query

    async def list_logs(self, filters: AuditLogFilter) -> Dict[str, Any]:
        """Filtered, newest-first page of audit entries with rendered changes"""
        query = self._filter_query(filters)

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.db.execute(count_query)).scalar() or 0

        skip = (filters.page - 1) * filters.limit
        result = await self.db.execute(
            query.options(selectinload(AuditLog.employee))
            .order_by(AuditLog.timestamp.desc(), AuditLog.id.desc())
            .offset(skip)
            .limit(filters.limit)
        )
        logs = result.scalars().all()

        total_pages = math.ceil(total / filters.limit) if total else 0
        return {
            "page_index": filters.page,
            "page_size": filters.limit,
            "count": total,
            "total_pages": total_pages,
            "has_next_page": filters.page < total_pages,
            "has_prev_page": filters.page > 1,
            "data": [self.format_log(log) for log in logs],
        }

    @staticmethod
    def format_log(log: AuditLog) -> Dict[str, Any]:
        employee = None
        if log.employee is not None:
            employee = {
                "id": log.employee.id,
                "name": log.employee.name,
                "email": log.employee.email,
                "job_title": log.employee.job_title,
            }
        return {
            "id": log.id,
            "employee": employee,
            "action_type": log.action_type,
            "action_label": describe_action(log.action_type),
            "target_id": log.target_id,
            "target_model": log.target_model,
            "changes": format_change_set(log.changes, log.target_model),
            "metadata": log.meta or {},
            "ip_address": log.ip_address,
            "user_agent": log.user_agent,
            "status": log.status,
            "error_message": log.error_message,
            "timestamp": log.timestamp,
        }
