from typing import Dict, Optional
from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from app.core.database import get_async_session
from app.core.request_context import get_request_context
from app.auth.jwt_handler import decode_access_token
from app.auth.permissions import PermissionChecker
from app.models.auth.employee import Employee
import logging

security = HTTPBearer()
logger = logging.getLogger(__name__)

def _unauthorized(detail: str = "Invalid authentication credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

async def get_current_employee(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
    session: AsyncSession = Depends(get_async_session)
) -> Employee:
    """Get current authenticated employee"""
    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise _unauthorized()

    try:
        employee_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise _unauthorized()

    result = await session.execute(
        select(Employee).where(Employee.id == employee_id, Employee.is_deleted == False)
    )
    employee = result.scalar_one_or_none()
    if employee is None or not employee.is_active:
        raise _unauthorized("Employee not found or inactive")

    # Permissions are read from the database so revocations apply immediately
    request.state.current_employee = employee
    request.state.employee_permissions = list(employee.permissions or [])
    return employee

def get_permission_checker_dependency(request: Request) -> PermissionChecker:
    """
    Permission checker for the employee set in request.state by get_current_employee
    """
    return PermissionChecker(getattr(request.state, "employee_permissions", []))

def require_permission(section: str, action: str):
    """
    Dependency to require specific permission for an endpoint

    Examples:
        require_permission("categories", "edit")      # categories.edit
    """
    async def permission_dependency(
        request: Request,
        current_employee: Employee = Depends(get_current_employee)
    ) -> Employee:
        checker = get_permission_checker_dependency(request)
        if checker.cannot(section, action):
            logger.info(f"Employee {current_employee.id} denied {section}.{action}")
        checker.require(section, action)
        return current_employee

    return permission_dependency

def get_audit_context(request: Request) -> Dict[str, Optional[str]]:
    return get_request_context(request)
