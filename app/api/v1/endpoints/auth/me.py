from fastapi import APIRouter, Depends
from app.api.dependencies import get_current_employee, get_permission_checker_dependency
from app.auth.permissions import PermissionChecker, allowed_sections
from app.models.auth.employee import Employee
from app.schemas.auth.session import CurrentEmployee

router = APIRouter()

@router.get("/me", response_model=CurrentEmployee)
async def get_current_employee_info(
    current_employee: Employee = Depends(get_current_employee),
    checker: PermissionChecker = Depends(get_permission_checker_dependency),
):
    """Current employee with the dashboard sections their permissions open"""
    permissions = sorted(checker.permissions)
    return {
        "id": current_employee.id,
        "name": current_employee.name,
        "email": current_employee.email,
        "job_title": current_employee.job_title,
        "avatar": current_employee.avatar,
        "permissions": permissions,
        "is_admin": checker.is_admin,
        "sections": allowed_sections(permissions),
    }
