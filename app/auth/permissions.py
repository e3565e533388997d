# app/auth/permissions.py
# Employee permissions are flat strings such as "categories.edit"; "ALL"
# marks a full administrator.

from typing import Iterable, List, Optional
import logging

from app.core.exceptions import PermissionDeniedError
from app.models.shared.enums import DASHBOARD_SECTIONS, Permission

logger = logging.getLogger(__name__)


class PermissionChecker:
    """
    Check an employee's permission strings
    """

    def __init__(self, employee_permissions: Optional[Iterable[str]]):
        self.permissions = set(employee_permissions or [])
        logger.debug(f"PermissionChecker initialized with {len(self.permissions)} permissions")

    @property
    def is_admin(self) -> bool:
        return Permission.ALL.value in self.permissions

    def can(self, section: str, action: str) -> bool:
        """
        Check if employee can perform action in a dashboard section

        Examples:
            can("categories", "edit")
        """
        permission_key = format_permission_name(section, action)
        if self.is_admin:
            logger.debug(f"Permission granted: {permission_key} (via ALL)")
            return True
        if permission_key in self.permissions:
            logger.debug(f"Permission granted: {permission_key}")
            return True
        logger.debug(f"Permission denied: {permission_key}")
        return False

    def cannot(self, section: str, action: str) -> bool:
        return not self.can(section, action)

    def require(self, section: str, action: str, custom_message: Optional[str] = None):
        """
        Require permission or raise PermissionDeniedError
        """
        if self.cannot(section, action):
            raise PermissionDeniedError(
                custom_message or f"Permission denied: {format_permission_name(section, action)} required"
            )


def allowed_sections(permissions: Optional[Iterable[str]]) -> List[str]:
    """
    Dashboard sections the employee may open: every section for ALL,
    otherwise each section the employee holds a ``.view`` permission for
    """
    permissions = list(permissions or [])
    if Permission.ALL.value in permissions:
        return list(DASHBOARD_SECTIONS)
    sections = {
        perm.split(".", 1)[0]
        for perm in permissions
        if perm.endswith(".view")
    }
    return [section for section in DASHBOARD_SECTIONS if section in sections]


def format_permission_name(section: str, action: str) -> str:
    return f"{section}.{action}"
