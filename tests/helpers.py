"""Helper functions for tests."""

from typing import Dict

from app.core.security import create_access_token
from app.models.auth.employee import Employee


def auth_headers(employee: Employee) -> Dict[str, str]:
    """Bearer header carrying a freshly signed token for the employee."""
    token = create_access_token(employee.id, employee.permissions)
    return {"Authorization": f"Bearer {token}"}
