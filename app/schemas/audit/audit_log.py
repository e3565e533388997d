from pydantic import BaseModel, Field
from typing import Dict, Any, Optional
from datetime import datetime

from app.models.shared.enums import AuditStatus

class AuditEmployee(BaseModel):
    id: int
    name: str
    email: str
    job_title: Optional[str] = None

    class Config:
        from_attributes = True

class FormattedChange(BaseModel):
    field: str
    old_value: str
    new_value: str

class AuditLogEntry(BaseModel):
    id: int
    employee: Optional[AuditEmployee] = None
    action_type: str
    action_label: str
    target_id: Optional[int] = None
    target_model: str
    changes: Dict[str, FormattedChange] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    status: AuditStatus
    error_message: Optional[str] = None
    timestamp: datetime

class AuditLogFilter(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    search: Optional[str] = None
    target_model: Optional[str] = None
    action_type: Optional[str] = None
    status: Optional[AuditStatus] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
