from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from app.db.base import BaseModel

class AuditLog(BaseModel):
    __tablename__ = "audit_logs"

    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    action_type = Column(String(100), nullable=False, index=True)  # e.g. "category.update"
    target_id = Column(Integer, nullable=True)
    target_model = Column(String(50), nullable=False, index=True)
    # {"field": {"old_value": ..., "new_value": ...}}
    changes = Column(JSON, nullable=False, default=dict)
    # "metadata" is reserved on declarative classes
    meta = Column("metadata", JSON, nullable=False, default=dict)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(Text, nullable=True)
    endpoint = Column(String(255), nullable=True)
    request_id = Column(String(100), nullable=True)
    status = Column(String(20), nullable=False, index=True)
    error_message = Column(Text, nullable=True)
    timestamp = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False, index=True)

    # Relationships
    employee = relationship("Employee")

    def __repr__(self):
        return f"<AuditLog {self.action_type} on {self.target_model}>"
