from typing import Optional

from sqlalchemy import Column, Integer, DateTime, Boolean
from sqlalchemy.sql import func
from app.models.base import Base

class BaseModel(Base):
    """Common columns shared by every dashboard table (ids, timestamps, soft delete, authorship)"""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    is_deleted = Column(Boolean, default=False, nullable=False)
    created_by = Column(Integer, nullable=True)
    updated_by = Column(Integer, nullable=True)

    def touch(self, employee_id: Optional[int]) -> None:
        self.updated_by = employee_id

    def soft_delete(self, employee_id: Optional[int]) -> None:
        """Hide the row from every query that filters on is_deleted"""
        self.is_deleted = True
        if hasattr(self, "is_active"):
            self.is_active = False
        self.touch(employee_id)
