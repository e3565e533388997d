from sqlalchemy import Column, String, Boolean, JSON, DateTime
from app.db.base import BaseModel

class Employee(BaseModel):
    __tablename__ = "employees"

    name = Column(String(150), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    phone = Column(String(30))
    job_title = Column(String(150))
    gender = Column(String(10))
    avatar = Column(String(500))
    # Permission strings such as "categories.edit"; "ALL" grants everything
    permissions = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, default=True, nullable=False)
    is_first_admin = Column(Boolean, default=False, nullable=False)
    last_login_at = Column(DateTime(timezone=True))

    def __repr__(self):
        return f"<Employee {self.email}>"
