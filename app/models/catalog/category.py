from sqlalchemy import Column, Integer, String, Boolean, Text, ForeignKey
from app.db.base import BaseModel

class Category(BaseModel):
    __tablename__ = 'categories'

    name = Column(String(150), nullable=False)
    slug = Column(String(180), nullable=False, unique=True, index=True)
    description = Column(Text)
    image = Column(String(500))
    is_active = Column(Boolean, default=True, nullable=False)
    parent_id = Column(Integer, ForeignKey('categories.id'), nullable=True, index=True)

    # Materialized ancestor chain ("1,4,9") and depth; maintained by the
    # category service, never written from request payloads
    path = Column(String(1000), nullable=False, default="", index=True)
    level = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Category {self.id} {self.name!r} level={self.level}>"
