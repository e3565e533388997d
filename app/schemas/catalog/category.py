from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    image: Optional[str] = None
    parent_id: Optional[int] = None
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        v = " ".join(v.split())
        if not v:
            raise ValueError("Category name is required")
        return v

class CategoryCreate(CategoryBase):
    pass

class CategoryUpdate(BaseModel):
    """Partial update; send parent_id=null to move a category to the top level"""
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    image: Optional[str] = None
    parent_id: Optional[int] = None
    is_active: Optional[bool] = None

# Shallow reference used for parent/children to avoid deep recursion
class CategoryRef(BaseModel):
    id: int
    name: str
    slug: str
    parent_id: Optional[int] = None
    level: int = 0

    class Config:
        from_attributes = True

class Category(BaseModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    image: Optional[str] = None
    is_active: bool = True
    parent_id: Optional[int] = None
    path: str = ""
    level: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_by: Optional[int] = None
    updated_by: Optional[int] = None

    class Config:
        from_attributes = True

class CategoryListItem(Category):
    sub_categories_count: int = 0
    is_main_category: bool = True

class CategoryDetail(Category):
    ancestors: List[CategoryRef] = Field(default_factory=list)
    children: List[CategoryRef] = Field(default_factory=list)

class CategoryTreeNode(BaseModel):
    id: int
    name: str
    slug: str
    is_active: bool = True
    level: int = 0
    children: List["CategoryTreeNode"] = Field(default_factory=list)

class CategoryTree(BaseModel):
    categories: List[CategoryTreeNode]
    total: int

class CategoryDeleteResult(BaseModel):
    message: str
    deleted_count: int
