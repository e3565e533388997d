from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict, Optional, Union
from app.api.dependencies import get_audit_context, require_permission
from app.core.config import settings
from app.core.database import get_async_session
from app.schemas.common.pagination import PaginatedResponse
from app.services.catalog.category_service import CategoryService
from app.schemas.catalog.category import (
    Category,
    CategoryCreate,
    CategoryDeleteResult,
    CategoryDetail,
    CategoryListItem,
    CategoryTree,
    CategoryUpdate,
)
from app.models.auth.employee import Employee
from app.core.exceptions import NotFoundError, ValidationError

router = APIRouter()

@router.get("/", response_model=Union[PaginatedResponse[CategoryListItem], CategoryTree])
async def get_categories(
    view: str = Query("table", pattern="^(table|tree)$"),
    page_index: int = Query(1, ge=1),
    page_size: int = Query(settings.CATEGORY_PAGE_SIZE, ge=1, le=1000),
    search: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_async_session),
    current_employee: Employee = Depends(require_permission("categories", "view")),
):
    """List categories as a paginated table or as a nested tree"""
    service = CategoryService(db)
    if view == "tree":
        return await service.get_category_tree()
    return await service.get_categories(page_index=page_index, page_size=page_size, search=search)

@router.post("/", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate,
    db: AsyncSession = Depends(get_async_session),
    current_employee: Employee = Depends(require_permission("categories", "create")),
    context: Dict = Depends(get_audit_context),
):
    """Create a new category"""
    try:
        service = CategoryService(db, context)
        return await service.create_category(category_data, current_employee.id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/{category_id}", response_model=CategoryDetail)
async def get_category(
    category_id: int,
    db: AsyncSession = Depends(get_async_session),
    current_employee: Employee = Depends(require_permission("categories", "view")),
):
    """Get category by ID with its breadcrumb and direct children"""
    try:
        service = CategoryService(db)
        return await service.get_category_detail(category_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Category not found")

@router.patch("/{category_id}", response_model=Category)
async def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    db: AsyncSession = Depends(get_async_session),
    current_employee: Employee = Depends(require_permission("categories", "edit")),
    context: Dict = Depends(get_audit_context),
):
    """Update category; moving it rebuilds the path of its subtree"""
    try:
        service = CategoryService(db, context)
        return await service.update_category(category_id, category_data, current_employee.id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Category not found")
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.delete("/{category_id}", response_model=CategoryDeleteResult)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_async_session),
    current_employee: Employee = Depends(require_permission("categories", "delete")),
    context: Dict = Depends(get_audit_context),
):
    """Delete category together with its subcategories (soft delete)"""
    try:
        service = CategoryService(db, context)
        deleted = await service.delete_category(category_id, current_employee.id)
        return {"message": "Category and subcategories deleted successfully", "deleted_count": deleted}
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Category not found")
