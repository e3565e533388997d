import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import and_, func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.config import settings
from app.core.exceptions import CategoryHierarchyError, NotFoundError, ValidationError
from app.models.catalog.category import Category
from app.models.shared.enums import AuditAction, AuditStatus, EntityKind
from app.schemas.catalog.category import CategoryCreate, CategoryUpdate
from app.services.audit.audit_log_service import AuditLogService
from app.services.catalog.category_hierarchy import (
    ancestor_ids,
    build_tree,
    rebuild_descendants,
    reparent,
    subtree_ids,
)
from app.utils.slugify import slugify

logger = logging.getLogger(__name__)

AUDITED_FIELDS = ("name", "slug", "description", "image", "is_active", "parent_id", "path", "level")


def _action(action: AuditAction) -> str:
    return f"category.{action.value}"


class CategoryService:
    def __init__(self, db: AsyncSession, context: Optional[Dict[str, Optional[str]]] = None):
        self.db = db
        self.context = context or {}
        self.audit = AuditLogService(db)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def get_category_by_id(self, category_id: int) -> Optional[Category]:
        result = await self.db.execute(
            select(Category).where(and_(Category.id == category_id, Category.is_deleted == False))
        )
        return result.scalar_one_or_none()

    async def _all_categories(self) -> List[Category]:
        result = await self.db.execute(
            select(Category).where(Category.is_deleted == False)
        )
        return list(result.scalars().all())

    async def _name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        query = select(Category.id).where(
            and_(func.lower(Category.name) == name.lower(), Category.is_deleted == False)
        )
        if exclude_id is not None:
            query = query.where(Category.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def _unique_slug(self, name: str, exclude_id: Optional[int] = None) -> str:
        base = slugify(name)
        candidate = base
        suffix = 2
        while True:
            query = select(Category.id).where(Category.slug == candidate)
            if exclude_id is not None:
                query = query.where(Category.id != exclude_id)
            if (await self.db.execute(query.limit(1))).scalar_one_or_none() is None:
                return candidate
            candidate = f"{base}-{suffix}"
            suffix += 1

    async def _reject(
        self,
        action: AuditAction,
        employee_id: int,
        message: str,
        target_id: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """Record a failed mutation and raise it as a ValidationError"""
        logger.warning(f"Rejected {_action(action)} by employee {employee_id}: {message}")
        await self.audit.record(
            employee_id=employee_id,
            action_type=_action(action),
            target_model=EntityKind.CATEGORY,
            target_id=target_id,
            metadata=metadata,
            status=AuditStatus.FAILURE,
            error_message=message,
            context=self.context,
        )
        raise ValidationError(message)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create_category(self, category_data: CategoryCreate, current_employee_id: int) -> Category:
        name = category_data.name
        if await self._name_taken(name):
            await self._reject(
                AuditAction.CREATE, current_employee_id,
                "Category name already exists", metadata={"category_name": name},
            )

        category = Category(
            name=name,
            slug=await self._unique_slug(name),
            description=category_data.description,
            image=category_data.image,
            is_active=category_data.is_active,
            created_by=current_employee_id,
        )
        try:
            await reparent(category, category_data.parent_id, self.get_category_by_id)
        except CategoryHierarchyError as e:
            await self._reject(
                AuditAction.CREATE, current_employee_id, str(e),
                metadata={"category_name": name, "parent_id": category_data.parent_id},
            )

        self.db.add(category)
        await self.db.flush()

        changes = {
            field: {"old_value": None, "new_value": getattr(category, field)}
            for field in AUDITED_FIELDS
        }
        await self.audit.record(
            employee_id=current_employee_id,
            action_type=_action(AuditAction.CREATE),
            target_model=EntityKind.CATEGORY,
            target_id=category.id,
            changes=changes,
            metadata={"category_name": category.name, "is_main_category": category.parent_id is None},
            context=self.context,
            commit=False,
        )
        await self.db.commit()
        await self.db.refresh(category)
        logger.info(f"Category {category.id} ({category.name}) created by employee {current_employee_id}")
        return category

    async def update_category(
        self,
        category_id: int,
        category_data: CategoryUpdate,
        current_employee_id: int,
    ) -> Category:
        category = await self.get_category_by_id(category_id)
        if not category:
            raise NotFoundError("Category not found")

        updates = category_data.model_dump(exclude_unset=True)
        before = {field: getattr(category, field) for field in AUDITED_FIELDS}

        # Validate everything before touching the instance
        new_name = updates.get("name")
        if new_name is not None:
            new_name = " ".join(new_name.split())
            if not new_name:
                await self._reject(AuditAction.UPDATE, current_employee_id,
                                   "Category name is required", target_id=category.id)
            if new_name.lower() != category.name.lower() and await self._name_taken(new_name, category.id):
                await self._reject(AuditAction.UPDATE, current_employee_id,
                                   "Category name already exists", target_id=category.id,
                                   metadata={"category_name": new_name})

        descendants_updated = 0
        if "parent_id" in updates and updates["parent_id"] != category.parent_id:
            try:
                await reparent(category, updates["parent_id"], self.get_category_by_id)
            except CategoryHierarchyError as e:
                await self._reject(AuditAction.UPDATE, current_employee_id, str(e),
                                   target_id=category.id,
                                   metadata={"category_name": category.name,
                                             "parent_id": updates["parent_id"]})
            if settings.CATEGORY_CASCADE_ON_REPARENT:
                moved = rebuild_descendants(category, await self._all_categories())
                for child in moved:
                    child.touch(current_employee_id)
                descendants_updated = len(moved)

        if new_name is not None and new_name != category.name:
            category.name = new_name
            category.slug = await self._unique_slug(new_name, exclude_id=category.id)
        for field in ("description", "image", "is_active"):
            if field in updates and (field != "is_active" or updates[field] is not None):
                setattr(category, field, updates[field])
        category.touch(current_employee_id)

        changes = {}
        for field in AUDITED_FIELDS:
            after = getattr(category, field)
            if before[field] != after:
                changes[field] = {"old_value": before[field], "new_value": after}

        await self.audit.record(
            employee_id=current_employee_id,
            action_type=_action(AuditAction.UPDATE),
            target_model=EntityKind.CATEGORY,
            target_id=category.id,
            changes=changes,
            metadata={
                "category_name": category.name,
                "changed_fields": sorted(updates.keys()),
                "descendants_updated": descendants_updated,
            },
            context=self.context,
            commit=False,
        )
        await self.db.commit()
        await self.db.refresh(category)
        logger.info(
            f"Category {category.id} updated by employee {current_employee_id} "
            f"({', '.join(changes) or 'no changes'}; {descendants_updated} descendants moved)"
        )
        return category

    async def delete_category(self, category_id: int, current_employee_id: int) -> int:
        """Soft delete the category and its whole subtree; returns how many were removed"""
        category = await self.get_category_by_id(category_id)
        if not category:
            raise NotFoundError("Category not found")

        categories = await self._all_categories()
        ids = subtree_ids(category.id, categories)
        doomed = set(ids)
        for node in categories:
            if node.id in doomed:
                node.soft_delete(current_employee_id)

        await self.audit.record(
            employee_id=current_employee_id,
            action_type=_action(AuditAction.DELETE),
            target_model=EntityKind.CATEGORY,
            target_id=category.id,
            changes={
                "name": {"old_value": category.name, "new_value": None},
                "deleted_subcategories": {"old_value": None, "new_value": len(ids) - 1},
            },
            metadata={"category_name": category.name, "total_deleted": len(ids)},
            context=self.context,
            commit=False,
        )
        await self.db.commit()
        logger.info(f"Category {category.id} and {len(ids) - 1} subcategories deleted by employee {current_employee_id}")
        return len(ids)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_categories(
        self,
        page_index: int = 1,
        page_size: int = settings.CATEGORY_PAGE_SIZE,
        search: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Get categories with pagination; top-level categories come first"""
        query = select(Category).where(Category.is_deleted == False)
        if search:
            query = query.where(
                or_(
                    Category.name.ilike(f"%{search}%"),
                    Category.description.ilike(f"%{search}%"),
                )
            )

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.db.execute(count_query)).scalar() or 0

        skip = (page_index - 1) * page_size
        result = await self.db.execute(
            query.order_by(
                Category.parent_id.is_(None).desc(),
                Category.created_at.desc(),
                Category.id.desc(),
            )
            .offset(skip)
            .limit(page_size)
        )
        categories = result.scalars().all()

        counts = await self._sub_category_counts([c.id for c in categories])
        data = [
            {
                **self.serialize(category),
                "sub_categories_count": counts.get(category.id, 0),
                "is_main_category": category.parent_id is None,
            }
            for category in categories
        ]
        total_pages = -(-total // page_size) if total else 0
        return {
            "page_index": page_index,
            "page_size": page_size,
            "count": total,
            "total_pages": total_pages,
            "has_next_page": page_index < total_pages,
            "has_prev_page": page_index > 1,
            "data": data,
        }

    async def _sub_category_counts(self, parent_ids: List[int]) -> Dict[int, int]:
        if not parent_ids:
            return {}
        result = await self.db.execute(
            select(Category.parent_id, func.count(Category.id))
            .where(and_(Category.parent_id.in_(parent_ids), Category.is_deleted == False))
            .group_by(Category.parent_id)
        )
        return {parent_id: count for parent_id, count in result.all()}

    async def get_category_tree(self) -> Dict[str, Any]:
        categories = sorted(await self._all_categories(), key=lambda c: (c.name or "").lower())
        tree = build_tree(
            categories,
            lambda c: {"id": c.id, "name": c.name, "slug": c.slug, "is_active": c.is_active, "level": c.level},
        )
        return {"categories": tree, "total": len(categories)}

    async def get_ancestors(self, category: Category) -> List[Category]:
        """Breadcrumb from the stored path, root first; deleted ancestors are skipped"""
        ids = [int(part) for part in ancestor_ids(category.path)]
        if not ids:
            return []
        result = await self.db.execute(
            select(Category).where(and_(Category.id.in_(ids), Category.is_deleted == False))
        )
        by_id = {c.id: c for c in result.scalars().all()}
        return [by_id[i] for i in ids if i in by_id]

    async def get_category_detail(self, category_id: int) -> Dict[str, Any]:
        category = await self.get_category_by_id(category_id)
        if not category:
            raise NotFoundError("Category not found")

        ancestors = await self.get_ancestors(category)
        result = await self.db.execute(
            select(Category)
            .where(and_(Category.parent_id == category.id, Category.is_deleted == False))
            .order_by(Category.name)
        )
        children = result.scalars().all()

        return {
            **self.serialize(category),
            "ancestors": [self.serialize(c) for c in ancestors],
            "children": [self.serialize(c) for c in children],
        }

    @staticmethod
    def serialize(category: Category) -> Dict[str, Any]:
        return {
            "id": category.id,
            "name": category.name,
            "slug": category.slug,
            "description": category.description,
            "image": category.image,
            "is_active": category.is_active,
            "parent_id": category.parent_id,
            "path": category.path,
            "level": category.level,
            "created_at": category.created_at,
            "updated_at": category.updated_at,
            "created_by": category.created_by,
            "updated_by": category.updated_by,
        }
