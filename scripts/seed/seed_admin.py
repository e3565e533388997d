"""
Dashboard seed data (async, idempotent)
- First administrator employee (permission "ALL")
- A starter category tree
Run:  python scripts/seed/seed_admin.py
"""

import os, sys
import asyncio
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import async_session_maker, engine
from app.core.security import create_access_token
from app.models.base import Base
from app.models.auth.employee import Employee
from app.models.catalog.category import Category
from app.models.shared.enums import Permission
from app.schemas.catalog.category import CategoryCreate
from app.services.catalog.category_service import CategoryService

# ----------------------------------------------------------------------
# SEED DATA
# ----------------------------------------------------------------------

ADMIN_SEED = {
    "name": "مدير النظام",
    "email": os.getenv("ADMIN_EMAIL", "admin@store.local"),
    "phone": "0500000000",
    "job_title": "مدير",
    "gender": "MALE",
    "permissions": [Permission.ALL.value],
    "is_active": True,
    "is_first_admin": True,
}

# (name, parent name)
CATEGORY_SEED = [
    ("إلكترونيات", None),
    ("هواتف", "إلكترونيات"),
    ("حواسيب", "إلكترونيات"),
    ("ملابس", None),
    ("رجالي", "ملابس"),
    ("نسائي", "ملابس"),
]

# ----------------------------------------------------------------------
# ASYNC HELPERS (idempotent upserts)
# ----------------------------------------------------------------------

async def get_or_create_admin(db: AsyncSession) -> Employee:
    result = await db.execute(select(Employee).where(Employee.email == ADMIN_SEED["email"]))
    obj = result.scalar_one_or_none()
    if obj:
        return obj
    obj = Employee(**ADMIN_SEED)
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    return obj

async def seed_categories(db: AsyncSession, admin: Employee) -> int:
    service = CategoryService(db, {"endpoint": "seed"})
    created = 0
    for name, parent_name in CATEGORY_SEED:
        existing = await db.execute(select(Category).where(Category.name == name, Category.is_deleted == False))
        if existing.scalar_one_or_none():
            continue
        parent_id = None
        if parent_name:
            parent = await db.execute(select(Category).where(Category.name == parent_name, Category.is_deleted == False))
            parent_id = parent.scalar_one().id
        await service.create_category(CategoryCreate(name=name, parent_id=parent_id), admin.id)
        created += 1
    return created

# ----------------------------------------------------------------------
# ASYNC ENTRY POINT
# ----------------------------------------------------------------------

async def main():
    # Create tables (safe if already created)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as db:
        try:
            admin = await get_or_create_admin(db)
            print(f"✓ Administrator ready: {admin.email}")
            created = await seed_categories(db, admin)
            print(f"✓ Categories created: {created}")
            print(f"🔑 Access token: {create_access_token(admin.id, admin.permissions)}")
            print("✅ Dashboard seed completed successfully!")
        except Exception as ex:
            await db.rollback()
            print(f"❌ Seed failed: {ex}")
            raise

if __name__ == "__main__":
    asyncio.run(main())
