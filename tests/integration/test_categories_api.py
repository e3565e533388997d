"""HTTP tests for the category and audit log dashboard routes."""

import pytest

from app.core.config import settings
from app.models.shared.enums import DASHBOARD_SECTIONS

from tests.helpers import auth_headers

CATEGORIES_URL = "/api/v1/dashboard/categories/"
AUDIT_LOGS_URL = "/api/v1/dashboard/audit-logs/"


async def _post(client, headers, name, parent_id=None):
    response = await client.post(
        CATEGORIES_URL, json={"name": name, "parent_id": parent_id}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
class TestAuthentication:
    async def test_invalid_token(self, client):
        response = await client.get(CATEGORIES_URL, headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401

    async def test_viewer_cannot_create(self, client, viewer):
        response = await client.post(CATEGORIES_URL, json={"name": "Toys"}, headers=auth_headers(viewer))
        assert response.status_code == 403

    async def test_viewer_can_list(self, client, viewer):
        response = await client.get(CATEGORIES_URL, headers=auth_headers(viewer))
        assert response.status_code == 200
        assert response.json()["count"] == 0
        assert response.json()["page_size"] == settings.CATEGORY_PAGE_SIZE


@pytest.mark.asyncio
class TestCategoryRoutes:
    async def test_crud_flow(self, client, admin):
        headers = auth_headers(admin)
        root = await _post(client, headers, "Electronics")
        child = await _post(client, headers, "Phones", root["id"])
        assert child["path"] == str(root["id"])
        assert child["level"] == 1

        response = await client.get(f"{CATEGORIES_URL}{child['id']}", headers=headers)
        assert response.status_code == 200
        assert [a["name"] for a in response.json()["ancestors"]] == ["Electronics"]

        response = await client.patch(
            f"{CATEGORIES_URL}{child['id']}", json={"parent_id": None}, headers=headers
        )
        assert response.status_code == 200
        assert response.json()["level"] == 0

        response = await client.delete(f"{CATEGORIES_URL}{root['id']}", headers=headers)
        assert response.status_code == 200
        assert response.json()["deleted_count"] == 1

        response = await client.get(f"{CATEGORIES_URL}{root['id']}", headers=headers)
        assert response.status_code == 404

    async def test_duplicate_name(self, client, admin):
        headers = auth_headers(admin)
        await _post(client, headers, "Toys")
        response = await client.post(CATEGORIES_URL, json={"name": " TOYS "}, headers=headers)
        assert response.status_code == 400

    async def test_cycle_is_rejected(self, client, admin):
        headers = auth_headers(admin)
        root = await _post(client, headers, "Electronics")
        child = await _post(client, headers, "Phones", root["id"])

        response = await client.patch(
            f"{CATEGORIES_URL}{root['id']}", json={"parent_id": child["id"]}, headers=headers
        )
        assert response.status_code == 400

        response = await client.get(f"{CATEGORIES_URL}{root['id']}", headers=headers)
        assert response.json()["parent_id"] is None

    async def test_tree_view(self, client, admin):
        headers = auth_headers(admin)
        root = await _post(client, headers, "Electronics")
        await _post(client, headers, "Phones", root["id"])

        response = await client.get(CATEGORIES_URL, params={"view": "tree"}, headers=headers)
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert body["categories"][0]["children"][0]["name"] == "Phones"

    async def test_update_unknown_category(self, client, admin):
        response = await client.patch(
            f"{CATEGORIES_URL}999", json={"name": "Ghost"}, headers=auth_headers(admin)
        )
        assert response.status_code == 404


@pytest.mark.asyncio
class TestAuditLogRoutes:
    async def test_entries_are_localized(self, client, admin):
        headers = auth_headers(admin)
        await _post(client, headers, "Books")

        response = await client.get(AUDIT_LOGS_URL, headers=headers)
        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        entry = body["data"][0]
        assert entry["action_label"] == "إضافة تصنيف"
        assert entry["employee"]["name"] == "Admin User"
        assert entry["changes"]["name"]["field"] == "الاسم"
        assert entry["changes"]["name"]["new_value"] == "Books"
        assert entry["changes"]["is_active"]["new_value"] == "نشط"

    async def test_filter_by_status(self, client, admin):
        headers = auth_headers(admin)
        await _post(client, headers, "Books")
        await client.post(CATEGORIES_URL, json={"name": "books"}, headers=headers)

        response = await client.get(AUDIT_LOGS_URL, params={"status": "failure"}, headers=headers)
        body = response.json()
        assert body["count"] == 1
        assert body["data"][0]["error_message"] == "Category name already exists"

    async def test_requires_authentication(self, client):
        response = await client.get(AUDIT_LOGS_URL, headers={"Authorization": "Bearer bogus"})
        assert response.status_code == 401


@pytest.mark.asyncio
class TestRequestTracing:
    async def test_request_id_is_echoed(self, client, viewer):
        response = await client.get(
            CATEGORIES_URL, headers={**auth_headers(viewer), "X-Request-Id": "req-123"}
        )
        assert response.headers["X-Request-Id"] == "req-123"

    async def test_request_id_is_generated(self, client):
        response = await client.get("/")
        assert len(response.headers["X-Request-Id"]) == 32


@pytest.mark.asyncio
class TestCurrentEmployee:
    async def test_viewer_sections(self, client, viewer):
        response = await client.get("/api/v1/dashboard/me", headers=auth_headers(viewer))
        assert response.status_code == 200
        body = response.json()
        assert body["email"] == "viewer@store.test"
        assert body["permissions"] == ["categories.view"]
        assert body["is_admin"] is False
        assert body["sections"] == ["categories"]

    async def test_admin_sees_every_section(self, client, admin):
        response = await client.get("/api/v1/dashboard/me", headers=auth_headers(admin))
        body = response.json()
        assert body["is_admin"] is True
        assert body["sections"] == DASHBOARD_SECTIONS

    async def test_requires_token(self, client):
        response = await client.get("/api/v1/dashboard/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401
