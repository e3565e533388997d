"""Tests for permission strings."""

import pytest

from app.auth.permissions import (
    PermissionChecker,
    allowed_sections,
    format_permission_name,
)
from app.core.exceptions import PermissionDeniedError
from app.models.shared.enums import DASHBOARD_SECTIONS


class TestPermissionChecker:
    def test_exact_permission(self):
        checker = PermissionChecker(["categories.view", "categories.edit"])
        assert checker.can("categories", "edit")
        assert checker.cannot("categories", "delete")
        assert not checker.is_admin

    def test_all_grants_everything(self):
        checker = PermissionChecker(["ALL"])
        assert checker.is_admin
        assert checker.can("employees", "delete")

    def test_empty_permissions(self):
        checker = PermissionChecker(None)
        assert checker.cannot("products", "view")

    def test_require_raises_forbidden(self):
        checker = PermissionChecker(["products.view"])
        with pytest.raises(PermissionDeniedError) as exc:
            checker.require("products", "delete")
        assert exc.value.status_code == 403
        assert "products.delete" in exc.value.detail

    def test_require_custom_message(self):
        with pytest.raises(PermissionDeniedError, match="no access"):
            PermissionChecker([]).require("orders", "view", "no access")


class TestSections:
    def test_admin_sees_every_section(self):
        assert allowed_sections(["ALL"]) == DASHBOARD_SECTIONS

    def test_view_permissions_map_to_sections(self):
        sections = allowed_sections(["products.view", "products.edit", "orders.view", "hero.edit"])
        assert sections == ["products", "orders"]

    def test_no_permissions(self):
        assert allowed_sections([]) == []
        assert allowed_sections(None) == []


def test_format_permission_name():
    assert format_permission_name("categories", "edit") == "categories.edit"
