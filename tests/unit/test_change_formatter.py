"""Tests for rendering audit change sets."""

from decimal import Decimal

import pytest

from app.core.config import settings
from app.models.shared.enums import EntityKind, OrderStatus
from app.services.audit import display_labels as labels
from app.services.audit.change_formatter import (
    describe_action,
    field_label,
    format_change_set,
    format_value,
    normalize_field,
    render_generic,
)


class TestFormatValue:
    @pytest.mark.parametrize("model", ["Employee", "Product", "Order", "Unknown", None])
    def test_missing_value(self, model):
        assert format_value(None, "name", model) == labels.NOT_SPECIFIED

    @pytest.mark.parametrize("field", ["name", "price", "status"])
    def test_empty_string(self, field):
        assert format_value("", field, "Product") == labels.EMPTY

    def test_employee_active_flag(self):
        assert format_value(True, "isActive", "Employee") == labels.ACTIVE
        assert format_value(False, "isActive", "Employee") == labels.INACTIVE
        assert format_value(True, "is_active", EntityKind.EMPLOYEE) == labels.ACTIVE

    def test_category_active_flag(self):
        assert format_value(False, "is_active", "Category") == labels.INACTIVE

    def test_product_price(self):
        rendered = format_value(150, "price", "Product")
        assert "150" in rendered
        assert settings.CURRENCY_SUFFIX in rendered
        assert rendered == f"150 {settings.CURRENCY_SUFFIX}"

    def test_product_price_keeps_fraction(self):
        assert format_value(149.5, "price", "Product") == f"149.5 {settings.CURRENCY_SUFFIX}"
        assert format_value(Decimal("20.00"), "price", "Product") == f"20 {settings.CURRENCY_SUFFIX}"

    def test_non_numeric_price_is_left_alone(self):
        assert format_value("call us", "price", "Product") == "call us"

    def test_price_outside_products_has_no_currency(self):
        assert format_value(150, "price", "Shipping") == "150"

    def test_employee_permissions(self):
        rendered = format_value(["PRODUCTS_VIEW"], "permissions", "Employee")
        assert rendered == "عرض المنتجات"
        assert "PRODUCTS_VIEW" not in rendered

    def test_employee_permissions_stored_values(self):
        rendered = format_value(["products.view", "categories.edit"], "permissions", "Employee")
        assert rendered == "عرض المنتجات" + labels.LIST_SEPARATOR + "تعديل الفئات"

    def test_unknown_permission_is_shown_raw(self):
        assert format_value(["reports.export"], "permissions", "Employee") == "reports.export"

    def test_employee_gender(self):
        assert format_value("MALE", "gender", "Employee") == "ذكر"
        assert format_value("FEMALE", "gender", "Employee") == "أنثى"
        assert format_value("OTHER", "gender", "Employee") == "OTHER"

    def test_order_status(self):
        assert format_value("PENDING", "status", "Order") == "قيد الانتظار"
        assert format_value("delivered", "status", "Order") == "تم التوصيل"
        assert format_value(OrderStatus.CANCELLED, "status", "Order") == "ملغي"
        assert format_value("ON_HOLD", "status", "Order") == "ON_HOLD"

    def test_status_outside_orders_uses_fallback(self):
        assert format_value("PENDING", "status", "Review") == "PENDING"


class TestGenericFallback:
    def test_boolean(self):
        assert format_value(True, "featured", "Product") == labels.YES
        assert format_value(False, "featured", "Brand") == labels.NO

    def test_lists(self):
        assert format_value([], "tags", "Product") == labels.NONE_LABEL
        assert format_value(["red", "blue"], "colors", "Product") == "red" + labels.LIST_SEPARATOR + "blue"

    def test_mappings(self):
        assert format_value({"name": "Nike", "id": 3}, "brand", "Product") == "Nike"
        assert format_value({"title": "Summer"}, "hero", "Hero") == "Summer"
        assert format_value({"id": 7, "email": "sara@store.test"}, "assigned_to", "Order") == "sara@store.test"
        assert format_value({"name": "Sara", "email": "sara@store.test"}, "assigned_to", "Order") == "Sara"
        assert format_value({"a": 1}, "meta", "Settings") == '{"a": 1}'

    def test_numbers_and_text(self):
        assert format_value(3, "stock", "Product") == "3"
        assert format_value(2.0, "weight", "Product") == "2"
        assert format_value("hello", "name", "Brand") == "hello"

    def test_unknown_model_uses_fallback(self):
        assert format_value(True, "is_active", "Warehouse") == labels.YES

    def test_render_generic_none(self):
        assert render_generic(None) == labels.NOT_SPECIFIED


class TestFormatChangeSet:
    def test_drops_entries_without_values(self):
        changes = {
            "name": {"old_value": None, "new_value": None},
            "description": None,
            "is_active": {"old_value": True, "new_value": False},
        }
        result = format_change_set(changes, "Category")
        assert list(result) == ["is_active"]
        assert result["is_active"] == {
            "field": "الحالة",
            "old_value": labels.ACTIVE,
            "new_value": labels.INACTIVE,
        }

    def test_one_sided_change_is_kept(self):
        result = format_change_set({"name": {"old_value": None, "new_value": "Phones"}}, "Category")
        assert result["name"]["old_value"] == labels.NOT_SPECIFIED
        assert result["name"]["new_value"] == "Phones"

    def test_camel_case_payloads(self):
        result = format_change_set({"isActive": {"oldValue": False, "newValue": True}}, "Employee")
        assert result["isActive"]["field"] == "الحالة"
        assert result["isActive"]["new_value"] == labels.ACTIVE

    def test_unmapped_field_label_falls_back_to_name(self):
        result = format_change_set({"warranty": {"old_value": 1, "new_value": 2}}, "Product")
        assert result["warranty"]["field"] == "warranty"

    def test_cyclic_value_does_not_raise(self):
        cyclic = {}
        cyclic["self"] = cyclic
        result = format_change_set({"specs": {"old_value": cyclic, "new_value": "ok"}}, "Product")
        assert result["specs"]["old_value"] == labels.INVALID_VALUE
        assert result["specs"]["new_value"] == "ok"

    def test_self_containing_list_does_not_raise(self):
        loop = []
        loop.append(loop)
        result = format_change_set({"tags": {"old_value": loop, "new_value": []}}, "Product")
        assert result["tags"]["old_value"] == labels.INVALID_VALUE
        assert result["tags"]["new_value"] == labels.NONE_LABEL

    def test_failing_formatter_and_label_lookup(self):
        def broken_formatter(value, field, model):
            raise RuntimeError("boom")

        def broken_labels(field):
            raise KeyError(field)

        result = format_change_set(
            {"name": {"old_value": "a", "new_value": "b"}},
            "Brand",
            field_label_lookup=broken_labels,
            value_formatter=broken_formatter,
        )
        assert result == {
            "name": {"field": "name", "old_value": labels.INVALID_VALUE, "new_value": labels.INVALID_VALUE}
        }

    def test_custom_lookups(self):
        result = format_change_set(
            {"name": {"old_value": "a", "new_value": "b"}},
            "Brand",
            field_label_lookup=str.upper,
            value_formatter=lambda value, field, model: f"<{value}>",
        )
        assert result["name"] == {"field": "NAME", "old_value": "<a>", "new_value": "<b>"}

    @pytest.mark.parametrize("changes", [None, [], "name", 42, {"name": "not a pair"}])
    def test_malformed_input(self, changes):
        assert format_change_set(changes, "Product") == {}


class TestLabels:
    def test_field_label(self):
        assert field_label("email") == "البريد الإلكتروني"
        assert field_label("jobTitle") == "المسمى الوظيفي"
        assert field_label("mystery") == "mystery"

    def test_normalize_field(self):
        assert normalize_field("isActive") == "is_active"
        assert normalize_field("parent_id") == "parent_id"

    def test_describe_action(self):
        assert describe_action("category.update") == "تعديل تصنيف"
        assert describe_action("order.status.update") == "تحديث الحالة طلب"
        assert describe_action("widget.explode") == "explode widget"
