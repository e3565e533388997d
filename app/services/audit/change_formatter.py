"""
Render audit change sets for display.

A change set maps a field name to ``{"old_value": ..., "new_value": ...}``.
Values are rendered in two tiers: an override table keyed by
``(EntityKind, field)`` handles fields that need domain wording (gender,
order status, prices, permissions, active flags); anything without an
override falls through to a renderer that only looks at the value's type.

Rendering never raises. A value that cannot be rendered shows up as
``INVALID_VALUE`` and the rest of the entry is still returned.
"""
import json
import logging
import re
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from app.core.config import settings
from app.models.shared.enums import EntityKind, Gender, OrderStatus, Permission
from app.services.audit import display_labels as labels

logger = logging.getLogger(__name__)

Renderer = Callable[[Any], str]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def normalize_field(field: Any) -> str:
    """``isActive`` -> ``is_active``; snake_case names pass through"""
    return _CAMEL_BOUNDARY.sub(r"_\1", str(field)).lower()


def resolve_entity(target_model: Union[EntityKind, str, None]) -> Optional[EntityKind]:
    if isinstance(target_model, EntityKind):
        return target_model
    if target_model is None:
        return None
    text = str(target_model)
    for kind in EntityKind:
        if kind.value.lower() == text.lower() or kind.name == text.upper():
            return kind
    return None


def field_label(field: Any) -> str:
    return labels.FIELD_LABELS.get(normalize_field(field), str(field))


def _number(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal) and value == value.to_integral_value():
        return str(value.quantize(Decimal(1)))
    return str(value)


def _unwrap(value):
    return value.value if isinstance(value, Enum) else value


def _is_number(value) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


# --- first tier: (entity, field) overrides --------------------------------

def _active_flag(value) -> str:
    return labels.ACTIVE if value else labels.INACTIVE


def _gender(value) -> str:
    try:
        return labels.GENDER_LABELS[Gender(str(value).upper())]
    except ValueError:
        return str(value)


def _price(value) -> str:
    if _is_number(value):
        return f"{_number(value)} {settings.CURRENCY_SUFFIX}"
    return str(value)


def _order_status(value) -> str:
    try:
        return labels.ORDER_STATUS_LABELS[OrderStatus(str(value).upper())]
    except ValueError:
        return str(value)


def _permission_label(code) -> str:
    code = _unwrap(code)
    permission = Permission.lookup(str(code))
    if permission is None:
        return str(code)
    return labels.PERMISSION_LABELS.get(permission, str(code))


def _permissions(value) -> str:
    if isinstance(value, (list, tuple)):
        return labels.LIST_SEPARATOR.join(_permission_label(code) for code in value)
    return str(value)


FIELD_RENDERERS: Dict[tuple, Renderer] = {
    (EntityKind.EMPLOYEE, "gender"): _gender,
    (EntityKind.EMPLOYEE, "is_active"): _active_flag,
    (EntityKind.PRODUCT, "is_active"): _active_flag,
    (EntityKind.CATEGORY, "is_active"): _active_flag,
    (EntityKind.PRODUCT, "price"): _price,
    (EntityKind.ORDER, "status"): _order_status,
    (EntityKind.EMPLOYEE, "permissions"): _permissions,
}


# --- second tier: by value type --------------------------------------------

def render_generic(value: Any) -> str:
    value = _unwrap(value)
    if value is None:
        return labels.NOT_SPECIFIED
    if isinstance(value, bool):
        return labels.YES if value else labels.NO
    if isinstance(value, (list, tuple, set)):
        if not value:
            return labels.NONE_LABEL
        return labels.LIST_SEPARATOR.join(render_generic(item) for item in value)
    if isinstance(value, Mapping):
        display = value.get("name") or value.get("title") or value.get("email")
        if display:
            return str(display)
        return json.dumps(value, ensure_ascii=False, default=str)
    if _is_number(value):
        return _number(value)
    return str(value)


def format_value(value: Any, field: Any, target_model: Union[EntityKind, str, None]) -> str:
    """Render one side of a change for display"""
    if value is None:
        return labels.NOT_SPECIFIED
    value = _unwrap(value)
    if isinstance(value, str) and value == "":
        return labels.EMPTY

    renderer = FIELD_RENDERERS.get((resolve_entity(target_model), normalize_field(field)))
    if renderer is not None:
        return renderer(value)
    return render_generic(value)


def _safe_format(value_formatter, value, field, target_model) -> str:
    try:
        rendered = value_formatter(value, field, target_model)
        return rendered if isinstance(rendered, str) else str(rendered)
    except Exception as e:
        logger.warning(f"Could not format {target_model}.{field} value: {e!r}")
        return labels.INVALID_VALUE


def _safe_label(field_label_lookup, field) -> str:
    try:
        return str(field_label_lookup(field) or field)
    except Exception as e:
        logger.warning(f"Could not resolve label for field {field!r}: {e!r}")
        return str(field)


def _sides(change) -> tuple:
    if not isinstance(change, Mapping):
        return None, None
    old_value = change.get("old_value", change.get("oldValue"))
    new_value = change.get("new_value", change.get("newValue"))
    return old_value, new_value


def format_change_set(
    changes: Any,
    target_model: Union[EntityKind, str, None],
    field_label_lookup: Callable[[Any], str] = field_label,
    value_formatter: Callable[[Any, Any, Any], str] = format_value,
) -> Dict[str, Dict[str, str]]:
    """
    Turn ``{field: {old_value, new_value}}`` into
    ``{field: {field: label, old_value: text, new_value: text}}``.

    Entries with no value at all, or with both sides None, are dropped.
    """
    if not isinstance(changes, Mapping):
        return {}

    formatted = {}
    for key, change in changes.items():
        if change is None:
            continue
        old_value, new_value = _sides(change)
        if old_value is None and new_value is None:
            continue
        formatted[str(key)] = {
            "field": _safe_label(field_label_lookup, key),
            "old_value": _safe_format(value_formatter, old_value, key, target_model),
            "new_value": _safe_format(value_formatter, new_value, key, target_model),
        }
    return formatted


def describe_action(action_type: str) -> str:
    """``category.status.update`` -> localized "<action> <entity>" label"""
    model, _, action = (action_type or "").partition(".")
    kind = resolve_entity(model)
    entity = labels.ENTITY_LABELS.get(kind, model) if kind else model
    return f"{labels.ACTION_LABELS.get(action, action)} {entity}".strip()
