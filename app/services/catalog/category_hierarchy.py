"""
Category tree rules.

Every category stores a materialized ``path`` (comma separated ancestor ids,
root first, excluding itself) and a ``level`` (0 for roots). The functions
here keep those two fields consistent with ``parent_id`` and refuse any
re-parenting that would make a category its own ancestor.

Nothing in this module touches the database. Callers hand in a lookup
callable (sync or async) and flat lists of category objects; any object with
``id``, ``parent_id``, ``path`` and ``level`` attributes works.
"""
import inspect
import logging
from collections import defaultdict, deque
from typing import Any, Callable, Dict, Iterable, List, Optional

from app.core.exceptions import CyclicHierarchyError, ParentNotFoundError

logger = logging.getLogger(__name__)

PATH_SEPARATOR = ","


def _same_id(a, b) -> bool:
    return a is not None and b is not None and str(a) == str(b)


async def _fetch(lookup_by_id: Callable[[Any], Any], category_id):
    result = lookup_by_id(category_id)
    if inspect.isawaitable(result):
        result = await result
    return result


def child_path(parent) -> str:
    """Path a direct child of ``parent`` must carry"""
    if parent.path:
        return f"{parent.path}{PATH_SEPARATOR}{parent.id}"
    return str(parent.id)


def ancestor_ids(path: Optional[str]) -> List[str]:
    """Split a stored path into ancestor ids, root first"""
    if not path:
        return []
    return [part for part in path.split(PATH_SEPARATOR) if part]


async def reparent(category, new_parent_id, lookup_by_id):
    """
    Place ``category`` under ``new_parent_id`` (or make it a root when None)
    and recompute its ``path`` and ``level``.

    Raises ParentNotFoundError when the parent does not resolve and
    CyclicHierarchyError when the parent is the category itself or sits
    below it. On error the category is left untouched.
    """
    if new_parent_id is None:
        category.parent_id = None
        category.path = ""
        category.level = 0
        return category

    if _same_id(new_parent_id, category.id):
        raise CyclicHierarchyError(
            "Category cannot be its own parent",
            category_id=category.id,
            parent_id=new_parent_id,
        )

    parent = await _fetch(lookup_by_id, new_parent_id)
    if parent is None:
        raise ParentNotFoundError(
            f"Parent category {new_parent_id} not found",
            category_id=category.id,
            parent_id=new_parent_id,
        )

    if _same_id(parent.id, category.id):
        raise CyclicHierarchyError(
            "Category cannot be its own parent",
            category_id=category.id,
            parent_id=new_parent_id,
        )

    # Walk up from the candidate parent; reaching the category means the
    # parent is one of its descendants. A broken chain counts as a root.
    visited = {str(parent.id)}
    current = parent
    while current.parent_id is not None:
        if _same_id(current.parent_id, category.id):
            raise CyclicHierarchyError(
                "Category cannot be moved under one of its own subcategories",
                category_id=category.id,
                parent_id=new_parent_id,
            )
        if str(current.parent_id) in visited:
            raise CyclicHierarchyError(
                f"Ancestor chain of category {new_parent_id} already contains a cycle",
                category_id=category.id,
                parent_id=new_parent_id,
            )
        visited.add(str(current.parent_id))

        next_parent = await _fetch(lookup_by_id, current.parent_id)
        if next_parent is None:
            logger.warning(
                f"Category {current.id} points to missing parent {current.parent_id}; "
                "treating it as a root"
            )
            break
        current = next_parent

    category.parent_id = parent.id
    category.path = child_path(parent)
    category.level = (parent.level or 0) + 1
    return category


def children_index(categories: Iterable) -> Dict[str, List]:
    index = defaultdict(list)
    for node in categories:
        if node.parent_id is not None:
            index[str(node.parent_id)].append(node)
    return index


def rebuild_descendants(category, categories: Iterable) -> List:
    """
    Recompute ``path``/``level`` for every descendant of ``category`` from its
    current position. ``categories`` is a flat snapshot of the tree. Returns
    the descendants whose stored values changed.
    """
    index = children_index(categories)
    changed = []
    queue = deque([category])
    seen = {str(category.id)}
    while queue:
        node = queue.popleft()
        for child in index.get(str(node.id), []):
            if str(child.id) in seen:
                continue
            seen.add(str(child.id))
            new_path = child_path(node)
            new_level = (node.level or 0) + 1
            if child.path != new_path or child.level != new_level:
                child.path = new_path
                child.level = new_level
                changed.append(child)
            queue.append(child)
    return changed


def subtree_ids(root_id, categories: Iterable) -> List:
    """``root_id`` followed by the ids of all its descendants (breadth first)"""
    index = children_index(categories)
    ids = [root_id]
    queue = deque([root_id])
    seen = {str(root_id)}
    while queue:
        current = queue.popleft()
        for child in index.get(str(current), []):
            if str(child.id) in seen:
                continue
            seen.add(str(child.id))
            ids.append(child.id)
            queue.append(child.id)
    return ids


def build_tree(categories: Iterable, serialize: Callable[[Any], Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Nest a flat category list; nodes whose parent is absent become roots"""
    nodes = list(categories)
    known = {str(node.id) for node in nodes}
    index = children_index(nodes)

    def _build(node, trail):
        item = serialize(node)
        item["children"] = [
            _build(child, trail | {str(child.id)})
            for child in index.get(str(node.id), [])
            if str(child.id) not in trail
        ]
        return item

    roots = [
        node for node in nodes
        if node.parent_id is None or str(node.parent_id) not in known
    ]
    return [_build(node, {str(node.id)}) for node in roots]
