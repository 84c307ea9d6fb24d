"""Helpers for turning flat parent/child rows into a tree."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Dict, Generic, Hashable, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class HierarchyNode(Generic[T]):
    """One entity plus its direct children, in input order."""

    __slots__ = ("entity", "children", "depth", "parent")

    def __init__(self, entity: T, depth: int = 1, parent: Optional["HierarchyNode[T]"] = None):
        self.entity = entity
        self.children: List[HierarchyNode[T]] = []
        self.depth = depth
        self.parent = parent

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def __repr__(self) -> str:
        return f"HierarchyNode({self.entity!r}, children={len(self.children)})"


def as_hierarchy(
    items: Iterable[T],
    id_of: Callable[[T], K],
    parent_id_of: Callable[[T], Optional[K]],
    root_id: Optional[K] = None,
) -> List[HierarchyNode[T]]:
    """
    Build a forest from ``items``.

    Items are grouped by parent id (stable), then each node receives the
    group keyed by its own id as children. The group keyed by ``root_id``
    is returned. Items whose parent is missing from ``items`` are never
    reached and do not appear in the result.
    """
    groups: Dict[Optional[K], List[T]] = defaultdict(list)
    for item in items:
        groups[parent_id_of(item)].append(item)

    roots = [HierarchyNode(item) for item in groups.get(root_id, [])]
    pending = list(roots)
    visited = set()
    while pending:
        node = pending.pop()
        key = id_of(node.entity)
        # each id expands once, so cycles under a non-None root_id terminate
        if key in visited:
            continue
        visited.add(key)
        node.children = [
            HierarchyNode(child, depth=node.depth + 1, parent=node)
            for child in groups.get(key, [])
        ]
        pending.extend(node.children)
    return roots


def walk(nodes: Iterable[HierarchyNode[T]]) -> Iterator[HierarchyNode[T]]:
    """Yield nodes depth-first in pre-order for flat rendering."""
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
