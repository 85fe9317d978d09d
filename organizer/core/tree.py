from __future__ import annotations

import json
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

__all__ = [
    "ROOT_ID",
    "NodeKind",
    "Node",
    "Tree",
    "TreeError",
    "NotFound",
    "TargetNotFound",
    "IllegalMove",
    "MalformedTree",
    "find_by_id",
    "is_descendant",
    "remove",
    "insert_at",
    "iter_nodes",
    "validate_tree",
    "node_from_dict",
    "node_to_dict",
    "tree_from_data",
    "tree_to_data",
    "load_tree",
]

# Parent id naming the synthetic container that holds the root-level nodes
ROOT_ID = "__root__"

# ---------- errors ----------

class TreeError(ValueError):
    """Base class for every recoverable tree condition."""

class NotFound(TreeError):
    """An id does not resolve to a node."""

class TargetNotFound(TreeError):
    """An insertion point names a missing or non-container parent."""

class IllegalMove(TreeError):
    """A move would drop a node onto itself or into its own subtree."""

class MalformedTree(TreeError):
    """Input data does not describe a well-formed tree."""

# ---------- nodes ----------

class NodeKind(str, Enum):
    CONTAINER = "container"
    LEAF = "leaf"

@dataclass(slots=True, frozen=True)
class Node:
    """
    A single immutable node of the hierarchy.

    • id       – opaque identifier, unique across the whole tree
    • kind     – container (folder) or leaf (playlist)
    • title    – display label, never inspected by the engine
    • children – ordered child nodes; always empty for leaves
    """
    id: str
    kind: NodeKind
    title: str = ""
    children: Tuple[Node, ...] = ()

    def __post_init__(self):
        try:
            object.__setattr__(self, "kind", NodeKind(self.kind))
        except ValueError as e:
            raise MalformedTree(f"Node {self.id!r} has unknown kind {self.kind!r}") from e
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        if self.kind is NodeKind.LEAF and self.children:
            raise MalformedTree(f"Leaf {self.id!r} cannot hold children")

    @property
    def is_container(self) -> bool:
        return self.kind is NodeKind.CONTAINER

    def with_children(self, children: Iterable[Node]) -> Node:
        """Return a copy of this container holding `children` instead."""
        return replace(self, children=tuple(children))

# A tree is the ordered tuple of root-level nodes.
Tree = Tuple[Node, ...]

# ---------- lookup ----------

def find_by_id(tree: Sequence[Node], node_id: str) -> Optional[Node]:
    """Depth-first search, parent before children. Returns None when absent."""
    for node in tree:
        if node.id == node_id:
            return node
        if node.children:
            found = find_by_id(node.children, node_id)
            if found is not None:
                return found
    return None

def is_descendant(node: Node, candidate_id: str) -> bool:
    """True if candidate_id is somewhere strictly below node."""
    for child in node.children:
        if child.id == candidate_id or is_descendant(child, candidate_id):
            return True
    return False

def iter_nodes(tree: Sequence[Node]) -> Iterator[Node]:
    """Yield every node in depth-first, parent-before-children order."""
    for node in tree:
        yield node
        yield from iter_nodes(node.children)

# ---------- edits ----------

def _remove_from(items: Tree, node_id: str) -> Tuple[Tree, Optional[Node]]:
    for i, item in enumerate(items):
        if item.id == node_id:
            return items[:i] + items[i + 1:], item
        if item.children:
            new_children, removed = _remove_from(item.children, node_id)
            if removed is not None:
                return items[:i] + (item.with_children(new_children),) + items[i + 1:], removed
    return items, None

def remove(tree: Sequence[Node], node_id: str) -> Tuple[Tree, Optional[Node]]:
    """
    Detach the node with node_id from wherever it lives.

    Returns (new_tree, removed_node). When nothing matches, removed_node is
    None and new_tree equals the input. Untouched branches are shared with
    the input tree; they are immutable so sharing is safe.
    """
    return _remove_from(tuple(tree), node_id)

def _splice(items: Tree, index: int, node: Node) -> Tree:
    index = max(0, min(int(index), len(items)))
    return items[:index] + (node,) + items[index:]

def _insert_into(items: Tree, parent_id: str, index: int, node: Node) -> Optional[Tree]:
    for i, item in enumerate(items):
        if item.id == parent_id:
            if not item.is_container:
                raise TargetNotFound(f"Parent {parent_id!r} is not a container")
            updated = item.with_children(_splice(item.children, index, node))
            return items[:i] + (updated,) + items[i + 1:]
        if item.children:
            new_children = _insert_into(item.children, parent_id, index, node)
            if new_children is not None:
                return items[:i] + (item.with_children(new_children),) + items[i + 1:]
    return None

def insert_at(tree: Sequence[Node], parent_id: str, index: int, node: Node) -> Tree:
    """
    Splice node into the children of container parent_id at index.

    ROOT_ID addresses the root-level list. The index is clamped to
    [0, child_count] of the parent as it exists in `tree`. Raises
    TargetNotFound when parent_id is missing or names a leaf, and
    IllegalMove when node's id is already present in `tree`.
    """
    tree = tuple(tree)
    if find_by_id(tree, node.id) is not None:
        raise IllegalMove(f"Node {node.id!r} is already in the tree")

    if parent_id == ROOT_ID:
        return _splice(tree, index, node)

    new_tree = _insert_into(tree, parent_id, index, node)
    if new_tree is None:
        raise TargetNotFound(f"No container with id {parent_id!r}")
    return new_tree

# ---------- validation ----------

def validate_tree(tree: Sequence[Node]) -> Tree:
    """Check id uniqueness across the tree. Returns the tree as a tuple."""
    seen = set()
    for node in iter_nodes(tree):
        if node.id == ROOT_ID:
            raise MalformedTree(f"Node id {ROOT_ID!r} is reserved")
        if node.id in seen:
            raise MalformedTree(f"Duplicate node id {node.id!r}")
        seen.add(node.id)
    return tuple(tree)

# ---------- plain data ----------

_KIND_NAMES = {
    "folder": NodeKind.CONTAINER,
    "container": NodeKind.CONTAINER,
    "playlist": NodeKind.LEAF,
    "leaf": NodeKind.LEAF,
}

def node_from_dict(data: Dict[str, Any]) -> Node:
    """
    Build a Node from {"id", "type", "title", "children"}.

    "kind" is accepted in place of "type". A dict with no type but with a
    "children" list is taken to be a folder.
    """
    if not isinstance(data, dict):
        raise MalformedTree(f"Expected a node object, got {type(data).__name__}")

    node_id = data.get("id")
    if not isinstance(node_id, str) or not node_id:
        raise MalformedTree(f"Node has no usable id: {data!r}")

    kind_name = data.get("type", data.get("kind"))
    if kind_name is None:
        kind_name = "folder" if "children" in data else "playlist"
    kind = _KIND_NAMES.get(str(kind_name).lower())
    if kind is None:
        raise MalformedTree(f"Unknown node type {kind_name!r} for {node_id!r}")

    raw_children = data.get("children") or []
    if kind is NodeKind.LEAF and raw_children:
        raise MalformedTree(f"Playlist {node_id!r} cannot hold children")

    children = tuple(node_from_dict(child) for child in raw_children)
    return Node(id=node_id, kind=kind, title=str(data.get("title", "")), children=children)

def node_to_dict(node: Node) -> Dict[str, Any]:
    if node.is_container:
        return {
            "id": node.id,
            "type": "folder",
            "title": node.title,
            "children": [node_to_dict(child) for child in node.children],
        }
    return {"id": node.id, "type": "playlist", "title": node.title}

def tree_from_data(data: Any) -> Tree:
    """Accept a list of root nodes or an object with an "items" list."""
    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise MalformedTree("Tree data must be a list of nodes or {'items': [...]}")
    return validate_tree([node_from_dict(item) for item in data])

def tree_to_data(tree: Sequence[Node]) -> List[Dict[str, Any]]:
    return [node_to_dict(node) for node in tree]

def load_tree(path: str) -> Tree:
    """Read an initial tree from a JSON file."""
    p = Path(path).expanduser()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed JSON in {p}: {e}") from e
    return tree_from_data(data)
