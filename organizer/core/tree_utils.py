from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from organizer.core.tree import (
    ROOT_ID,
    Node,
    Tree,
    NotFound,
    IllegalMove,
    find_by_id,
    is_descendant,
    iter_nodes,
    remove,
    insert_at,
)

__all__ = [
    "locate",
    "get_ancestors",
    "count_nodes",
    "check_drop",
    "is_legal_drop",
    "move_node",
]

def _find_child_index(items: Sequence[Node], child_id: str) -> int:
    """Find index of child with given ID in items. Returns -1 if not found."""
    return next((i for i, item in enumerate(items) if item.id == child_id), -1)

def locate(tree: Sequence[Node], node_id: str) -> Optional[Tuple[str, int]]:
    """
    Return (parent_id, index) of node_id, with ROOT_ID for root-level nodes.
    Returns None if the node is not in the tree.
    """
    idx = _find_child_index(tree, node_id)
    if idx >= 0:
        return (ROOT_ID, idx)

    for node in iter_nodes(tree):
        idx = _find_child_index(node.children, node_id)
        if idx >= 0:
            return (node.id, idx)
    return None

def get_ancestors(tree: Sequence[Node], node_id: str) -> List[str]:
    """Get all ancestor IDs from node_id up to the root level (excluding node_id itself)."""
    ancestors = []
    current = locate(tree, node_id)

    while current is not None and current[0] != ROOT_ID:
        parent_id = current[0]
        ancestors.append(parent_id)
        current = locate(tree, parent_id)

    return ancestors  # [parent, grandparent, great-grandparent, ...]

def count_nodes(tree: Sequence[Node]) -> int:
    return sum(1 for _ in iter_nodes(tree))

# ---------- drop legality / move ----------

def check_drop(tree: Sequence[Node], item_id: str, parent_id: str) -> Node:
    """
    Validate dropping item_id into parent_id and return the dragged node.

    Raises NotFound if item_id is not in the tree and IllegalMove if the
    drop would put a container inside itself or one of its descendants.
    Leaves can go anywhere.
    """
    dragged = find_by_id(tree, item_id)
    if dragged is None:
        raise NotFound(f"No node with id {item_id!r}")

    if dragged.is_container:
        if parent_id == item_id:
            raise IllegalMove(f"Cannot drop {item_id!r} into itself")
        if is_descendant(dragged, parent_id):
            raise IllegalMove(f"Cannot drop {item_id!r} into its descendant {parent_id!r}")

    return dragged

def is_legal_drop(tree: Sequence[Node], item_id: str, parent_id: str) -> bool:
    try:
        check_drop(tree, item_id, parent_id)
    except (NotFound, IllegalMove):
        return False
    return True

def move_node(tree: Sequence[Node], item_id: str, parent_id: str, index: int) -> Tree:
    """
    Move item_id to position index of parent_id and return the new tree.

    The index is interpreted against the tree *after* item_id has been
    removed, so moving within the same parent never needs adjusting by the
    caller. Raises NotFound, IllegalMove or TargetNotFound; the input tree
    is never modified.
    """
    check_drop(tree, item_id, parent_id)

    after_removal, removed = remove(tree, item_id)
    if removed is None:
        raise NotFound(f"No node with id {item_id!r}")

    return insert_at(after_removal, parent_id, index, removed)
