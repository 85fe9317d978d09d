'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import AbstractSet, Iterable, List, Sequence, Set, Union

from organizer.core.tree import ROOT_ID, Node, find_by_id, iter_nodes
from organizer.ui.constants import INDENT_W
from organizer.ui.index import InsertionIndex
from organizer.ui.types import InsertionPoint, Row

__all__ = ["CollapseState", "flatten_tree", "visible_insertion_points", "indent_px"]


class CollapseState:
    """
    Which containers the view currently shows collapsed.

    Display state only: the drag controller and the tree functions never
    look at it.
    """

    def __init__(self, collapsed: Iterable[str] = ()):
        self._collapsed: Set[str] = set(collapsed)

    def is_collapsed(self, node_id: str) -> bool:
        return node_id in self._collapsed

    def set_collapsed(self, tree: Sequence[Node], node_id: str, collapsed: bool) -> bool:
        """Set the collapsed flag on a container. Returns True if a change was made."""
        node = find_by_id(tree, node_id)
        if node is None or not node.is_container:
            return False

        if collapsed == self.is_collapsed(node_id):
            return False

        if collapsed:
            self._collapsed.add(node_id)
        else:
            self._collapsed.discard(node_id)
        return True

    def toggle_collapsed(self, tree: Sequence[Node], node_id: str) -> bool:
        """Toggle the collapsed flag on a container. Returns True if it changed."""
        return self.set_collapsed(tree, node_id, not self.is_collapsed(node_id))

    def prune(self, tree: Sequence[Node]) -> None:
        """Forget ids that are no longer containers in tree."""
        live = {n.id for n in iter_nodes(tree) if n.is_container}
        self._collapsed &= live

    def ids(self) -> Set[str]:
        return set(self._collapsed)


def _as_set(collapsed) -> AbstractSet[str]:
    if isinstance(collapsed, CollapseState):
        return collapsed.ids()
    return set(collapsed or ())

def _gather_children(node: Node, level: int, collapsed: AbstractSet[str], out: List[Row]) -> None:
    """Recursively gather node and its visible descendants into out."""
    out.append(Row(kind="folder" if node.is_container else "playlist", node_id=node.id, level=level))

    # Skip children if this node is collapsed
    if node.id in collapsed:
        return

    for child in node.children:
        _gather_children(child, level + 1, collapsed, out)

def flatten_tree(tree: Sequence[Node], collapsed=None) -> List[Row]:
    """
    Flatten the tree into display rows, depth-first.

    Args:
        tree: root-level nodes
        collapsed: CollapseState or iterable of container ids whose
                   descendants are hidden
    """
    hidden = _as_set(collapsed)
    rows: List[Row] = []
    for node in tree:
        _gather_children(node, 0, hidden, rows)
    return rows

def visible_insertion_points(
        index: InsertionIndex,
        tree: Sequence[Node],
        collapsed=None,
) -> List[InsertionPoint]:
    """
    Filter index down to the points the view should surface.

    A container's points are shown only if the container is expanded and
    every one of its ancestors is expanded too. Root-level points are
    always shown.
    """
    hidden = _as_set(collapsed)
    open_parents = {ROOT_ID}

    def _walk(nodes: Sequence[Node]) -> None:
        for node in nodes:
            if node.is_container and node.id not in hidden:
                open_parents.add(node.id)
                _walk(node.children)

    _walk(tree)
    return [p for p in index.points if p.parent_id in open_parents]

def indent_px(item: Union[Row, InsertionPoint]) -> int:
    """Left indent for a row or insertion indicator."""
    return item.level * INDENT_W
