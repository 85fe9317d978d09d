from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Union

from organizer.core.tree import ROOT_ID, Node
from organizer.ui.drag_events import insertion_key, parse_insertion_key
from organizer.ui.types import InsertionPoint

__all__ = ["InsertionIndex"]


class InsertionIndex:
    """
    Immutable per-build index of every insertion point in a tree.

    - points lists the gaps in display order: each container's gap 0, then
      each child (with its own gaps when it is a container) followed by the
      gap after it.
    - A container with n children owns n + 1 points, exactly 1 when empty.
    - ROOT_ID owns the gaps of the root-level list.

    Rebuild after every tree change; a stale index may name indices that
    no longer exist.
    """

    __slots__ = ("points", "_by_key", "_by_parent")

    def __init__(self, tree: Sequence[Node] = ()) -> None:
        self.points: List[InsertionPoint] = []
        self._by_key: Dict[str, InsertionPoint] = {}
        self._by_parent: Dict[str, List[InsertionPoint]] = {}
        self.rebuild(tree)

    def rebuild(self, tree: Sequence[Node]) -> None:
        """Recompute all points for `tree`. O(number of nodes)."""
        points: List[InsertionPoint] = []

        def _walk(parent_id: str, children: Sequence[Node], level: int) -> None:
            points.append(InsertionPoint(parent_id, 0, level))
            for i, child in enumerate(children):
                if child.is_container:
                    _walk(child.id, child.children, level + 1)
                points.append(InsertionPoint(parent_id, i + 1, level))

        _walk(ROOT_ID, tuple(tree), 0)

        by_parent: Dict[str, List[InsertionPoint]] = {}
        for point in points:
            by_parent.setdefault(point.parent_id, []).append(point)

        self.points = points
        self._by_key = {insertion_key(p): p for p in points}
        self._by_parent = by_parent

    # ------------------------------------------------------------------ #
    # lookup
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[InsertionPoint]:
        return iter(self.points)

    def __contains__(self, item: Union[InsertionPoint, str]) -> bool:
        return self.resolve(item) is not None

    def keys(self) -> List[str]:
        return [insertion_key(p) for p in self.points]

    def key_for(self, point: InsertionPoint) -> str:
        return insertion_key(point)

    def resolve(self, item: Union[InsertionPoint, str, None]) -> Optional[InsertionPoint]:
        """
        Map a point or key to the indexed point (which carries its level).
        Returns None for malformed keys and for points not in this tree.
        """
        if isinstance(item, InsertionPoint):
            key = insertion_key(item)
        else:
            point = parse_insertion_key(item)
            if point is None:
                return None
            key = insertion_key(point)
        return self._by_key.get(key)

    def points_for(self, parent_id: str) -> List[InsertionPoint]:
        return list(self._by_parent.get(parent_id, []))

    def parents(self) -> List[str]:
        return list(self._by_parent)
