from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Union

from organizer.core.log import Log
from organizer.core.tree import Node, Tree, find_by_id, tree_from_data, validate_tree

__all__ = ["TreeStore"]

Listener = Callable[[Tree], None]


class TreeStore:
    """
    Owner of the single current tree value.

    The tree is only ever replaced as a whole; nothing outside the store
    edits it, and every edit goes through the pure functions in core.tree.
    Listeners (the presentation side) are told about each replacement.
    """

    def __init__(self, initial: Union[Iterable[Node], list, dict] = ()):
        if isinstance(initial, dict):
            self._tree = tree_from_data(initial)
        else:
            items = list(initial)
            if all(isinstance(item, Node) for item in items):
                self._tree = validate_tree(tuple(items))
            else:
                # Plain data; node_from_dict rejects anything that is not a dict
                self._tree = tree_from_data(items)
        self._listeners: List[Listener] = []

    @property
    def tree(self) -> Tree:
        return self._tree

    def find(self, node_id: str) -> Optional[Node]:
        return find_by_id(self._tree, node_id)

    def replace(self, new_tree: Tree) -> None:
        """Swap in new_tree and notify listeners."""
        self._tree = tuple(new_tree)
        Log.debug(f"TreeStore.replace(), {len(self._tree)} root nodes", 10)

        for listener in list(self._listeners):
            try:
                listener(self._tree)
            except Exception as e:
                Log.debug(f"Tree listener {listener!r} failed: {e}", 0)

    # ------------------------------------------------------------------ #
    # listeners
    # ------------------------------------------------------------------ #

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
