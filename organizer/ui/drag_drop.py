# ui/drag_drop.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional

from organizer.core.log import Log
from organizer.core.store import TreeStore
from organizer.core.tree import Node, Tree, TreeError, TargetNotFound
from organizer.core.tree_utils import check_drop, move_node
from organizer.ui.drag_events import (
    DragCancel,
    DragEvent,
    DragHover,
    DragRelease,
    DragStart,
)
from organizer.ui.index import InsertionIndex
from organizer.ui.types import InsertionPoint

__all__ = ["DropOutcome", "DragController"]


class DropOutcome(str, Enum):
    MOVED = "moved"            # legal release, tree replaced
    NO_TARGET = "no_target"    # released over nothing legal
    CANCELLED = "cancelled"    # explicit cancel
    REJECTED = "rejected"      # commit guard refused the move
    IGNORED = "ignored"        # event not valid in the current state


class DragController:
    """
    Drag session state machine: Idle -> Dragging(item) -> Idle.

    While dragging, every hover recomputes the candidate from scratch and
    keeps it only if the drop is legal. Release commits the candidate as a
    single remove + insert through the store; cancel or a release over
    nothing ends the session with the tree untouched. Nothing in here
    raises to the caller; failures show up as no candidate / no move.
    """

    def __init__(self, store: TreeStore):
        self.store = store
        self._index = InsertionIndex(store.tree)
        self._index_tree: Tree = store.tree
        self._active_id: Optional[str] = None
        self._candidate: Optional[InsertionPoint] = None
        self._listeners: List[Callable[[DragController], None]] = []
        store.subscribe(self._on_tree_replaced)

    # ------------------------------------------------------------------ #
    # outbound state
    # ------------------------------------------------------------------ #

    @property
    def index(self) -> InsertionIndex:
        """Insertion points for the store's current tree, rebuilt when it changes."""
        if self._index_tree is not self.store.tree:
            self._index_tree = self.store.tree
            self._index.rebuild(self._index_tree)
        return self._index

    @property
    def is_dragging(self) -> bool:
        return self._active_id is not None

    @property
    def active_id(self) -> Optional[str]:
        return self._active_id

    @property
    def active_item(self) -> Optional[Node]:
        """The dragged node, for overlay rendering."""
        if self._active_id is None:
            return None
        return self.store.find(self._active_id)

    @property
    def candidate(self) -> Optional[InsertionPoint]:
        return self._candidate

    @property
    def tree(self) -> Tree:
        return self.store.tree

    def subscribe(self, listener: Callable[[DragController], None]) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[DragController], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                Log.debug(f"Drag listener {listener!r} failed: {e}", 0)

    # ------------------------------------------------------------------ #
    # legality
    # ------------------------------------------------------------------ #

    def resolve_legal(self, point: Optional[InsertionPoint]) -> Optional[InsertionPoint]:
        """
        Return the indexed point if dropping the active item there is legal,
        else None. Hover and release both go through here.
        """
        if self._active_id is None or point is None:
            return None

        try:
            resolved = self.index.resolve(point)
            if resolved is None:
                raise TargetNotFound(f"No insertion point {point.parent_id!r}[{point.index}]")
            check_drop(self.store.tree, self._active_id, resolved.parent_id)
        except TreeError as e:
            Log.debug(f"Illegal drop target for {self._active_id=}: {e}", 10)
            return None

        return resolved

    def is_legal(self, point: Optional[InsertionPoint]) -> bool:
        return self.resolve_legal(point) is not None

    # ------------------------------------------------------------------ #
    # events
    # ------------------------------------------------------------------ #

    def start(self, item_id: str) -> bool:
        """Idle -> Dragging(item_id). Returns False if the start was ignored."""
        if self._active_id is not None:
            Log.debug(f"start({item_id=}) ignored, already dragging {self._active_id=}", 0)
            return False

        if self.store.find(item_id) is None:
            Log.debug(f"start({item_id=}) ignored, no such node", 0)
            return False

        self._active_id = item_id
        self._candidate = None
        Log.debug(f"Drag start: {item_id=}", 1)
        self._notify()
        return True

    def hover(self, point: Optional[InsertionPoint]) -> Optional[InsertionPoint]:
        """Recompute the candidate for the point under the pointer."""
        if self._active_id is None:
            return None

        candidate = self.resolve_legal(point)
        Log.debug(f"Drag hover: {point=}, {candidate=}", 10)

        if candidate != self._candidate:
            self._candidate = candidate
            self._notify()
        return candidate

    def release(self, point: Optional[InsertionPoint] = None) -> DropOutcome:
        """
        Drop the active item. The released-over point is evaluated like a
        final hover; the move happens only if that leaves a candidate.
        """
        if self._active_id is None:
            Log.debug("release() ignored, no active drag", 1)
            return DropOutcome.IGNORED

        item_id = self._active_id
        candidate = self.resolve_legal(point)

        # Back to Idle before the store replaces the tree
        self._active_id = None
        self._candidate = None

        if candidate is None:
            Log.debug(f"Drop of {item_id=} with no target", 1)
            outcome = DropOutcome.NO_TARGET
        else:
            outcome = self._commit(item_id, candidate)

        self._notify()
        return outcome

    def cancel(self) -> DropOutcome:
        if self._active_id is None:
            return DropOutcome.IGNORED

        Log.debug(f"Drag cancelled: {self._active_id=}", 1)
        self._end()
        return DropOutcome.CANCELLED

    def dispatch(self, event: DragEvent) -> Optional[DropOutcome]:
        """
        Route a normalized event. Release and cancel return their outcome;
        start and hover return None, or IGNORED when not valid right now.
        """
        if isinstance(event, DragStart):
            return None if self.start(event.item_id) else DropOutcome.IGNORED
        if isinstance(event, DragHover):
            if self._active_id is None:
                return DropOutcome.IGNORED
            self.hover(event.point)
            return None
        if isinstance(event, DragRelease):
            return self.release(event.point)
        if isinstance(event, DragCancel):
            return self.cancel()

        Log.debug(f"Unknown drag event {event!r}", 0)
        return DropOutcome.IGNORED

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #

    def _commit(self, item_id: str, point: InsertionPoint) -> DropOutcome:
        try:
            new_tree = move_node(self.store.tree, item_id, point.parent_id, point.index)
        except TreeError as e:
            Log.debug(f"Move of {item_id=} to {point=} rejected: {e}", 0)
            return DropOutcome.REJECTED

        # Single replacement; listeners never see the removed-only tree
        self.store.replace(new_tree)
        Log.debug(f"Moved {item_id=} to {point.parent_id}[{point.index}]", 1)
        return DropOutcome.MOVED

    def _end(self) -> None:
        self._active_id = None
        self._candidate = None
        self._notify()

    def _on_tree_replaced(self, tree: Tree) -> None:
        if self._active_id is None:
            return

        # Tree changed under an active drag
        if self.store.find(self._active_id) is None:
            Log.debug(f"Dragged node {self._active_id=} vanished, ending drag", 0)
            self._end()
            return

        candidate = self.resolve_legal(self._candidate)
        if candidate != self._candidate:
            self._candidate = candidate
            self._notify()
