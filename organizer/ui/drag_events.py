# ui/drag_events.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from organizer.ui.constants import INSERTION_KEY_SEP
from organizer.ui.types import InsertionPoint

__all__ = [
    "DragStart",
    "DragHover",
    "DragRelease",
    "DragCancel",
    "DragEvent",
    "insertion_key",
    "parse_insertion_key",
    "event_from_dict",
]


# ------------ Normalized events ------------

@dataclass(slots=True, frozen=True)
class DragStart:
    item_id: str

@dataclass(slots=True, frozen=True)
class DragHover:
    point: Optional[InsertionPoint] = None

@dataclass(slots=True, frozen=True)
class DragRelease:
    point: Optional[InsertionPoint] = None

@dataclass(slots=True, frozen=True)
class DragCancel:
    pass

DragEvent = Union[DragStart, DragHover, DragRelease, DragCancel]


# ------------ Insertion point keys ------------

def insertion_key(point: InsertionPoint) -> str:
    """Format a point as "<parent_id>-insertion-<index>"."""
    return f"{point.parent_id}{INSERTION_KEY_SEP}{point.index}"

def parse_insertion_key(key: Any) -> Optional[InsertionPoint]:
    """
    Decode a key made by insertion_key(). Anything malformed (wrong type,
    missing separator, empty parent, non-numeric or negative index) gives None.
    """
    if not isinstance(key, str):
        return None

    # Split on the last separator so parent ids may contain it
    parent_id, sep, index_str = key.rpartition(INSERTION_KEY_SEP)
    if not sep or not parent_id:
        return None
    if not index_str.isdecimal():
        return None

    return InsertionPoint(parent_id=parent_id, index=int(index_str))


# ------------ Scripted events ------------

def _point_from(value: Any) -> Optional[InsertionPoint]:
    if isinstance(value, InsertionPoint):
        return value
    if isinstance(value, dict):
        parent_id = value.get("parent_id")
        index = value.get("index")
        if isinstance(parent_id, str) and parent_id and isinstance(index, int) and index >= 0:
            return InsertionPoint(parent_id=parent_id, index=index)
        return None
    return parse_insertion_key(value)

def event_from_dict(data: Dict[str, Any]) -> DragEvent:
    """
    Build an event from {"event": "start"|"hover"|"release"|"cancel", ...}.

    "start" needs "item"; "hover" and "release" take an optional "target"
    that is an insertion key or {"parent_id", "index"}. Raises ValueError
    when data does not describe a valid event.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Drag event must be an object, got {type(data).__name__}")

    name = str(data.get("event", "")).lower()

    if name == "start":
        item_id = data.get("item")
        if not isinstance(item_id, str) or not item_id:
            raise ValueError(f"start event needs an item id: {data!r}")
        return DragStart(item_id)
    if name == "hover":
        return DragHover(_point_from(data.get("target")))
    if name == "release":
        return DragRelease(_point_from(data.get("target")))
    if name == "cancel":
        return DragCancel()

    raise ValueError(f"Unknown drag event {name!r}")
