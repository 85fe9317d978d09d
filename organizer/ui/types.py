# ui/types.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class Row:
    """
    A single flattened row in the organizer view.

    • kind     – "folder" or "playlist"
    • node_id  – id of the node this row represents
    • level    – tree-indent level (root level = 0)
    """
    kind: str
    node_id: str
    level: int


@dataclass(slots=True, frozen=True)
class InsertionPoint:
    """
    An addressable gap among the children of one container.

    • parent_id – container id, or ROOT_ID for the root-level list
    • index     – 0..child_count, child_count meaning "append"
    • level     – indent level of the gap; display only, ignored by ==
    """
    parent_id: str
    index: int
    level: int = field(default=0, compare=False)
