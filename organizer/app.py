# app.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import json
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from organizer.core.demo import demo_tree
from organizer.core.log import Log
from organizer.core.store import TreeStore
from organizer.core.tree import load_tree, tree_to_data
from organizer.ui.drag_drop import DragController
from organizer.ui.drag_events import DragEvent, event_from_dict

def on_exception(exc_type, exc_value, exc_traceback):
    """Record unhandled exceptions in the log and on stderr instead of a bare traceback."""
    if issubclass(exc_type, KeyboardInterrupt):
        # Allow Ctrl+C to work normally
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    tb_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
    error_message = f"!ERROR! Unhandled Exception:\n{''.join(tb_lines)}"

    Log.debug(error_message, 0)
    print(error_message, file=sys.stderr)

def load_events(events_path: str) -> List[DragEvent]:
    """Read a JSON list of {"event": ..., "item"/"target": ...} objects."""
    p = Path(events_path).expanduser()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed JSON in {p}: {e}") from e

    if not isinstance(data, list):
        raise ValueError(f"Events file {p} must hold a JSON list")
    return [event_from_dict(item) for item in data]

def replay(controller: DragController, events: List[DragEvent]) -> List[str]:
    """Feed events through the controller; one line per release/cancel outcome."""
    lines = []
    for n, event in enumerate(events):
        outcome = controller.dispatch(event)
        if outcome is not None:
            lines.append(f"{n}: {type(event).__name__} -> {outcome.value}")
    return lines

def main(
        tree_path: Optional[str] = None,
        events_path: Optional[str] = None,
        verbosity: int = 0,
        stdexp: bool = False,
        log_file: Optional[str] = None,
) -> int:
    # Install the exception handler
    if not stdexp:
        sys.excepthook = on_exception

    Log.set_verbosity(verbosity)

    try:
        tree = load_tree(tree_path) if tree_path else demo_tree()
        events = load_events(events_path) if events_path else []
    except (OSError, ValueError) as e:
        Log.debug(f"Load failed: {e}", 0)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    store = TreeStore(tree)
    controller = DragController(store)

    for line in replay(controller, events):
        print(line)
    print(json.dumps(tree_to_data(store.tree), indent=2))

    if log_file:
        Log.write_to_file(log_file)
    return 0
