#!/usr/bin/env python3
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

import sys
import pathlib
import argparse

# Put this folder on sys.path so `import organizer` works when run from the repo root.
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent))

from organizer.app import main

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Playlist organizer drag-and-drop engine")
    parser.add_argument(
        "--tree",
        default=None,
        help="JSON file holding the initial tree (defaults to the demo tree)."
    )
    parser.add_argument(
        "--events",
        default=None,
        help="JSON file holding a list of drag events to replay."
    )
    parser.add_argument(
        "--verbosity",
        type=int, default=0,
        help="Set verbosity level (0=quiet, 1=normal, 2=verbose, 10+=per-hover debug)"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write the session log to this file when done."
    )
    parser.add_argument(
        "--stdexp",
        action="store_true",
        help="Use standard exception handling to stdout / stderr."
    )
    args = parser.parse_args()

    sys.exit(
        main(
            tree_path=args.tree,
            events_path=args.events,
            verbosity=args.verbosity,
            stdexp=args.stdexp,
            log_file=args.log_file,
        )
    )
