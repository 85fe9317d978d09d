################################################################################################

'''

Copyright 2025 Aaron Vose (avose@aaronvose.net)

Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the shared info / debug log used by the reorder engine.

'''

################################################################################################

import inspect
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

################################################################################################

TIME_FORMAT = "%m/%d/%Y %H:%M:%S"

class LogManager():
    __log: Optional[List[Tuple[str, str]]] = None

    def __init__(self, verbosity: int = 0):
        if LogManager.__log is None:
            LogManager.__log = [(self._now(), "Begin Organizer Log")]
        self.verbosity = verbosity

    @staticmethod
    def _now() -> str:
        return datetime.now().strftime(TIME_FORMAT)

    def add(self, text: str):
        LogManager.__log.append((self._now(), text))

    def debug(self, text: str, level: int = 0):
        """Record text tagged with the caller's file name when verbosity >= level."""
        if self.verbosity < level:
            return

        stack = inspect.stack()
        if len(stack) > 1:
            filename = Path(stack[1].filename).name
        else:
            filename = "unknown"

        self.add(f"[{filename}] {text}")

    def get(self, index: Optional[int] = None):
        if index is not None:
            return LogManager.__log[index]
        return LogManager.__log.copy()

    def messages(self) -> List[str]:
        return [text for _, text in LogManager.__log]

    def count(self) -> int:
        return len(LogManager.__log)

    def set_verbosity(self, verbosity: int = 0):
        self.verbosity = verbosity

    def clear(self):
        """Clear all log entries."""
        LogManager.__log.clear()
        LogManager.__log.append((self._now(), "Log cleared"))

    def write_to_file(self, filepath: str) -> bool:
        """Write all log entries to a file. Returns False if the write failed."""
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                for timestamp, message in LogManager.__log:
                    f.write(f"[{timestamp}] {message}\n")
        except OSError as e:
            self.add(f"Failed to write log to file '{filepath}': {e}")
            return False

        self.add(f"Log written to file: {filepath}")
        return True

################################################################################################

Log = LogManager()

################################################################################################
