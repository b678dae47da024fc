"""Shared logging for ghtriage.

Everything logs to /tmp/ghtriage.log via Python's logging module; the
terminal is reserved for the interactive review.
Filter with grep: grep 'ghtriage.review' /tmp/ghtriage.log
"""

import logging
from pathlib import Path

_LOG_PATH = Path("/tmp/ghtriage.log")

_handler = logging.FileHandler(_LOG_PATH, delay=True)
_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(message)s", datefmt="%H:%M:%S"))

_root = logging.getLogger("ghtriage")
_root.addHandler(_handler)
_root.setLevel(logging.DEBUG)
# keep log lines off the terminal even if something configures the root logger
_root.propagate = False


def get_logger(name: str) -> logging.Logger:
    return _root.getChild(name)
