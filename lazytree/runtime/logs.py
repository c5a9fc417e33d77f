"""Log destination setup for the ``lazytree`` logger.

Destinations come from ``LAZYTREE_LOG`` or the ``log`` config key, as a
comma-separated list:

* ``file:PATH`` appends to ``PATH``;
* ``err`` writes to stderr (only readable outside the TUI screen);
* ``false`` disables output (the default).
"""

from __future__ import annotations

import logging
import os
import sys

LOG_ENV_VAR = "LAZYTREE_LOG"
LOGGER_NAME = "lazytree"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_installed: list[logging.Handler] = []


def parse_log_spec(spec: str | None) -> list[tuple[str, str]]:
    """Split a destination list into ``(kind, target)`` pairs.

    Unknown entries are skipped; ``false`` clears everything before it.
    """
    destinations: list[tuple[str, str]] = []
    if not spec:
        return destinations
    for raw in spec.split(","):
        entry = raw.strip()
        if not entry:
            continue
        if entry.lower() == "false":
            destinations.clear()
        elif entry.lower() == "err":
            destinations.append(("err", ""))
        elif entry.startswith("file:") and len(entry) > 5:
            destinations.append(("file", entry[5:]))
    return destinations


def configure_logging(spec: str | None = None, level: int = logging.DEBUG) -> list[logging.Handler]:
    """Install handlers for ``spec`` (default: ``$LAZYTREE_LOG``) and return them."""
    close_logging()
    if spec is None:
        spec = os.environ.get(LOG_ENV_VAR)
    logger = logging.getLogger(LOGGER_NAME)
    formatter = logging.Formatter(LOG_FORMAT)
    for kind, target in parse_log_spec(spec):
        if kind == "file":
            handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _installed.append(handler)
    if _installed:
        logger.setLevel(level)
    return list(_installed)


def close_logging() -> None:
    """Detach and close every handler installed by :func:`configure_logging`."""
    logger = logging.getLogger(LOGGER_NAME)
    while _installed:
        handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()
