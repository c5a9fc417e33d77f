"""Public package surface for lazytree.

Exports ``main`` for programmatic CLI invocation.
The tree viewport lives in ``lazytree.tree_pane``; the shell around it lives
in ``lazytree.runtime`` and ``lazytree.modes``.
"""

from __future__ import annotations

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
