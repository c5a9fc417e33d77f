"""Application shell: terminal control, main loop, config, and logging.

``Application`` is imported lazily so config/logging helpers stay importable
without pulling in the terminal layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .application import Application


def __getattr__(name: str):
    if name == "Application":
        from .application import Application as _Application

        return _Application
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["Application"]
