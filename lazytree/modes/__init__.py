"""Application screens: the tree browser and its help/message/input overlays."""

from .base import Mode, OverlayMode
from .help import HelpMode, HelpTree
from .input import InputMode
from .message import MessageMode
from .tree import TreeMode

__all__ = [
    "Mode",
    "OverlayMode",
    "TreeMode",
    "HelpMode",
    "HelpTree",
    "MessageMode",
    "InputMode",
]
