"""Content sources: filesystem directories and in-memory object graphs."""

from .filesystem import FileNode, FileTree, format_size
from .objects import ObjectNode, load_json_tree, summarize

__all__ = [
    "FileNode",
    "FileTree",
    "ObjectNode",
    "format_size",
    "load_json_tree",
    "summarize",
]
