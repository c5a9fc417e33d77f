"""Tree-pane components: line clipping, column partition, and the viewport."""

from .columns import ColumnLayout, ColumnStat, partition_columns
from .line_writer import LineWriter
from .viewport import RenderedView, Row, TreeViewport

__all__ = [
    "ColumnLayout",
    "ColumnStat",
    "LineWriter",
    "RenderedView",
    "Row",
    "TreeViewport",
    "partition_columns",
]
