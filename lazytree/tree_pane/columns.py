"""Fixed versus scrollable column partitioning."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

SCROLL_MARGIN = 10


@dataclass
class ColumnStat:
    """Window-wide render span of one column index."""

    width: int = 0
    fixed: bool = False
    indent: bool = False


@dataclass
class ColumnLayout:
    """Partition result: fixed columns plus one contiguous scrollable block."""

    stats: list[ColumnStat] = field(default_factory=list)
    fixed_width: int = 0
    scroll_start: int = 0
    scroll_end: int = 0
    scrollable_width: int = 0

    @property
    def has_scrollable(self) -> bool:
        return self.scroll_start < self.scroll_end

    def scroll_room(self, width: int) -> int:
        """Physical cells the scrollable block gets on a ``width``-cell line."""
        if not self.has_scrollable:
            return 0
        return max(0, min(self.scrollable_width, width - self.fixed_width))

    def max_offset(self, width: int) -> int:
        if not self.has_scrollable:
            return 0
        return max(0, self.scrollable_width - self.scroll_room(width))


def partition_columns(
    widths: Sequence[int],
    width: int,
    indents: Sequence[bool] | None = None,
    margin: int = SCROLL_MARGIN,
) -> ColumnLayout:
    """Greedily fix the narrower outer column until ``width - margin`` is used up.

    Columns are taken from both ends, the narrower first (ties go to the
    left). Whatever stays unmarked in the middle scrolls as one block.
    """
    stats = [
        ColumnStat(width=w, indent=bool(indents[i]) if indents is not None and i < len(indents) else False)
        for i, w in enumerate(widths)
    ]
    start = 0
    end = len(stats) - 1
    fixed_width = 0
    while start <= end:
        index = start if stats[start].width <= stats[end].width else end
        selected = stats[index]
        if fixed_width + selected.width >= width - margin:
            break
        selected.fixed = True
        fixed_width += selected.width
        if index == start:
            start += 1
        else:
            end -= 1
    scrollable_width = sum(stat.width for stat in stats[start : end + 1])
    return ColumnLayout(
        stats=stats,
        fixed_width=fixed_width,
        scroll_start=start,
        scroll_end=max(start, end + 1),
        scrollable_width=scrollable_width,
    )
