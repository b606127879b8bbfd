"""Free horizontal intervals within grid rows.

A *gap* is a maximal run of columns in one row that no item covers.  Gaps are
always reported left to right, which is what lets the placement engine pack
items first-fit against the left edge.
"""
from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional, Sequence

from .grid import GridItem, get_columns

__all__ = ["Gap", "find_gaps", "common_gaps"]


class Gap(NamedTuple):
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def fits(self, w: int) -> bool:
        return self.length >= w


def _occupied(row: int, existing: Iterable[GridItem]) -> List[tuple[int, int]]:
    spans = [
        (item.x, item.x + item.w)
        for item in existing
        if item.y <= row < item.y + item.h
    ]
    spans.sort()
    return spans


def find_gaps(
    row: int, existing: Iterable[GridItem], cols: Optional[int] = None
) -> List[Gap]:
    """Return the free intervals of ``row`` in ascending ``start`` order.

    Intervals of the items crossing ``row`` are merged when they touch or
    overlap, and the complement up to the grid width is emitted.  A row nobody
    occupies yields the single gap ``(0, cols)``.
    """

    cols = get_columns(cols)
    gaps: List[Gap] = []
    cursor = 0
    for start, end in _occupied(row, existing):
        if start > cursor:
            gaps.append(Gap(cursor, min(start, cols) - cursor))
        cursor = max(cursor, end)
        if cursor >= cols:
            break
    if cursor < cols:
        gaps.append(Gap(cursor, cols - cursor))
    return gaps


def common_gaps(
    rows: Sequence[int], existing: Iterable[GridItem], cols: Optional[int] = None
) -> List[Gap]:
    """Return the intervals that are free in every one of ``rows``.

    Used for items taller than one row: a column range is only usable when
    each row the item would span leaves it uncovered.
    """

    existing = list(existing)
    cols = get_columns(cols)
    common: Optional[List[Gap]] = None
    for row in rows:
        row_gaps = find_gaps(row, existing, cols)
        if common is None:
            common = row_gaps
        else:
            common = _intersect(common, row_gaps)
        if not common:
            return []
    if common is None:
        return [Gap(0, cols)]
    return common


def _intersect(left: Sequence[Gap], right: Sequence[Gap]) -> List[Gap]:
    result: List[Gap] = []
    i = j = 0
    while i < len(left) and j < len(right):
        start = max(left[i].start, right[j].start)
        end = min(left[i].end, right[j].end)
        if start < end:
            result.append(Gap(start, end - start))
        if left[i].end < right[j].end:
            i += 1
        else:
            j += 1
    return result
